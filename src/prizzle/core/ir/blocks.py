"""
Block types for the prizzle AST.

Every top-level block of a schema maps onto exactly one of these specs,
tagged by ``kind``:

    model User { ... }         -> ModelSpec
    view UserInfo { ... }      -> ViewSpec
    enum Role { ... }          -> EnumSpec
    generator client { ... }   -> GeneratorSpec
    datasource db { ... }      -> DataSourceSpec
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from .fields import FieldSpec


class IndexKind(str, Enum):
    """Block-level constraint kinds."""

    INDEX = "index"
    UNIQUE = "unique"


class SortOrder(str, Enum):
    ASC = "Asc"
    DESC = "Desc"


class IndexField(BaseModel):
    """
    One column reference inside an index.

    Attributes:
        name: Field name
        sort: Optional sort direction
        ops: Optional operator class (``raw("...")`` already unwrapped)
    """

    name: str
    sort: SortOrder | None = None
    ops: str | None = None


class IndexSpec(BaseModel):
    """
    Block-level ``@@index`` / ``@@unique`` constraint.

    Attributes:
        type: Constraint kind
        fields: Ordered column references
        using: Optional access method (``type: Gin``)
        map: Optional explicit constraint name
    """

    type: IndexKind
    fields: list[IndexField] = Field(default_factory=list)
    using: str | None = None
    map: str | None = None

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


class _TableSpec(BaseModel):
    """Shared shape of models and views."""

    name: str
    fields: dict[str, FieldSpec] = Field(default_factory=dict)
    assertions: list[IndexSpec] = Field(default_factory=list)

    def get_field(self, name: str) -> FieldSpec | None:
        return self.fields.get(name)


class ModelSpec(_TableSpec):
    kind: Literal["model"] = "model"


class ViewSpec(_TableSpec):
    """Rendered as reference-only: never emitted as a column source."""

    kind: Literal["view"] = "view"


class EnumSpec(BaseModel):
    """
    Enum declaration.

    Attributes:
        name: Enum identifier (e.g. Role)
        values: Ordered literal value names
    """

    kind: Literal["enum"] = "enum"
    name: str
    values: list[str] = Field(default_factory=list)


class GeneratorSpec(BaseModel):
    """Generator block. Its properties are kept for inspection only."""

    kind: Literal["generator"] = "generator"
    name: str
    properties: dict[str, str] = Field(default_factory=dict)


class DataSourceSpec(BaseModel):
    """
    Datasource block.

    Attributes:
        name: Datasource identifier (e.g. db)
        provider: Raw provider expression, quotes included (e.g. '"postgresql"')
        url: Raw connection url expression (e.g. 'env("DATABASE_URL")')
        properties: Every other assignment, passed through unvalidated
    """

    kind: Literal["datasource"] = "datasource"
    name: str
    provider: str = ""
    url: str = ""
    properties: dict[str, str] = Field(default_factory=dict)

    @property
    def provider_name(self) -> str:
        """Provider with surrounding quotes removed."""
        return self.provider.strip().strip('"')


# Any top-level block; tell them apart by `kind`
Block = ModelSpec | ViewSpec | EnumSpec | GeneratorSpec | DataSourceSpec
