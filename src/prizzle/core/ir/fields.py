"""
Field types for the prizzle AST.

A field is a data type descriptor (base type, cardinality, optional storage
override) plus the assertions attached to it by field attributes.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Cardinality(str, Enum):
    """Cardinality markers. Required singular fields carry no marker."""

    MAYBE = "maybe"  # trailing '?'
    MANY = "many"  # trailing '[]'


class FieldDataType(BaseModel):
    """
    Data type of a field.

    Examples:
        - Int: FieldDataType(name="Int")
        - String?: FieldDataType(name="String", cardinality=MAYBE)
        - Json[]: FieldDataType(name="Json", cardinality=MANY)
        - Int @db.SmallInt: FieldDataType(name="Int", storage_type="SmallInt")
    """

    name: str
    cardinality: Cardinality | None = None
    storage_type: str | None = None

    @property
    def is_unsupported(self) -> bool:
        """Check if this is the ``Unsupported(...)`` escape hatch."""
        return self.name.startswith("Unsupported(") and self.name.endswith(")")

    @property
    def unsupported_expression(self) -> str:
        """Raw type expression wrapped by ``Unsupported(...)``."""
        return self.name[len("Unsupported(") : -1]


class PrimaryKeyAssertion(BaseModel):
    type: Literal["primaryKey"] = "primaryKey"


class DefaultAssertion(BaseModel):
    """Default value, kept as the raw expression text."""

    type: Literal["default"] = "default"
    value: str


class RelationAssertion(BaseModel):
    """
    Foreign key carried by a scalar field.

    Attributes:
        model: Referenced model name
        fields: Local field holding the key
        references: Referenced field on ``model``
        name: Optional relation name
        on_delete: Raw referential action word (e.g. "Cascade")
        on_update: Raw referential action word
    """

    type: Literal["relation"] = "relation"
    model: str
    fields: str
    references: str
    name: str | None = None
    on_delete: str | None = None
    on_update: str | None = None


FieldAssertion = Annotated[
    PrimaryKeyAssertion | DefaultAssertion | RelationAssertion,
    Field(discriminator="type"),
]


class FieldSpec(BaseModel):
    """A single field of a model or view."""

    data_type: FieldDataType
    assertions: list[FieldAssertion] = Field(default_factory=list)

    @property
    def is_primary_key(self) -> bool:
        return any(isinstance(a, PrimaryKeyAssertion) for a in self.assertions)

    @property
    def relations(self) -> list[RelationAssertion]:
        return [a for a in self.assertions if isinstance(a, RelationAssertion)]
