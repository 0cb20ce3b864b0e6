"""
Field parser mixin for schema models and views.

Parses field lines and their attributes:

    id        Int      @id @default(autoincrement())
    email     String   @unique
    age       Int?     @db.SmallInt
    author    Author   @relation(fields: [authorId], references: [id], onDelete: Cascade)
    authorId  Int
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import UnsupportedFieldAttribute
from ..lexer import (
    AttributeCall,
    Line,
    scan_attributes,
    split_arguments,
    split_field_line,
    split_keyword,
    split_list,
    unquote,
)
from .base import StagedRelation

logger = logging.getLogger(__name__)


def parse_data_type(type_token: str) -> ir.FieldDataType:
    """
    Parse a type token into base name and cardinality.

    ``String[]`` -> many, ``String?`` -> maybe, ``String`` -> required.
    """
    if type_token.endswith("[]"):
        return ir.FieldDataType(name=type_token[:-2], cardinality=ir.Cardinality.MANY)
    if type_token.endswith("?"):
        return ir.FieldDataType(name=type_token[:-1], cardinality=ir.Cardinality.MAYBE)
    return ir.FieldDataType(name=type_token)


class FieldParserMixin:
    """Parser mixin for field lines inside models and views."""

    if TYPE_CHECKING:
        current: Any
        staged_relations: list[StagedRelation]
        error: Any

    def parse_field(self, line: Line) -> None:
        """
        Parse one field line into the open model or view.

        Relation fields (those carrying ``@relation``) are not stored; they
        only stage relation metadata for the scalar fields they name.

        Raises:
            ParseError: On a malformed line
            UnsupportedFieldAttribute: On an attribute this parser does not know
        """
        table: ir.ModelSpec | ir.ViewSpec = self.current
        try:
            name, type_token, rest = split_field_line(line.text)
            attributes = scan_attributes(rest)
        except ValueError as e:
            raise self.error(str(e), line) from e

        field = ir.FieldSpec(data_type=parse_data_type(type_token))
        is_relation_virtual = False
        # Column of the attribute text inside the full line
        offset = len(line.text) - len(rest)

        for attr in attributes:
            if attr.name == "id" and attr.is_attribute:
                field.assertions.append(ir.PrimaryKeyAssertion())
            elif attr.name == "unique" and attr.is_attribute:
                table.assertions.append(self._single_field_unique(name, attr))
            elif attr.name == "default" and attr.is_attribute and attr.args is not None:
                field.assertions.append(ir.DefaultAssertion(value=attr.args))
            elif attr.name.startswith("db.") and attr.is_attribute:
                storage_type = attr.name[3:]
                if attr.args is not None:
                    storage_type += f"({attr.args})"
                field.data_type.storage_type = storage_type
            elif attr.name == "relation" and attr.is_attribute:
                is_relation_virtual = True
                self._stage_relation(name, field.data_type, attr.args or "", line)
            else:
                raise self.error(
                    f"Unsupported field attribute {attr.raw} on field '{name}'",
                    line,
                    column=offset + attr.column,
                    error_cls=UnsupportedFieldAttribute,
                )

        if not is_relation_virtual:
            table.fields[name] = field

    def _single_field_unique(self, field_name: str, attr: AttributeCall) -> ir.IndexSpec:
        index = ir.IndexSpec(type=ir.IndexKind.UNIQUE, fields=[ir.IndexField(name=field_name)])
        for arg in split_arguments(attr.args or ""):
            key, value = split_keyword(arg)
            if key == "map":
                index.map = unquote(value)
        return index

    def _stage_relation(
        self,
        field_name: str,
        data_type: ir.FieldDataType,
        args: str,
        line: Line,
    ) -> None:
        """
        Stage relation assertions for the local fields named in ``args``.

        Without both ``fields`` and ``references`` nothing is staged; that is
        the back-reference side of a relation.
        """
        relation_name: str | None = None
        local_fields: list[str] | None = None
        references: list[str] | None = None
        on_delete: str | None = None
        on_update: str | None = None

        try:
            arguments = split_arguments(args)
        except ValueError as e:
            raise self.error(str(e), line) from e

        for arg in arguments:
            key, value = split_keyword(arg)
            if key is None or key == "name":
                relation_name = unquote(value)
            elif key == "fields":
                local_fields = split_list(value)
            elif key == "references":
                references = split_list(value)
            elif key == "onDelete":
                on_delete = value
            elif key == "onUpdate":
                on_update = value
            elif key == "map":
                continue
            else:
                logger.warning(
                    "Ignoring relation argument '%s' on field '%s' (line %d)",
                    arg,
                    field_name,
                    line.number,
                )

        if local_fields is None or references is None:
            return

        if len(local_fields) != len(references):
            raise self.error(
                f"Relation on field '{field_name}' has {len(local_fields)} fields "
                f"but {len(references)} references",
                line,
            )

        for local, referenced in zip(local_fields, references):
            assertion = ir.RelationAssertion(
                model=data_type.name,
                fields=local,
                references=referenced,
                name=relation_name,
                on_delete=on_delete,
                on_update=on_update,
            )
            self.staged_relations.append(StagedRelation(local, assertion, line))
