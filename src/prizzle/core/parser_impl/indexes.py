"""
Index/unique parser mixin for schema models and views.

Grammar:
    @@index(FIELD_LIST (, KEY: VALUE)*)
    @@unique(FIELD_LIST (, KEY: VALUE)*)

    FIELD_LIST := '[' FIELD (',' FIELD)* ']' | FIELD
    FIELD      := NAME ('(' MODIFIER (',' MODIFIER)* ')')?
    MODIFIER   := 'sort:' (Asc | Desc) | 'ops:' (TOKEN | raw("..."))

Unknown modifiers are logged and skipped rather than rejected.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseError, UnrecognizedIndexModifier, UnsupportedBlockAttribute
from ..lexer import Line, split_arguments, split_keyword, split_list, unquote, unwrap_raw

logger = logging.getLogger(__name__)

_BLOCK_ATTRIBUTE = re.compile(r"^@@([\w.]+)(?:\((.*)\))?$")
_INDEX_FIELD = re.compile(r"^(\w+)(?:\((.*)\))?$")

_SORT_VALUES = {"Asc": ir.SortOrder.ASC, "Desc": ir.SortOrder.DESC}


class IndexParserMixin:
    """Parser mixin for ``@@index`` and ``@@unique`` lines."""

    if TYPE_CHECKING:
        current: Any
        warnings: list[ParseError]
        error: Any

    def parse_block_attribute(self, line: Line) -> None:
        """
        Parse a block attribute into the open model or view.

        Raises:
            UnsupportedBlockAttribute: For any keyword other than index/unique
            ParseError: On a malformed argument list
        """
        match = _BLOCK_ATTRIBUTE.match(line.text)
        if match is None or match.group(1) not in ("index", "unique"):
            raise self.error(
                f"Unsupported block attribute: {line.text}",
                line,
                error_cls=UnsupportedBlockAttribute,
            )

        keyword, args = match.group(1), match.group(2) or ""
        index = ir.IndexSpec(type=ir.IndexKind(keyword))

        try:
            arguments = split_arguments(args)
        except ValueError as e:
            raise self.error(str(e), line) from e

        for arg in arguments:
            key, value = split_keyword(arg)
            if key is None or key == "fields":
                index.fields = [self._parse_index_field(entry, line) for entry in split_list(value)]
            elif key == "type":
                index.using = value
            elif key == "map":
                index.map = unquote(value)
            elif key == "name":
                # client-side name of a compound key, not a constraint name
                continue
            else:
                logger.warning("Ignoring @@%s argument '%s' (line %d)", keyword, arg, line.number)

        if not index.fields:
            raise self.error(f"@@{keyword} needs at least one field", line)

        self.current.assertions.append(index)

    def _parse_index_field(self, entry: str, line: Line) -> ir.IndexField:
        match = _INDEX_FIELD.match(entry)
        if match is None:
            raise self.error(f"Invalid index field: {entry}", line)

        result = ir.IndexField(name=match.group(1))
        for modifier in split_arguments(match.group(2) or ""):
            key, value = split_keyword(modifier)
            if key == "sort" and value in _SORT_VALUES:
                result.sort = _SORT_VALUES[value]
                continue
            if key == "ops":
                result.ops = unwrap_raw(value)
                continue
            self._warn_index_modifier(modifier, result.name, line)
        return result

    def _warn_index_modifier(self, modifier: str, field_name: str, line: Line) -> None:
        diagnostic = self.error(
            f"Could not understand field modifier '{modifier}' on field '{field_name}'",
            line,
            error_cls=UnrecognizedIndexModifier,
        )
        self.warnings.append(diagnostic)
        logger.warning("%s", diagnostic.message)
