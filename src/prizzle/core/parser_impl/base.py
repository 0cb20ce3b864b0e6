"""
Base block parser for schema text.

Walks normalized lines through a small state machine. Header lines open a
block and register it in the AST straight away, lines inside the block are
routed by the current state, and the closing brace flushes staged relations
and returns to idle.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .. import ir
from ..errors import ParseError, make_parse_error
from ..lexer import Line, normalize_lines

logger = logging.getLogger(__name__)

BLOCK_TERMINATOR = "}"

_HEADER = re.compile(r"^(model|view|enum|generator|datasource)\s+(\w+)\s*\{$")


class ParserState(str, Enum):
    """States of the block parser."""

    IDLE = "idle"
    IN_MODEL = "inModel"
    IN_VIEW = "inView"
    IN_ENUM = "inEnum"
    IN_GENERATOR = "inGenerator"
    IN_DATASOURCE = "inDatasource"


_HEADER_STATES = {
    "model": ParserState.IN_MODEL,
    "view": ParserState.IN_VIEW,
    "enum": ParserState.IN_ENUM,
    "generator": ParserState.IN_GENERATOR,
    "datasource": ParserState.IN_DATASOURCE,
}


@dataclass
class StagedRelation:
    """Relation metadata waiting for its block to close."""

    field: str
    assertion: ir.RelationAssertion
    line: Line


class BaseParser:
    """
    Line-driven state machine for schema blocks.

    Field lines and ``@@`` lines inside models and views are handed to
    ``parse_field`` / ``parse_block_attribute`` supplied by the mixins.
    """

    if TYPE_CHECKING:

        def parse_field(self, line: Line) -> None: ...
        def parse_block_attribute(self, line: Line) -> None: ...

    def __init__(self, text: str, file: Path):
        """
        Initialize parser.

        Args:
            text: Raw schema text
            file: Source file path (for error reporting)
        """
        self.file = file
        self.lines = normalize_lines(text)
        self.ast = ir.SchemaAST()
        self.state = ParserState.IDLE
        self.current: ir.Block | None = None
        self.staged_relations: list[StagedRelation] = []
        self.warnings: list[ParseError] = []
        self._open_line: Line | None = None

    def error(
        self,
        message: str,
        line: Line,
        column: int = 1,
        error_cls: type[ParseError] = ParseError,
    ) -> ParseError:
        """Build a ParseError pointing at ``line``."""
        return make_parse_error(message, self.file, line.number, column, line.text, error_cls)

    def parse(self) -> ir.SchemaAST:
        """
        Parse every line and return the closed AST.

        Raises:
            ParseError: On malformed input or an unterminated block
        """
        for line in self.lines:
            self.feed(line)

        if self.state != ParserState.IDLE:
            assert self._open_line is not None
            raise self.error(
                f"Block '{self._open_line.text}' is never closed", self._open_line
            )

        return self.ast

    def feed(self, line: Line) -> None:
        """Advance the state machine by one normalized line."""
        if line.text == BLOCK_TERMINATOR:
            self._close_block(line)
            return

        header = _HEADER.match(line.text)
        if header:
            self._open_block(header.group(1), header.group(2), line)
            return

        if self.state == ParserState.IDLE:
            raise self.error(f"Unexpected line outside of a block: {line.text}", line)
        if self.state in (ParserState.IN_MODEL, ParserState.IN_VIEW):
            if line.text.startswith("@@"):
                self.parse_block_attribute(line)
            else:
                self.parse_field(line)
        elif self.state == ParserState.IN_ENUM:
            assert isinstance(self.current, ir.EnumSpec)
            self.current.values.append(line.text)
        elif self.state == ParserState.IN_GENERATOR:
            assert isinstance(self.current, ir.GeneratorSpec)
            key, value = self._split_assignment(line)
            self.current.properties[key] = value
        elif self.state == ParserState.IN_DATASOURCE:
            assert isinstance(self.current, ir.DataSourceSpec)
            key, value = self._split_assignment(line)
            if key == "provider":
                self.current.provider = value
            elif key == "url":
                self.current.url = value
            else:
                self.current.properties[key] = value

    def _open_block(self, keyword: str, name: str, line: Line) -> None:
        if self.state != ParserState.IDLE:
            raise self.error(f"'{keyword} {name}' opened inside another block", line)

        block: ir.Block
        if keyword == "model":
            block = ir.ModelSpec(name=name)
        elif keyword == "view":
            block = ir.ViewSpec(name=name)
        elif keyword == "enum":
            block = ir.EnumSpec(name=name)
        elif keyword == "generator":
            block = ir.GeneratorSpec(name=name)
        else:
            block = ir.DataSourceSpec(name=name)

        self.ast.register(block)
        self.current = block
        self.state = _HEADER_STATES[keyword]
        self._open_line = line
        logger.debug("Opened %s %s at line %d", keyword, name, line.number)

    def _close_block(self, line: Line) -> None:
        if self.state == ParserState.IDLE or self.current is None:
            raise self.error("Closing brace without an open block", line)

        if self.staged_relations:
            self._flush_relations()

        logger.debug("Closed %s %s at line %d", self.current.kind, self.current.name, line.number)
        self.staged_relations = []
        self.current = None
        self.state = ParserState.IDLE
        self._open_line = None

    def _flush_relations(self) -> None:
        """Attach staged relation assertions to their owning scalar fields."""
        assert isinstance(self.current, ir.ModelSpec | ir.ViewSpec)
        for staged in self.staged_relations:
            target = self.current.get_field(staged.field)
            if target is None:
                raise self.error(
                    f"Relation on {self.current.name} uses field '{staged.field}' "
                    "which is not declared in the block",
                    staged.line,
                )
            target.assertions.append(staged.assertion)

    def _split_assignment(self, line: Line) -> tuple[str, str]:
        key, sep, value = line.text.partition("=")
        if not sep or not key.strip():
            raise self.error(f"Expected '<key> = <value>' but got: {line.text}", line)
        return key.strip(), value.strip()
