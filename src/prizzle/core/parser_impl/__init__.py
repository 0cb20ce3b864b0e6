"""
Schema parser package.

The parser is a line-driven state machine (``BaseParser``) combined with
mixins for the pieces of a model or view body:

- FieldParserMixin: field lines and their ``@`` attributes
- IndexParserMixin: ``@@index`` / ``@@unique`` lines

Usage:
    from prizzle.core.parser_impl import parse_schema

    ast = parse_schema(text, Path("schema.prisma"))
"""

from pathlib import Path

from .. import ir
from .base import BaseParser, ParserState, StagedRelation
from .fields import FieldParserMixin, parse_data_type
from .indexes import IndexParserMixin


class Parser(BaseParser, FieldParserMixin, IndexParserMixin):
    """Complete schema parser."""

    pass


def parse_schema(text: str, file: Path | None = None) -> ir.SchemaAST:
    """
    Parse schema text into a closed AST.

    Args:
        text: Schema source
        file: Source path used in error messages

    Returns:
        SchemaAST with every block closed

    Raises:
        ParseError: If the schema cannot be parsed
    """
    parser = Parser(text, file or Path("<string>"))
    return parser.parse()


__all__ = [
    "Parser",
    "ParserState",
    "StagedRelation",
    "parse_schema",
    "parse_data_type",
]
