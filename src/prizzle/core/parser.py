import logging
from pathlib import Path

from . import ir
from .errors import ParseError, PrizzleError
from .parser_impl import Parser, parse_schema

logger = logging.getLogger(__name__)


def parse_file(path: Path, warnings: list[ParseError] | None = None) -> ir.SchemaAST:
    """
    Read a schema file in full and parse it.

    Args:
        path: Path to a .prisma schema
        warnings: If given, recoverable diagnostics are appended to it

    Returns:
        Closed SchemaAST

    Raises:
        PrizzleError: If the file cannot be read
        ParseError: If the schema cannot be parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PrizzleError(f"Cannot read schema {path}: {e}") from e

    parser = Parser(text, path)
    ast = parser.parse()
    if warnings is not None:
        warnings.extend(parser.warnings)
    logger.info(
        "Parsed %s: %d models, %d views, %d enums, %d datasources, %d generators",
        path,
        len(ast.models),
        len(ast.views),
        len(ast.enums),
        len(ast.datasources),
        len(ast.generators),
    )
    return ast


__all__ = ["parse_file", "parse_schema"]
