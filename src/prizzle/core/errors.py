"""
Error types for prizzle schema parsing and code generation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class PrizzleError(Exception):
    """Base exception for all prizzle errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(PrizzleError):
    """
    Raised when a schema cannot be parsed.

    Examples:
    - Block header inside an open block
    - Closing brace with no open block
    - Input ending before every block is closed
    - Relation pointing at a field the block does not declare
    """

    pass


class UnsupportedBlockAttribute(ParseError):
    """Raised for an ``@@`` attribute other than ``@@index`` / ``@@unique``."""

    pass


class UnsupportedFieldAttribute(ParseError):
    """Raised for a field attribute the parser does not understand."""

    pass


class UnrecognizedIndexModifier(ParseError):
    """
    Diagnostic for an unknown per-field index modifier.

    Never raised: the index parser logs it and keeps going.
    """

    pass


class GenerationError(PrizzleError):
    """
    Raised when the AST cannot be rendered to Drizzle.

    Examples:
    - Scalar or storage type outside the mapping table
    - Unknown datasource provider
    - Unknown referential action
    """

    pass


class UnsupportedScalarType(GenerationError):
    pass


class UnsupportedProvider(GenerationError):
    pass


class UnsupportedActionWord(GenerationError):
    pass


class ConfigError(PrizzleError):
    """Raised when a prizzle.toml manifest cannot be loaded."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the schema file where the error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line showing the error location
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "schema.prisma:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with its number and an error marker."""
        if not self.snippet:
            return ""

        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.snippet}\n{' ' * marker_pos}^^^"


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int = 1,
    snippet: str | None = None,
    error_cls: type[ParseError] = ParseError,
) -> ParseError:
    """
    Helper to create a ParseError (or subclass) with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line
        error_cls: ParseError subclass to instantiate

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return error_cls(message, context)
