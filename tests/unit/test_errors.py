"""Tests for error formatting."""

from pathlib import Path

from prizzle.core.errors import (
    ErrorContext,
    ParseError,
    PrizzleError,
    UnsupportedFieldAttribute,
    make_parse_error,
)


def test_message_without_context():
    assert str(PrizzleError("boom")) == "boom"


def test_location_only():
    context = ErrorContext(file=Path("schema.prisma"), line=3, column=7)

    assert context.format() == "schema.prisma:3:7"


def test_snippet_marker_points_at_column():
    context = ErrorContext(
        file=Path("schema.prisma"), line=12, column=8, snippet="id Int @updatedAt"
    )

    assert context.format() == (
        "schema.prisma:12:8\n"
        "  12 | id Int @updatedAt\n"
        "              ^^^"
    )


def test_make_parse_error_subclass():
    error = make_parse_error(
        "Unsupported field attribute @updatedAt",
        Path("schema.prisma"),
        line=4,
        column=8,
        error_cls=UnsupportedFieldAttribute,
    )

    assert isinstance(error, ParseError)
    assert error.message == "Unsupported field attribute @updatedAt"
    assert str(error) == "schema.prisma:4:8\nUnsupported field attribute @updatedAt"
