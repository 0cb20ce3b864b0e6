"""Shared pytest fixtures for prizzle tests."""

from pathlib import Path

import pytest

from prizzle.core import ir
from prizzle.core.parser import parse_file


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def blog_schema_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "schemas" / "blog.prisma"


@pytest.fixture
def blog_ast(blog_schema_path: Path) -> ir.SchemaAST:
    """Return the parsed blog schema."""
    return parse_file(blog_schema_path)


@pytest.fixture
def user_model() -> ir.ModelSpec:
    """Return a small model built directly from AST types."""
    return ir.ModelSpec(
        name="User",
        fields={
            "id": ir.FieldSpec(
                data_type=ir.FieldDataType(name="Int"),
                assertions=[ir.PrimaryKeyAssertion()],
            ),
            "name": ir.FieldSpec(data_type=ir.FieldDataType(name="String")),
            "age": ir.FieldSpec(
                data_type=ir.FieldDataType(name="Int", cardinality=ir.Cardinality.MAYBE)
            ),
        },
    )
