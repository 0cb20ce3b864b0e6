"""
prizzle AST (intermediate representation).

The parser builds these structures; the code generators only read them.
"""

from .blocks import (
    Block,
    DataSourceSpec,
    EnumSpec,
    GeneratorSpec,
    IndexField,
    IndexKind,
    IndexSpec,
    ModelSpec,
    SortOrder,
    ViewSpec,
)
from .fields import (
    Cardinality,
    DefaultAssertion,
    FieldAssertion,
    FieldDataType,
    FieldSpec,
    PrimaryKeyAssertion,
    RelationAssertion,
)
from .schema import SchemaAST

__all__ = [
    # Fields
    "Cardinality",
    "FieldDataType",
    "FieldAssertion",
    "PrimaryKeyAssertion",
    "DefaultAssertion",
    "RelationAssertion",
    "FieldSpec",
    # Blocks
    "Block",
    "IndexKind",
    "SortOrder",
    "IndexField",
    "IndexSpec",
    "ModelSpec",
    "ViewSpec",
    "EnumSpec",
    "GeneratorSpec",
    "DataSourceSpec",
    # Root
    "SchemaAST",
]
