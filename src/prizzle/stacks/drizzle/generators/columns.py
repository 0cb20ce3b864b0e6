"""
Column rendering for Drizzle pg-core tables.

A column is built from three parts, in order:

    d.integer("authorId")                         constructor
    .notNull()                                    cardinality suffix
    .references((): d.AnyPgColumn => Author.id)   assertion suffixes
"""

from ....core import ir
from ....core.errors import GenerationError, UnsupportedActionWord, UnsupportedScalarType

# Base scalar type -> pg-core column constructor
SCALAR_TYPES = {
    "String": "text",
    "DateTime": "timestamp",
    "Json": "json",
    "Int": "integer",
    "Boolean": "boolean",
    "SmallInt": "smallint",
}

# @db.X storage override -> pg-core column constructor
STORAGE_TYPES = {
    "Text": "text",
    "Timestamp": "timestamp",
    "Json": "json",
    "JsonB": "jsonb",
    "Integer": "integer",
    "SmallInt": "smallint",
    "Boolean": "boolean",
    "Uuid": "uuid",
}

# Referential action words (case-sensitive)
ACTION_WORDS = {
    "Cascade": "cascade",
    "SetNull": "set null",
    "NoAction": "no action",
    "Restrict": "restrict",
    "SetDefault": "set default",
}


def map_action(word: str | None) -> str | None:
    """
    Translate a referential action word.

    Raises:
        UnsupportedActionWord: If ``word`` is not in the action table
    """
    if word is None:
        return None
    if word not in ACTION_WORDS:
        raise UnsupportedActionWord(
            f"Could not map referential action '{word}'. "
            f"Expected one of: {', '.join(ACTION_WORDS)}"
        )
    return ACTION_WORDS[word]


def column_constructor(name: str, field: ir.FieldSpec, schema: ir.SchemaAST) -> str:
    """
    Render the column constructor call.

    Precedence: storage override, ``Unsupported(...)``, enum, base scalar.

    Raises:
        UnsupportedScalarType: If the type is outside the mapping tables
    """
    data_type = field.data_type

    if data_type.storage_type is not None:
        if data_type.storage_type not in STORAGE_TYPES:
            raise UnsupportedScalarType(
                f"Could not convert {name}: unsupported storage type @db.{data_type.storage_type}"
            )
        return f'd.{STORAGE_TYPES[data_type.storage_type]}("{name}")'

    if data_type.is_unsupported:
        return f'unsupported("{name}", {{ type: {data_type.unsupported_expression} }})'

    if data_type.name in schema.enums:
        return f'{data_type.name}("{name}")'

    if data_type.name not in SCALAR_TYPES:
        raise UnsupportedScalarType(f"Could not convert {name}: unsupported type {data_type.name}")
    return f'd.{SCALAR_TYPES[data_type.name]}("{name}")'


def cardinality_suffix(field: ir.FieldSpec) -> str:
    cardinality = field.data_type.cardinality
    if cardinality == ir.Cardinality.MANY:
        return ".array()"
    if cardinality == ir.Cardinality.MAYBE:
        return ""
    return ".notNull()"


def _relation_suffix(assertion: ir.RelationAssertion, schema: ir.SchemaAST) -> str:
    if assertion.model in schema.views:
        raise GenerationError(
            f"Could not convert {assertion.fields}: it references view {assertion.model}, "
            "which has no table"
        )

    on_delete = map_action(assertion.on_delete)
    on_update = map_action(assertion.on_update)

    options = []
    if on_delete is not None:
        options.append(f'onDelete: "{on_delete}"')
    if on_update is not None:
        options.append(f'onUpdate: "{on_update}"')
    rendered_options = f", {{ {', '.join(options)} }}" if options else ""

    target = f"{assertion.model}.{assertion.references}"
    return f".references((): d.AnyPgColumn => {target}{rendered_options})"


def assertion_suffixes(field: ir.FieldSpec, schema: ir.SchemaAST) -> str:
    """
    Render field assertions in declared order.

    Raises:
        GenerationError: If a relation targets a view
    """
    suffixes = []
    for assertion in field.assertions:
        if isinstance(assertion, ir.PrimaryKeyAssertion):
            suffixes.append(".primaryKey()")
        elif isinstance(assertion, ir.DefaultAssertion):
            suffixes.append(f".default(sql`{assertion.value}`)")
        elif isinstance(assertion, ir.RelationAssertion):
            suffixes.append(_relation_suffix(assertion, schema))
        else:
            raise TypeError(f"Unknown field assertion: {assertion!r}")
    return "".join(suffixes)


def render_column(name: str, field: ir.FieldSpec, schema: ir.SchemaAST) -> str | None:
    """
    Render one ``name: constructor...`` column entry.

    Returns None for relation fields (type names a model or view); the
    relationship lives on the scalar key field instead.
    """
    if schema.is_relation_type(field.data_type.name):
        return None

    return (
        f"{name}: {column_constructor(name, field, schema)}"
        f"{cardinality_suffix(field)}{assertion_suffixes(field, schema)}"
    )
