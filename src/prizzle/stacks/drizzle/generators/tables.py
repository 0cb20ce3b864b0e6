"""
Table generator for Drizzle pg-core.

Each model becomes a ``pgTable`` whose columns follow field order. Block
constraints become the table's extra config:

    export const Post = d.pgTable("Post", {
      id: d.integer("id").notNull().primaryKey(),
      slug: d.text("slug").notNull()
    }, (table) => [
      d.uniqueIndex("Post_slug_key").on(table.slug)
    ]);

Views are reference-only and are not rendered.
"""

from textwrap import dedent

from ....core import ir
from ...base import Generator, GeneratorResult, Section
from .columns import render_column

UNSUPPORTED_HELPER = dedent(
    """\
    const unsupported = d.customType<{ data: unknown; config: { type: string } }>({
      dataType(config) {
        if (config == null || typeof config.type !== "string") {
          throw new Error("Unsupported was used without config");
        }
        return config.type;
      },
    });"""
)


def index_name(model: ir.ModelSpec, index: ir.IndexSpec) -> str:
    """Explicit ``map`` name, else ``<Model>_<fields>_idx`` / ``_key``."""
    if index.map:
        return index.map
    suffix = "key" if index.type == ir.IndexKind.UNIQUE else "idx"
    return "_".join([model.name, *index.field_names, suffix])


def render_index_column(field: ir.IndexField) -> str:
    column = f"table.{field.name}"
    if field.sort == ir.SortOrder.ASC:
        column += ".asc()"
    elif field.sort == ir.SortOrder.DESC:
        column += ".desc()"
    if field.ops:
        column += f'.op("{field.ops}")'
    return column


def render_index(model: ir.ModelSpec, index: ir.IndexSpec) -> str:
    builder = "uniqueIndex" if index.type == ir.IndexKind.UNIQUE else "index"
    columns = ", ".join(render_index_column(f) for f in index.fields)
    if index.using:
        return f'd.{builder}("{index_name(model, index)}").using("{index.using.lower()}", {columns})'
    return f'd.{builder}("{index_name(model, index)}").on({columns})'


def render_table(model: ir.ModelSpec, schema: ir.SchemaAST) -> str:
    columns = []
    for name, field in model.fields.items():
        column = render_column(name, field, schema)
        if column is not None:
            columns.append(column)

    body = ",\n  ".join(columns)
    table = f'export const {model.name} = d.pgTable("{model.name}", {{\n  {body}\n}}'
    if model.assertions:
        indexes = ",\n  ".join(render_index(model, index) for index in model.assertions)
        table += f", (table) => [\n  {indexes}\n]"
    return table + ");"


def uses_unsupported(schema: ir.SchemaAST) -> bool:
    return any(
        field.data_type.is_unsupported and field.data_type.storage_type is None
        for model in schema.models.values()
        for field in model.fields.values()
    )


class TablesGenerator(Generator):
    """Generate one table per model."""

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        section = Section(title="Models")

        if uses_unsupported(self.schema):
            section.declarations.append(UNSUPPORTED_HELPER)

        for model in self.schema.models.values():
            section.declarations.append(render_table(model, self.schema))

        result.add_section(section)
        result.add_artifact("table_names", list(self.schema.models))
        return result
