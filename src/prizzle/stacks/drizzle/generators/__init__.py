"""
Drizzle code generators.

Output layout, in order:
- fixed pg-core and sql imports, then provider imports
- datasource clients
- enums
- tables (preceded by the ``unsupported`` custom type when needed)
"""

from ....core import ir
from ...base import CompositeGenerator, Generator, GeneratorResult
from .columns import ACTION_WORDS, SCALAR_TYPES, STORAGE_TYPES, map_action, render_column
from .datasources import PROVIDERS, DataSourcesGenerator, render_url
from .enums import EnumsGenerator, render_enum
from .tables import TablesGenerator, render_index, render_table

FIXED_IMPORTS = (
    'import * as d from "drizzle-orm/pg-core";',
    'import { sql } from "drizzle-orm";',
)


class DrizzleGenerator(CompositeGenerator):
    """Run the datasource, enum and table generators in output order."""

    def get_generators(self) -> list[Generator]:
        return [
            DataSourcesGenerator(self.schema),
            EnumsGenerator(self.schema),
            TablesGenerator(self.schema),
        ]


def banner(title: str) -> str:
    """Box comment used to separate output sections."""
    inner = f"    {title}    "
    return "\n".join(
        [
            f"// ┌{'─' * len(inner)}┐",
            f"// │{inner}│",
            f"// └{'─' * len(inner)}┘",
        ]
    )


def assemble(result: GeneratorResult) -> str:
    """Join imports and sections into the final module text."""
    parts = ["\n".join([*FIXED_IMPORTS, *result.imports])]
    for section in result.sections:
        chunk = [banner(section.title)] if section.title else []
        chunk.extend(section.declarations)
        if chunk:
            parts.append("\n\n".join(chunk))
    return "\n\n".join(parts) + "\n"


def render_drizzle(schema: ir.SchemaAST) -> str:
    """
    Render a closed AST to a Drizzle TypeScript module.

    Pure and deterministic: the same AST always yields the same text.

    Raises:
        GenerationError: If any value falls outside the mapping tables
    """
    return assemble(DrizzleGenerator(schema).generate())


__all__ = [
    "ACTION_WORDS",
    "SCALAR_TYPES",
    "STORAGE_TYPES",
    "PROVIDERS",
    "FIXED_IMPORTS",
    "DrizzleGenerator",
    "DataSourcesGenerator",
    "EnumsGenerator",
    "TablesGenerator",
    "assemble",
    "banner",
    "map_action",
    "render_column",
    "render_drizzle",
    "render_enum",
    "render_index",
    "render_table",
    "render_url",
]
