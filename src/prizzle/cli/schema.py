"""
Schema commands: generate and inspect.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from prizzle.core import ir
from prizzle.core.errors import GenerationError, ParseError, PrizzleError
from prizzle.core.parser import parse_file
from prizzle.stacks import get_backend

from .utils import configure_logging, resolve_manifest

console = Console()


def generate_command(
    schema: Path | None = typer.Argument(None, help="Path to schema.prisma"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (default: out.ts)"
    ),
    manifest: Path | None = typer.Option(
        None, "--manifest", "-m", help="Path to prizzle.toml"
    ),
    target: str | None = typer.Option(None, "--target", "-t", help="Target backend"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """
    Translate a Prisma schema into Drizzle declarations.

    The output file is written only if parsing and generation both succeed.

    Examples:
        prizzle generate prisma/schema.prisma
        prizzle generate schema.prisma -o src/db/schema.ts
    """
    try:
        settings = resolve_manifest(schema, output, manifest, target)
        configure_logging("DEBUG" if verbose else settings.logging.level)

        diagnostics: list[ParseError] = []
        ast = parse_file(settings.schema, diagnostics)
        result = get_backend(settings.target).generate(ast, settings.output)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except GenerationError as e:
        typer.echo(f"Generation error: {e}", err=True)
        raise typer.Exit(code=1)
    except PrizzleError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for diagnostic in diagnostics:
        result.add_warning(_diagnostic_line(diagnostic))
    for warning in result.warnings:
        typer.echo(f"WARNING: {warning}", err=True)

    typer.echo(
        f"✓ Wrote {settings.output} "
        f"({len(result.artifacts.get('table_names', []))} tables, "
        f"{len(result.artifacts.get('enum_names', []))} enums, "
        f"{len(result.artifacts.get('datasource_names', []))} datasources)"
    )


def inspect_command(
    schema: Path | None = typer.Argument(None, help="Path to schema.prisma"),
    manifest: Path | None = typer.Option(
        None, "--manifest", "-m", help="Path to prizzle.toml"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full AST as JSON"),
) -> None:
    """
    Parse a schema and show what the parser found.

    Generators and datasources are listed with all their properties.
    """
    try:
        settings = resolve_manifest(schema, None, manifest)
        configure_logging(settings.logging.level)
        ast = parse_file(settings.schema)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except PrizzleError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(ast.model_dump_json())
        return

    console.print(_summary_table(ast, settings.schema))


def _summary_table(ast: ir.SchemaAST, path: Path) -> Table:
    table = Table(title=f"Schema: {path}")
    table.add_column("Kind", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Details")

    for name, datasource in ast.datasources.items():
        details = {"provider": datasource.provider, "url": datasource.url, **datasource.properties}
        table.add_row("datasource", name, json.dumps(details))
    for name, generator in ast.generators.items():
        table.add_row("generator", name, json.dumps(generator.properties))
    for name, enum in ast.enums.items():
        table.add_row("enum", name, ", ".join(enum.values))
    for name, model in ast.models.items():
        table.add_row("model", name, f"{len(model.fields)} fields, {len(model.assertions)} constraints")
    for name, view in ast.views.items():
        table.add_row("view", name, f"{len(view.fields)} fields")

    return table


def _diagnostic_line(diagnostic: ParseError) -> str:
    if diagnostic.context is None:
        return diagnostic.message
    context = diagnostic.context
    return f"{context.file}:{context.line}:{context.column}: {diagnostic.message}"
