"""
prizzle CLI.

Commands:
- generate: translate schema.prisma into Drizzle declarations
- inspect: show the parsed schema
"""

import typer

from prizzle.cli.schema import generate_command, inspect_command
from prizzle.cli.utils import get_version, version_callback

app = typer.Typer(
    help="prizzle – Prisma schema to Drizzle ORM translator",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """prizzle CLI main callback for global options."""
    pass


app.command(name="generate")(generate_command)
app.command(name="inspect")(inspect_command)


def main() -> None:
    app()


__all__ = ["app", "main", "get_version", "version_callback"]
