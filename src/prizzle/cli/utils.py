"""
prizzle CLI utilities.

Shared helpers used by the CLI commands.
"""

import logging
import platform
import sys
from pathlib import Path

import typer

from prizzle.core.errors import ConfigError
from prizzle.core.manifest import ProjectManifest, find_manifest, load_manifest

DEFAULT_SCHEMA = Path("prisma") / "schema.prisma"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    from prizzle import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        from prizzle.stacks import get_backend, list_backends

        typer.echo(f"prizzle version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo("")
        typer.echo("Targets:")
        for name in list_backends():
            capabilities = get_backend(name).get_capabilities()
            formats = ", ".join(capabilities.output_formats)
            typer.echo(f"  {name:<14} {capabilities.description} ({formats})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Log to stderr so generated output on stdout stays clean."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        stream=sys.stderr,
        format=LOG_FORMAT,
        force=True,
    )


def resolve_manifest(
    schema: Path | None,
    output: Path | None,
    manifest: Path | None,
    target: str | None = None,
) -> ProjectManifest:
    """
    Merge command line options over prizzle.toml settings.

    The manifest is the one given with --manifest, else the nearest
    prizzle.toml above the current directory, else defaults.

    Raises:
        ConfigError: If no schema can be determined
    """
    if manifest is not None:
        settings = load_manifest(manifest)
    else:
        found = find_manifest(Path.cwd())
        settings = load_manifest(found) if found else ProjectManifest()

    if schema is not None:
        settings.schema = schema
    if output is not None:
        settings.output = output
    if target is not None:
        settings.target = target

    if settings.schema is None:
        if not DEFAULT_SCHEMA.exists():
            raise ConfigError(
                f"No schema given. Pass a path, set [project].schema in prizzle.toml, "
                f"or create {DEFAULT_SCHEMA}"
            )
        settings.schema = DEFAULT_SCHEMA

    return settings
