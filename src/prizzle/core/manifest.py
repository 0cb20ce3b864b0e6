import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

MANIFEST_NAME = "prizzle.toml"
DEFAULT_OUTPUT = Path("out.ts")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"  # standard logging level name


@dataclass
class ProjectManifest:
    """
    Settings read from prizzle.toml.

    Relative paths are resolved against the manifest's directory.
    """

    schema: Path | None = None
    output: Path = DEFAULT_OUTPUT
    target: str = "drizzle"
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def find_manifest(start: Path) -> Path | None:
    """Return the nearest prizzle.toml in ``start`` or its parents."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read manifest {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    root = path.parent
    project = data.get("project", {})
    logging_data = data.get("logging", {})

    schema = project.get("schema")
    output = project.get("output")

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigError(f"Unknown logging level '{level}' in {path}")

    return ProjectManifest(
        schema=root / schema if schema else None,
        output=root / output if output else root / DEFAULT_OUTPUT,
        target=project.get("target", "drizzle"),
        logging=LoggingConfig(level=level),
    )
