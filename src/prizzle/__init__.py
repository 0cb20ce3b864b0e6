"""
prizzle - Prisma schema to Drizzle ORM translator.

Parses a schema.prisma file into an AST and renders it as drizzle-orm
pg-core declarations.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import GenerationError, ParseError, PrizzleError
from .core.parser import parse_file, parse_schema
from .stacks.drizzle import render_drizzle


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("prizzle")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "PrizzleError",
    "ParseError",
    "GenerationError",
    "parse_file",
    "parse_schema",
    "render_drizzle",
]
