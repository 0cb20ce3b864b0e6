"""Core prizzle functionality: AST, parser, errors, project manifest."""

from . import ir
from .errors import (
    ConfigError,
    ErrorContext,
    GenerationError,
    ParseError,
    PrizzleError,
    UnrecognizedIndexModifier,
    UnsupportedActionWord,
    UnsupportedBlockAttribute,
    UnsupportedFieldAttribute,
    UnsupportedProvider,
    UnsupportedScalarType,
)
from .manifest import ProjectManifest, find_manifest, load_manifest
from .parser import parse_file, parse_schema

__all__ = [
    "ir",
    # Errors
    "PrizzleError",
    "ErrorContext",
    "ParseError",
    "UnsupportedBlockAttribute",
    "UnsupportedFieldAttribute",
    "UnrecognizedIndexModifier",
    "GenerationError",
    "UnsupportedScalarType",
    "UnsupportedProvider",
    "UnsupportedActionWord",
    "ConfigError",
    # Manifest
    "ProjectManifest",
    "find_manifest",
    "load_manifest",
    # Parsing
    "parse_file",
    "parse_schema",
]
