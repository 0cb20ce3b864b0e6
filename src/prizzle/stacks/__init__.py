"""
Target plugin system for prizzle.

A backend renders a closed SchemaAST into source code for one target
table-mapping library and writes it out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core import ir
from ..core.errors import GenerationError

if TYPE_CHECKING:
    from .base import GeneratorResult


@dataclass
class BackendCapabilities:
    """
    Describes what a backend generates.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    output_formats: list[str]  # e.g., ["ts"]


class Backend(ABC):
    """Abstract base class for all prizzle backends."""

    @abstractmethod
    def generate(self, schema: ir.SchemaAST, output_path: Path) -> GeneratorResult:
        """
        Render the schema and write it to ``output_path``.

        The file is written once, only after rendering succeeded.

        Raises:
            GenerationError: If the schema cannot be rendered
        """
        pass

    def get_capabilities(self) -> BackendCapabilities:
        return BackendCapabilities(
            name=self.__class__.__name__,
            description="No description provided",
            output_formats=["unknown"],
        )


class BackendRegistry:
    """
    Registry for backend plugins.

    Supports registration via register() and lookup by name.
    """

    def __init__(self) -> None:
        self._backends: dict[str, type[Backend]] = {}

    def register(self, name: str, backend_class: type[Backend]) -> None:
        """
        Register a backend class.

        Args:
            name: Backend name (used in CLI: --target <name>)
            backend_class: Backend class (must extend Backend)

        Raises:
            GenerationError: If name already registered or class invalid
        """
        if name in self._backends:
            raise GenerationError(
                f"Backend '{name}' is already registered. Cannot register {backend_class.__name__}."
            )

        if not issubclass(backend_class, Backend):
            raise GenerationError(f"Backend class {backend_class.__name__} must extend Backend")

        self._backends[name] = backend_class

    def get(self, name: str) -> Backend:
        """
        Get a backend instance by name.

        Raises:
            GenerationError: If backend not found
        """
        if name not in self._backends:
            available = list(self._backends.keys())
            raise GenerationError(f"Backend '{name}' not found. Available backends: {available}")

        return self._backends[name]()

    def list_backends(self) -> list[str]:
        return list(self._backends.keys())


# Global registry instance
_registry: BackendRegistry | None = None


def get_registry() -> BackendRegistry:
    """Get the global backend registry, registering built-in backends on first use."""
    global _registry
    if _registry is None:
        from .drizzle import DrizzleBackend

        _registry = BackendRegistry()
        _registry.register("drizzle", DrizzleBackend)
    return _registry


def get_backend(name: str) -> Backend:
    """Convenience lookup on the global registry."""
    return get_registry().get(name)


def list_backends() -> list[str]:
    return get_registry().list_backends()


__all__ = [
    "Backend",
    "BackendCapabilities",
    "BackendRegistry",
    "get_registry",
    "get_backend",
    "list_backends",
]
