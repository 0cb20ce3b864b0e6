"""
Base infrastructure for code generators.

Provides:
- Generator / CompositeGenerator base classes
- GeneratorResult and Section containers
"""

from .generator import CompositeGenerator, Generator, GeneratorResult, Section

__all__ = [
    "Generator",
    "CompositeGenerator",
    "GeneratorResult",
    "Section",
]
