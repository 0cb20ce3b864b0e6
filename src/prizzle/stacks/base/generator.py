"""
Base generator classes for modular code generation.

Generators are responsible for rendering one part of the output:
- DataSourcesGenerator: database clients
- EnumsGenerator: enum declarations
- TablesGenerator: table declarations with columns and indexes

Generators never touch the filesystem. They return imports and sections,
and the backend assembles and writes the final file.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ...core import ir


@dataclass
class Section:
    """
    A titled group of declarations in the generated file.

    Attributes:
        title: Banner title, or None for an untitled section
        declarations: Top-level declarations, separated by a blank line when rendered
    """

    title: str | None = None
    declarations: list[str] = field(default_factory=list)


@dataclass
class GeneratorResult:
    """
    Result from a generator execution.

    Attributes:
        imports: Import lines, deduplicated and in first-seen order
        sections: Output sections in render order
        artifacts: Data to share with other generators or the CLI
        warnings: Any warnings to display to user
    """

    imports: list[str] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    artifacts: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def add_import(self, line: str) -> None:
        """Record an import line unless it is already present."""
        if line not in self.imports:
            self.imports.append(line)

    def add_section(self, section: Section) -> None:
        self.sections.append(section)

    def add_artifact(self, key: str, value: Any) -> None:
        """Add an artifact for other generators or the CLI."""
        self.artifacts[key] = value

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def merge(self, other: "GeneratorResult") -> None:
        """Merge another result into this one."""
        for line in other.imports:
            self.add_import(line)
        self.sections.extend(other.sections)
        self.artifacts.update(other.artifacts)
        self.warnings.extend(other.warnings)


class Generator(ABC):
    """
    Base class for all generators.

    A generator renders one part of the output from a closed SchemaAST.

    Example:
        class EnumsGenerator(Generator):
            def generate(self) -> GeneratorResult:
                result = GeneratorResult()
                section = Section(title="Enums")
                for enum in self.schema.enums.values():
                    section.declarations.append(render_enum(enum))
                result.add_section(section)
                return result
    """

    def __init__(self, schema: ir.SchemaAST):
        """
        Initialize generator.

        Args:
            schema: Closed schema AST (every block terminated)
        """
        self.schema = schema

    @abstractmethod
    def generate(self) -> GeneratorResult:
        """
        Generate output fragments.

        Returns:
            GeneratorResult with imports and sections

        Raises:
            GenerationError: If some part of the schema cannot be rendered
        """
        pass


class CompositeGenerator(Generator):
    """
    Generator that runs multiple sub-generators in order.

    Example:
        class DrizzleGenerator(CompositeGenerator):
            def get_generators(self) -> list[Generator]:
                return [
                    DataSourcesGenerator(self.schema),
                    EnumsGenerator(self.schema),
                    TablesGenerator(self.schema),
                ]
    """

    @abstractmethod
    def get_generators(self) -> list[Generator]:
        """
        Get the list of sub-generators to run.

        Returns:
            List of Generator instances
        """
        pass

    def generate(self) -> GeneratorResult:
        """
        Run all sub-generators and merge results.

        Returns:
            Combined GeneratorResult from all sub-generators
        """
        combined = GeneratorResult()
        for generator in self.get_generators():
            combined.merge(generator.generate())
        return combined
