"""
Root of the prizzle AST.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .blocks import Block, DataSourceSpec, EnumSpec, GeneratorSpec, ModelSpec, ViewSpec


class SchemaAST(BaseModel):
    """
    Complete parsed schema.

    Five independent name-keyed mappings. Insertion order follows the
    source and drives the order of generated declarations.
    """

    models: dict[str, ModelSpec] = Field(default_factory=dict)
    views: dict[str, ViewSpec] = Field(default_factory=dict)
    generators: dict[str, GeneratorSpec] = Field(default_factory=dict)
    datasources: dict[str, DataSourceSpec] = Field(default_factory=dict)
    enums: dict[str, EnumSpec] = Field(default_factory=dict)

    def register(self, block: Block) -> None:
        """Register a freshly opened block under its name."""
        if isinstance(block, ModelSpec):
            self.models[block.name] = block
        elif isinstance(block, ViewSpec):
            self.views[block.name] = block
        elif isinstance(block, EnumSpec):
            self.enums[block.name] = block
        elif isinstance(block, GeneratorSpec):
            self.generators[block.name] = block
        elif isinstance(block, DataSourceSpec):
            self.datasources[block.name] = block
        else:
            raise TypeError(f"Unknown block type: {type(block).__name__}")

    def is_relation_type(self, type_name: str) -> bool:
        """Check if a type name refers to a declared model or view."""
        return type_name in self.models or type_name in self.views
