"""
Drizzle backend.

Renders the whole module in memory and writes it in one go, so a failed
run never leaves a partial file behind.
"""

import logging
from pathlib import Path

from ...core import ir
from .. import Backend, BackendCapabilities
from ..base import GeneratorResult
from .generators import DrizzleGenerator, assemble

logger = logging.getLogger(__name__)


class DrizzleBackend(Backend):
    """Generate a drizzle-orm/pg-core TypeScript module."""

    def generate(self, schema: ir.SchemaAST, output_path: Path) -> GeneratorResult:
        result = DrizzleGenerator(schema).generate()
        code = assemble(result)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code, encoding="utf-8")
        logger.info("Wrote %s (%d bytes)", output_path, len(code))

        result.add_artifact("output_path", output_path)
        return result

    def get_capabilities(self) -> BackendCapabilities:
        return BackendCapabilities(
            name="drizzle",
            description="Drizzle ORM (pg-core) table, enum and client declarations",
            output_formats=["ts"],
        )
