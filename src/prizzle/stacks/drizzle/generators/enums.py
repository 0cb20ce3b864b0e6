"""Enum generator: one ``pgEnum`` per enum, values in declaration order."""

import json

from ....core import ir
from ...base import Generator, GeneratorResult, Section


def render_enum(enum: ir.EnumSpec) -> str:
    return f'export const {enum.name} = d.pgEnum("{enum.name}", {json.dumps(enum.values)});'


class EnumsGenerator(Generator):
    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        section = Section(title="Enums")
        for enum in self.schema.enums.values():
            section.declarations.append(render_enum(enum))
        result.add_section(section)
        result.add_artifact("enum_names", list(self.schema.enums))
        return result
