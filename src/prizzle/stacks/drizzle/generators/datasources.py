"""
Datasource client generator.

    datasource db {
      provider = "postgresql"
      url      = env("DATABASE_URL")
    }

becomes

    export const dbClient = postgres(process.env["DATABASE_URL"]!);
    export const db = pgDrizzle(dbClient);
"""

import re
from dataclasses import dataclass

from ....core import ir
from ....core.errors import GenerationError, UnsupportedProvider
from ...base import Generator, GeneratorResult, Section

_ENV_CALL = re.compile(r"env\((.+?)\)")


@dataclass(frozen=True)
class ProviderTemplate:
    """How to build a client and a Drizzle instance for one provider."""

    imports: tuple[str, ...]
    client: str  # client factory called with the url expression
    drizzle: str  # drizzle wrapper called with the client


_POSTGRES = ProviderTemplate(
    imports=(
        'import postgres from "postgres";',
        'import { drizzle as pgDrizzle } from "drizzle-orm/postgres-js";',
    ),
    client="postgres",
    drizzle="pgDrizzle",
)

PROVIDERS = {
    "postgresql": _POSTGRES,
    "postgres": _POSTGRES,
}


def get_provider(datasource: ir.DataSourceSpec) -> ProviderTemplate:
    """
    Look up the provider template for a datasource.

    Raises:
        UnsupportedProvider: If the provider is not in the allow-list
    """
    provider = datasource.provider_name
    if provider not in PROVIDERS:
        raise UnsupportedProvider(
            f"Could not map provider {datasource.provider or '<missing>'} "
            f"for datasource {datasource.name}"
        )
    return PROVIDERS[provider]


def render_url(url: str) -> str:
    """Rewrite ``env("X")`` into a runtime ``process.env["X"]!`` lookup."""
    return _ENV_CALL.sub(r"process.env[\1]!", url)


def render_client(datasource: ir.DataSourceSpec) -> str:
    provider = get_provider(datasource)
    if not datasource.url:
        raise GenerationError(f"Datasource {datasource.name} has no url")

    name = datasource.name
    return (
        f"export const {name}Client = {provider.client}({render_url(datasource.url)});\n"
        f"export const {name} = {provider.drizzle}({name}Client);"
    )


class DataSourcesGenerator(Generator):
    """Generate one client and one Drizzle instance per datasource."""

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        section = Section()

        for datasource in self.schema.datasources.values():
            for line in get_provider(datasource).imports:
                result.add_import(line)
            section.declarations.append(render_client(datasource))

        if section.declarations:
            result.add_section(section)
        result.add_artifact("datasource_names", list(self.schema.datasources))
        return result
