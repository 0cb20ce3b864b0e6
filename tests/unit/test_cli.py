"""Tests for CLI commands."""

import logging
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from prizzle.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The commands reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_project(tmp_path: Path, blog_schema_path: Path):
    """Create a temporary project with a schema and a manifest."""
    prisma_dir = tmp_path / "prisma"
    prisma_dir.mkdir()
    shutil.copy(blog_schema_path, prisma_dir / "schema.prisma")

    (tmp_path / "prizzle.toml").write_text(
        """
[project]
schema = "prisma/schema.prisma"
output = "src/db/schema.ts"
"""
    )

    return tmp_path


def test_generate_command(cli_runner: CliRunner, tmp_path: Path, blog_schema_path: Path):
    output = tmp_path / "schema.ts"

    result = cli_runner.invoke(app, ["generate", str(blog_schema_path), "-o", str(output)])

    assert result.exit_code == 0
    assert "✓ Wrote" in result.output
    assert "2 tables, 1 enums, 1 datasources" in result.output
    assert 'export const Post = d.pgTable("Post", {' in output.read_text()


def test_generate_with_manifest(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(
        app, ["generate", "--manifest", str(test_project / "prizzle.toml")]
    )

    assert result.exit_code == 0
    assert (test_project / "src" / "db" / "schema.ts").exists()


def test_generate_finds_manifest_in_cwd(
    cli_runner: CliRunner, test_project: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(test_project)

    result = cli_runner.invoke(app, ["generate"])

    assert result.exit_code == 0
    assert (test_project / "src" / "db" / "schema.ts").exists()


def test_generate_parse_error(cli_runner: CliRunner, tmp_path: Path):
    schema = tmp_path / "schema.prisma"
    schema.write_text("model User {\n  id Int @id\n  updatedAt DateTime @updatedAt\n}\n")
    output = tmp_path / "schema.ts"

    result = cli_runner.invoke(app, ["generate", str(schema), "-o", str(output)])

    assert result.exit_code == 1
    assert "Parse error" in result.output
    assert "@updatedAt" in result.output
    assert not output.exists()


def test_generate_reports_index_warnings(cli_runner: CliRunner, tmp_path: Path):
    schema = tmp_path / "schema.prisma"
    schema.write_text("model User {\n  id Int @id\n  name String\n  @@index([name(length: 10)])\n}\n")
    output = tmp_path / "schema.ts"

    result = cli_runner.invoke(app, ["generate", str(schema), "-o", str(output)])

    assert result.exit_code == 0
    assert (
        f"WARNING: {schema}:4:1: Could not understand field modifier 'length: 10' on field 'name'"
        in result.output
    )
    assert 'd.index("User_name_idx").on(table.name)' in output.read_text()


def test_generate_error_keeps_previous_output(cli_runner: CliRunner, tmp_path: Path):
    schema = tmp_path / "schema.prisma"
    schema.write_text('datasource db {\n  provider = "mysql"\n  url = "mysql://x"\n}\n')
    output = tmp_path / "schema.ts"
    output.write_text("// previous run\n")

    result = cli_runner.invoke(app, ["generate", str(schema), "-o", str(output)])

    assert result.exit_code == 1
    assert "Generation error" in result.output
    assert output.read_text() == "// previous run\n"


def test_generate_missing_schema(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(app, ["generate"])

    assert result.exit_code == 1
    assert "No schema given" in result.output


def test_generate_unreadable_schema(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["generate", str(tmp_path / "missing.prisma")])

    assert result.exit_code == 1
    assert "Cannot read schema" in result.output


def test_inspect_command(cli_runner: CliRunner, blog_schema_path: Path):
    result = cli_runner.invoke(app, ["inspect", str(blog_schema_path)])

    assert result.exit_code == 0
    for name in ("Author", "Post", "AuthorStats", "Role", "client"):
        assert name in result.output


def test_inspect_json(cli_runner: CliRunner, blog_schema_path: Path):
    result = cli_runner.invoke(app, ["inspect", str(blog_schema_path), "--json"])

    assert result.exit_code == 0
    assert '"AuthorStats"' in result.output
    assert "gin_trgm_ops" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "prizzle version" in result.output
    assert "Drizzle ORM (pg-core) table, enum and client declarations (ts)" in result.output
