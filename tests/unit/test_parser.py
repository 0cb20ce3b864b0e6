"""Tests for the block parser state machine."""

from pathlib import Path

import pytest

from prizzle.core import ir
from prizzle.core.errors import ParseError
from prizzle.core.parser_impl import Parser, ParserState, parse_schema


class TestBlocks:
    def test_all_block_kinds_are_registered(self, blog_ast: ir.SchemaAST):
        assert list(blog_ast.models) == ["Author", "Post"]
        assert list(blog_ast.views) == ["AuthorStats"]
        assert list(blog_ast.enums) == ["Role"]
        assert list(blog_ast.generators) == ["client"]
        assert list(blog_ast.datasources) == ["db"]

    def test_every_block_is_a_block(self, blog_ast: ir.SchemaAST):
        groups = [
            blog_ast.models,
            blog_ast.views,
            blog_ast.enums,
            blog_ast.generators,
            blog_ast.datasources,
        ]

        assert all(isinstance(block, ir.Block) for group in groups for block in group.values())
        assert {block.kind for group in groups for block in group.values()} == {
            "model",
            "view",
            "enum",
            "generator",
            "datasource",
        }

    def test_enum_values_keep_order(self):
        ast = parse_schema("enum Status {\n  DRAFT\n  REVIEW\n  PUBLISHED\n  ARCHIVED\n}")

        assert ast.enums["Status"].values == ["DRAFT", "REVIEW", "PUBLISHED", "ARCHIVED"]

    def test_datasource_properties(self, blog_ast: ir.SchemaAST):
        db = blog_ast.datasources["db"]

        assert db.provider == '"postgresql"'
        assert db.provider_name == "postgresql"
        assert db.url == 'env("DATABASE_URL")'
        assert db.properties == {"extensions": "[pg_trgm]"}

    def test_generator_properties(self, blog_ast: ir.SchemaAST):
        assert blog_ast.generators["client"].properties == {"provider": '"prisma-client-js"'}

    def test_field_order_is_preserved(self, blog_ast: ir.SchemaAST):
        assert list(blog_ast.models["Post"].fields) == [
            "id",
            "title",
            "tags",
            "body",
            "createdAt",
            "authorId",
        ]

    def test_block_registered_when_header_is_read(self):
        parser = Parser("model User {\n  id Int @id\n}", Path("inline.prisma"))
        header, field, _ = parser.lines

        parser.feed(header)
        assert parser.state == ParserState.IN_MODEL
        assert "User" in parser.ast.models

        parser.feed(field)
        assert "id" in parser.ast.models["User"].fields

    def test_close_returns_to_idle(self):
        parser = Parser("view Stats {\n  total Int\n}", Path("inline.prisma"))
        for line in parser.lines:
            parser.feed(line)

        assert parser.state == ParserState.IDLE
        assert parser.current is None


class TestMalformedInput:
    def test_unterminated_block(self):
        with pytest.raises(ParseError, match="never closed"):
            parse_schema("model User {\n  id Int @id\n")

    def test_stray_closing_brace(self):
        with pytest.raises(ParseError, match="without an open block"):
            parse_schema("}")

    def test_header_inside_block(self):
        with pytest.raises(ParseError, match="opened inside another block"):
            parse_schema("model A {\nmodel B {\n}\n}")

    def test_line_outside_block(self):
        with pytest.raises(ParseError, match="outside of a block"):
            parse_schema("id Int")

    def test_assignment_without_equals(self):
        with pytest.raises(ParseError, match="key"):
            parse_schema('generator client {\n  provider "prisma-client-js"\n}')

    def test_error_carries_location(self):
        with pytest.raises(ParseError) as exc_info:
            parse_schema("\n\nmodel User {\n  id\n}", Path("schema.prisma"))

        context = exc_info.value.context
        assert context is not None
        assert context.line == 4
        assert context.file == Path("schema.prisma")
        assert "schema.prisma:4:1" in str(exc_info.value)
