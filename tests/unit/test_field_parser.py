"""Tests for field lines and field attributes."""

import pytest

from prizzle.core import ir
from prizzle.core.errors import ParseError, UnsupportedFieldAttribute
from prizzle.core.parser_impl import parse_data_type, parse_schema


def _model(body: str, name: str = "M") -> ir.ModelSpec:
    return parse_schema(f"model {name} {{\n{body}\n}}").models[name]


class TestDataType:
    def test_required(self):
        assert parse_data_type("Int") == ir.FieldDataType(name="Int")

    def test_optional(self):
        assert parse_data_type("Int?").cardinality == ir.Cardinality.MAYBE

    def test_array(self):
        data_type = parse_data_type("String[]")

        assert data_type.name == "String"
        assert data_type.cardinality == ir.Cardinality.MANY

    def test_unsupported_expression(self):
        data_type = parse_data_type('Unsupported("circle")?')

        assert data_type.is_unsupported
        assert data_type.unsupported_expression == '"circle"'
        assert data_type.cardinality == ir.Cardinality.MAYBE


class TestFieldAttributes:
    def test_primary_key(self):
        field = _model("id Int @id").fields["id"]

        assert field.is_primary_key

    def test_default_is_kept_verbatim(self):
        field = _model('id String @default(dbgenerated("gen_random_uuid()"))').fields["id"]

        assert field.assertions == [ir.DefaultAssertion(value='dbgenerated("gen_random_uuid()")')]

    def test_assertions_keep_declared_order(self):
        field = _model("id Int @default(autoincrement()) @id").fields["id"]

        assert [a.type for a in field.assertions] == ["default", "primaryKey"]

    def test_unique_goes_to_block(self):
        model = _model("email String @unique")

        assert model.fields["email"].assertions == []
        assert model.assertions == [
            ir.IndexSpec(type=ir.IndexKind.UNIQUE, fields=[ir.IndexField(name="email")])
        ]

    def test_unique_map_name(self):
        model = _model('email String @unique(map: "user_email")')

        assert model.assertions[0].map == "user_email"

    def test_storage_override_keeps_cardinality(self):
        data_type = _model("rank Int? @db.SmallInt").fields["rank"].data_type

        assert data_type.name == "Int"
        assert data_type.storage_type == "SmallInt"
        assert data_type.cardinality == ir.Cardinality.MAYBE

    def test_storage_override_arguments(self):
        data_type = _model("name String @db.VarChar(255)").fields["name"].data_type

        assert data_type.storage_type == "VarChar(255)"

    def test_unknown_attribute_aborts(self):
        with pytest.raises(UnsupportedFieldAttribute, match="@updatedAt"):
            _model("updatedAt DateTime @updatedAt")

    def test_stray_text_aborts(self):
        with pytest.raises(UnsupportedFieldAttribute):
            _model("id Int @id primary")

    def test_unknown_attribute_column(self):
        with pytest.raises(UnsupportedFieldAttribute) as exc_info:
            _model("id Int @id @map(\"user_id\")")

        assert exc_info.value.context is not None
        assert exc_info.value.context.column == len("id Int @id ") + 1


class TestRelations:
    SCHEMA = """
model Author {
  id    Int    @id
  posts Post[]
}

model Post {
  id       Int    @id
  author   Author @relation(fields: [authorId], references: [id], onDelete: Cascade, onUpdate: NoAction)
  authorId Int
}
"""

    def test_relation_field_is_not_stored(self):
        post = parse_schema(self.SCHEMA).models["Post"]

        assert "author" not in post.fields

    def test_relation_merged_into_scalar_field(self):
        post = parse_schema(self.SCHEMA).models["Post"]

        assert post.fields["authorId"].relations == [
            ir.RelationAssertion(
                model="Author",
                fields="authorId",
                references="id",
                on_delete="Cascade",
                on_update="NoAction",
            )
        ]

    def test_back_reference_is_kept_as_field(self):
        author = parse_schema(self.SCHEMA).models["Author"]

        assert author.fields["posts"].data_type == ir.FieldDataType(
            name="Post", cardinality=ir.Cardinality.MANY
        )

    def test_relation_before_or_after_scalar(self):
        before = _model(
            "author Author @relation(fields: [authorId], references: [id])\nauthorId Int"
        )
        after = _model(
            "authorId Int\nauthor Author @relation(fields: [authorId], references: [id])"
        )

        assert before.fields["authorId"] == after.fields["authorId"]
        assert len(before.fields["authorId"].relations) == 1

    def test_composite_relation(self):
        model = _model(
            "owner Account @relation(fields: [tenantId, ownerId], references: [tenantId, id])\n"
            "tenantId Int\n"
            "ownerId Int"
        )

        assert model.fields["tenantId"].relations[0].references == "tenantId"
        assert model.fields["ownerId"].relations[0].references == "id"

    def test_relation_name(self):
        model = _model(
            'author Author @relation("Written", fields: [authorId], references: [id])\n'
            "authorId Int"
        )

        assert model.fields["authorId"].relations[0].name == "Written"

    def test_relation_without_fields_stages_nothing(self):
        model = _model('author Author @relation("Written")\nauthorId Int')

        assert model.fields["authorId"].assertions == []

    def test_relation_to_undeclared_field(self):
        with pytest.raises(ParseError, match="authorId"):
            _model("author Author @relation(fields: [authorId], references: [id])")

    def test_mismatched_relation_lists(self):
        with pytest.raises(ParseError, match="2 fields but 1 references"):
            _model(
                "owner Account @relation(fields: [a, b], references: [id])\na Int\nb Int"
            )
