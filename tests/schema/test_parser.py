"""Tests for schema/parser.py - two-pass schema parsing."""

from __future__ import annotations

from schemaplane.schema.models import Cardinality, FieldKind, ParsedSchema
from schemaplane.schema.parser import collect_enum_names, parse


class TestCollectEnumNames:
    """Tests for the enum pre-pass."""

    def test_collects_all_enums(self) -> None:
        lines = ["enum A {", "X", "}", "model M {", "}", "  enum B {", "Y", "}"]
        assert collect_enum_names(lines) == frozenset({"A", "B"})


class TestParseMiniSchema:
    """Parsing the shared mini schema."""

    def test_counts(self, mini_schema: ParsedSchema) -> None:
        assert len(mini_schema.models) == 7
        assert len(mini_schema.enumerations) == 2

    def test_declaration_order(self, mini_schema: ParsedSchema) -> None:
        assert [m.name for m in mini_schema.models] == [
            "Company",
            "User",
            "UserOnCompany",
            "Area",
            "Sector",
            "WorkOrder",
            "Machine",
        ]
        assert [e.name for e in mini_schema.enumerations] == ["WorkOrderStatus", "Priority"]

    def test_enum_values(self, mini_schema: ParsedSchema) -> None:
        status = mini_schema.get_enum("WorkOrderStatus")
        assert status is not None
        assert status.values == ("PENDING", "IN_PROGRESS", "COMPLETED", "CANCELLED")

    def test_company_fields(self, mini_schema: ParsedSchema) -> None:
        company = mini_schema.get_model("Company")
        assert company is not None
        assert len(company.fields) == 10
        assert len(company.scalar_fields) == 7
        assert len(company.relation_fields) == 3
        assert company.mapped_name == "companies"

    def test_line_numbers(self, mini_schema: ParsedSchema) -> None:
        company = mini_schema.get_model("Company")
        assert company is not None
        assert company.line == 25
        assert company.end_line == 39
        id_field = company.get_field("id")
        assert id_field is not None
        assert id_field.line == 26

    def test_enum_typed_fields(self, mini_schema: ParsedSchema) -> None:
        work_order = mini_schema.get_model("WorkOrder")
        assert work_order is not None
        assert len(work_order.fields) == 12
        status = work_order.get_field("status")
        assert status is not None
        assert status.kind is FieldKind.ENUM
        assert status.default == "PENDING"

    def test_relation_arguments(self, mini_schema: ParsedSchema) -> None:
        work_order = mini_schema.get_model("WorkOrder")
        assert work_order is not None
        assignee = work_order.get_field("assignee")
        assert assignee is not None
        assert assignee.relation is not None
        assert assignee.relation.fields == ("assigneeId",)
        assert assignee.relation.on_delete == "SetNull"
        assert assignee.cardinality is Cardinality.MANY_TO_ONE_OPTIONAL

    def test_block_attributes(self, mini_schema: ParsedSchema) -> None:
        link = mini_schema.get_model("UserOnCompany")
        assert link is not None
        assert [u.lead_fields for u in link.unique_constraints] == [("userId", "companyId")]
        assert [i.lead_field for i in link.indexes] == ["companyId"]


class TestParseEdgeCases:
    """Lenient parsing behavior."""

    def test_given_empty_text_when_parsed_then_empty_schema(self) -> None:
        schema = parse("")
        assert schema.models == ()
        assert schema.enumerations == ()

    def test_given_enum_declared_after_use_when_parsed_then_still_enum(self) -> None:
        # Given
        text = "model Task {\n  id Int @id\n  level Level\n}\n\nenum Level {\n  LOW\n  HIGH\n}\n"

        # When
        schema = parse(text)

        # Then
        task = schema.get_model("Task")
        assert task is not None
        level = task.get_field("level")
        assert level is not None
        assert level.kind is FieldKind.ENUM

    def test_given_lowercase_model_when_referenced_then_relation(self) -> None:
        text = "model post {\n  id Int @id\n}\nmodel Blog {\n  id Int @id\n  posts post[]\n}\n"

        schema = parse(text)

        blog = schema.get_model("Blog")
        assert blog is not None
        posts = blog.get_field("posts")
        assert posts is not None
        assert posts.is_relation is True

    def test_given_nested_default_when_parsed_then_full_expression(self) -> None:
        text = 'model Token {\n  id String @id @default(dbgenerated("gen_random_uuid()")) @db.Uuid\n}\n'

        schema = parse(text)

        token = schema.get_model("Token")
        assert token is not None
        id_field = token.get_field("id")
        assert id_field is not None
        assert id_field.default == 'dbgenerated("gen_random_uuid()")'
        assert id_field.db_type == "Uuid"

    def test_given_relation_then_more_attributes_when_parsed_then_clause_isolated(self) -> None:
        text = (
            "model Post {\n"
            "  id Int @id\n"
            "  authorId Int\n"
            '  author User @relation(fields: [authorId], references: [id], onDelete: Cascade) @map("writer")\n'
            "}\n"
        )

        schema = parse(text)

        post = schema.get_model("Post")
        assert post is not None
        author = post.get_field("author")
        assert author is not None
        assert author.relation is not None
        assert author.relation.on_delete == "Cascade"
        assert author.relation.references == ("id",)

    def test_given_unterminated_block_when_parsed_then_earlier_blocks_kept(self) -> None:
        text = "model A {\n  id Int @id\n}\nmodel B {\n  id Int @id\n"

        schema = parse(text)

        assert [m.name for m in schema.models] == ["A"]

    def test_given_one_line_block_when_parsed_then_later_blocks_kept(self) -> None:
        text = "model A {}\n\nmodel B {\n  id Int @id\n}\n"

        schema = parse(text)

        assert [m.name for m in schema.models] == ["A", "B"]
        assert schema.models[0].fields == ()
        assert schema.models[1].line == 3

    def test_given_unrecognized_lines_when_parsed_then_skipped(self) -> None:
        text = "model A {\n  id Int @id\n  ???\n  @@schema(\"public\")\n}\n"

        schema = parse(text)

        model = schema.get_model("A")
        assert model is not None
        assert [f.name for f in model.fields] == ["id"]
        assert model.indexes == ()

    def test_given_comments_when_parsed_then_attached_and_collected(self) -> None:
        text = (
            "model A {\n"
            "  // Primary key\n"
            "  id Int @id\n"
            "\n"
            "  // Orphan note\n"
            "\n"
            "  name String\n"
            "}\n"
        )

        schema = parse(text)

        model = schema.get_model("A")
        assert model is not None
        id_field = model.get_field("id")
        name_field = model.get_field("name")
        assert id_field is not None and id_field.comment == "Primary key"
        assert name_field is not None and name_field.comment is None
        assert model.comments == ("Primary key", "Orphan note")

    def test_given_enum_with_comments_when_parsed_then_values_only(self) -> None:
        text = "enum Color {\n  // primary colors\n  RED\n\n  GREEN @map(\"green\")\n}\n"

        schema = parse(text)

        color = schema.get_enum("Color")
        assert color is not None
        assert color.values == ("RED", 'GREEN @map("green")')

    def test_given_generator_and_datasource_when_parsed_then_ignored(self) -> None:
        text = 'generator client {\n  provider = "prisma-client-js"\n}\nmodel A {\n  id Int @id\n}\n'

        schema = parse(text)

        assert schema.model_names == frozenset({"A"})

    def test_given_enum_with_block_map_when_parsed_then_members_exclude_it(self) -> None:
        # Given
        text = 'enum Status {\n  ACTIVE\n  INACTIVE @map("inactive")\n\n  @@map("status")\n}\n'

        # When
        schema = parse(text)

        # Then
        status = schema.get_enum("Status")
        assert status is not None
        assert status.values == ("ACTIVE", 'INACTIVE @map("inactive")', '@@map("status")')
        assert status.members == ("ACTIVE", "INACTIVE")
