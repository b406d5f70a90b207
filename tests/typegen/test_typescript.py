"""Tests for typegen/typescript.py - TypeScript rendering."""

from __future__ import annotations

from schemaplane.config.models import TypegenConfig
from schemaplane.schema.models import ParsedSchema
from schemaplane.schema.parser import parse
from schemaplane.typegen.generator import TypeField, TypeRef, TypeSource, generate_types
from schemaplane.typegen.typescript import render_typescript, ts_type


class TestTsType:
    def test_primitive(self) -> None:
        assert ts_type(TypeField("a", TypeRef("string", TypeSource.PRIMITIVE))) == "string"

    def test_nullable_list_model(self) -> None:
        field = TypeField("posts", TypeRef("Post", TypeSource.MODEL), is_list=True, nullable=True)
        assert ts_type(field) == "PostScalar[] | null"

    def test_unknown_raw_name(self) -> None:
        assert ts_type(TypeField("g", TypeRef("Ghost", TypeSource.UNKNOWN))) == "Ghost"


class TestRenderTypescript:
    """Tests for render_typescript."""

    def _render(self, schema: ParsedSchema, config: TypegenConfig | None = None) -> str:
        return render_typescript(generate_types(schema, config), config)

    def test_header_and_import(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema)
        assert text.startswith("/**\n * AUTO-GENERATED FILE - DO NOT EDIT\n")
        assert "import type { JsonValue, Decimal } from '@prisma/client';" in text

    def test_custom_runtime_import(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema, TypegenConfig(runtime_import="./runtime"))
        assert "from './runtime';" in text

    def test_enum_unions(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema)
        assert "export type Priority = 'LOW' | 'MEDIUM' | 'HIGH' | 'CRITICAL';" in text

    def test_enum_value_attributes_dropped(self) -> None:
        text = self._render(parse('enum Color {\n  RED @map("red")\n  BLUE\n}\n'))
        assert "export type Color = 'RED' | 'BLUE';" in text

    def test_enum_block_map_not_a_member(self) -> None:
        text = self._render(parse('enum Status {\n  ACTIVE\n  INACTIVE\n\n  @@map("status")\n}\n'))
        assert "export type Status = 'ACTIVE' | 'INACTIVE';" in text
        assert "@@map" not in text

    def test_scalar_type(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema)
        assert (
            "export type CompanyScalar = {\n"
            "  id: number;\n"
            "  name: string;\n"
            "  cuit: string | null;\n"
            "  email: string | null;\n"
            "  createdAt: Date;\n"
            "  updatedAt: Date;\n"
            "  isActive: boolean;\n"
            "};"
        ) in text

    def test_create_and_update_inputs(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema)
        assert (
            "export type CompanyCreateInput = {\n"
            "  name: string;\n"
            "  cuit?: string | null;\n"
            "  email?: string | null;\n"
            "  isActive?: boolean;\n"
            "};"
        ) in text
        assert "export type CompanyUpdateInput = {\n  name?: string;\n" in text

    def test_with_relations(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema)
        assert "export type CompanyWithRelations = CompanyScalar & {\n  areas: AreaScalar[];\n" in text
        assert "  assignee: UserScalar | null;" in text
        assert "export type MachineWithRelations = MachineScalar;" in text

    def test_enum_typed_field(self, mini_schema: ParsedSchema) -> None:
        assert "  status: WorkOrderStatus;" in self._render(mini_schema)

    def test_utility_types_appended(self, mini_schema: ParsedSchema) -> None:
        text = self._render(mini_schema)
        for name in ("PaginatedResponse<T>", "ApiError", "BaseListParams", "CompanyScopedWhere", "ListQueryArgs"):
            assert f"export interface {name}" in text

    def test_empty_schema_still_valid_module(self) -> None:
        text = self._render(parse(""))
        assert "// ─── Enums ───" not in text
        assert "export interface ApiError" in text
