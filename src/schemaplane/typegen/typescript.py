"""TypeScript rendering of a TypeBundle."""

from __future__ import annotations

from collections.abc import Iterable

from schemaplane.config.models import TypegenConfig
from schemaplane.typegen.generator import TypeBundle, TypeField, TypeSource

_UTILITY_TYPES = """\
// ─── Utility Types ───

export interface PaginatedResponse<T> {
  data: T[];
  total: number;
  page: number;
  pageSize: number;
  totalPages: number;
}

export interface ApiError {
  error: string;
  message?: string;
  details?: unknown;
}

export interface BaseListParams {
  page?: number;
  pageSize?: number;
  search?: string;
  sortBy?: string;
  sortOrder?: 'asc' | 'desc';
}

export interface CompanyScopedWhere {
  companyId: number;
}

export interface ListQueryArgs<TWhere = Record<string, unknown>> {
  where?: TWhere;
  skip?: number;
  take?: number;
  orderBy?: Record<string, 'asc' | 'desc'>;
}
"""


def ts_type(f: TypeField) -> str:
    """TypeScript type expression; known models render as their scalar shape."""
    name = f.type.name
    if f.type.source is TypeSource.MODEL:
        name = f"{name}Scalar"
    if f.is_list:
        name = f"{name}[]"
    if f.nullable:
        name = f"{name} | null"
    return name


def _members(fields: Iterable[TypeField]) -> list[str]:
    return [f"  {f.name}{'?' if f.optional else ''}: {ts_type(f)};" for f in fields]


def render_typescript(bundle: TypeBundle, config: TypegenConfig | None = None) -> str:
    """Full .ts module: header, runtime import, enums, per-model types, utilities."""
    config = config or TypegenConfig()
    out = [
        "/**",
        " * AUTO-GENERATED FILE - DO NOT EDIT",
        f" * Generated by {config.header_name}. Re-run the generator after schema changes.",
        " */",
        "",
        f"import type {{ JsonValue, Decimal }} from '{config.runtime_import}';",
        "",
    ]

    if bundle.enums:
        out += ["// ─── Enums ───", ""]
        for e in bundle.enums:
            union = " | ".join(f"'{v}'" for v in e.members) or "never"
            out += [f"export type {e.name} = {union};", ""]

    for m in bundle.models:
        out += [f"// ─── {m.name} ───", ""]
        out += [f"export type {m.name}Scalar = {{", *_members(m.scalar), "};", ""]
        out += [f"export type {m.name}CreateInput = {{", *_members(m.create_input), "};", ""]
        out += [f"export type {m.name}UpdateInput = {{", *_members(m.update_input), "};", ""]
        if m.with_relations:
            out += [
                f"export type {m.name}WithRelations = {m.name}Scalar & {{",
                *_members(m.with_relations),
                "};",
                "",
            ]
        else:
            out += [f"export type {m.name}WithRelations = {m.name}Scalar;", ""]

    out.append(_UTILITY_TYPES)
    return "\n".join(out)
