"""Mermaid `erDiagram` building blocks."""

from __future__ import annotations

from collections.abc import Iterable

from schemaplane.schema.models import Cardinality, Field, Model, RelationEdge

_INDENT = "    "

# Crow's-foot connector per relation cardinality
_CONNECTORS = {
    Cardinality.ONE_TO_MANY: "||--o{",
    Cardinality.MANY_TO_ONE_OPTIONAL: "}o--||",
    Cardinality.MANY_TO_ONE: "}|--||",
}


def connector(cardinality: Cardinality) -> str:
    return _CONNECTORS[cardinality]


def attribute_line(field: Field, *, marker: str = "") -> str:
    suffix = f" {marker}" if marker else ""
    return f"{_INDENT * 2}{field.base_type.lower()} {field.name}{suffix}"


def key_marker(field: Field) -> str:
    if field.is_id:
        return "PK"
    if field.is_unique:
        return "UK"
    return ""


def primary_key(model: Model) -> Field | None:
    for f in model.fields:
        if f.is_id:
            return f
    return None


def entity(name: str, attribute_lines: Iterable[str]) -> list[str]:
    return [f"{_INDENT}{name} {{", *attribute_lines, f"{_INDENT}}}"]


def stub_entity(model: Model) -> list[str]:
    """Entity with only its primary key."""
    pk = primary_key(model)
    return entity(model.name, [attribute_line(pk, marker="PK")] if pk else [])


def edge(e: RelationEdge) -> str:
    return f'{_INDENT}{e.source} {connector(e.cardinality)} {e.target} : "{e.field_name}"'


def diagram(lines: Iterable[str]) -> str:
    return "\n".join(["```mermaid", "erDiagram", *lines, "```"]) + "\n"
