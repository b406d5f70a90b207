"""Viewer projection - display-ready records grouped by category.

Pure transform over a ParsedSchema. Rendering (rich tables, JSON) lives
in the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemaplane.schema.categories import categorize, category_icon
from schemaplane.schema.models import Enumeration, Field, Model, ParsedSchema


@dataclass(frozen=True, slots=True)
class FieldView:
    name: str
    type_label: str
    kind: str  # "scalar" | "enum" | "relation"
    required: bool
    key: str  # "PK", "unique" or ""
    default: str
    relation: str  # "companyId → id (onDelete: Cascade)" for owning relation fields
    notes: str

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "type": self.type_label,
            "kind": self.kind,
            "required": self.required,
            "key": self.key,
            "default": self.default,
            "relation": self.relation,
            "notes": self.notes,
        }


@dataclass(frozen=True, slots=True)
class ModelView:
    name: str
    category: str
    mapped_name: str | None
    fields: tuple[FieldView, ...]
    attributes: tuple[str, ...]  # raw @@index / @@unique text
    line: int

    @property
    def relation_count(self) -> int:
        return sum(1 for f in self.fields if f.kind == "relation")

    @property
    def scalar_count(self) -> int:
        return len(self.fields) - self.relation_count

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "category": self.category,
            "mapped_name": self.mapped_name,
            "line": self.line,
            "fields": [f.to_dict() for f in self.fields],
            "attributes": list(self.attributes),
        }


@dataclass(frozen=True, slots=True)
class CategoryGroup:
    label: str
    icon: str
    models: tuple[ModelView, ...]


@dataclass(frozen=True, slots=True)
class SchemaView:
    groups: tuple[CategoryGroup, ...]
    enumerations: tuple[Enumeration, ...]

    @property
    def models(self) -> list[ModelView]:
        return [m for g in self.groups for m in g.models]


def _relation_text(f: Field) -> str:
    if f.relation is None:
        return ""
    text = f.relation.describe()
    if f.relation.on_delete:
        suffix = f"onDelete: {f.relation.on_delete}"
        text = f"{text} ({suffix})" if text else suffix
    return text


def project_field(f: Field) -> FieldView:
    notes = [n for n in (f.db_type and f"@db.{f.db_type}", f.comment) if n]
    return FieldView(
        name=f.name,
        type_label=f.type_label,
        kind=f.kind.value,
        required=not f.is_optional and not f.is_list,
        key="PK" if f.is_id else "unique" if f.is_unique else "",
        default=f.default or "",
        relation=_relation_text(f),
        notes="; ".join(notes),
    )


def project_model(model: Model) -> ModelView:
    attributes = tuple(a.raw for a in (*model.indexes, *model.unique_constraints))
    return ModelView(
        name=model.name,
        category=categorize(model.name),
        mapped_name=model.mapped_name,
        fields=tuple(project_field(f) for f in model.fields),
        attributes=attributes,
        line=model.line,
    )


def project(schema: ParsedSchema) -> SchemaView:
    """Group models by category label (sorted); models keep declaration order."""
    grouped: dict[str, list[ModelView]] = {}
    for model in schema.models:
        view = project_model(model)
        grouped.setdefault(view.category, []).append(view)

    groups = tuple(
        CategoryGroup(label=label, icon=category_icon(label), models=tuple(grouped[label]))
        for label in sorted(grouped)
    )
    return SchemaView(groups=groups, enumerations=schema.enumerations)


def find_model(view: SchemaView, name: str) -> ModelView | None:
    """Case-insensitive exact lookup, falling back to a unique prefix match."""
    wanted = name.lower()
    models = view.models
    for m in models:
        if m.name.lower() == wanted:
            return m
    prefixed = [m for m in models if m.name.lower().startswith(wanted)]
    if len(prefixed) == 1:
        return prefixed[0]
    return None
