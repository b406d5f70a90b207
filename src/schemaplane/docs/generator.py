"""Markdown documentation generator.

Produces one page per model, an index (README.md) and an ERD overview
(ERD.md) as an in-memory bundle keyed by relative path. Writing the
bundle to disk is the caller's job.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from schemaplane.config.models import DocsConfig
from schemaplane.docs import mermaid
from schemaplane.schema.categories import categorize, category_icon
from schemaplane.schema.models import Field, Model, ParsedSchema, RelationEdge

log = structlog.get_logger(__name__)

INDEX_NAME = "README.md"
ERD_NAME = "ERD.md"

YES = "✅"
NO = "❌"
PK = "🔑 PK"


@dataclass(frozen=True, slots=True)
class Category:
    name: str
    icon: str
    models: tuple[Model, ...]


@dataclass
class DocsBundle:
    """Generated documents keyed by path relative to the docs root."""

    files: dict[str, str] = field(default_factory=dict)
    model_pages: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)


def build_categories(models: Iterable[Model]) -> list[Category]:
    """Categories sorted by name, models sorted by name inside each."""
    grouped: dict[str, list[Model]] = {}
    for m in models:
        grouped.setdefault(categorize(m.name), []).append(m)
    return [
        Category(
            name=name,
            icon=category_icon(name),
            models=tuple(sorted(grouped[name], key=lambda m: m.name)),
        )
        for name in sorted(grouped)
    ]


def _code(text: str) -> str:
    return f"`{text}`"


def _table(header: list[str], rows: Iterable[list[str]]) -> list[str]:
    lines = ["| " + " | ".join(header) + " |", "|" + "|".join("-" * (len(h) + 2) for h in header) + "|"]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return lines


def _field_row(f: Field) -> list[str]:
    unique = PK if f.is_id else YES if f.is_unique else ""
    notes = ". ".join(n for n in (f.db_type and f"DB: {f.db_type}", f.comment) if n)
    return [
        _code(f.name),
        _code(f.type_label),
        NO if f.is_optional else YES,
        unique,
        _code(f.default) if f.default else "",
        notes,
    ]


def _relation_row(f: Field) -> list[str]:
    rel = f.relation
    return [
        _code(f.name),
        f"[{f.base_type}](./{f.base_type}.md)",
        f.cardinality.value if f.cardinality else "",
        ", ".join(rel.fields) if rel and rel.fields else "-",
        ", ".join(rel.references) if rel and rel.references else "-",
        rel.on_delete if rel and rel.on_delete else "-",
    ]


def _entity_diagram(model: Model, schema: ParsedSchema, config: DocsConfig) -> list[str]:
    scalars = model.scalar_fields
    attrs = [mermaid.attribute_line(f, marker=mermaid.key_marker(f)) for f in scalars[: config.entity_field_limit]]
    if len(scalars) > config.entity_field_limit:
        attrs.append("        string _more_fields")
    body = mermaid.entity(model.name, attrs)

    related: list[str] = []
    for f in model.relation_fields:
        if f.base_type not in related and f.base_type != model.name:
            related.append(f.base_type)
    for ref_model, _ in schema.referenced_by(model.name):
        if ref_model.name not in related:
            related.append(ref_model.name)
    for name in related:
        other = schema.get_model(name)
        if other is not None:
            body.extend(mermaid.stub_entity(other))

    body.extend(mermaid.edge(RelationEdge.of(model.name, f)) for f in model.relation_fields)
    return ["## Entity Diagram", "", mermaid.diagram(body)]


def render_model(model: Model, schema: ParsedSchema, config: DocsConfig | None = None) -> str:
    """Reference page for one model; rows follow declaration order."""
    config = config or DocsConfig()
    out: list[str] = [f"# {model.name}", ""]

    if model.mapped_name:
        out += [f"> Table name: {_code(model.mapped_name)}", ""]
    out += [f"**Schema location:** Lines {model.line}-{model.end_line}", ""]

    out += ["## Fields", ""]
    out += _table(
        ["Field", "Type", "Required", "Unique", "Default", "Notes"],
        (_field_row(f) for f in model.scalar_fields),
    )

    if model.relation_fields:
        out += ["", "## Relations", ""]
        out += _table(
            ["Field", "Type", "Cardinality", "FK Fields", "References", "On Delete"],
            (_relation_row(f) for f in model.relation_fields),
        )

    referenced_by = schema.referenced_by(model.name)
    if referenced_by:
        out += ["", "## Referenced By", ""]
        out += _table(
            ["Model", "Field", "Cardinality"],
            (
                [f"[{m.name}](./{m.name}.md)", _code(f.name), "Has many" if f.is_list else "Has one"]
                for m, f in referenced_by
            ),
        )

    if model.indexes:
        out += ["", "## Indexes", ""]
        out += [f"- {_code(', '.join(a.lead_fields) or a.raw)}" for a in model.indexes]

    if model.unique_constraints:
        out += ["", "## Unique Constraints", ""]
        out += [f"- {_code(', '.join(a.lead_fields) or a.raw)}" for a in model.unique_constraints]

    if model.relation_fields or referenced_by:
        out += [""]
        out += _entity_diagram(model, schema, config)
        return "\n".join(out)

    return "\n".join(out) + "\n"


def render_index(
    schema: ParsedSchema,
    *,
    config: DocsConfig | None = None,
    source: str = "prisma/schema.prisma",
    generated: str | None = None,
) -> str:
    """Summary page: overview counts, models by category and enum values."""
    config = config or DocsConfig()
    models = schema.models
    out = ["# Database Schema Documentation", "", f"> Auto-generated from {_code(source)}"]
    if generated:
        out.append(f"> Generated: {generated}")
    out.append("")

    out += ["## Overview", ""]
    out += _table(
        ["Metric", "Count"],
        [
            ["Models", str(len(models))],
            ["Enums", str(len(schema.enumerations))],
            ["Total Fields", str(sum(len(m.scalar_fields) for m in models))],
            ["Total Relations", str(sum(len(m.relation_fields) for m in models))],
            ["Total Indexes", str(sum(len(m.indexes) for m in models))],
        ],
    )

    out += ["", "## Models by Category", ""]
    for cat in build_categories(models):
        out += [f"### {cat.icon} {cat.name} ({len(cat.models)})", ""]
        out += _table(
            ["Model", "Fields", "Relations", "Indexes"],
            (
                [
                    f"[{m.name}](./{config.models_dir}/{m.name}.md)",
                    str(len(m.scalar_fields)),
                    str(len(m.relation_fields)),
                    str(len(m.indexes)),
                ]
                for m in cat.models
            ),
        )
        out.append("")

    out += ["## Enums", ""]
    for e in schema.enumerations:
        out += [f"### {e.name}", "", "`" + "` | `".join(e.members) + "`", ""]

    return "\n".join(out)


def _key_fields(model: Model, config: DocsConfig) -> list[Field]:
    wanted = set(config.erd_key_fields)
    keys = [
        f
        for f in model.scalar_fields
        if not f.is_id and (f.is_unique or f.name in wanted)
    ]
    return keys[: config.erd_key_field_limit]


def _edge_table(edges: list[RelationEdge]) -> list[str]:
    return _table(
        ["From", "Field", "To", "Cardinality"],
        ([_code(e.source), _code(e.field_name), _code(e.target), e.cardinality.value] for e in edges),
    )


def render_erd(schema: ParsedSchema, config: DocsConfig | None = None) -> str:
    """One diagram per category plus a table of every edge not drawn in one."""
    config = config or DocsConfig()
    out = ["# ERD Overview", "", "> High-level entity relationship diagram by category", ""]
    edges = schema.relation_edges()
    outside: list[RelationEdge] = []

    for cat in build_categories(schema.models):
        names = {m.name for m in cat.models}
        own = [e for e in edges if e.source in names]
        internal = [e for e in own if e.target in names]
        outside.extend(e for e in own if e.target not in names)

        out += [f"## {cat.icon} {cat.name}", ""]
        if len(cat.models) > config.erd_max_models:
            out += [
                f"> Too many models ({len(cat.models)}) for a single diagram. See individual model pages.",
                "",
                "Models: " + ", ".join(_code(m.name) for m in cat.models),
                "",
            ]
            if internal:
                out += _edge_table(internal)
                out.append("")
            continue

        body: list[str] = []
        for m in cat.models:
            pk = mermaid.primary_key(m)
            attrs = [mermaid.attribute_line(pk, marker="PK")] if pk else []
            attrs += [mermaid.attribute_line(f) for f in _key_fields(m, config)]
            body.extend(mermaid.entity(m.name, attrs))
        body.extend(mermaid.edge(e) for e in internal)
        out += [mermaid.diagram(body)]

    if outside:
        out += ["## Cross-Category Relations", ""]
        out += _edge_table(outside)
        out.append("")

    return "\n".join(out)


def select_models(
    schema: ParsedSchema,
    *,
    only: Iterable[str] | None = None,
    category: str | None = None,
) -> list[Model]:
    """Models whose pages should be generated.

    `only` matches names case-insensitively; `category` matches the label
    case-insensitively and takes precedence when both are given.
    """
    models = list(schema.models)
    if only:
        wanted = {n.strip().lower() for n in only if n.strip()}
        models = [m for m in models if m.name.lower() in wanted]
    if category:
        label = category.lower()
        models = [m for m in schema.models if categorize(m.name).lower() == label]
    return models


def generate_docs(
    schema: ParsedSchema,
    config: DocsConfig | None = None,
    *,
    only: Iterable[str] | None = None,
    category: str | None = None,
    source: str = "prisma/schema.prisma",
    generated: str | None = None,
) -> DocsBundle:
    """Build the full bundle. Index and ERD always cover every model."""
    config = config or DocsConfig()
    bundle = DocsBundle()

    for model in select_models(schema, only=only, category=category):
        path = f"{config.models_dir}/{model.name}.md"
        bundle.files[path] = render_model(model, schema, config)
        bundle.model_pages.append(path)

    bundle.files[INDEX_NAME] = render_index(schema, config=config, source=source, generated=generated)
    bundle.files[ERD_NAME] = render_erd(schema, config)

    log.debug("docs_generated", pages=len(bundle.model_pages), files=len(bundle))
    return bundle
