"""Markdown and mermaid documentation generator."""

from schemaplane.docs.generator import (
    ERD_NAME,
    INDEX_NAME,
    Category,
    DocsBundle,
    build_categories,
    generate_docs,
    render_erd,
    render_index,
    render_model,
    select_models,
)

__all__ = [
    "ERD_NAME",
    "INDEX_NAME",
    "Category",
    "DocsBundle",
    "build_categories",
    "generate_docs",
    "render_erd",
    "render_index",
    "render_model",
    "select_models",
]
