"""Type definition generator."""

from schemaplane.typegen.generator import (
    PRIMITIVE_MAP,
    ModelTypes,
    TypeBundle,
    TypeField,
    TypeRef,
    TypeSource,
    generate_types,
    is_auto_generated,
    resolve_type,
)
from schemaplane.typegen.typescript import render_typescript, ts_type

__all__ = [
    "PRIMITIVE_MAP",
    "ModelTypes",
    "TypeBundle",
    "TypeField",
    "TypeRef",
    "TypeSource",
    "generate_types",
    "is_auto_generated",
    "render_typescript",
    "resolve_type",
    "ts_type",
]
