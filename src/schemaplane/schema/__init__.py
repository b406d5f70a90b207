"""Schema parsing - data model, parser and categorizer."""

from schemaplane.schema.categories import OTHER, categorize, category_icon
from schemaplane.schema.classifier import classify, classify_type
from schemaplane.schema.models import (
    PRIMITIVE_TYPES,
    BlockAttribute,
    Cardinality,
    Enumeration,
    Field,
    FieldKind,
    Model,
    ParsedSchema,
    Relation,
    RelationEdge,
)
from schemaplane.schema.parser import parse

__all__ = [
    "OTHER",
    "PRIMITIVE_TYPES",
    "BlockAttribute",
    "Cardinality",
    "Enumeration",
    "Field",
    "FieldKind",
    "Model",
    "ParsedSchema",
    "Relation",
    "RelationEdge",
    "categorize",
    "category_icon",
    "classify",
    "classify_type",
    "parse",
]
