"""Type generator - per-model scalar, input and relation-aware shapes.

Shapes are language-neutral; typescript.py renders them. A field type
that is neither primitive, enum nor known model keeps its raw name and
is reported through TypeBundle.unresolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from schemaplane.config.models import TypegenConfig
from schemaplane.schema.models import Enumeration, Field, Model, ParsedSchema

log = structlog.get_logger(__name__)

PRIMITIVE_MAP: dict[str, str] = {
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
    "DateTime": "Date",
    "Json": "JsonValue",
    "BigInt": "bigint",
    "Decimal": "Decimal",
    "Bytes": "Buffer",
}


class TypeSource(Enum):
    PRIMITIVE = "primitive"
    ENUM = "enum"
    MODEL = "model"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class TypeRef:
    name: str
    source: TypeSource


@dataclass(frozen=True, slots=True)
class TypeField:
    name: str
    type: TypeRef
    is_list: bool = False
    nullable: bool = False
    optional: bool = False  # key may be omitted


@dataclass(frozen=True, slots=True)
class ModelTypes:
    name: str
    scalar: tuple[TypeField, ...]
    create_input: tuple[TypeField, ...]
    update_input: tuple[TypeField, ...]
    with_relations: tuple[TypeField, ...]  # relation fields only; combined with scalar


@dataclass(frozen=True, slots=True)
class TypeBundle:
    enums: tuple[Enumeration, ...]
    models: tuple[ModelTypes, ...]

    @property
    def unresolved(self) -> list[tuple[str, str, str]]:
        """(model, field, raw type) for every type that resolved to nothing."""
        return [
            (m.name, f.name, f.type.name)
            for m in self.models
            for f in (*m.scalar, *m.with_relations)
            if f.type.source is TypeSource.UNKNOWN
        ]


def resolve_type(base_type: str, schema: ParsedSchema) -> TypeRef:
    if base_type in PRIMITIVE_MAP:
        return TypeRef(PRIMITIVE_MAP[base_type], TypeSource.PRIMITIVE)
    if schema.get_enum(base_type) is not None:
        return TypeRef(base_type, TypeSource.ENUM)
    if schema.get_model(base_type) is not None:
        return TypeRef(base_type, TypeSource.MODEL)
    return TypeRef(base_type, TypeSource.UNKNOWN)


def is_auto_generated(f: Field, config: TypegenConfig) -> bool:
    """Primary key with a generated default, or a managed timestamp."""
    if f.is_id and f.default in config.auto_id_defaults:
        return True
    return f.name in config.timestamp_fields


def _type_field(f: Field, schema: ParsedSchema, *, optional: bool) -> TypeField:
    return TypeField(
        name=f.name,
        type=resolve_type(f.base_type, schema),
        is_list=f.is_list,
        nullable=f.is_optional,
        optional=optional,
    )


def build_model_types(model: Model, schema: ParsedSchema, config: TypegenConfig) -> ModelTypes:
    scalars = model.scalar_fields
    writable = [f for f in scalars if not is_auto_generated(f, config)]
    return ModelTypes(
        name=model.name,
        scalar=tuple(_type_field(f, schema, optional=False) for f in scalars),
        create_input=tuple(
            _type_field(f, schema, optional=f.is_optional or f.default is not None or f.is_list)
            for f in writable
        ),
        update_input=tuple(_type_field(f, schema, optional=True) for f in writable),
        with_relations=tuple(
            _type_field(f, schema, optional=False) for f in model.relation_fields
        ),
    )


def generate_types(schema: ParsedSchema, config: TypegenConfig | None = None) -> TypeBundle:
    config = config or TypegenConfig()
    bundle = TypeBundle(
        enums=schema.enumerations,
        models=tuple(build_model_types(m, schema, config) for m in schema.models),
    )
    for model_name, field_name, raw in bundle.unresolved:
        log.debug("type_unresolved", model=model_name, field=field_name, type=raw)
    return bundle
