"""Schema models - parsed enumerations, fields, relations and models.

Everything here is built once by the parser and never mutated. Models
reference each other by name only; resolve through ParsedSchema.get_model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PRIMITIVE_TYPES: frozenset[str] = frozenset(
    {"String", "Int", "Float", "Boolean", "DateTime", "Json", "BigInt", "Decimal", "Bytes"}
)


class FieldKind(Enum):
    """What a field's base type resolves to."""

    SCALAR = "scalar"
    ENUM = "enum"
    RELATION = "relation"


class Cardinality(Enum):
    """Cardinality of a relation field, from its list/optional markers."""

    ONE_TO_MANY = "One-to-Many"
    MANY_TO_ONE_OPTIONAL = "Many-to-One (optional)"
    MANY_TO_ONE = "Many-to-One"


@dataclass(frozen=True, slots=True)
class Enumeration:
    """An `enum` block. `values` keeps every value line as written."""

    name: str
    values: tuple[str, ...] = ()

    @property
    def members(self) -> tuple[str, ...]:
        """Value names without `@map(...)` arguments or `@@` block attributes."""
        return tuple(v.split()[0] for v in self.values if not v.startswith("@@"))


@dataclass(frozen=True, slots=True)
class Relation:
    """Arguments of a `@relation(...)` clause."""

    name: str | None = None
    fields: tuple[str, ...] = ()  # foreign-key fields on the owning model
    references: tuple[str, ...] = ()  # referenced fields on the target model
    on_delete: str | None = None
    on_update: str | None = None

    def describe(self) -> str:
        """Human form, e.g. "companyId → id"."""
        if not self.fields:
            return ""
        return f"{', '.join(self.fields)} → {', '.join(self.references)}"


@dataclass(frozen=True, slots=True)
class Field:
    """One field line of a model block."""

    name: str
    base_type: str
    kind: FieldKind
    is_list: bool = False
    is_optional: bool = False
    is_id: bool = False
    is_unique: bool = False
    default: str | None = None
    relation: Relation | None = None
    db_type: str | None = None
    comment: str | None = None
    line: int = 0  # 1-based

    @property
    def is_relation(self) -> bool:
        return self.kind is FieldKind.RELATION

    @property
    def is_enum(self) -> bool:
        return self.kind is FieldKind.ENUM

    @property
    def type_label(self) -> str:
        """Declared type with markers, e.g. "Post[]" or "String?"."""
        return self.base_type + ("[]" if self.is_list else "") + ("?" if self.is_optional else "")

    @property
    def foreign_keys(self) -> tuple[str, ...]:
        return self.relation.fields if self.relation else ()

    @property
    def cardinality(self) -> Cardinality | None:
        if not self.is_relation:
            return None
        if self.is_list:
            return Cardinality.ONE_TO_MANY
        if self.is_optional:
            return Cardinality.MANY_TO_ONE_OPTIONAL
        return Cardinality.MANY_TO_ONE


@dataclass(frozen=True, slots=True)
class BlockAttribute:
    """An `@@index([...])` or `@@unique([...])` line."""

    lead_fields: tuple[str, ...]
    raw: str

    @property
    def lead_field(self) -> str | None:
        return self.lead_fields[0] if self.lead_fields else None


@dataclass(frozen=True, slots=True)
class Model:
    name: str
    fields: tuple[Field, ...] = ()
    mapped_name: str | None = None
    indexes: tuple[BlockAttribute, ...] = ()
    unique_constraints: tuple[BlockAttribute, ...] = ()
    comments: tuple[str, ...] = ()
    line: int = 0  # header line, 1-based
    end_line: int = 0  # closing brace line, 1-based

    @property
    def scalar_fields(self) -> tuple[Field, ...]:
        return tuple(f for f in self.fields if not f.is_relation)

    @property
    def relation_fields(self) -> tuple[Field, ...]:
        return tuple(f for f in self.fields if f.is_relation)

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(f.name for f in self.fields)

    def get_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True, slots=True)
class RelationEdge:
    """Directed edge from a relation field to the model it names."""

    source: str
    field_name: str
    target: str
    cardinality: Cardinality

    @classmethod
    def of(cls, source: str, f: Field) -> RelationEdge:
        return cls(source, f.name, f.base_type, f.cardinality)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class ParsedSchema:
    """Result of one parse: models and enumerations in declaration order."""

    models: tuple[Model, ...] = ()
    enumerations: tuple[Enumeration, ...] = ()
    _by_name: dict[str, Model] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lookup: dict[str, Model] = {}
        for m in self.models:
            lookup.setdefault(m.name, m)
        object.__setattr__(self, "_by_name", lookup)

    @property
    def enum_names(self) -> frozenset[str]:
        return frozenset(e.name for e in self.enumerations)

    @property
    def model_names(self) -> frozenset[str]:
        return frozenset(self._by_name)

    def get_model(self, name: str) -> Model | None:
        return self._by_name.get(name)

    def get_enum(self, name: str) -> Enumeration | None:
        for e in self.enumerations:
            if e.name == name:
                return e
        return None

    def relation_edges(self) -> list[RelationEdge]:
        """Every relation field as an edge, in declaration order."""
        return [RelationEdge.of(m.name, f) for m in self.models for f in m.relation_fields]

    def referenced_by(self, name: str) -> list[tuple[Model, Field]]:
        """Fields on other models whose base type is `name`."""
        return [
            (m, f)
            for m in self.models
            if m.name != name
            for f in m.relation_fields
            if f.base_type == name
        ]
