"""Field classifier - turns one model body line into a Field."""

from __future__ import annotations

import re
from collections.abc import Collection

from schemaplane.schema.attributes import (
    extract_db_type,
    extract_default,
    extract_relation,
    split_comment,
)
from schemaplane.schema.models import PRIMITIVE_TYPES, Field, FieldKind

_FIELD_RE = re.compile(r"^(\w+)\s+(\w+)(\[\])?(\?)?")


def classify_type(base_type: str, enum_names: Collection[str]) -> FieldKind:
    """Primitive -> SCALAR, known enum -> ENUM, anything else -> RELATION.

    Casing is irrelevant: a lowercase unknown type is still a relation.
    """
    if base_type in PRIMITIVE_TYPES:
        return FieldKind.SCALAR
    if base_type in enum_names:
        return FieldKind.ENUM
    return FieldKind.RELATION


def classify(
    line: str,
    enum_names: Collection[str],
    *,
    pending_comment: str | None = None,
    line_number: int = 0,
) -> Field | None:
    """Parse a field line, or return None when it is not `<name> <Type>...`.

    The trailing comment is removed before any attribute is scanned.
    """
    code, comment = split_comment(line.strip())
    match = _FIELD_RE.match(code)
    if not match:
        return None

    name, base_type, list_marker, optional_marker = match.groups()
    kind = classify_type(base_type, enum_names)

    return Field(
        name=name,
        base_type=base_type,
        kind=kind,
        is_list=list_marker is not None,
        is_optional=optional_marker is not None,
        is_id=re.search(r"@id\b", code) is not None,
        is_unique=re.search(r"@unique\b", code) is not None,
        default=extract_default(code),
        relation=extract_relation(code),
        db_type=extract_db_type(code),
        comment=comment or pending_comment,
        line=line_number,
    )
