"""Schema parser - two-pass, line-oriented.

Pass 1 collects every enum name so that pass 2 can classify field types
against the complete set. The parser is lenient: lines it does not
understand are skipped and an unterminated block ends the parse.
"""

from __future__ import annotations

import re

import structlog

from schemaplane.schema.attributes import extract_field_list, extract_map_name, split_comment
from schemaplane.schema.classifier import classify
from schemaplane.schema.models import (
    BlockAttribute,
    Enumeration,
    Field,
    Model,
    ParsedSchema,
)
from schemaplane.schema.scanner import scan_block

log = structlog.get_logger(__name__)

_DECLARATION_RE = re.compile(r"^(model|enum)\s+(\w+)")


def collect_enum_names(lines: list[str]) -> frozenset[str]:
    """Pass 1: names of every `enum X {` declaration."""
    names: set[str] = set()
    for line in lines:
        match = _DECLARATION_RE.match(line.strip())
        if match and match.group(1) == "enum":
            names.add(match.group(2))
    return frozenset(names)


def _parse_model(
    name: str,
    body: list[str],
    *,
    first_line: int,
    header_line: int,
    end_line: int,
    enum_names: frozenset[str],
) -> Model:
    fields: list[Field] = []
    indexes: list[BlockAttribute] = []
    uniques: list[BlockAttribute] = []
    comments: list[str] = []
    mapped_name: str | None = None
    pending_comment: str | None = None

    for offset, raw in enumerate(body):
        trimmed = raw.strip()
        if not trimmed:
            pending_comment = None
            continue

        if trimmed.startswith("//"):
            pending_comment = trimmed.lstrip("/").strip()
            comments.append(pending_comment)
            continue

        if trimmed.startswith("@@"):
            code, _ = split_comment(trimmed)
            if code.startswith("@@map("):
                mapped_name = extract_map_name(code)
            elif code.startswith("@@index("):
                indexes.append(BlockAttribute(extract_field_list(code), code))
            elif code.startswith("@@unique("):
                uniques.append(BlockAttribute(extract_field_list(code), code))
            else:
                log.debug("block_attribute_skipped", model=name, text=code)
            continue

        field = classify(
            trimmed,
            enum_names,
            pending_comment=pending_comment,
            line_number=first_line + offset,
        )
        if field is None:
            log.debug("line_skipped", model=name, line=first_line + offset, text=trimmed)
        else:
            fields.append(field)
        pending_comment = None

    return Model(
        name=name,
        fields=tuple(fields),
        mapped_name=mapped_name,
        indexes=tuple(indexes),
        unique_constraints=tuple(uniques),
        comments=tuple(comments),
        line=header_line,
        end_line=end_line,
    )


def parse(text: str) -> ParsedSchema:
    """Parse schema text into models and enumerations, in declaration order.

    Never raises for malformed input.
    """
    lines = text.splitlines()
    enum_names = collect_enum_names(lines)

    models: list[Model] = []
    enumerations: list[Enumeration] = []

    i = 0
    while i < len(lines):
        match = _DECLARATION_RE.match(lines[i].strip())
        if not match:
            i += 1
            continue

        keyword, name = match.groups()
        block = scan_block(lines, i)
        if block is None:
            log.debug("unterminated_block", kind=keyword, name=name, line=i + 1)
            break

        if keyword == "model":
            models.append(
                _parse_model(
                    name,
                    block.body,
                    first_line=i + 2,
                    header_line=i + 1,
                    end_line=block.next_index,
                    enum_names=enum_names,
                )
            )
        else:
            values = tuple(
                line.strip()
                for line in block.body
                if line.strip() and not line.strip().startswith("//")
            )
            enumerations.append(Enumeration(name=name, values=values))
        i = block.next_index

    log.debug("schema_parsed", models=len(models), enums=len(enumerations))
    return ParsedSchema(models=tuple(models), enumerations=tuple(enumerations))
