"""Attribute primitives - depth-aware scanners for field and block attributes.

Nested arguments (`@default(dbgenerated("gen_random_uuid()"))`) cannot be
balanced by a regular expression, so argument lists are cut out with an
explicit parenthesis-depth scan that ignores characters inside string
literals. Regular expressions only pick apart the already-isolated text.
"""

from __future__ import annotations

import re

from schemaplane.schema.models import Relation

DEFAULT_MARKER = "@default("
RELATION_MARKER = "@relation("

_RELATION_NAME_RE = re.compile(r'^\s*(?:name:\s*)?"([^"]*)"')
_FIELDS_RE = re.compile(r"\bfields:\s*\[([^\]]*)\]")
_REFERENCES_RE = re.compile(r"\breferences:\s*\[([^\]]*)\]")
_ON_DELETE_RE = re.compile(r"\bonDelete:\s*(\w+)")
_ON_UPDATE_RE = re.compile(r"\bonUpdate:\s*(\w+)")
_DB_TYPE_RE = re.compile(r"@db\.(\w+(?:\([^)]*\))?)")
_MAP_RE = re.compile(r'@@map\(\s*"(.+?)"\s*\)')
_BRACKET_RE = re.compile(r"\[([^\]]*)\]")
_IDENT_RE = re.compile(r"\w+")


def balanced_argument(line: str, open_index: int) -> str:
    """Text between the `(` at `open_index` and the `)` that balances it.

    Parentheses inside double-quoted strings are ignored. An unbalanced
    argument runs to the end of the line. Either way the result is stripped.
    """
    depth = 0
    in_string = False
    start = open_index + 1
    i = start
    while i < len(line):
        ch = line[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return line[start:i].strip()
            depth -= 1
        i += 1
    return line[start:].strip()


def extract_default(line: str) -> str | None:
    """Expression inside `@default(...)`, or None when absent.

    >>> extract_default('id String @id @default(uuid())')
    'uuid()'
    """
    idx = line.find(DEFAULT_MARKER)
    if idx == -1:
        return None
    return balanced_argument(line, idx + len(DEFAULT_MARKER) - 1)


def _split_list(text: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in text.split(",") if part.strip())


def extract_relation(line: str) -> Relation | None:
    """Parse the `@relation(...)` clause of a field line.

    The clause is isolated by depth before its sub-clauses are read, so
    attributes following it on the same line never leak into it and a
    trailing `onDelete`/`onUpdate` is always seen.
    """
    idx = line.find(RELATION_MARKER)
    if idx == -1:
        return None
    args = balanced_argument(line, idx + len(RELATION_MARKER) - 1)

    name_match = _RELATION_NAME_RE.match(args)
    fields_match = _FIELDS_RE.search(args)
    refs_match = _REFERENCES_RE.search(args)
    on_delete = _ON_DELETE_RE.search(args)
    on_update = _ON_UPDATE_RE.search(args)

    return Relation(
        name=name_match.group(1) if name_match else None,
        fields=_split_list(fields_match.group(1)) if fields_match else (),
        references=_split_list(refs_match.group(1)) if refs_match else (),
        on_delete=on_delete.group(1) if on_delete else None,
        on_update=on_update.group(1) if on_update else None,
    )


def extract_db_type(line: str) -> str | None:
    """`@db.VarChar(255)` -> `VarChar(255)`."""
    match = _DB_TYPE_RE.search(line)
    return match.group(1) if match else None


def extract_map_name(line: str) -> str | None:
    match = _MAP_RE.search(line)
    return match.group(1) if match else None


def extract_field_list(line: str) -> tuple[str, ...]:
    """Field names of the first bracket list: `@@index([a, b(sort: Desc)])` -> (a, b)."""
    match = _BRACKET_RE.search(line)
    if not match:
        return ()
    names: list[str] = []
    depth = 0
    current = ""
    for ch in match.group(1):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            names.append(current)
            current = ""
            continue
        current += ch
    names.append(current)

    result: list[str] = []
    for item in names:
        ident = _IDENT_RE.match(item.strip())
        if ident:
            result.append(ident.group(0))
    return tuple(result)


def split_comment(line: str) -> tuple[str, str | None]:
    """Split a line into its code part and its trailing `//` comment.

    `//` inside a string literal does not start a comment.
    """
    in_string = False
    i = 0
    while i < len(line) - 1:
        ch = line[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "/" and line[i + 1] == "/":
            comment = line[i + 2 :].strip()
            return line[:i].rstrip(), comment or None
        i += 1
    return line.rstrip(), None
