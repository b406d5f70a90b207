"""Brace-depth block scanner."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Block:
    """Body of a `model`/`enum` block.

    `next_index` is the 0-based index of the line after the closing brace,
    which is also the 1-based number of the closing brace line.
    """

    body: list[str]
    next_index: int


def scan_block(lines: list[str], header_index: int) -> Block | None:
    """Collect the lines strictly inside the block opened at `header_index`.

    Braces on the header line seed the depth, so `model A {}` closes on its
    own line with an empty body. Each later line moves the depth by its
    brace balance. Returns None when input ends before the block closes.
    """
    header = lines[header_index]
    depth = header.count("{") - header.count("}") if "{" in header else 1
    if depth <= 0:
        return Block(body=[], next_index=header_index + 1)

    body: list[str] = []
    i = header_index + 1
    while i < len(lines):
        line = lines[i]
        depth += line.count("{") - line.count("}")
        i += 1
        if depth <= 0:
            return Block(body=body, next_index=i)
        body.append(line)
    return None
