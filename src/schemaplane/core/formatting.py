"""Summary formatting utilities for consistent terminal output.

Design principles:
- Every summary fits on one line (~80 chars max)
- Grammatically correct (1 model vs 2 models)
"""

from __future__ import annotations


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "model")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 model" or "3 models"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_name_list(names: list[str], *, max_shown: int = 3, max_total: int = 60) -> str:
    """Format a list of names, collapsing the tail as "+N more".

    Examples:
        ["User"] -> "User"
        ["User", "Post"] -> "User, Post"
        ["A", "B", "C", "D"] -> "A, B, +2 more"
    """
    if not names:
        return ""

    if len(names) <= max_shown:
        result = ", ".join(names)
    else:
        result = ", ".join(names[:2]) + f", +{len(names) - 2} more"

    if len(result) > max_total:
        result = f"{names[0]}, +{len(names) - 1} more"

    if len(result) > max_total:
        return pluralize(len(names), "name")

    return result


def summarize_counts(counts: dict[str, int]) -> str:
    """Join non-zero counts into one line.

    Examples:
        {"error": 1, "warning": 2, "info": 0} -> "1 error, 2 warnings"
        {} -> "nothing"
    """
    parts = [pluralize(n, label) for label, n in counts.items() if n]
    return ", ".join(parts) if parts else "nothing"


def truncate_at_word(text: str, max_len: int = 40, suffix: str = "...") -> str:
    """Truncate text at word boundary.

    Examples:
        "Foreign key has no index on this field" -> "Foreign key has no index..."
    """
    if len(text) <= max_len:
        return text

    cut_at = max_len - len(suffix)
    if cut_at <= 0:
        return suffix

    space_idx = text.rfind(" ", 0, cut_at)
    if space_idx > 0:
        return text[:space_idx] + suffix

    return text[:cut_at] + suffix
