"""Small formatting helpers for terminal output.

Design principles:
- Every summary fits on one line
- Paths compressed for deep nesting
- Grammatically correct (1 match vs 2 matches)
"""

from __future__ import annotations


def compress_path(path: str, max_len: int = 40) -> str:
    """Compress path to fit within max_len.

    Examples:
        src/codeoutline/outline/_internal/extraction/markup.py -> src/.../markup.py
        short/path.py -> short/path.py (unchanged)
    """
    if len(path) <= max_len:
        return path

    parts = path.split("/")
    if len(parts) <= 2:
        return path

    compressed = f"{parts[0]}/.../{parts[-1]}"
    if len(compressed) <= max_len:
        return compressed
    return parts[-1]


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return "1 match" or "3 matches" style counts.

    Args:
        count: The number of items
        singular: Singular form (e.g., "file")
        plural: Plural form (default: singular + "s")
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def truncate(text: str, max_len: int, suffix: str = "...") -> str:
    """Hard-truncate text to max_len characters including the suffix."""
    if len(text) <= max_len:
        return text
    cut_at = max_len - len(suffix)
    if cut_at <= 0:
        return suffix[:max_len]
    return text[:cut_at] + suffix


def format_line_range(start: int, end: int) -> str:
    """``[12]`` for a single line, ``[12-30]`` for a range."""
    if start == end:
        return f"[{start}]"
    return f"[{start}-{end}]"
