"""Extension-based file type detection.

Extensions are matched exactly (case-sensitive) against the pack registry.
Anything unrecognized is TEXT, or BINARY when the leading bytes contain NUL.
"""

from __future__ import annotations

from pathlib import Path

from codeoutline.outline._internal.parsing.packs import get_pack_for_ext
from codeoutline.outline.models import FileType, Language

# Same window git uses to sniff binary content
_BINARY_SNIFF_BYTES = 8000


def detect_language(path: Path | str) -> Language | None:
    """Map a path's extension to a Language, or None when unknown."""
    suffix = Path(path).suffix
    if not suffix:
        return None
    pack = get_pack_for_ext(suffix[1:])
    return pack.language if pack is not None else None


def looks_binary(content: bytes) -> bool:
    return b"\x00" in content[:_BINARY_SNIFF_BYTES]


def detect(path: Path | str, content: bytes | None = None) -> FileType:
    """Classify a file as code in a known language, text, or binary.

    Content is only consulted for unknown extensions.
    """
    language = detect_language(path)
    if language is not None:
        return FileType.code(language)
    if content is not None and looks_binary(content):
        return FileType.binary()
    return FileType.text()
