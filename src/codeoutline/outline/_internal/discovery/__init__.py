"""File type detection."""

from codeoutline.outline._internal.discovery.language_detect import (
    detect,
    detect_language,
    looks_binary,
)

__all__ = ["detect", "detect_language", "looks_binary"]
