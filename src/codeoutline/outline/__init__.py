"""Outline and definition search public API."""

from codeoutline.outline._internal.discovery.language_detect import detect
from codeoutline.outline._internal.extraction.markup import enrich_markup, is_component
from codeoutline.outline._internal.extraction.outline import extract_outline
from codeoutline.outline._internal.extraction.search import find_definitions
from codeoutline.outline._internal.parsing.treesitter import get_parser
from codeoutline.outline.models import (
    DefinitionMatch,
    FileType,
    FileTypeKind,
    Language,
    OutlineEntry,
    OutlineKind,
    Span,
)
from codeoutline.outline.ops import (
    OutlineResult,
    SearchResult,
    outline_file,
    outline_source,
    search_file,
    search_source,
)
from codeoutline.outline.render import format_matches, format_outline

__all__ = [
    # Models
    "DefinitionMatch",
    "FileType",
    "FileTypeKind",
    "Language",
    "OutlineEntry",
    "OutlineKind",
    "Span",
    # Core passes
    "detect",
    "enrich_markup",
    "extract_outline",
    "find_definitions",
    "get_parser",
    "is_component",
    # Operations
    "OutlineResult",
    "SearchResult",
    "outline_file",
    "outline_source",
    "search_file",
    "search_source",
    # Rendering
    "format_matches",
    "format_outline",
]
