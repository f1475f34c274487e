"""Outline, markup and definition extraction over syntax trees."""

from codeoutline.outline._internal.extraction.markup import enrich_markup, is_component
from codeoutline.outline._internal.extraction.outline import extract_outline
from codeoutline.outline._internal.extraction.search import find_definitions

__all__ = ["enrich_markup", "extract_outline", "find_definitions", "is_component"]
