"""Shared fixtures for outline tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from codeoutline.config import CodeOutlineConfig
from codeoutline.outline import Language, OutlineEntry, extract_outline
from codeoutline.outline._internal.parsing import TreeSitterParser

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def parser() -> TreeSitterParser:
    """Create a TreeSitterParser instance."""
    return TreeSitterParser()


@pytest.fixture
def polyglot_dir() -> Path:
    return FIXTURES / "polyglot"


@pytest.fixture
def config() -> CodeOutlineConfig:
    return CodeOutlineConfig()


@pytest.fixture
def outline_of(parser: TreeSitterParser):
    """Parse source text and return its outline."""

    def _outline(source: str, language: Language, **kwargs) -> list[OutlineEntry]:
        result = parser.parse(source.encode(), language)
        return extract_outline(result.root_node, language, **kwargs)

    return _outline
