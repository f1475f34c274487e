"""Tree-sitter parse adapter.

Loads one grammar per Language (cached) and turns source bytes into a
syntax tree. tree-sitter is error tolerant: the root always exists, and
syntax errors show up as ERROR or missing nodes, which are counted here and
otherwise left for the extractors to skip.
"""

from __future__ import annotations

import importlib
import threading
from dataclasses import dataclass, field
from typing import Any

import tree_sitter

from codeoutline.core.errors import GrammarError
from codeoutline.core.logging import get_logger
from codeoutline.outline._internal.parsing.packs import LanguagePack, get_pack
from codeoutline.outline.models import Language

log = get_logger("outline.parsing")


@dataclass
class ParseResult:
    """Result of parsing one source buffer."""

    tree: Any  # tree_sitter.Tree
    language: Language
    error_count: int
    total_nodes: int
    root_node: Any  # tree_sitter.Node


@dataclass
class TreeSitterParser:
    """Parses source bytes with the grammar registered for a Language.

    Usage::

        parser = TreeSitterParser()
        result = parser.parse(b"def f(): pass", Language.PYTHON)
        result.root_node.type  # "module"

    Grammars are loaded lazily and cached. A fresh ``tree_sitter.Parser``
    is used per call, so one instance can serve concurrent callers.
    """

    _languages: dict[Language, tree_sitter.Language] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def grammar_for(self, language: Language) -> tree_sitter.Language:
        """Get or load the grammar handle for a language.

        Raises:
            GrammarError: The grammar package is not installed or is broken.
        """
        cached = self._languages.get(language)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._languages.get(language)
            if cached is None:
                cached = _load_grammar(get_pack(language))
                self._languages[language] = cached
        return cached

    def parse(self, content: bytes, language: Language) -> ParseResult:
        """Parse source bytes.

        Raises:
            GrammarError: The language's grammar is unavailable.
        """
        ts_lang = self.grammar_for(language)
        tree = tree_sitter.Parser(ts_lang).parse(content)
        root = tree.root_node

        error_count, total_nodes = _count_nodes(root)
        if error_count:
            log.debug(
                "parse_errors",
                language=language.value,
                error_count=error_count,
                total_nodes=total_nodes,
            )

        return ParseResult(
            tree=tree,
            language=language,
            error_count=error_count,
            total_nodes=total_nodes,
            root_node=root,
        )


def _load_grammar(pack: LanguagePack) -> tree_sitter.Language:
    """Load a grammar via its pack's module and loader function."""
    func_name = pack.language_func or "language"
    try:
        mod = importlib.import_module(pack.grammar_module)
        lang_fn = getattr(mod, func_name)
        grammar = tree_sitter.Language(lang_fn())
    except ImportError as err:
        raise GrammarError.unavailable(pack.name, pack.grammar_package, "not installed") from err
    except (AttributeError, TypeError, ValueError) as err:
        raise GrammarError.unavailable(pack.name, pack.grammar_package, str(err)) from err
    log.debug("grammar_loaded", language=pack.name, module=pack.grammar_module)
    return grammar


def _count_nodes(root: Any) -> tuple[int, int]:
    error_count = 0
    total_nodes = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total_nodes += 1
        if node.type == "ERROR" or node.is_missing:
            error_count += 1
        stack.extend(node.children)
    return error_count, total_nodes


_default_parser: TreeSitterParser | None = None


def get_parser() -> TreeSitterParser:
    """Process-wide parser sharing one grammar cache."""
    global _default_parser
    if _default_parser is None:
        _default_parser = TreeSitterParser()
    return _default_parser
