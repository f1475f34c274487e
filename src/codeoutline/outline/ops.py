"""Outline and search operations.

Entry points for collaborators (CLI, editors, agents). Every failure a
caller can act on comes back in the result's ``error`` field; nothing is
raised except registry defects, which fail at import time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from codeoutline.config.models import CodeOutlineConfig
from codeoutline.core.errors import CodeOutlineError, GrammarError, SourceError
from codeoutline.core.logging import get_logger
from codeoutline.outline._internal.discovery.language_detect import detect
from codeoutline.outline._internal.extraction.outline import extract_outline
from codeoutline.outline._internal.extraction.search import find_definitions
from codeoutline.outline._internal.parsing.packs import get_pack
from codeoutline.outline._internal.parsing.treesitter import ParseResult, get_parser
from codeoutline.outline.models import (
    DefinitionMatch,
    FileType,
    Language,
    OutlineEntry,
    OutlineKind,
    Span,
)

log = get_logger("outline.ops")


@dataclass
class OutlineResult:
    """Outline of one file."""

    path: str | None
    file_type: FileType
    entries: list[OutlineEntry] = field(default_factory=list)
    error_count: int = 0  # syntax error nodes in the tree
    error: CodeOutlineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "file_type": str(self.file_type),
            "entries": [entry.to_dict() for entry in self.entries],
            "error_count": self.error_count,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class SearchResult:
    """Definition sites of one symbol in one file."""

    path: str | None
    file_type: FileType
    symbol: str
    matches: list[DefinitionMatch] = field(default_factory=list)
    error: CodeOutlineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "file_type": str(self.file_type),
            "symbol": self.symbol,
            "matches": [match.to_dict() for match in self.matches],
            "error": self.error.to_dict() if self.error else None,
        }


def outline_source(
    content: bytes,
    language: Language,
    *,
    path: Path | str | None = None,
    config: CodeOutlineConfig | None = None,
) -> OutlineResult:
    """Outline in-memory source of a known language."""
    config = config or CodeOutlineConfig()
    file_type = FileType.code(language)
    path_str = str(path) if path is not None else None

    try:
        parsed = get_parser().parse(content, language)
    except GrammarError as e:
        log.warning("grammar_unavailable", language=language.value, error=e.message)
        return OutlineResult(path=path_str, file_type=file_type, error=e)

    entries = extract_outline(
        parsed.root_node,
        language,
        member_depth=config.outline.member_depth,
        markup=config.outline.markup,
        signature_max_length=config.outline.signature_max_length,
    )
    if config.outline.implicit_file_module and path is not None:
        entries = _wrap_file_module(entries, parsed, path)

    log.debug(
        "outline_extracted",
        path=path_str,
        language=language.value,
        entries=len(entries),
        error_count=parsed.error_count,
    )
    return OutlineResult(
        path=path_str,
        file_type=file_type,
        entries=entries,
        error_count=parsed.error_count,
    )


def outline_file(
    path: Path | str,
    content: bytes | None = None,
    *,
    config: CodeOutlineConfig | None = None,
) -> OutlineResult:
    """Outline a file. Non-code files yield an empty result without error."""
    config = config or CodeOutlineConfig()
    loaded = _load(Path(path), content, config)
    if isinstance(loaded, CodeOutlineError):
        return OutlineResult(path=str(path), file_type=detect(path), error=loaded)

    file_type = detect(path, loaded)
    if file_type.language is None:
        return OutlineResult(path=str(path), file_type=file_type)
    return outline_source(loaded, file_type.language, path=path, config=config)


def search_source(
    content: bytes,
    language: Language,
    symbol: str,
    *,
    path: Path | str | None = None,
    config: CodeOutlineConfig | None = None,
) -> SearchResult:
    """Find definitions of ``symbol`` in in-memory source."""
    config = config or CodeOutlineConfig()
    file_type = FileType.code(language)
    path_str = str(path) if path is not None else None

    try:
        parsed = get_parser().parse(content, language)
    except GrammarError as e:
        log.warning("grammar_unavailable", language=language.value, error=e.message)
        return SearchResult(path=path_str, file_type=file_type, symbol=symbol, error=e)

    matches = find_definitions(parsed.root_node, language, symbol)
    if (
        config.outline.implicit_file_module
        and path is not None
        and get_pack(language).implicit_file_module
        and Path(path).stem == symbol
    ):
        matches.insert(
            0,
            DefinitionMatch(
                name=symbol,
                node_kind=parsed.root_node.type,
                kind=OutlineKind.MODULE,
                span=Span.of(parsed.root_node),
            ),
        )

    log.debug("definitions_found", path=path_str, symbol=symbol, matches=len(matches))
    return SearchResult(path=path_str, file_type=file_type, symbol=symbol, matches=matches)


def search_file(
    path: Path | str,
    symbol: str,
    content: bytes | None = None,
    *,
    config: CodeOutlineConfig | None = None,
) -> SearchResult:
    """Find definitions of ``symbol`` in a file. Non-code files yield no matches."""
    config = config or CodeOutlineConfig()
    loaded = _load(Path(path), content, config)
    if isinstance(loaded, CodeOutlineError):
        return SearchResult(path=str(path), file_type=detect(path), symbol=symbol, error=loaded)

    file_type = detect(path, loaded)
    if file_type.language is None:
        return SearchResult(path=str(path), file_type=file_type, symbol=symbol)
    return search_source(loaded, file_type.language, symbol, path=path, config=config)


def _load(path: Path, content: bytes | None, config: CodeOutlineConfig) -> bytes | SourceError:
    limit = config.limits.max_file_size_mb * 1024 * 1024
    if content is None:
        try:
            size = path.stat().st_size
            if size > limit:
                return SourceError.too_large(str(path), size, limit)
            content = path.read_bytes()
        except OSError as e:
            return SourceError.read_error(str(path), e.strerror or str(e))
    if len(content) > limit:
        return SourceError.too_large(str(path), len(content), limit)
    return content


def _wrap_file_module(
    entries: list[OutlineEntry], parsed: ParseResult, path: Path | str
) -> list[OutlineEntry]:
    """Wrap entries in a module named after the file, for file-scoped module languages."""
    if not get_pack(parsed.language).implicit_file_module:
        return entries
    stem = Path(path).stem
    if not stem or not entries:
        return entries
    root = parsed.root_node
    end = entries[-1].span
    span = Span(
        start_line=1,
        start_column=0,
        end_line=end.end_line,
        end_column=end.end_column,
        start_byte=0,
        end_byte=end.end_byte,
    )
    return [
        OutlineEntry(
            kind=OutlineKind.MODULE,
            name=stem,
            span=span,
            children=entries,
            node_kind=root.type,
        )
    ]
