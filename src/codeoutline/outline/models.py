"""Data model for outlines and definition search.

Everything here is created fresh per call and never persisted. Entries are
plain dataclasses so the rendering and JSON layers can walk them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Language(str, Enum):
    """Closed set of grammar targets.

    Every member must have a LanguagePack in
    ``codeoutline.outline._internal.parsing.packs``; the registry refuses to
    import otherwise.
    """

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    GO = "go"
    RUST = "rust"
    JAVA = "java"
    C = "c"
    CPP = "cpp"
    RUBY = "ruby"
    HASKELL = "haskell"
    RESCRIPT = "rescript"


class FileTypeKind(str, Enum):
    CODE = "code"
    TEXT = "text"
    BINARY = "binary"


@dataclass(frozen=True)
class FileType:
    """Classification of a path: code in a known Language, or text/binary."""

    kind: FileTypeKind
    language: Language | None = None

    @classmethod
    def code(cls, language: Language) -> FileType:
        return cls(FileTypeKind.CODE, language)

    @classmethod
    def text(cls) -> FileType:
        return cls(FileTypeKind.TEXT)

    @classmethod
    def binary(cls) -> FileType:
        return cls(FileTypeKind.BINARY)

    @property
    def is_code(self) -> bool:
        return self.kind is FileTypeKind.CODE

    def __str__(self) -> str:
        if self.language is not None:
            return f"code({self.language.value})"
        return self.kind.value


class OutlineKind(str, Enum):
    """Semantic classification of an outline entry, independent of language."""

    FUNCTION = "function"
    METHOD = "method"
    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    TYPE_ALIAS = "type"
    ENUM = "enum"
    CONSTANT = "const"
    VARIABLE = "variable"
    MODULE = "module"
    IMPORT = "import"
    # Markup attached under component declarations
    ELEMENT = "element"
    FRAGMENT = "fragment"
    SPREAD = "spread"

    @property
    def is_markup(self) -> bool:
        return self in _MARKUP_KINDS

    @property
    def is_callable(self) -> bool:
        return self in (OutlineKind.FUNCTION, OutlineKind.METHOD)


_MARKUP_KINDS = frozenset({OutlineKind.ELEMENT, OutlineKind.FRAGMENT, OutlineKind.SPREAD})


@dataclass(frozen=True)
class Span:
    """Source location. Lines are 1-based, columns 0-based byte offsets."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int
    start_byte: int = 0
    end_byte: int = 0

    @classmethod
    def of(cls, node: Any) -> Span:
        """Span of a tree-sitter node."""
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        return cls(
            start_line=start_row + 1,
            start_column=start_col,
            end_line=end_row + 1,
            end_column=end_col,
            start_byte=node.start_byte,
            end_byte=node.end_byte,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "start_line": self.start_line,
            "start_column": self.start_column,
            "end_line": self.end_line,
            "end_column": self.end_column,
        }


@dataclass
class OutlineEntry:
    """One declaration (or markup construct) in an outline.

    ``name`` is an empty string when the name could not be extracted;
    fragments are always nameless.
    """

    kind: OutlineKind
    name: str
    span: Span
    children: list[OutlineEntry] = field(default_factory=list)
    signature: str | None = None
    doc: str | None = None
    node_kind: str = ""  # grammar node kind the entry came from

    @property
    def start_line(self) -> int:
        return self.span.start_line

    @property
    def end_line(self) -> int:
        return self.span.end_line

    def walk(self) -> list[OutlineEntry]:
        """This entry and all descendants, pre-order."""
        out: list[OutlineEntry] = []
        stack = [self]
        while stack:
            entry = stack.pop()
            out.append(entry)
            stack.extend(reversed(entry.children))
        return out

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "name": self.name,
            "span": self.span.to_dict(),
        }
        if self.signature is not None:
            data["signature"] = self.signature
        if self.doc is not None:
            data["doc"] = self.doc
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class DefinitionMatch:
    """A definition site for a searched symbol."""

    name: str
    node_kind: str
    kind: OutlineKind
    span: Span

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "node_kind": self.node_kind,
            "kind": self.kind.value,
            "span": self.span.to_dict(),
        }
