"""Outline extraction: top-level declarations of a syntax tree.

The walk is table driven. For each child of the root, transparent wrapper
kinds are flattened (any depth) so their children count as top-level
siblings, mapped kinds become one OutlineEntry each, and everything else
(comments, pragmas, decorators, ERROR nodes) is skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from codeoutline.outline._internal.extraction.markup import enrich_markup, is_component
from codeoutline.outline._internal.extraction.names import (
    classify,
    extract_item_names,
    extract_name,
    first_line,
    node_text,
)
from codeoutline.outline._internal.parsing.packs import KindRule, LanguagePack, get_pack
from codeoutline.outline.models import Language, OutlineEntry, OutlineKind, Span

DEFAULT_SIGNATURE_LENGTH = 120

# Container children that hold member declarations when there is no body field
_BODY_HINTS = ("body", "block", "declaration_list")

# Skipped when looking for a comment above a declaration
_ANNOTATION_HINTS = ("decorator", "attribute", "annotation")

_COMMENT_PREFIXES = ("///", "//!", "/**", "/*", "//", "-- |", "--", "{-", "#")
_COMMENT_SUFFIXES = ("*/", "-}")


def extract_outline(
    root: Any,
    language: Language,
    *,
    member_depth: int = 1,
    markup: bool = True,
    signature_max_length: int = DEFAULT_SIGNATURE_LENGTH,
) -> list[OutlineEntry]:
    """Extract the outline of a parsed file.

    Args:
        root: Root node of the syntax tree.
        language: Language the tree was parsed with.
        member_depth: Levels of members listed under containers that allow it.
        markup: Attach markup children to component declarations.
        signature_max_length: Truncation limit for signatures.

    Returns:
        Entries in source order. Empty for empty or declaration-free input.
    """
    pack = get_pack(language)
    walker = _OutlineWalker(pack, markup, signature_max_length)
    return walker.collect(root.named_children, member_depth)


def iter_declarations(nodes: Iterable[Any], wrapper_kinds: frozenset[str]) -> Iterator[Any]:
    """Yield nodes in source order, replacing wrappers by their children."""
    stack = list(nodes)
    stack.reverse()
    while stack:
        node = stack.pop()
        if node.type in wrapper_kinds:
            stack.extend(reversed(node.named_children))
            continue
        yield node


def member_nodes(node: Any) -> list[Any]:
    """Children of a container's body, or [] when it has none."""
    body = node.child_by_field_name("body")
    if body is None:
        for child in node.named_children:
            if any(hint in child.type for hint in _BODY_HINTS):
                body = child
                break
    if body is None:
        return []
    return list(body.named_children)


def extract_signature(node: Any, limit: int = DEFAULT_SIGNATURE_LENGTH) -> str:
    """First source line of a declaration without its body."""
    line = node_text(node).split("\n", 1)[0].strip()
    if line.endswith("{"):
        # Destructured parameters keep their braces
        line = line[:-1].strip()
    elif "{" in line:
        line = line[: line.find("{")].strip()
    elif line.endswith(":"):
        line = line[:-1].strip()
    if len(line) > limit:
        return line[: limit - 3] + "..."
    return line


def extract_doc(node: Any, wrapper_kinds: frozenset[str]) -> str | None:
    """Adjacent comment directly above a declaration, first line only."""
    current = node
    while True:
        follower = current
        prev = current.prev_named_sibling
        while prev is not None and _is_annotation(prev.type):
            follower = prev
            prev = prev.prev_named_sibling
        parent = current.parent
        if prev is None and parent is not None and parent.type in wrapper_kinds:
            current = parent
            continue
        break

    if prev is None or not _is_comment(prev.type):
        return None
    if prev.end_point[0] + 1 < follower.start_point[0]:
        return None
    return _clean_comment(node_text(prev)) or None


def _is_annotation(kind: str) -> bool:
    return any(hint in kind for hint in _ANNOTATION_HINTS)


def _is_comment(kind: str) -> bool:
    return "comment" in kind or kind == "haddock"


def _clean_comment(text: str) -> str:
    line = text.strip().split("\n", 1)[0].strip()
    for prefix in _COMMENT_PREFIXES:
        if line.startswith(prefix):
            line = line[len(prefix) :]
            break
    for suffix in _COMMENT_SUFFIXES:
        line = line.removesuffix(suffix)
    return first_line(line.strip())


class _OutlineWalker:
    """Builds entries for one pack. Member recursion is bounded by member_depth."""

    def __init__(self, pack: LanguagePack, markup: bool, signature_max_length: int) -> None:
        self.pack = pack
        self.markup = markup and pack.markup is not None
        self.signature_max_length = signature_max_length

    def collect(self, nodes: Iterable[Any], depth_left: int) -> list[OutlineEntry]:
        entries: list[OutlineEntry] = []
        for node in iter_declarations(nodes, self.pack.wrapper_kinds):
            rule = self.pack.rules.get(node.type)
            if rule is None:
                continue
            if rule.item_kinds:
                items = self.split(node, rule)
                if items:
                    entries.extend(items)
                    continue
            entry = self.build(node, rule, depth_left)
            if entry is not None:
                entries.append(entry)
        return entries

    def split(self, node: Any, rule: KindRule) -> list[OutlineEntry]:
        """One entry per listed item, each spanning the whole statement."""
        doc = extract_doc(node, self.pack.wrapper_kinds)
        return [
            OutlineEntry(
                kind=rule.kind,
                name=name,
                span=Span.of(node),
                doc=doc,
                node_kind=node.type,
            )
            for name in extract_item_names(rule, node)
        ]

    def build(self, node: Any, rule: KindRule, depth_left: int) -> OutlineEntry | None:
        if rule.requires_field and node.child_by_field_name(rule.requires_field) is None:
            return None

        entry = OutlineEntry(
            kind=classify(rule, node),
            name=extract_name(rule, node),
            span=Span.of(node),
            doc=extract_doc(node, self.pack.wrapper_kinds),
            node_kind=node.type,
        )

        if rule.members and depth_left > 0:
            entry.children = self.collect(member_nodes(node), depth_left - 1)
            if rule.methods:
                for child in entry.children:
                    if child.kind is OutlineKind.FUNCTION:
                        child.kind = OutlineKind.METHOD

        if entry.kind.is_callable:
            entry.signature = extract_signature(node, self.signature_max_length)

        if self.markup and is_component(entry, node, self.pack.language):
            enrich_markup(entry, node, self.pack.language)

        return entry
