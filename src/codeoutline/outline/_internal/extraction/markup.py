"""Markup sub-extraction for component declarations.

A second pass over a declaration already classified by the outline
extractor. It only runs for languages with a MarkupConfig and only for
entries the language's ComponentRule recognizes; everything else is
returned untouched.

Within a component body, JSX becomes child entries:
- element / self-closing element -> ELEMENT named with the tag verbatim
  (``Layout.Header`` stays one dotted name)
- fragment -> FRAGMENT with no name
- ``{...expr}`` in an element's attributes -> SPREAD under that element
"""

from __future__ import annotations

from typing import Any

from codeoutline.core.logging import get_logger
from codeoutline.outline._internal.extraction.names import first_line, node_text
from codeoutline.outline._internal.parsing.packs import ComponentRule, MarkupConfig, get_pack
from codeoutline.outline.models import Language, OutlineEntry, OutlineKind, Span

log = get_logger("outline.markup")


class _UnresolvedTag(Exception):
    """An element whose tag cannot be read; its subtree is skipped."""


def is_component(entry: OutlineEntry, node: Any, language: Language) -> bool:
    """Whether a declaration defines a UI component in this language."""
    markup = get_pack(language).markup
    if markup is None or not entry.kind.is_callable:
        return False
    rule = markup.component
    if rule.marker is not None and _has_marker(node, rule):
        return True
    return rule.name_pattern is not None and bool(rule.name_pattern.search(entry.name))


def _has_marker(node: Any, rule: ComponentRule) -> bool:
    marker = rule.marker or ""
    prev = node.prev_named_sibling
    while prev is not None and prev.type in rule.decorator_kinds:
        if marker in node_text(prev):
            return True
        prev = prev.prev_named_sibling
    return any(
        child.type in rule.decorator_kinds and marker in node_text(child)
        for child in node.named_children
    )


def enrich_markup(entry: OutlineEntry, node: Any, language: Language) -> OutlineEntry:
    """Append markup found in ``node``'s subtree to ``entry.children``.

    Walks iteratively in source order. An element whose tag cannot be
    resolved is dropped with its subtree; the walk continues with its
    siblings. Returns ``entry`` unchanged when there is no markup.
    """
    markup = get_pack(language).markup
    if markup is None:
        return entry

    stack: list[tuple[Any, list[OutlineEntry]]] = [
        (child, entry.children) for child in reversed(node.named_children)
    ]
    while stack:
        current, target = stack.pop()
        if _is_markup(current.type, markup):
            try:
                child_entry = _markup_entry(current, markup)
            except _UnresolvedTag:
                log.debug(
                    "markup_subtree_skipped",
                    node_kind=current.type,
                    line=current.start_point[0] + 1,
                    component=entry.name,
                )
                continue
            target.append(child_entry)
            stack.extend((child, child_entry.children) for child in reversed(current.named_children))
            continue
        stack.extend((child, target) for child in reversed(current.named_children))

    return entry


def _is_markup(kind: str, markup: MarkupConfig) -> bool:
    return (
        kind in markup.element_kinds
        or kind in markup.self_closing_kinds
        or kind in markup.fragment_kinds
    )


def _markup_entry(node: Any, markup: MarkupConfig) -> OutlineEntry:
    span = Span.of(node)
    if node.type in markup.fragment_kinds:
        return OutlineEntry(OutlineKind.FRAGMENT, "", span, node_kind=node.type)

    if node.type in markup.self_closing_kinds:
        tag_holder = node
    else:
        tag_holder = next(
            (child for child in node.named_children if child.type in markup.opening_kinds),
            None,
        )
        if tag_holder is None:
            raise _UnresolvedTag(node.type)

    tag = _tag_name(tag_holder, markup)
    if not tag:
        if markup.nameless_is_fragment and node.type in markup.element_kinds:
            return OutlineEntry(OutlineKind.FRAGMENT, "", span, node_kind=node.type)
        raise _UnresolvedTag(node.type)

    element = OutlineEntry(OutlineKind.ELEMENT, tag, span, node_kind=node.type)
    element.children.extend(_spreads(tag_holder, markup))
    return element


def _tag_name(holder: Any, markup: MarkupConfig) -> str:
    if markup.tag_field is not None:
        tag = holder.child_by_field_name(markup.tag_field)
        if tag is not None:
            return node_text(tag).strip()
    for child in holder.named_children:
        if child.type in markup.tag_kinds:
            return node_text(child).strip()
    return ""


def _spreads(holder: Any, markup: MarkupConfig) -> list[OutlineEntry]:
    spreads: list[OutlineEntry] = []
    for child in holder.named_children:
        if child.type not in markup.spread_container_kinds:
            continue
        if any(inner.type in markup.spread_kinds for inner in child.named_children):
            text = first_line(node_text(child).strip().removeprefix("{").removesuffix("}"))
            spreads.append(
                OutlineEntry(OutlineKind.SPREAD, text.strip(), Span.of(child), node_kind=child.type)
            )
    return spreads
