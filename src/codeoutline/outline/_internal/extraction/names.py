"""Name extraction shared by the outline extractor and definition search.

All helpers take tree-sitter nodes and return plain strings. They never
raise for a missing field or child; an unresolved name is ``""``.
"""

from __future__ import annotations

from typing import Any

from codeoutline.outline._internal.parsing.packs import (
    KindRule,
    NameRule,
    NameStrategy,
)
from codeoutline.outline.models import OutlineKind

MAX_NAME_LENGTH = 80

# Terminal kinds reached while following C/C++ declarator chains
_DECLARATOR_TERMINALS = frozenset(
    {
        "identifier",
        "field_identifier",
        "type_identifier",
        "primitive_type",
        "qualified_identifier",
        "destructor_name",
        "operator_name",
        "template_function",
    }
)
_MAX_DECLARATOR_DEPTH = 16


def node_text(node: Any) -> str:
    """Full source text of a node."""
    raw = node.text
    if raw is None:
        return ""
    return raw.decode("utf-8", errors="replace")


def first_line(text: str, limit: int = MAX_NAME_LENGTH) -> str:
    """First line of ``text``, truncated to ``limit`` characters with '...'."""
    line = text.split("\n", 1)[0].rstrip("\r")
    if len(line) > limit:
        return line[: limit - 3] + "..."
    return line


def find_binding(node: Any, binding: str) -> Any | None:
    """Inner binding child: the named field, else the first child of that kind."""
    inner = node.child_by_field_name(binding)
    if inner is not None:
        return inner
    for child in node.named_children:
        if child.type == binding:
            return child
    return None


def _declarator_name(node: Any) -> str:
    current = node.child_by_field_name("declarator")
    for _ in range(_MAX_DECLARATOR_DEPTH):
        if current is None:
            return ""
        if current.type in _DECLARATOR_TERMINALS:
            return node_text(current)
        inner = current.child_by_field_name("declarator")
        if inner is None:
            # parenthesized_declarator and friends carry no declarator field
            named = current.named_children
            inner = named[0] if named else None
        current = inner
    return ""


def _apply(rule: NameRule, node: Any) -> str:
    if rule.strategy is NameStrategy.FIELD:
        target = node.child_by_field_name(rule.field)
        return node_text(target) if target is not None else ""

    if rule.strategy is NameStrategy.BINDING:
        inner = find_binding(node, rule.binding or "")
        if inner is None:
            return ""
        target = inner.child_by_field_name(rule.field)
        return node_text(target) if target is not None else ""

    if rule.strategy is NameStrategy.CHILD_TEXT:
        for child in node.named_children:
            if child.type in rule.child_kinds:
                return node_text(child)
        return ""

    if rule.strategy is NameStrategy.DECLARATOR:
        return _declarator_name(node)

    return extract_import_source(node_text(node))


def extract_name(rule: KindRule, node: Any) -> str:
    """Resolve a declaration's name using its rule's strategies in order."""
    for name_rule in rule.names:
        name = _apply(name_rule, node).strip()
        if name:
            if rule.kind is OutlineKind.IMPORT:
                name = clean_import_name(name)
            return first_line(rule.name_template.format(name))
    return ""


def extract_item_names(rule: KindRule, node: Any) -> list[str]:
    """One name per listed item of a multi-item statement, in source order.

    An item with a ``name`` field (``numpy as np``) is named by that field.
    """
    names: list[str] = []
    for child in node.named_children:
        if child.type not in rule.item_kinds:
            continue
        target = child.child_by_field_name("name")
        name = node_text(target if target is not None else child).strip()
        if rule.kind is OutlineKind.IMPORT:
            name = clean_import_name(name)
        if name:
            names.append(first_line(rule.name_template.format(name)))
    return names


def classify(rule: KindRule, node: Any) -> OutlineKind:
    """Kind of a declaration, refined by the bound expression when configured.

    Best effort: only the expression's own node kind is inspected, so a value
    produced by a call (``const f = memo(() => ...)``) stays a variable.
    """
    classifier = rule.classify
    if classifier is None:
        return rule.kind
    holder = node
    if classifier.binding is not None:
        holder = find_binding(node, classifier.binding)
        if holder is None:
            return rule.kind
    value = holder.child_by_field_name(classifier.field)
    if value is None:
        return rule.kind
    return classifier.kinds.get(value.type, rule.kind)


def clean_import_name(name: str) -> str:
    """Strip statement noise from an import's module literal.

    ``"react"`` -> ``react``, ``<stdio.h>`` -> ``stdio.h``,
    ``std::io::{self, Read}`` -> ``std::io``.
    """
    name = name.strip().rstrip(";").strip()
    if len(name) >= 2 and name[0] == name[-1] and name[0] in "\"'`":
        name = name[1:-1]
    elif name.startswith("<") and name.endswith(">"):
        name = name[1:-1]
    if "{" in name:
        name = name.split("{", 1)[0]
    return name.strip().removesuffix("::")


def extract_import_source(text: str) -> str:
    """Module name out of an import statement's text.

    Handles: ``use foo::bar`` -> ``foo::bar``, ``open Belt`` -> ``Belt``,
    ``from collections import X`` -> ``collections``,
    ``import qualified Data.Text as T`` -> ``Data.Text``,
    ``import X from "react"`` -> ``react``, ``#include <stdio.h>`` -> ``<stdio.h>``.
    """
    trimmed = text.strip().rstrip(";").strip()

    if trimmed.startswith("use "):
        rest = trimmed[4:].split("{", 1)[0]
        return rest.strip().removesuffix("::")

    if trimmed.startswith("open "):
        parts = trimmed[5:].split()
        return parts[0] if parts else ""

    if trimmed.startswith("from "):
        parts = trimmed[5:].split()
        return parts[0] if parts else ""

    if trimmed.startswith("import "):
        # Haskell modules are capitalized and never use `from`
        if " from " not in trimmed and ' from"' not in trimmed:
            rest = trimmed[7:].removeprefix("qualified ").split()
            if rest and rest[0][:1].isupper():
                return rest[0]

    if trimmed.startswith("import"):
        pos = trimmed.find("from ")
        if pos != -1:
            return trimmed[pos + 5 :].strip().strip("\"';")
        parts = trimmed[len("import") :].split()
        return parts[0].strip("\"';") if parts else ""

    if trimmed.startswith("#include"):
        return trimmed[len("#include") :].strip()

    parts = trimmed.split()
    return parts[-1] if parts else trimmed
