"""AST-based symbol definition search.

Scans the whole tree (definitions may be nested: class members, instance
bodies, inner functions) for nodes in the language's definition-kind set
whose extracted name equals the query exactly. Identifiers in any other
position, such as call arguments, are never reported.
"""

from __future__ import annotations

from typing import Any

from codeoutline.outline._internal.extraction.names import classify, extract_name
from codeoutline.outline._internal.parsing.packs import get_pack
from codeoutline.outline.models import DefinitionMatch, Language, Span


def find_definitions(root: Any, language: Language, symbol: str) -> list[DefinitionMatch]:
    """All definition sites of ``symbol`` in source order. Case-sensitive."""
    if not symbol:
        return []

    pack = get_pack(language)
    matches: list[DefinitionMatch] = []
    stack = [root]
    while stack:
        node = stack.pop()
        rule = pack.rules.get(node.type) if node.type in pack.definition_kinds else None
        if rule is not None and (
            rule.requires_field is None or node.child_by_field_name(rule.requires_field) is not None
        ):
            name = extract_name(rule, node)
            if name == symbol:
                matches.append(
                    DefinitionMatch(
                        name=name,
                        node_kind=node.type,
                        kind=classify(rule, node),
                        span=Span.of(node),
                    )
                )
        stack.extend(reversed(node.named_children))
    return matches
