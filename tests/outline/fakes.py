"""Hand-built syntax nodes for extractor tests that need no grammar."""

from __future__ import annotations

from typing import Any


class FakeNode:
    """Quacks like ``tree_sitter.Node`` for the attributes extractors read."""

    def __init__(
        self,
        type: str,
        text: str,
        named_children: list[FakeNode],
        fields: dict[str, FakeNode],
        start_point: tuple[int, int],
        end_point: tuple[int, int],
    ) -> None:
        self.type = type
        self.text = text.encode()
        self.named_children = named_children
        self.children = named_children
        self._fields = fields
        self.start_point = start_point
        self.end_point = end_point
        self.start_byte = 0
        self.end_byte = len(self.text)
        self.is_named = True
        self.is_missing = False
        self.parent: FakeNode | None = None
        self.prev_named_sibling: FakeNode | None = None

        for i, child in enumerate(named_children):
            child.parent = self
            child.prev_named_sibling = named_children[i - 1] if i else None

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self._fields.get(name)

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r})"


def node(
    kind: str,
    /,
    *children: FakeNode,
    text: str | None = None,
    line: int = 0,
    end_line: int | None = None,
    **fields: Any,
) -> FakeNode:
    """Build a node.

    Keyword arguments become fields; field nodes are also named children,
    placed before the positional children. Text defaults to the children's
    text joined by spaces.
    """
    ordered = [child for child in fields.values() if child is not None]
    ordered.extend(child for child in children if child not in ordered)
    if text is None:
        text = " ".join(child.text.decode() for child in ordered)
    if end_line is None:
        end_line = line + text.count("\n")
    return FakeNode(
        type=kind,
        text=text,
        named_children=ordered,
        fields={key: value for key, value in fields.items() if value is not None},
        start_point=(line, 0),
        end_point=(end_line, len(text.rsplit("\n", 1)[-1])),
    )


def ident(name: str, kind: str = "identifier", line: int = 0) -> FakeNode:
    return node(kind, text=name, line=line)


def kinds_and_names(entries: list[Any]) -> list[tuple[str, str]]:
    """(kind, name) pairs of outline entries, for compact assertions."""
    return [(entry.kind.value, entry.name) for entry in entries]
