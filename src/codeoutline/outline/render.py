"""Text rendering of outlines and definition matches.

Outline format, one declaration per line::

    [1-]         imports: react, ./theme(2)
    [3-12]       fn Button
                 function Button({ label }: Props)  // Primary action
      [4-11]     <button>

Consecutive imports collapse into one ``imports:`` line grouped by source.
"""

from __future__ import annotations

from collections.abc import Sequence

from codeoutline.core.formatting import format_line_range, truncate
from codeoutline.outline.models import DefinitionMatch, OutlineEntry, OutlineKind

DEFAULT_MAX_LINES = 200
MAX_IMPORT_SOURCES = 5
MAX_DOC_LENGTH = 60

KIND_LABELS: dict[OutlineKind, str] = {
    OutlineKind.FUNCTION: "fn",
    OutlineKind.METHOD: "method",
    OutlineKind.CLASS: "class",
    OutlineKind.STRUCT: "struct",
    OutlineKind.INTERFACE: "interface",
    OutlineKind.TYPE_ALIAS: "type",
    OutlineKind.ENUM: "enum",
    OutlineKind.CONSTANT: "const",
    OutlineKind.VARIABLE: "let",
    OutlineKind.MODULE: "mod",
    OutlineKind.IMPORT: "import",
}


def format_outline(entries: Sequence[OutlineEntry], max_lines: int = DEFAULT_MAX_LINES) -> str:
    """Render entries as text, at most ``max_lines`` entry lines."""
    out: list[str] = []
    imports: list[OutlineEntry] = []

    for entry in entries:
        if len(out) >= max_lines:
            break
        if entry.kind is OutlineKind.IMPORT:
            imports.append(entry)
            continue
        if imports:
            out.append(format_imports(imports))
            imports = []

        stack: list[tuple[OutlineEntry, int]] = [(entry, 0)]
        while stack and len(out) < max_lines:
            current, indent = stack.pop()
            out.append(format_entry(current, indent))
            stack.extend((child, indent + 1) for child in reversed(current.children))

    if imports and len(out) < max_lines:
        out.append(format_imports(imports))

    return "\n".join(out)


def format_imports(imports: Sequence[OutlineEntry]) -> str:
    """Collapse imports into ``imports: src(count), ...`` grouped by source."""
    counts: dict[str, int] = {}
    for imp in imports:
        counts[imp.name] = counts.get(imp.name, 0) + 1

    parts = [
        f"{source}({count})" if count > 1 else source
        for source, count in list(counts.items())[:MAX_IMPORT_SOURCES]
    ]
    suffix = f", ... ({len(imports)} total)" if len(counts) > MAX_IMPORT_SOURCES else ""
    start = imports[0].start_line
    return f"{f'[{start}-]':<12} imports: {', '.join(parts)}{suffix}"


def format_entry(entry: OutlineEntry, indent: int = 0) -> str:
    """One entry line, plus a continuation line for its signature."""
    prefix = "  " * indent
    span = format_line_range(entry.start_line, entry.end_line)

    if entry.kind.is_markup:
        return f"{prefix}{span:<12} {_markup_label(entry)}"

    label = KIND_LABELS[entry.kind]
    line = f"{prefix}{span:<12} {label} {entry.name}".rstrip()
    if entry.signature:
        line += f"\n{prefix}{'':<12} {entry.signature}"
    if entry.doc:
        line += f"  // {truncate(entry.doc, MAX_DOC_LENGTH)}"
    return line


def _markup_label(entry: OutlineEntry) -> str:
    if entry.kind is OutlineKind.FRAGMENT:
        return "<>...</>"
    if entry.kind is OutlineKind.SPREAD:
        return f"{{{entry.name}}}"
    return f"<{entry.name}>"


def format_matches(path: str, matches: Sequence[DefinitionMatch]) -> str:
    """``path:line  kind name`` per match."""
    lines = []
    for match in matches:
        label = KIND_LABELS.get(match.kind, match.kind.value)
        lines.append(f"{path}:{match.span.start_line}  {label} {match.name}  ({match.node_kind})")
    return "\n".join(lines)
