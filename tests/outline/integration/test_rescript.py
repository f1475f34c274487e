"""ReScript outlines, JSX components and the implicit file module.

The ReScript grammar is installed on demand, so these tests skip without it.
"""

from __future__ import annotations

import pytest

from codeoutline.config import CodeOutlineConfig
from codeoutline.outline import Language, OutlineKind, outline_source, search_source
from tests.outline.fakes import kinds_and_names

pytest.importorskip("tree_sitter_rescript")

SOURCE = """\
let name = "hello"

let add = (x, y) => x + y

type color = Red | Green | Blue

module Utils = {
  let helper = () => "help"
}

external alert: string => unit = "alert"

open Belt

exception NotFound(string)
"""

COMPONENT = """\
@react.component
let make = (~name: string) => {
  <div className="container">
    <h1> {React.string(name)} </h1>
    <Counter count={1} />
    <> <span> {React.string("fragment")} </span> </>
    <Header.Nav items={["a", "b"]} />
  </div>
}
"""


class TestReScriptOutline:
    def test_declarations(self, outline_of) -> None:
        pairs = kinds_and_names(outline_of(SOURCE, Language.RESCRIPT))

        assert ("variable", "name") in pairs
        assert ("function", "add") in pairs
        assert ("type", "color") in pairs
        assert ("module", "Utils") in pairs
        assert ("function", "alert") in pairs
        assert ("import", "Belt") in pairs
        assert ("enum", "NotFound") in pairs

    def test_empty_file(self, outline_of) -> None:
        assert outline_of("", Language.RESCRIPT) == []

    def test_interface_file(self, outline_of) -> None:
        source = 'type color = Red | Green | Blue\nexternal alert: string => unit = "alert"\n'

        pairs = kinds_and_names(outline_of(source, Language.RESCRIPT))

        assert ("type", "color") in pairs

    def test_component_markup(self, outline_of) -> None:
        entries = outline_of(COMPONENT, Language.RESCRIPT)

        assert kinds_and_names(entries) == [("function", "make")]
        div = entries[0].children[0]
        assert (div.kind, div.name) == (OutlineKind.ELEMENT, "div")
        assert kinds_and_names(div.children) == [
            ("element", "h1"),
            ("element", "Counter"),
            ("fragment", ""),
            ("element", "Header.Nav"),
        ]

    def test_malformed_jsx_does_not_raise(self, outline_of) -> None:
        source = "@react.component\nlet make = () => {\n  <div>\n    <span>\n  </div>\n}\n"

        outline_of(source, Language.RESCRIPT)

    def test_non_component_has_no_markup(self, outline_of) -> None:
        source = 'let render = () => {\n  <div> {React.string("x")} </div>\n}\n'

        entries = outline_of(source, Language.RESCRIPT)

        assert all(entry.children == [] for entry in entries)


class TestImplicitFileModule:
    """Every ReScript file is a module named after its stem."""

    def test_outline_wrapped_in_file_module(self) -> None:
        result = outline_source(SOURCE.encode(), Language.RESCRIPT, path="src/Greeting.res")

        assert kinds_and_names(result.entries) == [("module", "Greeting")]
        assert ("module", "Utils") in kinds_and_names(result.entries[0].children)

    def test_empty_file_not_wrapped(self) -> None:
        result = outline_source(b"", Language.RESCRIPT, path="Empty.res")

        assert result.entries == []

    def test_search_matches_file_module(self) -> None:
        result = search_source(SOURCE.encode(), Language.RESCRIPT, "Greeting", path="Greeting.res")

        assert [m.kind for m in result.matches] == [OutlineKind.MODULE]
        assert result.matches[0].span.start_line == 1

    def test_file_module_can_be_disabled(self) -> None:
        config = CodeOutlineConfig(outline={"implicit_file_module": False})

        result = outline_source(SOURCE.encode(), Language.RESCRIPT, path="Greeting.res", config=config)

        assert ("module", "Utils") in kinds_and_names(result.entries)
        assert ("module", "Greeting") not in kinds_and_names(result.entries)
