"""Unit tests for markup sub-extraction inside component declarations."""

from __future__ import annotations

from codeoutline.outline import Language, OutlineEntry, OutlineKind, Span, extract_outline
from codeoutline.outline._internal.extraction.markup import is_component
from tests.outline.fakes import ident, kinds_and_names, node


def _js_function(name: str, *body_children):
    body = node("statement_block", node("return_statement", *body_children))
    return node(
        "function_declaration",
        text=f"function {name}(props) {{\n  return ...\n}}",
        name=ident(name),
        body=body,
    )


def _opening(tag: str | None):
    if tag is None:
        return node("jsx_opening_element", text="<>")
    return node("jsx_opening_element", text=f"<{tag}>", name=ident(tag))


def _spread(expr: str):
    return node("jsx_expression", node("spread_element", ident(expr)), text=f"{{...{expr}}}")


class TestJsxComponents:
    """JSX in PascalCase functions becomes element/fragment/spread children."""

    def test_elements_fragments_and_spreads(self) -> None:
        # Given a component rendering <Layout><Layout.Header {...props} /><></></Layout>
        header = node(
            "jsx_self_closing_element",
            _spread("props"),
            text="<Layout.Header {...props} />",
            name=node("member_expression", text="Layout.Header"),
        )
        fragment = node(
            "jsx_element", _opening(None), node("jsx_closing_element", text="</>")
        )
        layout = node(
            "jsx_element",
            _opening("Layout"),
            header,
            fragment,
            node("jsx_closing_element", text="</Layout>"),
        )
        root = node("program", _js_function("Page", node("parenthesized_expression", layout)))

        # When
        entries = extract_outline(root, Language.JAVASCRIPT)

        # Then
        page = entries[0]
        assert kinds_and_names(page.children) == [("element", "Layout")]
        layout_entry = page.children[0]
        assert kinds_and_names(layout_entry.children) == [
            ("element", "Layout.Header"),
            ("fragment", ""),
        ]
        assert kinds_and_names(layout_entry.children[0].children) == [("spread", "...props")]

    def test_unresolved_tag_skips_only_that_subtree(self) -> None:
        """An element without a readable tag is dropped; siblings survive."""
        broken = node(
            "jsx_self_closing_element",
            node("jsx_self_closing_element", text="<Inner />", name=ident("Inner")),
            text="< />",
        )
        icon = node("jsx_self_closing_element", text="<Icon />", name=ident("Icon"))
        root = node("program", _js_function("Toolbar", broken, icon))

        entries = extract_outline(root, Language.JAVASCRIPT)

        assert kinds_and_names(entries[0].children) == [("element", "Icon")]

    def test_lowercase_function_is_not_a_component(self) -> None:
        el = node("jsx_self_closing_element", text="<div />", name=ident("div"))
        root = node("program", _js_function("render", el))

        entries = extract_outline(root, Language.JAVASCRIPT)

        assert entries[0].children == []

    def test_markup_disabled(self) -> None:
        el = node("jsx_self_closing_element", text="<div />", name=ident("div"))
        root = node("program", _js_function("Card", el))

        entries = extract_outline(root, Language.JAVASCRIPT, markup=False)

        assert entries[0].children == []

    def test_typescript_has_no_markup(self) -> None:
        """Plain .ts files never carry markup children."""
        el = node("jsx_self_closing_element", text="<div />", name=ident("div"))
        root = node("program", _js_function("Card", el))

        entries = extract_outline(root, Language.TYPESCRIPT)

        assert entries[0].children == []


def _rescript_let(name: str, body):
    binding = node(
        "let_binding",
        text=f"{name} = () => ...",
        pattern=ident(name, "value_identifier"),
        body=body,
    )
    return node("let_declaration", binding, text=f"let {name} = () => ...")


class TestReScriptComponents:
    """ReScript components are marked by the @react.component decorator."""

    def test_decorated_let_gets_markup(self) -> None:
        inner = node(
            "jsx_self_closing_element",
            node("nested_jsx_identifier", text="Foo.Bar"),
            text="<Foo.Bar />",
        )
        frag = node("jsx_fragment", inner, text="<> <Foo.Bar /> </>")
        div = node(
            "jsx_element",
            node("jsx_opening_element", node("jsx_identifier", text="div"), text="<div>"),
            frag,
            node("jsx_closing_element", text="</div>"),
        )
        root = node(
            "source_file",
            node("decorator", text="@react.component"),
            _rescript_let("make", node("function", div)),
        )

        entries = extract_outline(root, Language.RESCRIPT)

        assert kinds_and_names(entries) == [("function", "make")]
        make = entries[0]
        assert kinds_and_names(make.children) == [("element", "div")]
        assert kinds_and_names(make.children[0].children) == [("fragment", "")]
        assert kinds_and_names(make.children[0].children[0].children) == [
            ("element", "Foo.Bar")
        ]

    def test_undecorated_let_has_no_markup(self) -> None:
        div = node(
            "jsx_element",
            node("jsx_opening_element", node("jsx_identifier", text="div"), text="<div>"),
        )
        root = node("source_file", _rescript_let("helper", node("function", div)))

        entries = extract_outline(root, Language.RESCRIPT)

        assert entries[0].kind is OutlineKind.FUNCTION
        assert entries[0].children == []


class TestIsComponent:
    """Only callable entries can be components."""

    def test_non_callable_never_component(self) -> None:
        entry = OutlineEntry(OutlineKind.VARIABLE, "Theme", Span(1, 0, 1, 10))
        assert is_component(entry, node("lexical_declaration"), Language.TSX) is False

    def test_language_without_markup(self) -> None:
        entry = OutlineEntry(OutlineKind.FUNCTION, "Main", Span(1, 0, 1, 10))
        assert is_component(entry, node("function_definition"), Language.PYTHON) is False

    def test_pascal_case_function_in_tsx(self) -> None:
        entry = OutlineEntry(OutlineKind.FUNCTION, "Main", Span(1, 0, 1, 10))
        assert is_component(entry, node("function_declaration"), Language.TSX) is True
