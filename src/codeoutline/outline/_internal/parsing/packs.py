"""LanguagePack registry: single source of truth for per-language behavior.

Every Language has exactly ONE LanguagePack that consolidates:
- Grammar install metadata (package, module, version, loader function)
- File extension detection
- The node-kind mapping (grammar node kind -> KindRule)
- Transparent wrapper kinds (promoted to their parent's level)
- Definition kinds (eligible as symbol search hits)
- Optional markup config for component declarations

Adding a language means adding a Language member and a pack here; nothing
else changes. Completeness is checked when this module is imported.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from codeoutline.core.errors import InternalError
from codeoutline.outline.models import Language, OutlineKind

# =========================================================================
# Dataclasses
# =========================================================================


class NameStrategy(str, Enum):
    """How to read a declaration's name from its node."""

    FIELD = "field"  # node's own named field
    BINDING = "binding"  # inner binding child (by field or kind), then its field
    CHILD_TEXT = "child_text"  # text of the first child of a listed kind
    DECLARATOR = "declarator"  # follow C-style declarator fields to the identifier
    IMPORT_SOURCE = "import_source"  # module name parsed from the statement text


@dataclass(frozen=True)
class NameRule:
    strategy: NameStrategy
    field: str = "name"
    binding: str | None = None
    child_kinds: frozenset[str] = frozenset()


def by_field(name: str = "name") -> NameRule:
    return NameRule(NameStrategy.FIELD, field=name)


def by_binding(binding: str, name: str = "name") -> NameRule:
    return NameRule(NameStrategy.BINDING, field=name, binding=binding)


def by_child(*kinds: str) -> NameRule:
    return NameRule(NameStrategy.CHILD_TEXT, child_kinds=frozenset(kinds))


BY_DECLARATOR = NameRule(NameStrategy.DECLARATOR, field="declarator")
BY_IMPORT_SOURCE = NameRule(NameStrategy.IMPORT_SOURCE)


@dataclass(frozen=True)
class Classifier:
    """Picks a kind from the node kind of a bound expression.

    ``field`` is read on the declaration itself, or on its inner ``binding``
    child when one is given. Unlisted expression kinds keep the rule's kind.
    """

    field: str
    kinds: Mapping[str, OutlineKind]
    binding: str | None = None


@dataclass(frozen=True)
class KindRule:
    """Maps one grammar node kind to an outline entry."""

    kind: OutlineKind
    names: tuple[NameRule, ...] = (NameRule(NameStrategy.FIELD),)
    classify: Classifier | None = None
    members: bool = False  # list nested declarations as children
    methods: bool = False  # member functions become METHOD
    requires_field: str | None = None  # skip node when this field is absent
    name_template: str = "{}"
    # One entry per child of these kinds (`import os, sys`)
    item_kinds: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ComponentRule:
    """Recognizes declarations that define UI components.

    A declaration matches when a preceding (or owned) decorator contains
    ``marker``, or when the entry name matches ``name_pattern``. Only
    callable entries are considered.
    """

    decorator_kinds: frozenset[str] = frozenset()
    marker: str | None = None
    name_pattern: re.Pattern[str] | None = None


@dataclass(frozen=True)
class MarkupConfig:
    """Node kinds of embedded markup (JSX) in one grammar."""

    component: ComponentRule
    element_kinds: frozenset[str] = frozenset({"jsx_element"})
    self_closing_kinds: frozenset[str] = frozenset({"jsx_self_closing_element"})
    fragment_kinds: frozenset[str] = frozenset()
    opening_kinds: frozenset[str] = frozenset({"jsx_opening_element"})
    tag_field: str | None = "name"
    tag_kinds: frozenset[str] = frozenset()
    spread_container_kinds: frozenset[str] = frozenset({"jsx_expression"})
    spread_kinds: frozenset[str] = frozenset({"spread_element"})
    # Grammars that parse `<>...</>` as an element without a tag name
    nameless_is_fragment: bool = False


@dataclass(frozen=True)
class LanguagePack:
    """Complete tree-sitter configuration for a single language."""

    # -- Identity --
    language: Language

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-python")
    grammar_module: str  # Python import ("tree_sitter_python")
    min_version: str
    # Non-standard function name (e.g. "language_typescript", "language_tsx")
    language_func: str | None = None

    # -- File detection (extensions without the leading dot, case-sensitive) --
    extensions: frozenset[str] = field(default_factory=frozenset)

    # -- Extraction tables --
    rules: Mapping[str, KindRule] = field(default_factory=dict)
    wrapper_kinds: frozenset[str] = frozenset()
    definition_kinds: frozenset[str] = frozenset()

    # -- Optional passes --
    markup: MarkupConfig | None = None
    # Every file is a module named after its stem
    implicit_file_module: bool = False

    def __post_init__(self) -> None:
        # Packs may share a rule table; each holds its own read-only copy
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @property
    def name(self) -> str:
        return self.language.value


_F = OutlineKind

_FUNCTION_LITERALS: Mapping[str, OutlineKind] = MappingProxyType(
    {
        "arrow_function": _F.FUNCTION,
        "function_expression": _F.FUNCTION,
        "function": _F.FUNCTION,
        "generator_function": _F.FUNCTION,
    }
)

# =========================================================================
# PYTHON
# =========================================================================

PYTHON_PACK = LanguagePack(
    language=Language.PYTHON,
    grammar_package="tree-sitter-python",
    grammar_module="tree_sitter_python",
    min_version="0.23.0",
    extensions=frozenset({"py", "pyi"}),
    rules={
        "function_definition": KindRule(_F.FUNCTION),
        "class_definition": KindRule(_F.CLASS, members=True, methods=True),
        "assignment": KindRule(
            _F.VARIABLE,
            names=(by_field("left"),),
            classify=Classifier("right", {"lambda": _F.FUNCTION}),
        ),
        "type_alias_statement": KindRule(_F.TYPE_ALIAS, names=(by_field("left"),)),
        "import_statement": KindRule(
            _F.IMPORT,
            names=(by_child("dotted_name"), by_binding("aliased_import")),
            item_kinds=frozenset({"dotted_name", "aliased_import"}),
        ),
        "import_from_statement": KindRule(_F.IMPORT, names=(by_field("module_name"),)),
        "future_import_statement": KindRule(_F.IMPORT, names=(BY_IMPORT_SOURCE,)),
    },
    wrapper_kinds=frozenset({"decorated_definition", "expression_statement"}),
    definition_kinds=frozenset(
        {"function_definition", "class_definition", "assignment", "type_alias_statement"}
    ),
)

# =========================================================================
# JAVASCRIPT / TYPESCRIPT / TSX
# =========================================================================

_JS_RULES: Mapping[str, KindRule] = MappingProxyType(
    {
        "function_declaration": KindRule(_F.FUNCTION),
        "generator_function_declaration": KindRule(_F.FUNCTION),
        "class_declaration": KindRule(_F.CLASS, members=True, methods=True),
        "method_definition": KindRule(_F.METHOD),
        "field_definition": KindRule(_F.VARIABLE, names=(by_field("property"),)),
        "lexical_declaration": KindRule(
            _F.VARIABLE,
            names=(by_binding("variable_declarator"),),
            classify=Classifier("value", _FUNCTION_LITERALS, binding="variable_declarator"),
        ),
        "variable_declaration": KindRule(
            _F.VARIABLE,
            names=(by_binding("variable_declarator"),),
            classify=Classifier("value", _FUNCTION_LITERALS, binding="variable_declarator"),
        ),
        # Only reached by search; declarations above cover the outline
        "variable_declarator": KindRule(
            _F.VARIABLE,
            classify=Classifier("value", _FUNCTION_LITERALS),
        ),
        "import_statement": KindRule(_F.IMPORT, names=(by_field("source"), BY_IMPORT_SOURCE)),
    }
)

_JS_DEFINITIONS = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "class_declaration",
        "method_definition",
        "field_definition",
        "variable_declarator",
    }
)

_TS_RULES: Mapping[str, KindRule] = MappingProxyType(
    {
        **_JS_RULES,
        "abstract_class_declaration": KindRule(_F.CLASS, members=True, methods=True),
        "interface_declaration": KindRule(_F.INTERFACE),
        "type_alias_declaration": KindRule(_F.TYPE_ALIAS),
        "enum_declaration": KindRule(_F.ENUM),
        "internal_module": KindRule(_F.MODULE, members=True),
        "module": KindRule(_F.MODULE),
        "function_signature": KindRule(_F.FUNCTION),
        "method_signature": KindRule(_F.METHOD),
        "abstract_method_signature": KindRule(_F.METHOD),
        "public_field_definition": KindRule(_F.VARIABLE),
    }
)

_TS_DEFINITIONS = _JS_DEFINITIONS | frozenset(
    {
        "abstract_class_declaration",
        "interface_declaration",
        "type_alias_declaration",
        "enum_declaration",
        "internal_module",
        "function_signature",
        "method_signature",
        "abstract_method_signature",
        "public_field_definition",
    }
)

_JS_WRAPPERS = frozenset({"export_statement"})
_TS_WRAPPERS = frozenset({"export_statement", "expression_statement", "ambient_declaration"})

# React convention: components are functions named in PascalCase
_JSX_MARKUP = MarkupConfig(
    component=ComponentRule(name_pattern=re.compile(r"^[A-Z]")),
    nameless_is_fragment=True,
)

JAVASCRIPT_PACK = LanguagePack(
    language=Language.JAVASCRIPT,
    grammar_package="tree-sitter-javascript",
    grammar_module="tree_sitter_javascript",
    min_version="0.23.0",
    extensions=frozenset({"js", "jsx", "mjs", "cjs"}),
    rules=_JS_RULES,
    wrapper_kinds=_JS_WRAPPERS,
    definition_kinds=_JS_DEFINITIONS,
    markup=_JSX_MARKUP,
)

TYPESCRIPT_PACK = LanguagePack(
    language=Language.TYPESCRIPT,
    grammar_package="tree-sitter-typescript",
    grammar_module="tree_sitter_typescript",
    min_version="0.23.0",
    language_func="language_typescript",
    extensions=frozenset({"ts", "mts", "cts"}),
    rules=_TS_RULES,
    wrapper_kinds=_TS_WRAPPERS,
    definition_kinds=_TS_DEFINITIONS,
)

TSX_PACK = LanguagePack(
    language=Language.TSX,
    grammar_package="tree-sitter-typescript",
    grammar_module="tree_sitter_typescript",
    min_version="0.23.0",
    language_func="language_tsx",
    extensions=frozenset({"tsx"}),
    rules=_TS_RULES,
    wrapper_kinds=_TS_WRAPPERS,
    definition_kinds=_TS_DEFINITIONS,
    markup=_JSX_MARKUP,
)

# =========================================================================
# GO
# =========================================================================

GO_PACK = LanguagePack(
    language=Language.GO,
    grammar_package="tree-sitter-go",
    grammar_module="tree_sitter_go",
    min_version="0.23.0",
    extensions=frozenset({"go"}),
    rules={
        "package_clause": KindRule(_F.MODULE, names=(by_child("package_identifier"),)),
        "function_declaration": KindRule(_F.FUNCTION),
        "method_declaration": KindRule(_F.METHOD),
        "type_spec": KindRule(
            _F.TYPE_ALIAS,
            classify=Classifier(
                "type",
                {"struct_type": _F.STRUCT, "interface_type": _F.INTERFACE},
            ),
        ),
        "type_alias": KindRule(_F.TYPE_ALIAS),
        "var_spec": KindRule(_F.VARIABLE),
        "const_spec": KindRule(_F.CONSTANT),
        "import_spec": KindRule(_F.IMPORT, names=(by_field("path"),)),
    },
    wrapper_kinds=frozenset(
        {
            "type_declaration",
            "var_declaration",
            "var_spec_list",
            "const_declaration",
            "import_declaration",
            "import_spec_list",
        }
    ),
    definition_kinds=frozenset(
        {
            "function_declaration",
            "method_declaration",
            "type_spec",
            "type_alias",
            "var_spec",
            "const_spec",
        }
    ),
)

# =========================================================================
# RUST
# =========================================================================

RUST_PACK = LanguagePack(
    language=Language.RUST,
    grammar_package="tree-sitter-rust",
    grammar_module="tree_sitter_rust",
    min_version="0.23.0",
    extensions=frozenset({"rs"}),
    rules={
        "function_item": KindRule(_F.FUNCTION),
        "function_signature_item": KindRule(_F.FUNCTION),
        "struct_item": KindRule(_F.STRUCT),
        "union_item": KindRule(_F.STRUCT),
        "enum_item": KindRule(_F.ENUM),
        "trait_item": KindRule(_F.INTERFACE, members=True, methods=True),
        "impl_item": KindRule(
            _F.MODULE,
            names=(by_field("type"),),
            members=True,
            methods=True,
            name_template="impl {}",
        ),
        "type_item": KindRule(_F.TYPE_ALIAS),
        "const_item": KindRule(_F.CONSTANT),
        "static_item": KindRule(_F.CONSTANT),
        "mod_item": KindRule(_F.MODULE, members=True),
        "macro_definition": KindRule(_F.FUNCTION),
        "use_declaration": KindRule(_F.IMPORT, names=(by_field("argument"),)),
        "extern_crate_declaration": KindRule(_F.IMPORT),
    },
    wrapper_kinds=frozenset({"foreign_mod_item", "declaration_list"}),
    definition_kinds=frozenset(
        {
            "function_item",
            "function_signature_item",
            "struct_item",
            "union_item",
            "enum_item",
            "trait_item",
            "type_item",
            "const_item",
            "static_item",
            "mod_item",
            "macro_definition",
        }
    ),
)

# =========================================================================
# JAVA
# =========================================================================

JAVA_PACK = LanguagePack(
    language=Language.JAVA,
    grammar_package="tree-sitter-java",
    grammar_module="tree_sitter_java",
    min_version="0.23.0",
    extensions=frozenset({"java"}),
    rules={
        "package_declaration": KindRule(
            _F.MODULE, names=(by_child("scoped_identifier", "identifier"),)
        ),
        "import_declaration": KindRule(
            _F.IMPORT, names=(by_child("scoped_identifier", "identifier"),)
        ),
        "class_declaration": KindRule(_F.CLASS, members=True, methods=True),
        "record_declaration": KindRule(_F.CLASS, members=True, methods=True),
        "interface_declaration": KindRule(_F.INTERFACE, members=True, methods=True),
        "annotation_type_declaration": KindRule(_F.INTERFACE),
        "enum_declaration": KindRule(_F.ENUM, members=True, methods=True),
        "method_declaration": KindRule(_F.METHOD),
        "constructor_declaration": KindRule(_F.METHOD),
        "field_declaration": KindRule(_F.VARIABLE, names=(by_binding("declarator"),)),
        "constant_declaration": KindRule(_F.CONSTANT, names=(by_binding("declarator"),)),
        # Only reached by search
        "variable_declarator": KindRule(_F.VARIABLE),
    },
    wrapper_kinds=frozenset({"enum_body_declarations"}),
    definition_kinds=frozenset(
        {
            "class_declaration",
            "record_declaration",
            "interface_declaration",
            "annotation_type_declaration",
            "enum_declaration",
            "method_declaration",
            "constructor_declaration",
            "variable_declarator",
        }
    ),
)

# =========================================================================
# C / C++
# =========================================================================

_C_RULES: Mapping[str, KindRule] = MappingProxyType(
    {
        "function_definition": KindRule(_F.FUNCTION, names=(BY_DECLARATOR,)),
        "struct_specifier": KindRule(_F.STRUCT, requires_field="body"),
        "union_specifier": KindRule(_F.STRUCT, requires_field="body"),
        "enum_specifier": KindRule(_F.ENUM, requires_field="body"),
        "type_definition": KindRule(_F.TYPE_ALIAS, names=(BY_DECLARATOR,)),
        "declaration": KindRule(
            _F.VARIABLE,
            names=(BY_DECLARATOR,),
            classify=Classifier("declarator", {"function_declarator": _F.FUNCTION}),
        ),
        "preproc_def": KindRule(_F.CONSTANT),
        "preproc_function_def": KindRule(_F.FUNCTION),
        "preproc_include": KindRule(_F.IMPORT, names=(by_field("path"),)),
    }
)

_C_WRAPPERS = frozenset(
    {
        "preproc_if",
        "preproc_ifdef",
        "preproc_else",
        "preproc_elif",
        "preproc_elifdef",
        "linkage_specification",
        "declaration_list",
    }
)

_C_DEFINITIONS = frozenset(
    {
        "function_definition",
        "struct_specifier",
        "union_specifier",
        "enum_specifier",
        "type_definition",
        "declaration",
        "preproc_def",
        "preproc_function_def",
    }
)

C_PACK = LanguagePack(
    language=Language.C,
    grammar_package="tree-sitter-c",
    grammar_module="tree_sitter_c",
    min_version="0.23.0",
    extensions=frozenset({"c", "h"}),
    rules=_C_RULES,
    wrapper_kinds=_C_WRAPPERS,
    definition_kinds=_C_DEFINITIONS,
)

CPP_PACK = LanguagePack(
    language=Language.CPP,
    grammar_package="tree-sitter-cpp",
    grammar_module="tree_sitter_cpp",
    min_version="0.23.0",
    extensions=frozenset({"cpp", "cc", "cxx", "hpp", "hh", "hxx"}),
    rules={
        **_C_RULES,
        "struct_specifier": KindRule(
            _F.STRUCT, requires_field="body", members=True, methods=True
        ),
        "class_specifier": KindRule(_F.CLASS, requires_field="body", members=True, methods=True),
        "namespace_definition": KindRule(_F.MODULE, members=True),
        "field_declaration": KindRule(
            _F.VARIABLE,
            names=(BY_DECLARATOR,),
            classify=Classifier("declarator", {"function_declarator": _F.METHOD}),
        ),
        "alias_declaration": KindRule(_F.TYPE_ALIAS),
        "using_declaration": KindRule(_F.IMPORT, names=(BY_IMPORT_SOURCE,)),
    },
    wrapper_kinds=_C_WRAPPERS | frozenset({"template_declaration"}),
    definition_kinds=_C_DEFINITIONS
    | frozenset({"class_specifier", "namespace_definition", "field_declaration", "alias_declaration"}),
)

# =========================================================================
# RUBY
# =========================================================================

RUBY_PACK = LanguagePack(
    language=Language.RUBY,
    grammar_package="tree-sitter-ruby",
    grammar_module="tree_sitter_ruby",
    min_version="0.23.0",
    extensions=frozenset({"rb", "rake", "gemspec"}),
    rules={
        "method": KindRule(_F.FUNCTION),
        "singleton_method": KindRule(_F.FUNCTION),
        "class": KindRule(_F.CLASS, members=True, methods=True),
        "module": KindRule(_F.MODULE, members=True, methods=True),
        "assignment": KindRule(
            _F.VARIABLE,
            names=(by_field("left"),),
            classify=Classifier("left", {"constant": _F.CONSTANT}),
        ),
    },
    definition_kinds=frozenset({"method", "singleton_method", "class", "module", "assignment"}),
)

# =========================================================================
# HASKELL
# =========================================================================

_HASKELL_LAMBDAS: Mapping[str, OutlineKind] = MappingProxyType(
    {"lambda": _F.FUNCTION, "lambda_case": _F.FUNCTION, "lambda_cases": _F.FUNCTION}
)

HASKELL_PACK = LanguagePack(
    language=Language.HASKELL,
    grammar_package="tree-sitter-haskell",
    grammar_module="tree_sitter_haskell",
    min_version="0.23.0",
    extensions=frozenset({"hs"}),
    rules={
        "function": KindRule(_F.FUNCTION),
        "bind": KindRule(
            _F.VARIABLE,
            classify=Classifier("expression", _HASKELL_LAMBDAS, binding="match"),
        ),
        "signature": KindRule(_F.FUNCTION),
        "data_type": KindRule(_F.ENUM),
        "newtype": KindRule(_F.STRUCT),
        # Grammar releases before 0.24 spell it "synomym"
        "type_synomym": KindRule(_F.TYPE_ALIAS),
        "type_synonym": KindRule(_F.TYPE_ALIAS),
        "class": KindRule(_F.INTERFACE),
        "instance": KindRule(_F.CLASS),
        "foreign_import": KindRule(_F.IMPORT, names=(by_binding("signature"), BY_IMPORT_SOURCE)),
        "import": KindRule(_F.IMPORT, names=(by_field("module"), BY_IMPORT_SOURCE)),
    },
    wrapper_kinds=frozenset({"declarations", "imports"}),
    definition_kinds=frozenset(
        {
            "function",
            "bind",
            "signature",
            "data_type",
            "newtype",
            "type_synomym",
            "type_synonym",
            "class",
            "instance",
        }
    ),
)

# =========================================================================
# RESCRIPT
# =========================================================================

RESCRIPT_PACK = LanguagePack(
    language=Language.RESCRIPT,
    grammar_package="tree-sitter-rescript",
    grammar_module="tree_sitter_rescript",
    min_version="0.1.0",
    extensions=frozenset({"res", "resi"}),
    rules={
        "let_declaration": KindRule(
            _F.VARIABLE,
            names=(by_binding("let_binding", "pattern"), by_binding("let_binding")),
            classify=Classifier(
                "body",
                {"function": _F.FUNCTION, "arrow_function": _F.FUNCTION},
                binding="let_binding",
            ),
        ),
        "type_declaration": KindRule(_F.TYPE_ALIAS, names=(by_binding("type_binding"),)),
        "module_declaration": KindRule(_F.MODULE, names=(by_binding("module_binding"),)),
        "external_declaration": KindRule(_F.FUNCTION, names=(by_child("value_identifier"),)),
        "exception_declaration": KindRule(_F.ENUM, names=(by_child("variant_identifier"),)),
        "open_statement": KindRule(
            _F.IMPORT, names=(by_child("module_identifier"), BY_IMPORT_SOURCE)
        ),
    },
    definition_kinds=frozenset(
        {
            "let_declaration",
            "type_declaration",
            "module_declaration",
            "external_declaration",
            "exception_declaration",
        }
    ),
    markup=MarkupConfig(
        component=ComponentRule(
            decorator_kinds=frozenset({"decorator"}),
            marker="@react.component",
        ),
        fragment_kinds=frozenset({"jsx_fragment"}),
        tag_field=None,
        tag_kinds=frozenset({"jsx_identifier", "nested_jsx_identifier"}),
    ),
    implicit_file_module=True,
)


# =========================================================================
# Canonical registries
# =========================================================================

_ALL_PACKS: tuple[LanguagePack, ...] = (
    PYTHON_PACK,
    JAVASCRIPT_PACK,
    TYPESCRIPT_PACK,
    TSX_PACK,
    GO_PACK,
    RUST_PACK,
    JAVA_PACK,
    C_PACK,
    CPP_PACK,
    RUBY_PACK,
    HASKELL_PACK,
    RESCRIPT_PACK,
)


def _build_registry(packs: tuple[LanguagePack, ...]) -> dict[Language, LanguagePack]:
    """Index packs by language, rejecting an incomplete or inconsistent set."""
    registry: dict[Language, LanguagePack] = {}
    for pack in packs:
        if pack.language in registry:
            raise InternalError.registry_defect(
                f"duplicate pack for {pack.name}", language=pack.name
            )
        stray = pack.definition_kinds - pack.rules.keys()
        if stray:
            raise InternalError.registry_defect(
                f"definition kinds without a rule in {pack.name}: {sorted(stray)}",
                language=pack.name,
            )
        shadowed = pack.wrapper_kinds & pack.rules.keys()
        if shadowed:
            raise InternalError.registry_defect(
                f"kinds both mapped and transparent in {pack.name}: {sorted(shadowed)}",
                language=pack.name,
            )
        registry[pack.language] = pack

    missing = [lang.value for lang in Language if lang not in registry]
    if missing:
        raise InternalError.registry_defect(f"no pack for {missing}", languages=missing)
    return registry


def _build_ext_map(packs: tuple[LanguagePack, ...]) -> dict[str, LanguagePack]:
    ext_map: dict[str, LanguagePack] = {}
    for pack in packs:
        for ext in pack.extensions:
            if ext in ext_map:
                raise InternalError.registry_defect(
                    f"extension .{ext} claimed by {ext_map[ext].name} and {pack.name}",
                    extension=ext,
                )
            ext_map[ext] = pack
    return ext_map


# Language -> Pack
PACKS: Mapping[Language, LanguagePack] = MappingProxyType(_build_registry(_ALL_PACKS))

# Extension -> Pack
_EXT_TO_PACK: Mapping[str, LanguagePack] = MappingProxyType(_build_ext_map(_ALL_PACKS))


# =========================================================================
# Public API
# =========================================================================


def get_pack(language: Language) -> LanguagePack:
    """Get the LanguagePack for a language. Total over Language."""
    return PACKS[language]


def get_pack_for_ext(ext: str) -> LanguagePack | None:
    """Get a LanguagePack for a file extension (without leading dot, exact case)."""
    return _EXT_TO_PACK.get(ext)


def all_packs() -> tuple[LanguagePack, ...]:
    return _ALL_PACKS
