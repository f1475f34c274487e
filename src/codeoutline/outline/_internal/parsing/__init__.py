"""Tree-sitter parsing and the per-language pack registry."""

from codeoutline.outline._internal.parsing.packs import (
    PACKS,
    LanguagePack,
    get_pack,
    get_pack_for_ext,
)
from codeoutline.outline._internal.parsing.treesitter import (
    ParseResult,
    TreeSitterParser,
    get_parser,
)

__all__ = [
    "PACKS",
    "LanguagePack",
    "ParseResult",
    "TreeSitterParser",
    "get_pack",
    "get_pack_for_ext",
    "get_parser",
]
