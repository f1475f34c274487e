"""codeoutline - tree-sitter outlines and symbol definition search."""

__version__ = "0.1.0"
