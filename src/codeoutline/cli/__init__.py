"""codeoutline command line interface."""
