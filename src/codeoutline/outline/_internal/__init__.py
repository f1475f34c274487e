"""Internal implementation: grammars, detection, parsing and extraction."""
