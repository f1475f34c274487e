"""On-demand tree-sitter grammar installation.

Grammar wheels are separate PyPI distributions. The common ones are declared
dependencies; the rest (ReScript) are installed into the running interpreter
when asked for.
"""

from __future__ import annotations

import importlib
import subprocess
import sys
from collections.abc import Callable, Iterable
from importlib.util import find_spec

from codeoutline.core.logging import get_logger
from codeoutline.outline._internal.parsing.packs import all_packs
from codeoutline.outline.models import Language

log = get_logger("outline.grammars")

# Language -> (PyPI package name, min version, import name), derived from packs
GRAMMAR_PACKAGES: dict[Language, tuple[str, str, str]] = {
    pack.language: (pack.grammar_package, pack.min_version, pack.grammar_module)
    for pack in all_packs()
}


def is_grammar_installed(import_name: str) -> bool:
    """Check if a grammar package is installed."""
    return find_spec(import_name) is not None


def get_missing_grammars(languages: Iterable[Language]) -> list[tuple[str, str]]:
    """Get (package, version) tuples needed but not installed, without duplicates."""
    needed: list[tuple[str, str]] = []
    for lang in languages:
        pkg, version, import_name = GRAMMAR_PACKAGES[lang]
        if not is_grammar_installed(import_name) and (pkg, version) not in needed:
            needed.append((pkg, version))
    return needed


def install_grammars(
    packages: list[tuple[str, str]],
    status_fn: Callable[[str], None] | None = None,
) -> bool:
    """Install grammar packages via pip.

    Uses the current Python interpreter so installed grammars are importable
    by this process.

    Args:
        packages: List of (package_name, min_version) tuples
        status_fn: Optional callback for progress messages

    Returns True if all installed successfully.
    """
    if not packages:
        return True

    specs = [f"{pkg}>={ver}" for pkg, ver in packages]
    if status_fn:
        status_fn(f"Installing: {', '.join(pkg for pkg, _ in packages)}")

    cmd = [sys.executable, "-m", "pip", "install", "--quiet", *specs]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=300)
    except subprocess.TimeoutExpired:
        log.warning("grammar_install_timeout", packages=specs)
        if status_fn:
            status_fn("Grammar installation timed out")
        return False

    if result.returncode != 0:
        log.warning("grammar_install_failed", packages=specs, stderr=result.stderr.strip())
        if status_fn:
            status_fn(f"Failed to install grammars: {result.stderr.strip()}")
        return False

    importlib.invalidate_caches()
    log.info("grammars_installed", packages=specs)
    return True
