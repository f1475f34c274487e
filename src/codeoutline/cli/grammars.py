"""codeoutline grammars command - list and install tree-sitter grammars."""

import click
from rich.console import Console
from rich.table import Table

from codeoutline.outline import Language
from codeoutline.outline._internal.grammars import (
    GRAMMAR_PACKAGES,
    get_missing_grammars,
    install_grammars,
    is_grammar_installed,
)


def _grammar_table() -> Table:
    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("language", style="cyan")
    table.add_column("package")
    table.add_column("status")
    for lang, (package, version, import_name) in GRAMMAR_PACKAGES.items():
        installed = is_grammar_installed(import_name)
        status = "[green]installed[/green]" if installed else "[yellow]missing[/yellow]"
        table.add_row(lang.value, f"{package}>={version}", status)
    return table


@click.command()
@click.option("--install", "do_install", is_flag=True, help="pip-install missing grammars")
def grammars_command(do_install: bool) -> None:
    """List grammar packages and whether they are importable."""
    console = Console()
    console.print(_grammar_table())

    missing = get_missing_grammars(list(Language))
    if not missing:
        return
    if not do_install:
        console.print(
            f"\n{len(missing)} grammar package(s) missing. "
            "Run [bold]codeoutline grammars --install[/bold] to install them."
        )
        return

    if not install_grammars(missing, status_fn=console.print):
        raise click.ClickException("Grammar installation failed")
    console.print("[green]Grammars installed[/green]")
