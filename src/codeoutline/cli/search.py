"""codeoutline search command - find where a symbol is defined."""

import json
from pathlib import Path

import click

from codeoutline.core.formatting import compress_path, pluralize
from codeoutline.core.logging import clear_operation_id, set_operation_id
from codeoutline.outline import format_matches, search_file


@click.command()
@click.argument("symbol")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def search_command(ctx: click.Context, symbol: str, paths: tuple[Path, ...], as_json: bool) -> None:
    """Find definitions of SYMBOL in PATHS.

    Matches are exact and case-sensitive. Exits with status 1 when nothing
    is found, like grep.
    """
    config = ctx.obj["config"]
    set_operation_id()
    try:
        results = [search_file(path, symbol, config=config) for path in paths]
    finally:
        clear_operation_id()

    total = sum(len(result.matches) for result in results)

    if as_json:
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for result in results:
            if result.error is not None:
                click.echo(f"{result.path}: {result.error}", err=True)
            elif result.matches:
                click.echo(format_matches(result.path or "", result.matches))
        files = sum(1 for result in results if result.matches)
        where = compress_path(str(paths[0])) if len(paths) == 1 else pluralize(len(paths), "file")
        click.echo(f"{pluralize(total, 'match', 'matches')} in {pluralize(files, 'file')} ({where})")

    if total == 0:
        ctx.exit(1)
