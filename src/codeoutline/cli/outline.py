"""codeoutline outline command - print a file's declarations."""

import json
from pathlib import Path

import click

from codeoutline.core.logging import clear_operation_id, set_operation_id
from codeoutline.outline import format_outline, outline_file


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--max-lines",
    type=click.IntRange(min=1),
    default=None,
    help="Cap on rendered lines (default: limits.outline_max_lines)",
)
@click.pass_context
def outline_command(ctx: click.Context, path: Path, as_json: bool, max_lines: int | None) -> None:
    """Show the outline of PATH.

    Imports are collapsed into one line; classes, modules and components
    list their members underneath.
    """
    config = ctx.obj["config"]
    set_operation_id()
    try:
        result = outline_file(path, config=config)
    finally:
        clear_operation_id()

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error is not None:
            ctx.exit(1)
        return

    if result.error is not None:
        raise click.ClickException(str(result.error))

    if not result.file_type.is_code:
        click.echo(f"{path}: not a recognized source file ({result.file_type})")
        return

    if not result.entries:
        click.echo(f"{path}: no declarations")
        return

    click.echo(format_outline(result.entries, max_lines or config.limits.outline_max_lines))
