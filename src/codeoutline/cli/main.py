"""codeoutline CLI - codeoutline command."""

import click

from codeoutline import __version__
from codeoutline.cli.grammars import grammars_command
from codeoutline.cli.outline import outline_command
from codeoutline.cli.search import search_command
from codeoutline.config import load_config
from codeoutline.core.errors import ConfigError
from codeoutline.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="codeoutline")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """codeoutline - structural outlines and definition search for source files."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


cli.add_command(outline_command, name="outline")
cli.add_command(search_command, name="search")
cli.add_command(grammars_command, name="grammars")


if __name__ == "__main__":
    cli()
