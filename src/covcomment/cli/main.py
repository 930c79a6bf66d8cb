"""covcomment CLI."""

import click

from covcomment import __version__
from covcomment.cli.render import render_command
from covcomment.cli.run import run_command
from covcomment.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="covcomment")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Coverage summary tables and pull request comments."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(run_command, name="run")
cli.add_command(render_command, name="render")


if __name__ == "__main__":
    cli()
