"""codescope CLI."""

import click

from codescope import __version__
from codescope.cli.resolve import resolve_command


@click.group()
@click.version_option(version=__version__, prog_name="codescope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """codescope - describe the declaration enclosing a cursor."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(resolve_command, name="resolve")


if __name__ == "__main__":
    cli()
