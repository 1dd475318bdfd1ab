"""codescope resolve command - describe the scope enclosing a cursor."""

import json
from pathlib import Path

import click
import structlog

from codescope.config import load_config
from codescope.core.errors import ConfigError
from codescope.core.logging import configure_logging
from codescope.scope import collect_scope_context, render
from codescope.syntax import CursorPosition, CursorRange

log = structlog.get_logger()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", "-l", type=click.IntRange(min=1), required=True, help="1-based line")
@click.option("--column", "-c", type=click.IntRange(min=1), default=1, help="1-based column")
@click.option("--end-line", type=click.IntRange(min=1), help="Selection end line (1-based)")
@click.option("--end-column", type=click.IntRange(min=1), help="Selection end column (1-based)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: .codescope/config.yaml)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def resolve_command(
    ctx: click.Context,
    path: Path,
    line: int,
    column: int,
    end_line: int | None,
    end_column: int | None,
    config_path: Path | None,
    as_json: bool,
) -> None:
    """Describe the declaration enclosing a cursor in PATH.

    The cursor is --line/--column; add --end-line/--end-column for a
    selection. Coordinates are 1-based, as shown by editors.
    """
    try:
        config = load_config(Path.cwd(), config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    anchor = CursorPosition(line - 1, column - 1)
    head = CursorPosition(
        (end_line or line) - 1,
        (end_column if end_column is not None else column) - 1,
    )
    cursor_range = CursorRange.from_editor(anchor, head)

    descriptor = collect_scope_context(path, cursor_range, config=config.resolver)
    log.debug("cli.resolved", path=str(path), range=str(cursor_range), top=descriptor.is_top)

    if as_json:
        click.echo(json.dumps(descriptor.to_dict()))
    else:
        click.echo(render(descriptor))
