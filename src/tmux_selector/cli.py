#!/usr/bin/env python3
"""Main CLI entry point for tmux-selector."""
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from .config import get_config
from .errors import CancelledError, FetchError, NoCandidateError, NoPanesError, SelectorError
from .output import find_pane, format_pane
from .recency import resolve_best
from .tmux import current_pane_id, in_tmux, list_panes
from .tui import select_pane

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None):
    """Configure logging for the application.

    Log records go to the configured file, or to stderr alongside the UI.
    """
    config = get_config()
    log_level = (level or config.logging.level).upper()

    if config.logging.file:
        log_path = Path(config.logging.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
        force=True
    )


def choose_pane_id(panes, auto: bool) -> str:
    """Pick a pane id automatically or interactively.

    Raises:
        NoCandidateError: Auto mode found no pane besides the current one
        CancelledError: The user cancelled the interactive selection
    """
    if auto:
        index = resolve_best(panes, current_pane_id())
        if index is None:
            raise NoCandidateError()
        return panes[index].full_id

    pane_id = select_pane(list(panes))
    if pane_id is None:
        raise CancelledError()
    return pane_id


@click.command()
@click.option('-f', '--format', 'fmt', default='plain', show_default=True,
              help='Output format: json or plain')
@click.option('-a', '--auto', is_flag=True, help='Auto-select the most recently used pane')
@click.option('--log-level', default=None, type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Set logging level')
@click.version_option(package_name='tmux-selector')
def cli(fmt, auto, log_level):
    """Interactively pick a tmux pane and print its target id."""
    try:
        get_config()
    except ValidationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(log_level)

    if not in_tmux():
        click.echo("Error: Not running in tmux", err=True)
        sys.exit(1)

    try:
        panes = list_panes()
        if not panes:
            raise NoPanesError()

        pane_id = choose_pane_id(panes, auto)
    except FetchError as e:
        logger.debug("tmux query failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except SelectorError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    pane = find_pane(panes, pane_id)
    click.echo(format_pane(pane, fmt))


if __name__ == "__main__":
    cli()
