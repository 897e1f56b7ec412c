"""Query tmux for panes.

The list-panes output is a narrow wire contract: one line per pane, six
`|`-separated fields in a fixed order. Malformed lines are skipped rather
than failing the whole fetch.
"""
import logging
import os
from typing import List, Mapping, Optional

from . import proc
from .config import get_config
from .errors import FetchError
from .models.pane import Pane

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
FIELD_COUNT = 6
PANE_FORMAT = FIELD_SEPARATOR.join([
    "#{session_name}",
    "#{window_index}",
    "#{pane_index}",
    "#{pane_title}",
    "#{t:last-used}",
    "#{pane_active}",
])
CURRENT_PANE_FORMAT = "#{session_name}:#{window_index}.#{pane_index}"


def in_tmux(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether we are running inside a tmux session."""
    if environ is None:
        environ = os.environ
    return bool(environ.get("TMUX"))


def _parse_last_used(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        return 0
    return int(value)


def parse_pane_line(line: str) -> Optional[Pane]:
    """Parse one line of list-panes output, or None if it is malformed."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < FIELD_COUNT:
        return None

    return Pane(
        session_name=parts[0],
        window_index=parts[1],
        pane_index=parts[2],
        pane_title=parts[3],
        last_used=_parse_last_used(parts[4]),
        is_active=parts[5] == "1",
    )


def parse_panes(output: str) -> List[Pane]:
    """Parse list-panes output, keeping tmux's order."""
    panes = []
    for line in output.splitlines():
        if not line:
            continue
        pane = parse_pane_line(line)
        if pane is None:
            logger.debug(f"Skipping malformed pane line: {line!r}")
            continue
        panes.append(pane)
    return panes


def _tmux(*args: str) -> str:
    """Run tmux and return its decoded stdout."""
    cmd = [get_config().tmux.binary, *args]
    try:
        result = proc.run(cmd, text=False)
    except OSError as e:
        raise FetchError(f"Failed to run {cmd[0]}: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise FetchError(
            f"tmux {args[0]} failed with exit code {result.returncode}: {stderr}",
            returncode=result.returncode,
            stderr=stderr,
        )

    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FetchError(f"tmux {args[0]} returned non-text output") from e


def list_panes() -> List[Pane]:
    """List all panes across all sessions."""
    panes = parse_panes(_tmux("list-panes", "-a", "-F", PANE_FORMAT))
    logger.info(f"Found {len(panes)} panes")
    return panes


def current_pane_id() -> str:
    """Get the `session:window.pane` id of the pane we are running in."""
    return _tmux("display-message", "-p", CURRENT_PANE_FORMAT).strip()
