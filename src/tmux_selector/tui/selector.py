"""Interactive pane selector.

A single-threaded loop: redraw the whole list, block on the next key, move
the cursor or finish. The list is drawn on the side channel so the result on
stdout stays clean.
"""
import logging
from typing import List, Optional, Sequence

import click

from ..models.pane import Pane
from ..recency import resolve_best
from ..tmux import current_pane_id
from .keys import Action, classify
from .terminal import Terminal

logger = logging.getLogger(__name__)

TITLE = "Select target tmux pane:"
HINT = "Use ↑↓/WS/KJ to navigate, Enter to select, q to cancel"

# Raw mode disables output post-processing, so lines need an explicit CR.
NEWLINE = "\r\n"


class PaneSelector:
    """Cursor over a fixed list of panes."""

    def __init__(self, panes: Sequence[Pane], terminal: Terminal, selected_index: Optional[int] = None):
        self.panes: List[Pane] = list(panes)
        self.terminal = terminal
        if selected_index is None or not 0 <= selected_index < len(self.panes):
            selected_index = 0
        self.selected_index = selected_index

    def move_previous(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1
        else:
            self.selected_index = len(self.panes) - 1

    def move_next(self) -> None:
        if self.selected_index < len(self.panes) - 1:
            self.selected_index += 1
        else:
            self.selected_index = 0

    def render(self) -> None:
        """Redraw the full frame."""
        term = self.terminal
        term.clear()
        term.write(click.style(TITLE, fg="yellow") + NEWLINE)
        term.write(click.style(HINT, dim=True) + NEWLINE)
        term.write(NEWLINE)

        for index, pane in enumerate(self.panes):
            if index == self.selected_index:
                line = click.style(f"  > {pane.display_name}", reverse=True, bold=True)
            else:
                line = f"    {pane.display_name}"
            term.write(line + NEWLINE)
        term.flush()

    def _loop(self) -> Optional[str]:
        while True:
            self.render()
            event = self.terminal.read_key()
            action = classify(event)
            logger.debug(f"Key {event} -> {action.value}")

            if action == Action.PREV:
                self.move_previous()
            elif action == Action.NEXT:
                self.move_next()
            elif action == Action.CONFIRM:
                return self.panes[self.selected_index].full_id
            elif action == Action.CANCEL:
                return None

    def run(self) -> Optional[str]:
        """Run until the user confirms or cancels.

        Returns:
            The confirmed pane's full id, or None if cancelled
        """
        if not self.panes:
            return None

        try:
            with self.terminal.raw_mode():
                pane_id = self._loop()
        except BaseException:
            self._clear(propagating=True)
            raise
        self._clear()
        return pane_id

    def _clear(self, propagating: bool = False) -> None:
        """Clear the side channel without masking an error already propagating."""
        try:
            self.terminal.clear()
        except OSError as e:
            logger.error(f"Failed to clear terminal: {e}")
            if not propagating:
                raise


def select_pane(panes: Sequence[Pane], terminal: Optional[Terminal] = None,
                current_id: Optional[str] = None) -> Optional[str]:
    """Let the user pick a pane, starting on the most recently used one.

    Args:
        panes: Panes to choose from
        terminal: Terminal to draw on and read keys from
        current_id: Id of the caller's own pane, looked up if not given

    Returns:
        The chosen pane's full id, or None if cancelled or nothing to pick
    """
    if not panes:
        logger.info("No panes to select from")
        return None

    if current_id is None:
        current_id = current_pane_id()

    selector = PaneSelector(panes, terminal or Terminal(), resolve_best(panes, current_id))
    return selector.run()
