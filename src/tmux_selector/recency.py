"""Pick the pane the user most likely wants to jump to."""
from typing import Optional, Sequence

from .models.pane import Pane


def resolve_best(panes: Sequence[Pane], current_id: str) -> Optional[int]:
    """Return the index of the best pane other than `current_id`.

    An active pane always replaces the running best, whatever its timestamp,
    so the last active pane in fetch order wins. Otherwise a pane wins only
    with a strictly newer `last_used`, so the first of equal timestamps is
    kept. With no qualifying pane, fall back to the first pane that is not
    the current one.

    Returns:
        Index into `panes`, or None if there is no other pane
    """
    best_index = None
    best_time = 0

    for index, pane in enumerate(panes):
        if pane.full_id == current_id:
            continue

        if pane.is_active or pane.last_used > best_time:
            best_time = pane.last_used
            best_index = index

    if best_index is not None:
        return best_index

    for index, pane in enumerate(panes):
        if pane.full_id != current_id:
            return index
    return None
