"""Format the selected pane for stdout."""
from typing import Optional, Sequence

from .models.pane import Pane

FORMATS = ("plain", "json")


def find_pane(panes: Sequence[Pane], full_id: str) -> Optional[Pane]:
    """Find a pane by its full id."""
    for pane in panes:
        if pane.full_id == full_id:
            return pane
    return None


def format_pane(pane: Pane, fmt: str = "plain") -> str:
    """Render a pane as one line: JSON for "json", the bare id otherwise."""
    if fmt == "json":
        return pane.model_dump_json()
    return pane.full_id
