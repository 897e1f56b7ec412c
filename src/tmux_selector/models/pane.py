"""Pane model for tmux-selector."""
from pydantic import BaseModel, ConfigDict, Field, computed_field


class Pane(BaseModel):
    """A tmux pane, as reported by `list-panes -a`."""

    model_config = ConfigDict(frozen=True)

    session_name: str = Field(..., description="Session name")
    window_index: str = Field(..., description="Window index in session")
    pane_index: str = Field(..., description="Pane index in window")
    pane_title: str = Field("", description="Pane title")
    last_used: int = Field(0, ge=0, description="Last use time (unix timestamp)")
    is_active: bool = Field(False, description="Is active pane in its window")

    @computed_field
    @property
    def full_id(self) -> str:
        """Composite target, e.g. ``main:1.0``."""
        return f"{self.session_name}:{self.window_index}.{self.pane_index}"

    @property
    def display_name(self) -> str:
        return f"{self.full_id} - {self.pane_title}"
