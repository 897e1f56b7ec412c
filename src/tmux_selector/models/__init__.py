"""Data models for tmux-selector."""
from .pane import Pane

__all__ = ["Pane"]
