"""Interactive pane selection on the terminal."""
from .selector import PaneSelector, select_pane
from .terminal import RawMode, Terminal

__all__ = ["PaneSelector", "RawMode", "Terminal", "select_pane"]
