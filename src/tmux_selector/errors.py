"""Error kinds for tmux-selector."""
from typing import Optional


class SelectorError(Exception):
    """Base class for failures that end the process with a diagnostic."""


class FetchError(SelectorError):
    """tmux could not be run, exited non-zero, or produced non-text output."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class NoPanesError(SelectorError):
    """tmux reported no panes."""

    def __init__(self, message: str = "No tmux panes found"):
        super().__init__(message)


class NoCandidateError(SelectorError):
    """Auto-selection found no pane other than the current one."""

    def __init__(self, message: str = "No suitable pane found for auto-selection"):
        super().__init__(message)


class CancelledError(SelectorError):
    """The user aborted the interactive selection."""

    def __init__(self, message: str = "Pane selection cancelled"):
        super().__init__(message)


class TerminalError(SelectorError):
    """Raw terminal mode could not be entered or restored."""
