"""Shared test fixtures."""
from contextlib import contextmanager

import pytest

from tmux_selector.models.pane import Pane
from tmux_selector.tui.keys import Key, KeyEvent


def make_pane(session="main", window="0", pane="0", title="", last_used=0, active=False):
    """Build a Pane with terse arguments."""
    return Pane(
        session_name=session,
        window_index=window,
        pane_index=pane,
        pane_title=title,
        last_used=last_used,
        is_active=active,
    )


class FakeTerminal:
    """Scripted terminal that records raw-mode use and everything written."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.raw_entered = 0
        self.raw_restored = 0
        self.in_raw = False
        self.clears = 0
        self.frames = []
        self.writes = []
        self.clear_error = None

    @contextmanager
    def raw_mode(self):
        self.raw_entered += 1
        self.in_raw = True
        try:
            yield self
        finally:
            self.in_raw = False
            self.raw_restored += 1

    def read_key(self):
        if not self.keys:
            raise AssertionError("selector read past the scripted keys")
        key = self.keys.pop(0)
        if isinstance(key, Exception):
            raise key
        return key

    def write(self, text):
        self.writes.append(text)

    def flush(self):
        self.frames.append("".join(self.writes))
        self.writes = []

    def clear(self):
        self.clears += 1
        if self.clear_error is not None and not self.in_raw:
            raise self.clear_error
        self.writes.append("<clear>")


def char(c, ctrl=False):
    return KeyEvent(Key.CHAR, char=c, ctrl=ctrl)


UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
LEFT = KeyEvent(Key.LEFT)
RIGHT = KeyEvent(Key.RIGHT)
ENTER = KeyEvent(Key.ENTER)
ESC = KeyEvent(Key.ESC)
CTRL_C = char("c", ctrl=True)


@pytest.fixture
def four_panes():
    """Four panes across two sessions, none active."""
    return [
        make_pane("main", "0", "0", "editor", 100),
        make_pane("main", "0", "1", "shell", 200),
        make_pane("main", "1", "0", "logs", 50),
        make_pane("work", "0", "0", "server", 10),
    ]


@pytest.fixture
def reset_global_config():
    """Reset the global config after each test."""
    from tmux_selector import config as config_module

    original = config_module._config
    config_module.set_config(None)
    yield
    config_module.set_config(original)
