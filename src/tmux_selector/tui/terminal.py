"""Raw terminal input and side-channel output."""
import logging
import os
import select
import sys
import termios
import tty
from typing import Optional, TextIO

import click

from ..errors import TerminalError
from .keys import KeyEvent, read_key

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"


class RawMode:
    """Put a terminal into raw mode for the duration of a `with` block.

    The saved attributes are restored on every exit path. If restoring fails
    while another exception is already propagating, the failure is only
    logged so the original error is not masked.
    """

    def __init__(self, fd: int):
        self.fd = fd
        self._saved = None

    def __enter__(self) -> "RawMode":
        try:
            self._saved = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
        except termios.error as e:
            raise TerminalError(f"Failed to enable raw mode: {e}") from e
        logger.debug(f"Raw mode enabled on fd {self.fd}")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
        except termios.error as e:
            logger.error(f"Failed to restore terminal mode: {e}")
            if exc_type is None:
                raise TerminalError(f"Failed to restore terminal mode: {e}") from e
        else:
            logger.debug(f"Raw mode disabled on fd {self.fd}")
        return False


class Terminal:
    """Keyboard input plus a side output channel (stderr by default).

    Nothing here writes to stdout, which is reserved for the result.
    """

    def __init__(self, input_fd: Optional[int] = None, output: Optional[TextIO] = None,
                 color: Optional[bool] = None):
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.output = sys.stderr if output is None else output
        self.color = color

    def raw_mode(self) -> RawMode:
        return RawMode(self.input_fd)

    def _read_byte(self) -> bytes:
        return os.read(self.input_fd, 1)

    def _ready(self, timeout: float) -> bool:
        readable, _, _ = select.select([self.input_fd], [], [], timeout)
        return bool(readable)

    def read_key(self) -> KeyEvent:
        """Block until the next key event."""
        event = read_key(self._read_byte, self._ready)
        if event is None:
            raise TerminalError("Terminal input closed")
        return event

    def write(self, text: str) -> None:
        click.echo(text, file=self.output, nl=False, color=self.color)

    def flush(self) -> None:
        self.output.flush()

    def clear(self) -> None:
        """Clear the side channel and move the cursor to the origin."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)
        self.flush()
