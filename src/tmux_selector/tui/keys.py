"""Decode raw terminal bytes into key events."""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

ESC = b"\x1b"

# Wait this long after a lone ESC before deciding it is the Esc key.
ESCAPE_TIMEOUT = 0.05


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    CHAR = "char"
    OTHER = "other"


class Action(Enum):
    PREV = "prev"
    NEXT = "next"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    IGNORE = "ignore"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keypress."""

    key: Key
    char: Optional[str] = None
    ctrl: bool = False
    mods: bool = False

    @property
    def plain(self) -> bool:
        """True if no modifier was held."""
        return not (self.ctrl or self.mods)


ARROWS = {
    b"A": Key.UP,
    b"B": Key.DOWN,
    b"C": Key.RIGHT,
    b"D": Key.LEFT,
}

PREV_CHARS = set("wWkKaAhH")
NEXT_CHARS = set("sSjJdDlL")
QUIT_CHARS = set("qQ")


def _utf8_length(first: int) -> int:
    if first >= 0xF0:
        return 4
    if first >= 0xE0:
        return 3
    if first >= 0xC0:
        return 2
    return 1


def _read_csi(read_byte: Callable[[], bytes], ready: Callable[[float], bool]) -> KeyEvent:
    """Read the rest of an `ESC [` sequence up to its final byte."""
    params = b""
    while ready(ESCAPE_TIMEOUT):
        ch = read_byte()
        if not ch:
            break
        if 0x40 <= ch[0] <= 0x7E:
            key = ARROWS.get(ch)
            if key is None:
                return KeyEvent(Key.OTHER)
            # `ESC [ 1 ; 5 A` and friends carry a modifier parameter
            return KeyEvent(key, mods=b";" in params)
        params += ch
        if len(params) > 16:
            break
    return KeyEvent(Key.OTHER)


def read_key(read_byte: Callable[[], bytes], ready: Callable[[float], bool]) -> Optional[KeyEvent]:
    """Decode a single key event.

    Args:
        read_byte: Blocking read of one byte; returns b"" at end of input
        ready: Returns True if another byte arrives within the given seconds

    Returns:
        The decoded event, or None at end of input
    """
    first = read_byte()
    if not first:
        return None

    if first == b"\r":
        return KeyEvent(Key.ENTER)

    if first == ESC:
        if not ready(ESCAPE_TIMEOUT):
            return KeyEvent(Key.ESC)
        nxt = read_byte()
        if nxt == b"[":
            return _read_csi(read_byte, ready)
        if nxt == b"O" and ready(ESCAPE_TIMEOUT):
            key = ARROWS.get(read_byte())
            return KeyEvent(key) if key else KeyEvent(Key.OTHER)
        # Alt+<key>
        return KeyEvent(Key.OTHER, mods=True)

    code = first[0]
    if 0x01 <= code <= 0x1A:
        return KeyEvent(Key.CHAR, char=chr(code + 0x60), ctrl=True)
    if code < 0x20 or code == 0x7F:
        return KeyEvent(Key.OTHER)

    data = first
    for _ in range(_utf8_length(code) - 1):
        data += read_byte()
    return KeyEvent(Key.CHAR, char=data.decode("utf-8", errors="replace"))


def classify(event: KeyEvent) -> Action:
    """Map a key event to what the selector should do with it."""
    if event.key == Key.CHAR and event.ctrl and event.char == "c" and not event.mods:
        return Action.CANCEL
    if not event.plain:
        return Action.IGNORE

    if event.key in (Key.UP, Key.LEFT):
        return Action.PREV
    if event.key in (Key.DOWN, Key.RIGHT):
        return Action.NEXT
    if event.key == Key.ENTER:
        return Action.CONFIRM
    if event.key == Key.ESC:
        return Action.CANCEL
    if event.key == Key.CHAR:
        if event.char in PREV_CHARS:
            return Action.PREV
        if event.char in NEXT_CHARS:
            return Action.NEXT
        if event.char in QUIT_CHARS:
            return Action.CANCEL
    return Action.IGNORE
