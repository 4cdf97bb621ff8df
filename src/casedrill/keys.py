"""
Key Events: Decoded keyboard input.

The session state machine only sees KeyEvent values; translating raw
blessed keystrokes happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from blessed.keyboard import Keystroke


class KeyCode(str, Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    OTHER = "other"


class KeyKind(str, Enum):
    """Press/repeat/release, for terminals that can tell them apart."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key event."""

    code: KeyCode
    char: str = ""
    ctrl: bool = False
    kind: KeyKind = KeyKind.PRESS

    @classmethod
    def character(cls, char: str) -> KeyEvent:
        return cls(KeyCode.CHAR, char=char)

    @classmethod
    def control(cls, char: str) -> KeyEvent:
        return cls(KeyCode.CHAR, char=char.lower(), ctrl=True)

    @property
    def is_press(self) -> bool:
        return self.kind is KeyKind.PRESS


ENTER = KeyEvent(KeyCode.ENTER)
BACKSPACE = KeyEvent(KeyCode.BACKSPACE)
ESCAPE = KeyEvent(KeyCode.ESCAPE)

_NAMED_KEYS = {
    "KEY_ENTER": ENTER,
    "KEY_BACKSPACE": BACKSPACE,
    "KEY_DELETE": BACKSPACE,
    "KEY_ESCAPE": ESCAPE,
}

_RAW_KEYS = {
    "\r": ENTER,
    "\n": ENTER,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
    "\x1b": ESCAPE,
}


def decode_keystroke(keystroke: Keystroke) -> KeyEvent | None:
    """
    Translate a blessed keystroke into a KeyEvent.

    Args:
        keystroke: Result of Terminal.inkey()

    Returns:
        The decoded event, or None for an empty keystroke (inkey timeout)
    """
    text = str(keystroke)
    if not text:
        return None

    if keystroke.is_sequence:
        if keystroke.name in _NAMED_KEYS:
            return _NAMED_KEYS[keystroke.name]
        if text in _RAW_KEYS:
            return _RAW_KEYS[text]
        return KeyEvent(KeyCode.OTHER)

    if text in _RAW_KEYS:
        return _RAW_KEYS[text]

    if len(text) == 1:
        code = ord(text)
        # Ctrl+A .. Ctrl+Z arrive as 0x01 .. 0x1a in raw mode
        if 1 <= code <= 26:
            return KeyEvent.control(chr(code + ord("a") - 1))
        if text.isprintable():
            return KeyEvent.character(text)

    return KeyEvent(KeyCode.OTHER)
