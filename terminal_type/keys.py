from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    SPACE = "space"
    CONFIRM = "confirm"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press. ``char`` is only set for ``KeyKind.CHAR``."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if char == " ":
            return cls(KeyKind.SPACE)
        return cls(KeyKind.CHAR, char)

    def is_char(self, char: str) -> bool:
        return self.kind is KeyKind.CHAR and self.char == char


BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
SPACE = KeyEvent(KeyKind.SPACE)
CONFIRM = KeyEvent(KeyKind.CONFIRM)
UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
LEFT = KeyEvent(KeyKind.LEFT)
RIGHT = KeyEvent(KeyKind.RIGHT)
QUIT = KeyEvent(KeyKind.QUIT)

QUIT_KEYS = ("ctrl+c", "ctrl+q")

_NAMED = {
    "backspace": BACKSPACE,
    "ctrl+h": BACKSPACE,
    "space": SPACE,
    "enter": CONFIRM,
    "tab": CONFIRM,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def from_textual(key: str, character: Optional[str], is_printable: bool) -> Optional[KeyEvent]:
    """Map the fields of a textual ``Key`` event to a ``KeyEvent``; None for keys we ignore."""
    if key in QUIT_KEYS:
        return QUIT
    if key in _NAMED:
        return _NAMED[key]
    if is_printable and character and len(character) == 1:
        return KeyEvent.character(character)
    return None
