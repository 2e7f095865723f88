"""A single-line text input with a cursor."""

from __future__ import annotations

import enum
from typing import Optional, Union


class InputKey(enum.Enum):
    """Non-character keys an input may receive."""

    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"
    DELETE = "delete"
    HOME = "home"
    END = "end"


class InputEffect(enum.Enum):
    """What handling a key did; ``ACK`` means consumed without effect."""

    TEXT_CHANGED = "text_changed"
    CURSOR_MOVED = "cursor_moved"
    ACK = "ack"


class LineInput:
    """Editable line of text; the cursor starts at the beginning."""

    def __init__(self, text: str = "") -> None:
        self._line = list(text)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def input(self, key: Union[str, InputKey]) -> Optional[InputEffect]:
        """Handle a key: a single character or an :class:`InputKey`.

        Returns ``None`` for keys the input does not consume.
        """
        if isinstance(key, str):
            if len(key) != 1:
                raise ValueError(f"expected a single character, got {key!r}")
            self._line.insert(self._cursor, key)
            self._cursor += 1
            return InputEffect.TEXT_CHANGED
        if key is InputKey.BACKSPACE:
            if self._cursor == 0:
                return InputEffect.ACK
            self._cursor -= 1
            del self._line[self._cursor]
            return InputEffect.TEXT_CHANGED
        if key is InputKey.LEFT:
            if self._cursor == 0:
                return InputEffect.ACK
            self._cursor -= 1
            return InputEffect.CURSOR_MOVED
        if key is InputKey.RIGHT:
            if self._cursor == len(self._line):
                return InputEffect.ACK
            self._cursor += 1
            return InputEffect.CURSOR_MOVED
        return None

    def segments(self, is_active: bool) -> list[tuple[str, bool]]:
        """Text split for display as ``(text, is_cursor)`` pairs.

        An inactive input is one plain segment; an active one is text before
        the cursor, the cursor cell (a space at the end) and text after it.
        """
        if not is_active:
            return [(self.text(), False)]
        before = "".join(self._line[: self._cursor])
        if self._cursor == len(self._line):
            return [(before, False), (" ", True), ("", False)]
        return [
            (before, False),
            (self._line[self._cursor], True),
            ("".join(self._line[self._cursor + 1 :]), False),
        ]

    def is_empty(self) -> bool:
        return not self._line

    def text(self) -> str:
        return "".join(self._line)

    def __repr__(self) -> str:
        return f"LineInput(text={self.text()!r}, cursor={self._cursor})"