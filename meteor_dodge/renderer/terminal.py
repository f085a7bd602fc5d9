"""Curses front end: a render surface over a window and a key reader.

The surface keeps its own record of the player cursor. Painting a meteor
moves the terminal's hardware cursor, so every write is followed by a move
back to the player's cell.
"""

import curses
from typing import Tuple

from pyrsistent.typing import PMap

from meteor_dodge.actions import Event
from meteor_dodge.config import HELP_TEXT, VI_KEYS
from meteor_dodge.types import Glyph

ARROW_KEYS = {
    curses.KEY_UP: Event.MOVE_UP,
    curses.KEY_DOWN: Event.MOVE_DOWN,
    curses.KEY_LEFT: Event.MOVE_LEFT,
    curses.KEY_RIGHT: Event.MOVE_RIGHT,
}


class CursesSurface:
    """:class:`meteor_dodge.renderer.surface.RenderSurface` over a curses window."""

    def __init__(self, window: "curses.window", blank: Glyph = " "):
        self.window = window
        self.blank = blank
        height, width = window.getmaxyx()
        self._cursor: Tuple[int, int] = (height // 2, width // 2)

    def _contains(self, row: int, col: int) -> bool:
        height, width = self.window.getmaxyx()
        return 0 <= row < height and 0 <= col < width

    def erase_at(self, row: int, col: int) -> None:
        self.draw_at(row, col, self.blank)

    def draw_at(self, row: int, col: int, glyph: Glyph) -> None:
        if not self._contains(row, col):
            return
        try:
            self.window.addch(row, col, glyph)
        except curses.error:
            # Writing the bottom-right cell succeeds but cannot advance the cursor.
            height, width = self.window.getmaxyx()
            if (row, col) != (height - 1, width - 1):
                raise
        self.window.move(*self.cursor_position())
        self.window.refresh()

    def read_glyph_at(self, row: int, col: int) -> Glyph:
        if not self._contains(row, col):
            return self.blank
        return chr(self.window.inch(row, col) & curses.A_CHARTEXT)

    def bounds(self) -> Tuple[int, int]:
        height, width = self.window.getmaxyx()
        return height, width

    def move_cursor_to(self, row: int, col: int) -> None:
        if not self._contains(row, col):
            return
        self._cursor = (row, col)
        self.window.move(row, col)
        self.window.refresh()

    def cursor_position(self) -> Tuple[int, int]:
        # The window may have shrunk past the cursor since it was last placed.
        height, width = self.window.getmaxyx()
        row, col = self._cursor
        clamped = (min(row, height - 1), min(col, width - 1))
        if clamped != self._cursor:
            self.move_cursor_to(*clamped)
        return self._cursor

    def draw_chrome(self) -> None:
        """Border plus the key help line, as the classic game shows them."""
        self.window.border("|", "|", "-", "-", ",", ",", "'", "'")
        _, width = self.window.getmaxyx()
        self.window.addstr(0, 0, HELP_TEXT[: max(width - 1, 0)])
        self.move_cursor_to(*self.cursor_position())


class CursesInput:
    """Blocking key reader translating keys into :class:`Event` values."""

    def __init__(self, window: "curses.window", keymap: PMap[str, Event] = VI_KEYS):
        self.window = window
        self.keymap = keymap
        window.keypad(True)

    def next_event(self) -> Event:
        return key_to_event(self.window.getch(), self.keymap)


def key_to_event(key: int, keymap: PMap[str, Event] = VI_KEYS) -> Event:
    """Map a ``getch`` key code to an input event."""
    if key == curses.KEY_RESIZE:
        return Event.RESIZE
    if key in ARROW_KEYS:
        return ARROW_KEYS[key]
    if 0 <= key < 256:
        return keymap.get(chr(key), Event.OTHER)
    return Event.OTHER
