"""Render surface protocol and in-memory glyph buffer.

The simulation paints meteors onto a surface and the collision oracle reads
glyphs back from it, so both must observe the same surface within a tick.
Any object with the methods of :class:`RenderSurface` can play that role.

:class:`GlyphBuffer` keeps the grid in a numpy ``<U1`` array. Writes outside
the grid are dropped rather than wrapped (numpy would otherwise treat ``-1``
as the last row), which matches how a terminal ignores off-screen writes.
"""

from typing import Protocol, Tuple

import numpy as np
from numpy.typing import NDArray

from meteor_dodge.components import Position, Shape
from meteor_dodge.types import Glyph, PaintFn
from meteor_dodge.utils.grid import footprint

METEOR_GLYPH: Glyph = "*"
BLANK_GLYPH: Glyph = " "


class RenderSurface(Protocol):
    def erase_at(self, row: int, col: int) -> None: ...

    def draw_at(self, row: int, col: int, glyph: Glyph) -> None: ...

    def read_glyph_at(self, row: int, col: int) -> Glyph: ...

    def bounds(self) -> Tuple[int, int]: ...

    def move_cursor_to(self, row: int, col: int) -> None: ...

    def cursor_position(self) -> Tuple[int, int]: ...


class GlyphBuffer:
    """Numpy-backed character grid with a cursor.

    Arguments:
        height: Number of rows.
        width: Number of columns.
        blank: Glyph used for empty cells and for erasing.
    """

    def __init__(self, height: int, width: int, blank: Glyph = BLANK_GLYPH):
        if height <= 0 or width <= 0:
            raise ValueError(f"Surface size must be positive, got {height}x{width}")
        self.blank = blank
        self.cells: NDArray[np.str_] = np.full((height, width), blank, dtype="<U1")
        self._cursor: Tuple[int, int] = (height // 2, width // 2)

    def _contains(self, row: int, col: int) -> bool:
        height, width = self.cells.shape
        return 0 <= row < height and 0 <= col < width

    def erase_at(self, row: int, col: int) -> None:
        self.draw_at(row, col, self.blank)

    def draw_at(self, row: int, col: int, glyph: Glyph) -> None:
        if self._contains(row, col):
            self.cells[row, col] = glyph

    def read_glyph_at(self, row: int, col: int) -> Glyph:
        if not self._contains(row, col):
            return self.blank
        return str(self.cells[row, col])

    def bounds(self) -> Tuple[int, int]:
        height, width = self.cells.shape
        return int(height), int(width)

    def move_cursor_to(self, row: int, col: int) -> None:
        if self._contains(row, col):
            self._cursor = (row, col)

    def cursor_position(self) -> Tuple[int, int]:
        return self._cursor

    def resize(self, height: int, width: int) -> None:
        """Change the grid size, keeping the overlapping region."""
        if height <= 0 or width <= 0:
            raise ValueError(f"Surface size must be positive, got {height}x{width}")
        cells = np.full((height, width), self.blank, dtype="<U1")
        keep_h = min(height, self.cells.shape[0])
        keep_w = min(width, self.cells.shape[1])
        cells[:keep_h, :keep_w] = self.cells[:keep_h, :keep_w]
        self.cells = cells
        row, col = self._cursor
        self._cursor = (min(row, height - 1), min(col, width - 1))

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.cells)


def paint(surface: RenderSurface, pos: Position, shape: Shape, glyph: Glyph) -> None:
    """Write ``glyph`` to every footprint cell of a meteor."""
    for cell in footprint(pos, shape):
        surface.draw_at(cell.row, cell.col, glyph)


def eraser(surface: RenderSurface) -> PaintFn:
    """Paint callback clearing a meteor footprint."""

    def erase(pos: Position, shape: Shape) -> None:
        for cell in footprint(pos, shape):
            surface.erase_at(cell.row, cell.col)

    return erase


def drawer(surface: RenderSurface, glyph: Glyph = METEOR_GLYPH) -> PaintFn:
    """Paint callback drawing a meteor footprint."""

    def draw(pos: Position, shape: Shape) -> None:
        paint(surface, pos, shape, glyph)

    return draw
