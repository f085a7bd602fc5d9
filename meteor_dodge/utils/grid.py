"""Grid math helpers.

Pure predicates and footprint expansion used by the movement, reap and
collision code. Kept lightweight so per-tick loops stay cheap.
"""

from typing import List

from meteor_dodge.components import Position, Shape, SHAPE_OFFSETS
from meteor_dodge.state import State


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the playfield rectangle."""
    return 0 <= pos.row < state.height and 0 <= pos.col < state.width


def footprint(pos: Position, shape: Shape) -> List[Position]:
    """Cells painted by a meteor of ``shape`` anchored at ``pos``.

    Cells may fall outside the grid; surfaces drop those writes.
    """
    return [pos.offset(d_row, d_col) for d_row, d_col in SHAPE_OFFSETS[shape]]
