"""Position component.

Integer grid coordinates stored in ``State.position`` keyed by entity id.
Rows grow downward and columns grow rightward, matching terminal addressing.
A meteor may briefly sit one cell outside the grid (row ``-1`` or
``height``, column ``-1`` or ``width``) between a move and the next reap.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)
