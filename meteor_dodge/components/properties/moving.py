"""Linear movement component.

Every meteor carries a ``Moving`` component naming one of eight compass
paths. The path is fixed at creation; the moving system translates the
meteor by exactly one unit vector per tick.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Tuple


class Path(StrEnum):
    """Eight-way movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP_LEFT = auto()
    UP_RIGHT = auto()
    DOWN_LEFT = auto()
    DOWN_RIGHT = auto()


PATH_VECTORS: Dict[Path, Tuple[int, int]] = {
    Path.UP: (-1, 0),
    Path.DOWN: (1, 0),
    Path.LEFT: (0, -1),
    Path.RIGHT: (0, 1),
    Path.UP_LEFT: (-1, -1),
    Path.UP_RIGHT: (-1, 1),
    Path.DOWN_LEFT: (1, -1),
    Path.DOWN_RIGHT: (1, 1),
}


@dataclass(frozen=True)
class Moving:
    """Autonomous mover definition.

    Attributes:
        path: Direction of travel, immutable for the entity's lifetime.
    """

    path: Path

    @property
    def vector(self) -> Tuple[int, int]:
        """(Δrow, Δcol) applied every tick."""
        return PATH_VECTORS[self.path]
