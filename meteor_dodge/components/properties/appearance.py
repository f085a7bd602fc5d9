"""Meteor appearance component.

``Appearance`` selects which cells around a meteor's anchor position are
painted. The same footprint is used when drawing and when erasing, so a
meteor never leaves stray glyphs behind.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Tuple


class Shape(StrEnum):
    """Built-in meteor shapes."""

    DOT = auto()
    CROSS = auto()
    X = auto()


SHAPE_OFFSETS: Dict[Shape, Tuple[Tuple[int, int], ...]] = {
    Shape.DOT: ((0, 0),),
    Shape.CROSS: ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)),
    Shape.X: ((0, 0), (-1, -1), (1, -1), (-1, 1), (1, 1)),
}
"""(Δrow, Δcol) offsets painted for each shape; the anchor cell comes first."""


@dataclass(frozen=True)
class Appearance:
    """Visual footprint of a meteor.

    Attributes:
        shape: Which offsets around the anchor are painted.
    """

    shape: Shape
