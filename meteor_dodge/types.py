"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


if TYPE_CHECKING:
    from meteor_dodge.components import Position, Shape

EntityID = int

Glyph = str

PaintFn = Callable[["Position", "Shape"], None]
"""Callback painting (or clearing) a meteor footprint anchored at a position."""


class Outcome(StrEnum):
    """Game phase. ``QUIT`` and ``HIT`` are terminal."""

    RUNNING = auto()
    QUIT = auto()
    HIT = auto()
