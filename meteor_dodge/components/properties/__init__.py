"""Property component aggregates.

Re-exports the components that describe a meteor: where it is
(:class:`Position`), what it looks like (:class:`Appearance`) and how it
moves (:class:`Moving`).
All of them are frozen dataclasses; state changes are expressed by storing
new instances in fresh persistent maps.
"""

from .appearance import Appearance, Shape, SHAPE_OFFSETS
from .moving import Moving, Path, PATH_VECTORS
from .position import Position

__all__ = [
    "Appearance",
    "Moving",
    "Path",
    "PATH_VECTORS",
    "Position",
    "Shape",
    "SHAPE_OFFSETS",
]
