"""meteor_dodge.components
=========================

Aggregate import surface for the ECS component dataclasses, e.g.::

    from meteor_dodge.components import Position, Moving, Path

Components carry no behavior beyond their fields; systems in
:mod:`meteor_dodge.systems` transform them.
"""

from .properties import Appearance, Shape, SHAPE_OFFSETS
from .properties import Moving, Path, PATH_VECTORS
from .properties import Position

__all__ = [
    "Appearance",
    "Moving",
    "Path",
    "PATH_VECTORS",
    "Position",
    "Shape",
    "SHAPE_OFFSETS",
]
