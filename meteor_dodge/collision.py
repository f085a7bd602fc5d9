"""Collision oracle.

:func:`is_hit` is the rule the game loop uses: the cursor is hit when the
glyph currently rendered under it is the meteor glyph. It reads the render
surface, not the meteor stores, so it is only meaningful once every paint of
the tick has landed. A meteor respawned by the reap system has not been
painted yet and therefore cannot hit on the tick it appears.

:func:`footprint_hit` answers the same question from the component stores
alone. It sees respawned meteors immediately and is used for diagnostics and
by the Gymnasium environment.
"""

from typing import Tuple

from meteor_dodge.components import Position
from meteor_dodge.entity import ordered_entity_ids
from meteor_dodge.renderer.surface import METEOR_GLYPH, RenderSurface
from meteor_dodge.state import State
from meteor_dodge.types import Glyph
from meteor_dodge.utils.grid import footprint


def is_hit(
    cursor: Tuple[int, int], surface: RenderSurface, glyph: Glyph = METEOR_GLYPH
) -> bool:
    """True iff the glyph rendered at ``cursor`` is the meteor glyph."""
    row, col = cursor
    return surface.read_glyph_at(row, col) == glyph


def footprint_hit(state: State, cursor: Tuple[int, int]) -> bool:
    """True iff any live meteor's footprint covers ``cursor``."""
    target = Position(*cursor)
    for eid in ordered_entity_ids(state):
        if target in footprint(state.position[eid], state.appearance[eid].shape):
            return True
    return False
