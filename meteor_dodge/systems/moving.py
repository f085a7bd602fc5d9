"""Autonomous linear movement system.

Advances every live meteor by its path vector in three strictly sequential
phases over the same entity order:

1. erase every meteor at its current position,
2. translate every meteor,
3. draw every meteor at its new position.

Interleaving the phases per meteor would corrupt the shared surface: erasing
one meteor's old cells after another has already been drawn there would
punch holes in it. No meteor is removed here even if it lands outside the
grid; the reap system handles that on the same tick.
"""

from dataclasses import replace
from typing import Dict

from pyrsistent import pmap

from meteor_dodge.components import Position
from meteor_dodge.entity import ordered_entity_ids
from meteor_dodge.state import State
from meteor_dodge.types import EntityID, PaintFn


def moving_system(state: State, erase: PaintFn, draw: PaintFn) -> State:
    """Erase, move and redraw all live meteors."""
    order = ordered_entity_ids(state)

    for eid in order:
        erase(state.position[eid], state.appearance[eid].shape)

    new_position: Dict[EntityID, Position] = dict(state.position)
    for eid in order:
        d_row, d_col = state.moving[eid].vector
        new_position[eid] = state.position[eid].offset(d_row, d_col)
    state = replace(state, position=pmap(new_position))

    for eid in order:
        draw(state.position[eid], state.appearance[eid].shape)

    return state
