"""Reap system: cull meteors that left the grid and replace them.

A meteor is reaped on the first check after it steps outside the grid on
either axis. Each reaped meteor is replaced by exactly one fresh random
meteor, so the population size is unchanged by this system. Replacements
are only registered here; they are painted by the next movement pass, which
means they cannot hit the cursor on the tick they appear.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Optional

from loguru import logger

from meteor_dodge.entity import ordered_entity_ids
from meteor_dodge.levels.factories import spawn_random_meteor
from meteor_dodge.state import State
from meteor_dodge.types import EntityID
from meteor_dodge.utils.grid import is_in_bounds


def out_of_bounds_ids(state: State) -> List[EntityID]:
    """Meteors whose anchor lies outside the grid, in insertion order."""
    return [
        eid
        for eid in ordered_entity_ids(state)
        if not is_in_bounds(state, state.position[eid])
    ]


def remove_meteors(state: State, eids: Iterable[EntityID]) -> State:
    """Drop ``eids`` from the registry and from every component store."""
    entity, position = state.entity, state.position
    appearance, moving = state.appearance, state.moving
    for eid in eids:
        entity = entity.discard(eid)
        position = position.discard(eid)
        appearance = appearance.discard(eid)
        moving = moving.discard(eid)
    return replace(
        state,
        entity=entity,
        position=position,
        appearance=appearance,
        moving=moving,
    )


def reap_and_respawn(state: State, rng: Optional[random.Random] = None) -> State:
    """Replace every out-of-bounds meteor with a fresh one.

    Replacements are allocated before the reaped meteors are removed, so
    their IDs stay above every ID used so far.
    """
    reaped = out_of_bounds_ids(state)
    if not reaped:
        return state

    for _ in reaped:
        state, _ = spawn_random_meteor(state, rng)

    logger.debug(f"Reaped {len(reaped)} meteor(s): {reaped}")
    return remove_meteors(state, reaped)
