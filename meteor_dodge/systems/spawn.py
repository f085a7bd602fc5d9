"""Spawn system: one new meteor per tick."""

import random
from typing import Optional

from meteor_dodge.levels.factories import spawn_random_meteor
from meteor_dodge.state import State


def spawn_one(state: State, rng: Optional[random.Random] = None) -> State:
    """Append one random meteor. The live collection grows by exactly one."""
    state, _ = spawn_random_meteor(state, rng)
    return state
