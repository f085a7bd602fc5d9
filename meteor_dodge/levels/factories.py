"""Meteor factory and starting-board generator.

``create_meteor`` is the spawn policy: shape and path are picked uniformly
from their enums and the anchor cell is a signed 32-bit draw per axis reduced
with floor-modulo, so it always lands inside the grid even for negative draws.
``add_meteor`` turns the resulting :class:`MeteorSpec` into components on a
``State``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from loguru import logger
from pyrsistent import pmap

from meteor_dodge.components import Appearance, Moving, Path, Position, Shape
from meteor_dodge.entity import Entity, new_entity_id, peek_entity_id
from meteor_dodge.state import State
from meteor_dodge.types import EntityID

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

DEFAULT_NUM_METEORS = 10

SHAPES: Tuple[Shape, ...] = tuple(Shape)
PATHS: Tuple[Path, ...] = tuple(Path)


@dataclass(frozen=True)
class MeteorSpec:
    """Authoring-time description of one meteor."""

    position: Position
    shape: Shape
    path: Path


def create_meteor(height: int, width: int, rng: random.Random) -> MeteorSpec:
    """Draw a random meteor strictly inside ``[0,height) x [0,width)``."""
    row = rng.randint(INT32_MIN, INT32_MAX) % height
    col = rng.randint(INT32_MIN, INT32_MAX) % width
    return MeteorSpec(
        position=Position(row, col),
        shape=SHAPES[rng.randrange(len(SHAPES))],
        path=PATHS[rng.randrange(len(PATHS))],
    )


def meteor_rng(state: State, eid: EntityID) -> random.Random:
    """RNG for spawning entity ``eid``.

    Seeded states derive a per-entity generator so replays are reproducible;
    unseeded states use system entropy.
    """
    if state.seed is None:
        return random.Random()
    return random.Random(hash((state.seed, eid)))


def add_meteor(state: State, spec: MeteorSpec) -> Tuple[State, EntityID]:
    """Register ``spec`` under a fresh entity ID."""
    state, eid = new_entity_id(state)
    state = replace(
        state,
        entity=state.entity.set(eid, Entity()),
        position=state.position.set(eid, spec.position),
        appearance=state.appearance.set(eid, Appearance(shape=spec.shape)),
        moving=state.moving.set(eid, Moving(path=spec.path)),
    )
    return state, eid


def spawn_random_meteor(
    state: State, rng: Optional[random.Random] = None
) -> Tuple[State, EntityID]:
    """Create a random meteor and add it to ``state``."""
    if rng is None:
        rng = meteor_rng(state, peek_entity_id(state))
    spec = create_meteor(state.height, state.width, rng)
    state, eid = add_meteor(state, spec)
    logger.debug(
        f"Spawned meteor {eid}: {spec.shape} moving {spec.path} at "
        f"({spec.position.row}, {spec.position.col})"
    )
    return state, eid


def generate(
    height: int,
    width: int,
    num_meteors: int = DEFAULT_NUM_METEORS,
    seed: Optional[int] = None,
) -> State:
    """Starting board with ``num_meteors`` random meteors.

    Meteors are not painted yet; the first tick draws them.
    """
    if num_meteors < 0:
        raise ValueError(f"num_meteors must be non-negative, got {num_meteors}")
    state = State(height=height, width=width, entity=pmap(), seed=seed)
    for _ in range(num_meteors):
        state, _ = spawn_random_meteor(state)
    logger.info(f"Generated {height}x{width} board with {num_meteors} meteors")
    return state
