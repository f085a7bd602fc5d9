"""Core immutable ECS `State` dataclass.

The frozen :class:`State` is the whole simulation snapshot at one tick.
Systems take a ``State`` (plus inputs) and return a new ``State``; the only
thing they touch outside the snapshot is the render surface, through the
paint callbacks they are handed.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity lacks that component.
* ``height`` / ``width`` are the playfield bounds, read from the render
    surface. They are re-read on a resize and must stay positive.
* Meteors leaving the grid are pruned from every store by the reap system
    (see :mod:`meteor_dodge.systems.reap`).
* ``outcome`` is ``RUNNING`` until the player quits or is hit; the reducer in
    :mod:`meteor_dodge.step` short-circuits on terminal outcomes.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap

from meteor_dodge.entity import Entity
from meteor_dodge.components import Appearance, Moving, Position
from meteor_dodge.types import EntityID, Outcome


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        height (int): Grid height in rows.
        width (int): Grid width in columns.
        entity (PMap[EntityID, Entity]): Registry of live meteors.
        position (PMap[EntityID, Position]): Anchor cell of each meteor.
        appearance (PMap[EntityID, Appearance]): Footprint shape of each meteor.
        moving (PMap[EntityID, Moving]): Fixed travel path of each meteor.
        next_id (int): Next entity ID to allocate.
        turn (int): Ticks processed so far.
        score (int): Ticks survived.
        outcome (Outcome): ``RUNNING``, ``QUIT`` or ``HIT``.
        seed (int | None): Base RNG seed; ``None`` draws from system entropy.
    """

    # Level
    height: int
    width: int

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    position: PMap[EntityID, Position] = pmap()
    appearance: PMap[EntityID, Appearance] = pmap()
    moving: PMap[EntityID, Moving] = pmap()

    # Allocation
    next_id: int = 0

    # Status
    turn: int = 0
    score: int = 0
    outcome: Outcome = Outcome.RUNNING

    # RNG
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise ValueError(
                f"Grid bounds must be positive, got {self.height}x{self.width}"
            )

    @property
    def terminated(self) -> bool:
        return self.outcome != Outcome.RUNNING

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Component maps are included only when non-empty; scalars always.
        Used for debug logging.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
