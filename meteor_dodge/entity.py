"""Entity primitives & ID allocation.

Each meteor is an ``EntityID`` (an integer) plus component dataclasses
stored in persistent maps on :class:`meteor_dodge.state.State`.

IDs come from the state itself (``State.next_id``) rather than a process
global, so two games built from the same seed allocate the same IDs. IDs are
never recycled and only ever grow, which makes ascending ID order equal to
insertion order.
"""

from dataclasses import dataclass, replace
from typing import List, Tuple, TYPE_CHECKING

from meteor_dodge.types import EntityID

if TYPE_CHECKING:
    from meteor_dodge.state import State


@dataclass(frozen=True)
class Entity:
    """Registry marker stored in ``State.entity``."""

    pass


def peek_entity_id(state: "State") -> EntityID:
    """ID the next call to :func:`new_entity_id` will return."""
    return max(state.next_id, max(state.entity.keys(), default=-1) + 1)


def new_entity_id(state: "State") -> Tuple["State", EntityID]:
    """Allocate a fresh ID and return the state with the counter advanced."""
    eid = peek_entity_id(state)
    return replace(state, next_id=eid + 1), eid


def ordered_entity_ids(state: "State") -> List[EntityID]:
    """Entity IDs in insertion order."""
    return sorted(state.entity)
