# tests/unit/test_state.py

from dataclasses import replace

import pytest

from meteor_dodge.components import Path, Shape
from meteor_dodge.entity import Entity, new_entity_id, ordered_entity_ids, peek_entity_id
from meteor_dodge.state import State
from meteor_dodge.types import Outcome
from tests.test_utils import make_meteor_state


@pytest.mark.parametrize("height, width", [(0, 10), (10, 0), (-1, 5), (5, -3)])
def test_state_rejects_non_positive_bounds(height: int, width: int) -> None:
    with pytest.raises(ValueError):
        State(height=height, width=width)


def test_resize_to_zero_is_rejected() -> None:
    state = State(height=10, width=10)
    with pytest.raises(ValueError):
        replace(state, height=0)


def test_terminated_flag() -> None:
    state = State(height=3, width=3)
    assert not state.terminated
    assert replace(state, outcome=Outcome.QUIT).terminated
    assert replace(state, outcome=Outcome.HIT).terminated


def test_entity_ids_are_monotonic_and_never_reused() -> None:
    state, ids = make_meteor_state(
        [((1, 1), Shape.DOT, Path.UP), ((2, 2), Shape.DOT, Path.UP)]
    )
    assert peek_entity_id(state) == 3
    state, eid = new_entity_id(state)
    assert eid == 3
    state, eid = new_entity_id(state)
    assert eid == 4


def test_new_entity_id_skips_ids_already_registered() -> None:
    state, _ = make_meteor_state([((1, 1), Shape.DOT, Path.UP)] * 3)
    state = replace(state, next_id=0)
    _, eid = new_entity_id(state)
    assert eid == 4


def test_ordered_entity_ids_follow_allocation_order() -> None:
    state, ids = make_meteor_state([((1, 1), Shape.DOT, Path.UP)] * 3)
    state = replace(state, entity=state.entity.discard(ids[1]))
    state, eid = new_entity_id(state)
    state = replace(state, entity=state.entity.set(eid, Entity()))
    assert ordered_entity_ids(state) == [ids[0], ids[2], eid]


def test_description_skips_empty_stores() -> None:
    state = State(height=4, width=6)
    description = state.description
    assert "position" not in description
    assert description["height"] == 4
    assert description["outcome"] == Outcome.RUNNING
