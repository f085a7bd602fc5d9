import random

import pytest

from meteor_dodge.components import Path, Position, Shape
from meteor_dodge.renderer.surface import GlyphBuffer, drawer, eraser
from meteor_dodge.systems.moving import moving_system
from meteor_dodge.systems.reap import out_of_bounds_ids, reap_and_respawn, remove_meteors
from meteor_dodge.systems.spawn import spawn_one
from meteor_dodge.utils.grid import is_in_bounds
from tests.test_utils import corner_rng, make_meteor_state


def _noop(pos: Position, shape: Shape) -> None:
    pass


def test_meteor_leaving_top_is_replaced() -> None:
    state, (eid,) = make_meteor_state([((0, 5), Shape.DOT, Path.UP)])
    state = moving_system(state, _noop, _noop)
    assert state.position[eid] == Position(-1, 5)

    state = reap_and_respawn(state)
    assert eid not in state.entity
    assert eid not in state.position
    assert len(state.entity) == 1
    (new_id,) = state.entity
    assert new_id > eid
    assert is_in_bounds(state, state.position[new_id])


@pytest.mark.parametrize(
    "start, path",
    [
        ((0, 5), Path.UP),
        ((9, 5), Path.DOWN),
        ((5, 0), Path.LEFT),
        ((5, 9), Path.RIGHT),
        ((0, 0), Path.UP_LEFT),
        ((9, 9), Path.DOWN_RIGHT),
        ((0, 4), Path.UP_RIGHT),
        ((4, 0), Path.DOWN_LEFT),
    ],
)
def test_every_edge_sentinel_is_reaped(start: tuple[int, int], path: Path) -> None:
    state, (eid,) = make_meteor_state([(start, Shape.DOT, path)])
    state = moving_system(state, _noop, _noop)
    assert out_of_bounds_ids(state) == [eid]
    state = reap_and_respawn(state)
    assert eid not in state.entity
    assert len(state.entity) == 1


def test_in_bounds_meteors_survive_untouched() -> None:
    state, ids = make_meteor_state(
        [((0, 5), Shape.DOT, Path.UP), ((5, 5), Shape.X, Path.LEFT)]
    )
    state = moving_system(state, _noop, _noop)
    state = reap_and_respawn(state)
    assert ids[0] not in state.entity
    assert state.position[ids[1]] == Position(5, 4)
    assert len(state.entity) == 2


def test_no_meteor_outside_bounds_after_reap() -> None:
    state, _ = make_meteor_state(
        [((r, c), Shape.CROSS, p) for r, c in [(0, 0), (9, 9), (0, 9), (9, 0)] for p in Path]
    )
    state = moving_system(state, _noop, _noop)
    state = reap_and_respawn(state)
    for pos in state.position.values():
        assert pos.row not in (-1, state.height)
        assert pos.col not in (-1, state.width)
    assert len(state.entity) == 32


def test_reap_is_idempotent() -> None:
    state, _ = make_meteor_state(
        [((0, 1), Shape.DOT, Path.UP), ((9, 3), Shape.DOT, Path.DOWN), ((4, 4), Shape.DOT, Path.LEFT)]
    )
    state = moving_system(state, _noop, _noop)
    once = reap_and_respawn(state)
    twice = reap_and_respawn(once)
    assert twice == once


def test_population_grows_by_exactly_one_per_cycle() -> None:
    rng = random.Random(7)
    state, _ = make_meteor_state(
        [((r, c), Shape.DOT, p) for (r, c), p in zip([(0, 0), (3, 3), (9, 9), (5, 0)], Path)]
    )
    buffer = GlyphBuffer(10, 10)
    for _ in range(50):
        before = len(state.entity)
        state = spawn_one(state, rng)
        state = moving_system(state, eraser(buffer), drawer(buffer))
        state = reap_and_respawn(state, rng)
        assert len(state.entity) == before + 1
        assert not out_of_bounds_ids(state)


def test_respawned_meteor_is_not_painted_until_next_step() -> None:
    buffer = GlyphBuffer(10, 10)
    state, _ = make_meteor_state([((0, 3), Shape.DOT, Path.UP)])
    state = moving_system(state, eraser(buffer), drawer(buffer))
    # Replacement spawns at (0, 0)
    state = reap_and_respawn(state, corner_rng())
    (new_id,) = state.entity
    assert state.position[new_id] == Position(0, 0)
    assert "*" not in str(buffer)


def test_meteor_outside_shrunken_grid_is_reaped() -> None:
    from dataclasses import replace

    state, (eid,) = make_meteor_state([((8, 8), Shape.DOT, Path.RIGHT)])
    state = replace(state, height=5, width=5)
    state = reap_and_respawn(state)
    assert eid not in state.entity
    (new_id,) = state.entity
    assert is_in_bounds(state, state.position[new_id])


def test_remove_meteors_prunes_every_store() -> None:
    state, ids = make_meteor_state(
        [((1, 1), Shape.DOT, Path.UP), ((2, 2), Shape.CROSS, Path.LEFT)]
    )
    state = remove_meteors(state, [ids[0], 99])
    for store in (state.entity, state.position, state.appearance, state.moving):
        assert set(store) == {ids[1]}
    assert state.next_id == 3


def test_replacements_get_ids_above_reaped_ones() -> None:
    state, ids = make_meteor_state(
        [((4, 4), Shape.DOT, Path.LEFT), ((0, 9), Shape.DOT, Path.UP_RIGHT)]
    )
    state = moving_system(state, _noop, _noop)
    state = reap_and_respawn(state, corner_rng())
    assert sorted(state.entity) == [ids[0], 3]
