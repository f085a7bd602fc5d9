from dataclasses import replace

import pytest

from meteor_dodge.actions import Event
from meteor_dodge.components import Path, Position, Shape
from meteor_dodge.renderer.surface import GlyphBuffer
from meteor_dodge.step import step
from meteor_dodge.types import Outcome
from tests.test_utils import corner_rng, make_meteor_state


def make_buffer(cursor: tuple[int, int] = (5, 5)) -> GlyphBuffer:
    buffer = GlyphBuffer(10, 10)
    buffer.move_cursor_to(*cursor)
    return buffer


def test_quit_terminates_without_advancing() -> None:
    state, _ = make_meteor_state([((2, 2), Shape.DOT, Path.RIGHT)])
    buffer = make_buffer()
    next_state = step(state, Event.QUIT, buffer, rng=corner_rng())
    assert next_state.outcome == Outcome.QUIT
    assert next_state.score == 0
    assert next_state.position == state.position
    assert "*" not in str(buffer)


def test_terminal_state_is_sticky() -> None:
    state, _ = make_meteor_state()
    state = replace(state, outcome=Outcome.HIT, score=3)
    buffer = make_buffer()
    assert step(state, Event.OTHER, buffer, rng=corner_rng()) is state
    assert step(state, Event.QUIT, buffer, rng=corner_rng()) is state


def test_survived_tick_increments_score_and_population() -> None:
    state, _ = make_meteor_state()
    buffer = make_buffer()
    state = step(state, Event.OTHER, buffer, rng=corner_rng())
    assert state.outcome == Outcome.RUNNING
    assert state.score == 1
    assert state.turn == 1
    assert len(state.entity) == 1


@pytest.mark.parametrize(
    "event, expected",
    [
        (Event.MOVE_UP, (4, 5)),
        (Event.MOVE_DOWN, (6, 5)),
        (Event.MOVE_LEFT, (5, 4)),
        (Event.MOVE_RIGHT, (5, 6)),
        (Event.OTHER, (5, 5)),
    ],
)
def test_move_events_shift_cursor(event: Event, expected: tuple[int, int]) -> None:
    state, _ = make_meteor_state()
    buffer = make_buffer()
    state = step(state, event, buffer, rng=corner_rng())
    assert buffer.cursor_position() == expected
    assert state.score == 1


def test_cursor_stays_at_edge() -> None:
    state, _ = make_meteor_state()
    buffer = make_buffer(cursor=(9, 9))
    state = step(state, Event.MOVE_DOWN, buffer, rng=corner_rng())
    assert buffer.cursor_position() == (9, 9)


def test_moving_cursor_into_meteor_is_hit_before_meteors_move() -> None:
    state, _ = make_meteor_state([((4, 5), Shape.DOT, Path.LEFT)])
    buffer = make_buffer()
    buffer.draw_at(4, 5, "*")
    next_state = step(state, Event.MOVE_UP, buffer, rng=corner_rng())
    assert next_state.outcome == Outcome.HIT
    assert next_state.score == 0
    # Meteors did not advance and nothing spawned
    assert next_state.position == state.position
    assert len(next_state.entity) == 1


def test_meteor_moving_onto_cursor_is_hit_after_move() -> None:
    state, (eid,) = make_meteor_state([((5, 4), Shape.DOT, Path.RIGHT)])
    buffer = make_buffer()
    next_state = step(state, Event.OTHER, buffer, rng=corner_rng())
    assert next_state.outcome == Outcome.HIT
    assert next_state.position[eid] == Position(5, 5)
    assert next_state.score == 0
    assert next_state.turn == 1


def test_cross_arm_sweeping_cursor_is_hit() -> None:
    state, _ = make_meteor_state([((3, 5), Shape.CROSS, Path.DOWN)])
    buffer = make_buffer()
    next_state = step(state, Event.OTHER, buffer, rng=corner_rng())
    assert next_state.outcome == Outcome.HIT


def test_respawned_meteor_on_cursor_is_invisible_for_one_tick() -> None:
    # Leaver exits at the top; its replacement spawns on the cursor at (0, 0).
    state, _ = make_meteor_state([((0, 7), Shape.DOT, Path.UP)])
    buffer = make_buffer(cursor=(0, 0))
    rng = corner_rng()
    state = step(state, Event.OTHER, buffer, rng=rng)
    assert state.outcome == Outcome.RUNNING
    assert any(pos == Position(0, 0) for pos in state.position.values())


def test_resize_updates_bounds_used_for_reaping() -> None:
    state, (eid,) = make_meteor_state([((7, 7), Shape.DOT, Path.RIGHT)])
    buffer = make_buffer(cursor=(1, 1))
    buffer.resize(5, 5)
    state = step(state, Event.RESIZE, buffer, rng=corner_rng())
    assert (state.height, state.width) == (5, 5)
    assert eid not in state.entity
    assert state.outcome == Outcome.RUNNING


def test_unknown_event_is_rejected() -> None:
    state, _ = make_meteor_state()
    with pytest.raises(ValueError):
        step(state, "teleport", make_buffer(), rng=corner_rng())  # type: ignore[arg-type]
