"""Tick reducer.

:func:`step` advances the game by exactly one input event. Ordering within a
tick:

1. Apply the event: quit ends the game at once, moves shift the cursor on the
   surface, a resize re-reads the surface bounds, anything else is a no-op.
2. Probe for a hit caused by the cursor moving into a meteor.
3. Spawn one meteor, run the erase/move/draw pass, reap and respawn.
4. Probe again for a hit caused by meteors moving onto the cursor.
5. Count the survived tick.

The probes read the render surface, so every paint of step 3 has completed
before the second probe runs.
"""

import random
from dataclasses import replace
from typing import Optional

from loguru import logger

from meteor_dodge.actions import Event, MOVE_EVENTS
from meteor_dodge.collision import is_hit
from meteor_dodge.config import DEFAULT_CONFIG, GameConfig
from meteor_dodge.renderer.surface import RenderSurface, drawer, eraser
from meteor_dodge.state import State
from meteor_dodge.systems.moving import moving_system
from meteor_dodge.systems.reap import reap_and_respawn
from meteor_dodge.systems.spawn import spawn_one
from meteor_dodge.types import Outcome


def step(
    state: State,
    event: Event,
    surface: RenderSurface,
    config: GameConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> State:
    """Advance the game by one input event.

    Args:
        state (State): Previous world state.
        event (Event): Input event that triggered this tick.
        surface (RenderSurface): Shared surface meteors are painted on and the
            cursor lives on.
        config (GameConfig): Glyph settings.
        rng (random.Random | None): Explicit generator for spawns; by default
            each spawn derives its own from ``state.seed``.

    Returns:
        State: Next state. Terminal states are returned unchanged.

    Raises:
        ValueError: If the event is not recognized.
    """
    if state.terminated:
        return state

    if event == Event.QUIT:
        logger.info(f"Player quit at score {state.score}")
        return replace(state, outcome=Outcome.QUIT)

    state = _apply_event(state, event, surface)

    if is_hit(surface.cursor_position(), surface, config.meteor_glyph):
        return _hit(state, surface, "cursor moved into a meteor")

    state = spawn_one(state, rng)
    state = moving_system(
        state, eraser(surface), drawer(surface, config.meteor_glyph)
    )
    state = reap_and_respawn(state, rng)

    if is_hit(surface.cursor_position(), surface, config.meteor_glyph):
        return _hit(state, surface, "meteor moved onto the cursor")

    return replace(state, score=state.score + 1, turn=state.turn + 1)


def _apply_event(state: State, event: Event, surface: RenderSurface) -> State:
    if event in MOVE_EVENTS:
        d_row, d_col = MOVE_EVENTS[event]
        row, col = surface.cursor_position()
        surface.move_cursor_to(row + d_row, col + d_col)
    elif event == Event.RESIZE:
        height, width = surface.bounds()
        logger.debug(f"Resized to {height}x{width}")
        state = replace(state, height=height, width=width)
    elif event != Event.OTHER:
        raise ValueError(f"Event is not valid: {event!r}")
    return state


def _hit(state: State, surface: RenderSurface, reason: str) -> State:
    logger.info(
        f"Hit at {surface.cursor_position()} ({reason}); final score {state.score}"
    )
    return replace(state, outcome=Outcome.HIT, turn=state.turn + 1)
