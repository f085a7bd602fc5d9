"""Game loop.

Pulls one blocking input event at a time and feeds it to
:func:`meteor_dodge.step.step` until the player quits or is hit.
"""

import random
from typing import Optional, Protocol

from loguru import logger

from meteor_dodge.actions import Event
from meteor_dodge.config import DEFAULT_CONFIG, GameConfig
from meteor_dodge.levels.factories import generate
from meteor_dodge.renderer.surface import RenderSurface
from meteor_dodge.state import State
from meteor_dodge.step import step


class InputSource(Protocol):
    def next_event(self) -> Event: ...


def run(
    state: State,
    surface: RenderSurface,
    source: InputSource,
    config: GameConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> State:
    """Step ``state`` with events from ``source`` until it is terminal."""
    while not state.terminated:
        state = step(state, source.next_event(), surface, config, rng)
    logger.info(f"Game over ({state.outcome}) after {state.turn} ticks")
    logger.debug(f"Final state: {state.description}")
    return state


def play(
    surface: RenderSurface,
    source: InputSource,
    config: GameConfig = DEFAULT_CONFIG,
) -> int:
    """Play a full game on ``surface`` and return the final score."""
    height, width = surface.bounds()
    state = generate(height, width, num_meteors=config.num_meteors, seed=config.seed)
    return run(state, surface, source, config).score
