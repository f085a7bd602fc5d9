"""Gymnasium environment wrapper for Meteor Dodge.

The agent plays the cursor. Each ``step`` feeds one input event to the game
reducer against an in-memory :class:`GlyphBuffer`, so the environment sees
exactly what a terminal player would.

Observation schema:

``{"grid": np.ndarray(H, W) uint8, "cursor": np.ndarray(2,) int64, "info": {...}}``

``grid`` holds ``0`` for blank cells, ``1`` for meteor cells and ``2`` for
anything else. Reward is ``1.0`` per survived tick. ``terminated`` is set
when the cursor is hit; episodes are never truncated.

Usage:

``env = MeteorDodgeEnv(height=20, width=40, num_meteors=10)``
"""

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from numpy.typing import NDArray
from gymnasium import spaces
from PIL.Image import Image as PILImage

from meteor_dodge.actions import GYM_ACTION_EVENTS, GymAction
from meteor_dodge.collision import footprint_hit
from meteor_dodge.config import DEFAULT_CONFIG, GameConfig
from meteor_dodge.levels.factories import DEFAULT_NUM_METEORS, generate
from meteor_dodge.renderer.surface import GlyphBuffer
from meteor_dodge.renderer.texture import DEFAULT_RESOLUTION, TextureRenderer
from meteor_dodge.state import State
from meteor_dodge.step import step
from meteor_dodge.types import Outcome

ObsType = Dict[str, Any]

CELL_BLANK = 0
CELL_METEOR = 1
CELL_OTHER = 2


def encode_grid(buffer: GlyphBuffer, config: GameConfig) -> NDArray[np.uint8]:
    """Integer cell codes for a glyph buffer."""
    grid = np.full(buffer.cells.shape, CELL_OTHER, dtype=np.uint8)
    grid[buffer.cells == config.blank_glyph] = CELL_BLANK
    grid[buffer.cells == config.meteor_glyph] = CELL_METEOR
    return grid


def env_status_observation_dict(
    state: State, cursor: Tuple[int, int]
) -> Dict[str, Any]:
    """Status portion of the observation (score, phase, turn, meteor count)."""
    return {
        "score": int(state.score),
        "phase": str(state.outcome),
        "turn": int(state.turn),
        "meteors": len(state.entity),
        "overlapping": int(footprint_hit(state, cursor)),
    }


class MeteorDodgeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` for the meteor game.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`meteor_dodge.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        height: int = 20,
        width: int = 40,
        num_meteors: int = DEFAULT_NUM_METEORS,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        config: GameConfig = DEFAULT_CONFIG,
    ):
        """Create a new environment instance.

        Arguments:
            height: Grid rows.
            width: Grid columns.
            num_meteors: Meteors on the board at reset.
            render_mode: "texture" to return PIL image frames, "human" to open a viewer.
            render_resolution: Width (pixels) of rendered images.
            config: Glyph settings shared with the game reducer.
        """
        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")
        self.height = height
        self.width = width
        self.num_meteors = num_meteors
        self.render_mode = render_mode
        self.config = replace(config, num_meteors=num_meteors)
        self._texture_renderer = TextureRenderer(resolution=render_resolution)

        self.state: Optional[State] = None
        self.buffer = GlyphBuffer(height, width, blank=self.config.blank_glyph)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0, high=CELL_OTHER, shape=(height, width), dtype=np.uint8
                ),
                "cursor": spaces.Box(
                    low=np.array([0, 0], dtype=np.int64),
                    high=np.array([height - 1, width - 1], dtype=np.int64),
                    dtype=np.int64,
                ),
                "info": spaces.Dict(
                    {
                        "score": int_box(0, 1_000_000_000),
                        "phase": spaces.Text(max_length=16),
                        "turn": int_box(0, 1_000_000_000),
                        "meteors": int_box(0, 1_000_000_000),
                        "overlapping": int_box(0, 1),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode on a blank board with the cursor centred."""
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.buffer = GlyphBuffer(self.height, self.width, blank=self.config.blank_glyph)
        self.state = generate(
            self.height, self.width, num_meteors=self.num_meteors, seed=game_seed
        )
        return self._get_obs(), {}

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one input event.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None, "Call reset() before step()"
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        event = GYM_ACTION_EVENTS[GymAction(int(action))]

        prev_score = self.state.score
        self.state = step(self.state, event, self.buffer, self.config)
        reward = float(self.state.score - prev_score)
        terminated = self.state.outcome == Outcome.HIT
        return self._get_obs(), reward, terminated, False, {}

    def render(self) -> Optional[PILImage]:  # type: ignore[override]
        img = self._texture_renderer.render(self.buffer)
        if self.render_mode == "human":
            img.show()
            return None
        return img

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        cursor = self.buffer.cursor_position()
        return {
            "grid": encode_grid(self.buffer, self.config),
            "cursor": np.array(cursor, dtype=np.int64),
            "info": env_status_observation_dict(self.state, cursor),
        }

    def close(self) -> None:
        pass
