"""Input events.

:class:`Event` is what an input source produces for every keystroke (or
terminal notification). :class:`GymAction` is the stable integer mapping used
by the Gymnasium environment.

``MOVE_EVENTS`` maps each movement event to its (Δrow, Δcol) cursor offset.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple


class Event(StrEnum):
    """String enum of input events.

    Members:
        MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT: Cursor moves.
        QUIT: Leave the game.
        RESIZE: The terminal changed size; bounds must be re-read.
        OTHER: Any unrecognized key. Still advances the game one tick.
    """

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    QUIT = auto()
    RESIZE = auto()
    OTHER = auto()


MOVE_EVENTS: Dict[Event, Tuple[int, int]] = {
    Event.MOVE_UP: (-1, 0),
    Event.MOVE_DOWN: (1, 0),
    Event.MOVE_LEFT: (0, -1),
    Event.MOVE_RIGHT: (0, 1),
}


class GymAction(IntEnum):
    """Stable integer mapping for Gymnasium ``Discrete`` spaces."""

    UP = 0
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()


GYM_ACTION_EVENTS: Dict[GymAction, Event] = {
    GymAction.UP: Event.MOVE_UP,
    GymAction.DOWN: Event.MOVE_DOWN,
    GymAction.LEFT: Event.MOVE_LEFT,
    GymAction.RIGHT: Event.MOVE_RIGHT,
    GymAction.WAIT: Event.OTHER,
}
