"""Game configuration.

``GameConfig`` bundles the knobs the loop and the terminal front end read.
``DEFAULT_CONFIG`` matches the classic game: ``*`` meteors on a blank field,
ten meteors at start, vi keys to move and ``q`` to quit. Command-line flags
override fields through ``dataclasses.replace``.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from meteor_dodge.actions import Event
from meteor_dodge.levels.factories import DEFAULT_NUM_METEORS
from meteor_dodge.types import Glyph

VI_KEYS: PMap[str, Event] = pmap(
    {
        "k": Event.MOVE_UP,
        "j": Event.MOVE_DOWN,
        "h": Event.MOVE_LEFT,
        "l": Event.MOVE_RIGHT,
        "q": Event.QUIT,
    }
)

HELP_TEXT = "vi keys to move, 'q' to quit, new meteor with every move"


@dataclass(frozen=True)
class GameConfig:
    """Tunable game settings.

    Attributes:
        meteor_glyph: Character painted for meteor cells and probed for hits.
        blank_glyph: Character used to erase cells.
        num_meteors: Meteors on the board before the first tick.
        seed: Base RNG seed; ``None`` for a fresh game every run.
        keymap: Character key to input event bindings.
        board: Fixed ``(height, width)`` playfield, or ``None`` to use the
            whole terminal.
    """

    meteor_glyph: Glyph = "*"
    blank_glyph: Glyph = " "
    num_meteors: int = DEFAULT_NUM_METEORS
    seed: Optional[int] = None
    keymap: PMap[str, Event] = VI_KEYS
    board: Optional[Tuple[int, int]] = None


DEFAULT_CONFIG = GameConfig()


# The classic layout expects an 85x40 terminal.
BOARD_PRESETS: Dict[str, Optional[Tuple[int, int]]] = {
    "terminal": None,
    "classic": (40, 85),
    "small": (20, 40),
}
"""Registry of named playfield sizes selectable from the command line."""
