"""Pillow rendering of a glyph grid.

Each cell becomes a square tile coloured by the glyph it holds. The player
cursor is outlined on top. Composition happens in a numpy RGBA array which is
then wrapped in a ``PIL.Image``.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from meteor_dodge.renderer.surface import BLANK_GLYPH, METEOR_GLYPH, GlyphBuffer
from meteor_dodge.types import Glyph

RGBA = Tuple[int, int, int, int]

DEFAULT_RESOLUTION = 640

DEFAULT_PALETTE: Dict[Glyph, RGBA] = {
    BLANK_GLYPH: (12, 12, 24, 255),
    METEOR_GLYPH: (230, 120, 40, 255),
}
FALLBACK_COLOR: RGBA = (90, 90, 110, 255)
CURSOR_COLOR: RGBA = (80, 220, 255, 255)


@dataclass
class TextureRenderer:
    """Render a :class:`GlyphBuffer` to an RGBA image.

    Attributes:
        resolution: Output width in pixels; height keeps the grid aspect ratio.
        palette: Glyph to colour mapping; unknown glyphs use ``FALLBACK_COLOR``.
    """

    resolution: int = DEFAULT_RESOLUTION
    palette: Dict[Glyph, RGBA] = field(default_factory=lambda: dict(DEFAULT_PALETTE))

    def cell_size(self, width: int) -> int:
        return max(self.resolution // width, 1)

    def to_array(self, buffer: GlyphBuffer) -> NDArray[np.uint8]:
        """Per-cell RGBA colours, shape ``(height, width, 4)``."""
        height, width = buffer.bounds()
        colors = np.empty((height, width, 4), dtype=np.uint8)
        colors[:, :] = FALLBACK_COLOR
        for glyph, color in self.palette.items():
            colors[buffer.cells == glyph] = color
        return colors

    def render(
        self, buffer: GlyphBuffer, cursor: Optional[Tuple[int, int]] = None
    ) -> Image.Image:
        height, width = buffer.bounds()
        size = self.cell_size(width)
        tiles = np.repeat(np.repeat(self.to_array(buffer), size, axis=0), size, axis=1)
        img = Image.fromarray(tiles)

        if cursor is None:
            cursor = buffer.cursor_position()
        row, col = cursor
        if 0 <= row < height and 0 <= col < width:
            draw = ImageDraw.Draw(img)
            draw.rectangle(
                [col * size, row * size, (col + 1) * size - 1, (row + 1) * size - 1],
                outline=CURSOR_COLOR,
                width=max(size // 8, 1),
            )
        return img
