# tests/unit/test_collision.py

from meteor_dodge.collision import footprint_hit, is_hit
from meteor_dodge.components import Path, Shape
from meteor_dodge.renderer.surface import GlyphBuffer
from tests.test_utils import make_meteor_state


def test_is_hit_reads_rendered_glyph() -> None:
    buffer = GlyphBuffer(10, 10)
    assert not is_hit((5, 5), buffer)
    buffer.draw_at(5, 5, "*")
    assert is_hit((5, 5), buffer)
    assert not is_hit((5, 6), buffer)


def test_is_hit_uses_configured_glyph() -> None:
    buffer = GlyphBuffer(4, 4)
    buffer.draw_at(1, 1, "@")
    assert not is_hit((1, 1), buffer)
    assert is_hit((1, 1), buffer, glyph="@")


def test_other_glyphs_are_not_hits() -> None:
    buffer = GlyphBuffer(4, 4)
    buffer.draw_at(0, 0, "|")
    assert not is_hit((0, 0), buffer)


def test_footprint_hit_uses_shapes() -> None:
    state, _ = make_meteor_state([((5, 5), Shape.X, Path.UP)])
    assert footprint_hit(state, (5, 5))
    assert footprint_hit(state, (4, 4))
    assert footprint_hit(state, (6, 6))
    assert not footprint_hit(state, (4, 5))


def test_footprint_hit_sees_unpainted_meteors_but_surface_probe_does_not() -> None:
    state, _ = make_meteor_state([((2, 2), Shape.DOT, Path.UP)])
    buffer = GlyphBuffer(10, 10)
    assert footprint_hit(state, (2, 2))
    assert not is_hit((2, 2), buffer)
