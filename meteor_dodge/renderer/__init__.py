"""Rendering subpackage.

* :mod:`meteor_dodge.renderer.surface`: the render-surface protocol shared by
  the simulation and the collision probe, plus an in-memory numpy glyph
  buffer.
* :mod:`meteor_dodge.renderer.terminal`: curses-backed surface and input.
* :mod:`meteor_dodge.renderer.texture`: Pillow image rendering of a glyph
  buffer, used by the Gymnasium environment.
"""
