"""Meteor Dodge: a turn-per-keystroke terminal game.

The simulation is an immutable ECS: a frozen :class:`meteor_dodge.state.State`
holds persistent component maps, and systems are pure functions from one
``State`` to the next. The only side effects are paint callbacks into a
render surface (see :mod:`meteor_dodge.renderer.surface`).
"""
