"""A maze-chase arcade game on pygame: scenes, game objects, collisions and stage data."""

__version__ = "0.1.0"