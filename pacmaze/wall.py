"""Invisible maze wall segments that block movers."""

from __future__ import annotations

import pygame

from pacmaze.collision import ObjectType
from pacmaze.config import OBJECT_SIZE
from pacmaze.game_object import GameObject
from pacmaze.vector2d import Vector2D


class Wall(GameObject):
    """A straight run of wall tiles with a capsule collision shape."""

    def initialize(self) -> None:
        """Make the wall a blocking shape that players and enemies hit."""
        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.WALL
        self.collision.hit_object_type.extend((ObjectType.PLAYER, ObjectType.ENEMY))
        self.collision.radius = OBJECT_SIZE / 2.0

    def draw(self, screen: pygame.Surface, screen_offset: Vector2D) -> None:
        """Walls are part of the background image and draw nothing."""

    def set_wall_data(self, x_size: int, y_size: int) -> None:
        """Size the segment for a run of ``x_size`` by ``y_size`` tiles."""
        end_x = 0.0
        end_y = 0.0
        if x_size == 1:
            end_y = OBJECT_SIZE * (y_size - 1)
        if y_size == 1:
            end_x = OBJECT_SIZE * (x_size - 1)
        self.collision.point = (Vector2D(), Vector2D(end_x, end_y))