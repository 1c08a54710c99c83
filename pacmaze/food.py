"""Dots the player eats: ordinary food and blinking power food."""

from __future__ import annotations

import pygame

from pacmaze.collision import ObjectType
from pacmaze.game_object import GameObject
from pacmaze.resources import ResourceManager, get_resource_manager
from pacmaze.vector2d import Vector2D

DOT_IMAGE = "Resource/Images/dot.png"
BIG_DOT_IMAGE = "Resource/Images/big_dot.png"

FOOD_SCALE = 0.2
POWER_FOOD_SCALE = 0.25
BLINK_INTERVAL = 0.15


class _Edible(GameObject):
    """Shared set-up for things the player eats."""

    image_path = DOT_IMAGE
    object_type = ObjectType.FOOD

    def __init__(self, resources: ResourceManager | None = None) -> None:
        super().__init__()
        self.resources = resources

    def initialize(self) -> None:
        """Load the image and make a small non-blocking shape the player hits."""
        resources = self.resources if self.resources is not None else get_resource_manager()
        self.image = resources.get_images(self.image_path)[0]
        self.collision.is_blocking = False
        self.collision.object_type = self.object_type
        self.collision.hit_object_type.append(ObjectType.PLAYER)
        self.collision.radius = 1.0
        self.z_layer = 1

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Disappear when the player touches it."""
        if hit_object.collision.object_type is ObjectType.PLAYER:
            self.destroy_object(self)


class Food(_Edible):
    """An ordinary dot."""

    image_path = DOT_IMAGE
    object_type = ObjectType.FOOD

    def initialize(self) -> None:
        """Load the dot image and set up its collision shape."""
        super().initialize()

    def draw(self, screen: pygame.Surface, screen_offset: Vector2D) -> None:
        """Draw the dot shrunk to a fifth of its size."""
        self._draw_image(screen, self.image, screen_offset, scale=FOOD_SCALE)

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Disappear when the player touches it."""
        super().on_hit_collision(hit_object)


class PowerFood(_Edible):
    """A large blinking dot that powers the player up."""

    image_path = BIG_DOT_IMAGE
    object_type = ObjectType.POWER_FOOD

    def __init__(self, resources: ResourceManager | None = None) -> None:
        super().__init__(resources)
        self.is_disp = True
        self.disp_time = 0.0

    def initialize(self) -> None:
        """Load the big dot image and set up its collision shape."""
        super().initialize()

    def update(self, delta_second: float) -> None:
        """Toggle visibility every blink interval."""
        self.disp_time += delta_second
        if self.disp_time >= BLINK_INTERVAL:
            self.disp_time = 0.0
            self.is_disp = not self.is_disp

    def draw(self, screen: pygame.Surface, screen_offset: Vector2D) -> None:
        """Draw the big dot while it is visible."""
        if self.is_disp:
            self._draw_image(screen, self.image, screen_offset, scale=POWER_FOOD_SCALE)

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Disappear when the player touches it."""
        super().on_hit_collision(hit_object)