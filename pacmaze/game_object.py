"""Base class for everything that lives in a scene."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

import pygame

from pacmaze.collision import CapsuleCollision
from pacmaze.vector2d import Vector2D

if TYPE_CHECKING:
    from pacmaze.scene_base import SceneBase

T = TypeVar("T", bound="GameObject")


class MobilityType(Enum):
    """Whether an object moves and so needs collision checks of its own."""

    STATIONARY = 0
    MOVABLE = 1


class GameObject:
    """An object with a location, a collision shape and an image, owned by a scene."""

    def __init__(self) -> None:
        self.owner_scene: SceneBase | None = None
        self.location = Vector2D()
        self.collision = CapsuleCollision()
        self.image: Any = None
        self.z_layer = 0
        self.mobility = MobilityType.STATIONARY

    def initialize(self) -> None:
        """Set the object up after it is created."""

    def update(self, delta_second: float) -> None:
        """Advance the object by one frame of ``delta_second`` seconds."""

    def draw(self, screen: pygame.Surface, screen_offset: Vector2D) -> None:
        """Draw the object's image centred on its location plus ``screen_offset``."""
        self._draw_image(screen, self.image, screen_offset)

    def finalize(self) -> None:
        """Release what the object holds before it is dropped."""

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """React to touching ``hit_object``."""

    def set_owner_scene(self, scene: SceneBase | None) -> None:
        """Attach the object to the scene that owns it."""
        self.owner_scene = scene

    def create_object(self, cls: type[T], location: Vector2D) -> T:
        """Create a new object of ``cls`` at ``location`` in the owning scene."""
        return self._scene().create_object(cls, location)

    def destroy_object(self, target: GameObject | None) -> None:
        """Ask the owning scene to remove ``target`` at the end of the frame."""
        self._scene().destroy_object(target)

    def screen_offset(self) -> Vector2D:
        """The owning scene's drawing offset."""
        return self._scene().screen_offset

    def _scene(self) -> SceneBase:
        if self.owner_scene is None:
            raise RuntimeError(f"{type(self).__name__} has no owner scene")
        return self.owner_scene

    def _draw_image(
        self,
        screen: pygame.Surface,
        image: Any,
        screen_offset: Vector2D,
        scale: float = 1.0,
    ) -> None:
        if image is None:
            return
        if scale != 1.0:
            image = pygame.transform.rotozoom(image, 0.0, scale)
        position = self.location + screen_offset
        screen.blit(image, image.get_rect(center=(position.x, position.y)))