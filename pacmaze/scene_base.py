"""Scene base class: owns objects, updates, collides, destroys and draws them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_right
from enum import Enum
from typing import TypeVar

import pygame

from pacmaze.game_object import GameObject, MobilityType
from pacmaze.vector2d import Vector2D

T = TypeVar("T", bound=GameObject)


class SceneType(Enum):
    """The scenes the game can be in."""

    TITLE = 0
    IN_GAME = 1
    RE_START = 2
    RESULT = 3
    EXIT = 4


class SceneBase(ABC):
    """Holds the objects of one scene and drives them frame by frame."""

    def __init__(self) -> None:
        self.create_list: list[GameObject] = []
        self.object_list: list[GameObject] = []
        self.destroy_list: list[GameObject] = []
        self.screen_offset = Vector2D()

    def initialize(self) -> None:
        """Set the scene up."""

    def update(self, delta_second: float) -> SceneType:
        """Run one frame and return the scene type to be in next."""
        for obj in self.create_list:
            index = bisect_right(self.object_list, obj.z_layer, key=lambda o: o.z_layer)
            self.object_list.insert(index, obj)
        self.create_list.clear()

        for obj in self.object_list:
            obj.update(delta_second)

        for i, target in enumerate(self.object_list):
            if target.mobility is MobilityType.STATIONARY:
                continue
            for j, partner in enumerate(self.object_list):
                if i != j:
                    self.check_collision(target, partner)

        for obj in self.destroy_list:
            for index, candidate in enumerate(self.object_list):
                if candidate is obj:
                    del self.object_list[index]
                    obj.finalize()
                    break
        self.destroy_list.clear()

        return self.now_scene_type()

    def draw(self, screen: pygame.Surface) -> None:
        """Draw every object with the scene's offset."""
        for obj in self.object_list:
            obj.draw(screen, self.screen_offset)

    def finalize(self) -> None:
        """Finalize and drop every object of the scene."""
        for obj in self.object_list:
            obj.finalize()
        self.object_list.clear()
        self.create_list.clear()
        self.destroy_list.clear()

    @abstractmethod
    def now_scene_type(self) -> SceneType:
        """The type of this scene."""

    def check_collision(self, target: GameObject, partner: GameObject) -> None:
        """Test two objects against each other and notify them of a hit."""

    def create_object(self, cls: type[T], location: Vector2D) -> T:
        """Create, initialize and place an object; it joins the scene next update."""
        instance = cls()
        if not isinstance(instance, GameObject):
            raise TypeError(f"{cls.__name__} is not a game object")
        instance.set_owner_scene(self)
        instance.initialize()
        instance.location = location
        self.create_list.append(instance)
        return instance

    def destroy_object(self, target: GameObject | None) -> None:
        """Mark an object to be removed at the end of the next update."""
        if target is None:
            return
        if any(obj is target for obj in self.destroy_list):
            return
        self.destroy_list.append(target)