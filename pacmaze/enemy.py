"""Maze ghosts: a shared enemy base and the four coloured ghosts."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pygame

from pacmaze.collision import ObjectType, nearest_point
from pacmaze.config import OBJECT_SIZE
from pacmaze.game_object import GameObject, MobilityType
from pacmaze.resources import ResourceManager, get_resource_manager
from pacmaze.vector2d import Vector2D

MONSTER_IMAGE = "Resource/Images/monster.png"
EYES_IMAGE = "Resource/Images/eyes.png"

ENEMY_SPEED = 50.0
MOVE_STEP = 2.0
FRAME_TIME = 1.0 / 16.0
FRIGHTENED_DURATION = 8.0
FRIGHTENED_FRAMES = (16, 17)

EYES_UP = 0
EYES_RIGHT = 1
EYES_DOWN = 2
EYES_LEFT = 3


class EnemyState(Enum):
    """What a ghost is doing."""

    FRIGHTENED = 0
    MOVE = 1
    HOME = 2


class EnemyBase(GameObject):
    """A ghost that walks straight, bounces off walls and can be frightened."""

    move_frames: tuple[int, int] = (0, 1)

    def __init__(self, resources: ResourceManager | None = None) -> None:
        super().__init__()
        self.resources = resources
        self.move_animation: tuple[Any, ...] = ()
        self.eyes_animation: tuple[Any, ...] = ()
        self.eye_image: Any = None
        self.velocity = Vector2D()
        self.enemy_state = EnemyState.MOVE
        self.animation_time = 0.0
        self.animation_count = 0
        self.frightened_time = 0.0
        self.is_frightened = False
        self.powerdown = False
        """Set for one frame when the frightened period has just run out."""

    def _resources(self) -> ResourceManager:
        return self.resources if self.resources is not None else get_resource_manager()

    def initialize(self) -> None:
        """Load the eyes, set up the collision shape and start moving right."""
        self.eyes_animation = self._resources().get_images(EYES_IMAGE, 4, 4, 1, 32, 32)
        self.eye_image = self.eyes_animation[EYES_RIGHT]

        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.ENEMY
        self.collision.hit_object_type.extend((ObjectType.PLAYER, ObjectType.WALL))
        self.collision.radius = (OBJECT_SIZE - 1.0) / 2.0

        self.z_layer = 5
        self.mobility = MobilityType.MOVABLE
        self.velocity = Vector2D(MOVE_STEP, 0.0)
        self.frightened_time = FRIGHTENED_DURATION

    def update(self, delta_second: float) -> None:
        """Move, animate and count down the frightened period."""
        self._movement(delta_second)
        if self.enemy_state is EnemyState.FRIGHTENED:
            self._advance_frame(delta_second)
        else:
            self._animation_control(delta_second)

        if self.is_frightened:
            self.enemy_state = EnemyState.FRIGHTENED
            self.frightened_time -= delta_second
            if self.frightened_time <= 0:
                self.enemy_state = EnemyState.MOVE
                self.is_frightened = False
                self.powerdown = True
        else:
            self.powerdown = False
            self.frightened_time = FRIGHTENED_DURATION

    def draw(self, screen: pygame.Surface, screen_offset: Vector2D) -> None:
        """Draw the body unless going home, and the eyes unless frightened."""
        if self.enemy_state in (EnemyState.MOVE, EnemyState.FRIGHTENED):
            self._draw_image(screen, self.image, screen_offset)
        if self.enemy_state in (EnemyState.MOVE, EnemyState.HOME):
            self._draw_image(screen, self.eye_image, screen_offset)

    def finalize(self) -> None:
        """Drop the animation frames."""
        self.move_animation = ()
        self.eyes_animation = ()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Bounce back from walls; head home when caught while frightened."""
        hit_type = hit_object.collision.object_type
        if hit_type is ObjectType.WALL:
            wall = hit_object.collision.translated(hit_object.location)
            near = nearest_point(wall, self.location)
            away = self.location - near
            overlap = (self.collision.radius + wall.radius) - away.length()
            self.location = self.location + away.normalize() * overlap
            self.velocity = -self.velocity

        if hit_type is ObjectType.PLAYER and self.enemy_state is EnemyState.FRIGHTENED:
            self.is_frightened = False
            self.enemy_state = EnemyState.HOME

    def frighten(self) -> None:
        """Start the frightened period from the next update."""
        self.is_frightened = True

    def _load_body(self) -> None:
        self.move_animation = self._resources().get_images(MONSTER_IMAGE, 20, 20, 1, 32, 32)
        self.image = self.move_animation[self.move_frames[0]]

    def _show_frightened_frame(self) -> None:
        if self.enemy_state is EnemyState.FRIGHTENED and self.move_animation:
            self.image = self.move_animation[FRIGHTENED_FRAMES[self.animation_count]]

    def _movement(self, delta_second: float) -> None:
        self.location = self.location + self.velocity * ENEMY_SPEED * delta_second

    def _advance_frame(self, delta_second: float) -> bool:
        self.animation_time += delta_second
        if self.animation_time < FRAME_TIME:
            return False
        self.animation_time = 0.0
        self.animation_count = (self.animation_count + 1) % 2
        return True

    def _animation_control(self, delta_second: float) -> None:
        if self.enemy_state is EnemyState.MOVE:
            if self._advance_frame(delta_second) and self.move_animation:
                self.image = self.move_animation[self.move_frames[self.animation_count]]

        if not self.eyes_animation:
            return
        if self.velocity.x > 0:
            self.eye_image = self.eyes_animation[EYES_RIGHT]
        elif self.velocity.x < 0:
            self.eye_image = self.eyes_animation[EYES_LEFT]
        elif self.velocity.y > 0:
            self.eye_image = self.eyes_animation[EYES_DOWN]
        elif self.velocity.y < 0:
            self.eye_image = self.eyes_animation[EYES_UP]


class RedEnemy(EnemyBase):
    """The red ghost."""

    move_frames = (0, 1)

    def initialize(self) -> None:
        """Set up the ghost and load its body frames."""
        super().initialize()
        self._load_body()

    def update(self, delta_second: float) -> None:
        """Run the shared update, then show the frightened body if frightened."""
        super().update(delta_second)
        self._show_frightened_frame()


class BlueEnemy(EnemyBase):
    """The blue ghost."""

    move_frames = (4, 5)

    def initialize(self) -> None:
        """Set up the ghost and load its body frames."""
        super().initialize()
        self._load_body()

    def update(self, delta_second: float) -> None:
        """Run the shared update, then show the frightened body if frightened."""
        super().update(delta_second)
        self._show_frightened_frame()


class PinkEnemy(EnemyBase):
    """The pink ghost."""

    move_frames = (2, 3)

    def initialize(self) -> None:
        """Set up the ghost and load its body frames."""
        super().initialize()
        self._load_body()

    def update(self, delta_second: float) -> None:
        """Run the shared update, then show the frightened body if frightened."""
        super().update(delta_second)
        self._show_frightened_frame()


class YellowEnemy(EnemyBase):
    """The yellow ghost."""

    move_frames = (6, 7)

    def initialize(self) -> None:
        """Set up the ghost and load its body frames."""
        super().initialize()
        self._load_body()

    def update(self, delta_second: float) -> None:
        """Run the shared update, then show the frightened body if frightened."""
        super().update(delta_second)
        self._show_frightened_frame()