"""The player character: steering through the maze, eating and dying."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

import pygame

from pacmaze.collision import ObjectType, nearest_point
from pacmaze.config import OBJECT_SIZE, WIN_MAX_X
from pacmaze.game_object import GameObject, MobilityType
from pacmaze.input_manager import (
    BUTTON_DPAD_DOWN,
    BUTTON_DPAD_LEFT,
    BUTTON_DPAD_RIGHT,
    BUTTON_DPAD_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    InputManager,
    get_input_manager,
)
from pacmaze.resources import ResourceManager, get_resource_manager
from pacmaze.stage_data import PanelID, StageData, default_stage
from pacmaze.vector2d import Vector2D

PACMAN_IMAGE = "Resource/Images/pacman.png"
DYING_IMAGE = "Resource/Images/dying.png"

PLAYER_SPEED = 50.0
MOVE_STEP = 2.0
MOVE_FRAME_TIME = 1.0 / 16.0
DYING_FRAME_TIME = 0.07
IDLE_FRAME = 9
ANIMATION_ORDER = (0, 1, 2, 1)


class PlayerState(Enum):
    """What the player is doing."""

    IDLE = 0
    MOVE = 1
    DIE = 2


class Direction(IntEnum):
    """Heading of the player; the order matches the sprite sheet rows of three."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    NONE = 4

    @property
    def opposite(self) -> Direction:
        if self is Direction.NONE:
            return Direction.NONE
        return Direction((self.value + 2) % 4)


_CONTROLS = (
    (Direction.UP, KEY_UP, BUTTON_DPAD_UP),
    (Direction.DOWN, KEY_DOWN, BUTTON_DPAD_DOWN),
    (Direction.LEFT, KEY_LEFT, BUTTON_DPAD_LEFT),
    (Direction.RIGHT, KEY_RIGHT, BUTTON_DPAD_RIGHT),
)


def _steer(velocity: Vector2D, direction: Direction) -> Vector2D:
    """Velocity with the component for ``direction`` set to the move step."""
    if direction is Direction.UP:
        return Vector2D(velocity.x, -MOVE_STEP)
    if direction is Direction.DOWN:
        return Vector2D(velocity.x, MOVE_STEP)
    if direction is Direction.LEFT:
        return Vector2D(-MOVE_STEP, velocity.y)
    if direction is Direction.RIGHT:
        return Vector2D(MOVE_STEP, velocity.y)
    return velocity


class Player(GameObject):
    """The player, moved by the keyboard or the pad's direction buttons."""

    def __init__(
        self,
        input_manager: InputManager | None = None,
        stage: StageData | None = None,
        resources: ResourceManager | None = None,
    ) -> None:
        super().__init__()
        self.input_manager = input_manager
        self.stage = stage
        self.resources = resources
        self.move_animation: tuple[Any, ...] = ()
        self.dying_animation: tuple[Any, ...] = ()
        self.old_location = Vector2D()
        self.velocity = Vector2D()
        self.player_state = PlayerState.MOVE
        self.now_direction = Direction.LEFT
        self.next_direction = Direction.LEFT
        self.food_count = 0
        self.animation_time = 0.0
        self.animation_count = 0
        self.old_panel = PanelID.NONE
        self.is_power_up = False
        self.is_destroy = False

    def initialize(self) -> None:
        """Load the sprite sheets and set up the collision shape."""
        resources = self.resources if self.resources is not None else get_resource_manager()
        self.move_animation = resources.get_images(PACMAN_IMAGE, 12, 12, 1, 32, 32)
        self.dying_animation = resources.get_images(DYING_IMAGE, 11, 11, 1, 32, 32)

        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.PLAYER
        self.collision.hit_object_type.extend(
            (
                ObjectType.ENEMY,
                ObjectType.WALL,
                ObjectType.FOOD,
                ObjectType.POWER_FOOD,
                ObjectType.SPECIAL,
            )
        )
        self.collision.radius = (OBJECT_SIZE - 1.0) / 2.0
        self.z_layer = 5
        self.mobility = MobilityType.MOVABLE

    def update(self, delta_second: float) -> None:
        """Act according to the current state."""
        if self.player_state is PlayerState.IDLE:
            self.image = self.move_animation[IDLE_FRAME]
        elif self.player_state is PlayerState.MOVE:
            self._movement(delta_second)
            self._animation_control(delta_second)
        elif self.player_state is PlayerState.DIE:
            self.animation_time += delta_second
            if self.animation_time >= DYING_FRAME_TIME:
                self.animation_time = 0.0
                self.animation_count += 1
                if self.animation_count >= len(self.dying_animation):
                    self.player_state = PlayerState.IDLE
                    self.animation_count = 0
                    self.is_destroy = True
            self.image = self.dying_animation[self.animation_count]

    def draw(self, screen: pygame.Surface, screen_offset: Vector2D) -> None:
        """Draw the current frame."""
        super().draw(screen, screen_offset)

    def finalize(self) -> None:
        """Drop the animation frames."""
        self.move_animation = ()
        self.dying_animation = ()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Push out of walls, count food, power up, or die on an enemy."""
        hit_type = hit_object.collision.object_type
        if hit_type is ObjectType.WALL:
            wall = hit_object.collision.translated(hit_object.location)
            near = nearest_point(wall, self.location)
            away = self.location - near
            overlap = (self.collision.radius + wall.radius) - away.length()
            self.location = self.location + away.normalize() * overlap

        if hit_type is ObjectType.FOOD:
            self.food_count += 1

        if hit_type is ObjectType.POWER_FOOD:
            self.food_count += 1
            self.is_power_up = True

        if hit_type is ObjectType.ENEMY and not self.is_power_up:
            self.player_state = PlayerState.DIE

    def power_down(self) -> None:
        """End the power-up."""
        self.is_power_up = False

    def _input(self) -> InputManager:
        return self.input_manager if self.input_manager is not None else get_input_manager()

    def _stage(self) -> StageData:
        return self.stage if self.stage is not None else default_stage()

    def _turn_to(self, direction: Direction) -> None:
        if self.now_direction is direction:
            self.old_panel = PanelID.NONE
            self.now_direction = direction
        elif self.now_direction in (direction.opposite, Direction.NONE):
            self.now_direction = direction
        else:
            self.next_direction = direction

    def _settle_direction(self) -> None:
        """Take the queued direction when the last move did not go the current way."""
        if Vector2D.distance(self.old_location, self.location) == 0.0:
            self.velocity = Vector2D()
            self.now_direction = self.next_direction
            self.next_direction = Direction.NONE
            return

        now = self.now_direction
        if now in (Direction.UP, Direction.DOWN):
            diff = self.location.y - self.old_location.y
            if (now is Direction.UP and diff < 0.0) or (now is Direction.DOWN and diff > 0.0):
                return
            self.velocity = Vector2D(self.velocity.x, 0.0)
        elif now in (Direction.LEFT, Direction.RIGHT):
            diff = self.location.x - self.old_location.x
            if (now is Direction.LEFT and diff < 0.0) or (now is Direction.RIGHT and diff > 0.0):
                return
            self.velocity = Vector2D(0.0, self.velocity.y)
        else:
            return
        self.now_direction = self.next_direction
        self.next_direction = Direction.NONE

    def _movement(self, delta_second: float) -> None:
        self._settle_direction()

        controls = self._input()
        panel = self._stage().panel_at(self.location)

        for direction, key, button in _CONTROLS:
            if controls.get_key_down(key) or controls.get_button_down(button):
                self._turn_to(direction)
                break

        if self.now_direction is Direction.NONE:
            self.velocity = Vector2D()
            self.now_direction = self.next_direction
            self.next_direction = Direction.NONE
        else:
            self.velocity = _steer(self.velocity, self.now_direction)

        if panel is not PanelID.NONE and self.old_panel is not panel:
            self.velocity = _steer(self.velocity, self.next_direction)

        self.old_location = self.location
        self.old_panel = panel

        self.location = self.location + self.velocity * PLAYER_SPEED * delta_second

        screen_width = float(WIN_MAX_X)
        if self.location.x < 0.0:
            self.old_location = Vector2D(screen_width, self.old_location.y)
            self.location = Vector2D(screen_width - self.collision.radius, self.location.y)
            self.velocity = Vector2D(self.velocity.x, 0.0)
        if screen_width < self.location.x:
            self.old_location = Vector2D(0.0, self.old_location.y)
            self.location = Vector2D(self.collision.radius, self.location.y)
            self.velocity = Vector2D(self.velocity.x, 0.0)

    def _animation_control(self, delta_second: float) -> None:
        self.animation_time += delta_second
        if self.animation_time >= MOVE_FRAME_TIME:
            self.animation_time = 0.0
            self.animation_count += 1
            if self.animation_count >= len(ANIMATION_ORDER):
                self.animation_count = 0
            direction = int(self.now_direction)
            if 0 <= direction < 4:
                frame = direction * 3 + ANIMATION_ORDER[self.animation_count]
                self.image = self.move_animation[frame]