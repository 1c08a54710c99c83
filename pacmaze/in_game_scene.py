"""The playing field: maze, dots, player and ghosts."""

from __future__ import annotations

import re
from functools import partial
from pathlib import Path
from typing import Any

import pygame

from pacmaze.collision import capsules_collide
from pacmaze.config import OBJECT_SIZE
from pacmaze.enemy import BlueEnemy, PinkEnemy, RedEnemy, YellowEnemy
from pacmaze.food import Food, PowerFood
from pacmaze.game_object import GameObject
from pacmaze.input_manager import BUTTON_START, KEY_P, InputManager, get_input_manager
from pacmaze.player import Player
from pacmaze.resources import ResourceManager, get_resource_manager
from pacmaze.scene_base import SceneBase, SceneType
from pacmaze.stage_data import StageData, parse_stage
from pacmaze.vector2d import Vector2D
from pacmaze.wall import Wall

STAGE_MAP_PATH = "Resource/Map/StageMap.csv"
FOOD_MAP_PATH = "Resource/Map/StageMapFoods.csv"
BACKGROUND_IMAGE = "Resource/Images/map.png"
BACKGROUND_SOUND = "Resource/Sounds/start-music.mp3"

ALL_FOOD_COUNT = 246
BACKGROUND_CENTER = (336, 432)
BACKGROUND_SCALE = 1.5
PAUSE_TEXT = " P A U S E "
PAUSE_FONT_SIZE = 16

_INT_FIELD = re.compile(r"\s*([+-]?\d+)")

_ENEMY_MODES = {
    "p": PinkEnemy,
    "b": BlueEnemy,
    "y": YellowEnemy,
}


def _scan_line(line: str) -> tuple[str, list[int]]:
    """Read ``mode,a,b,c,d`` the way a formatted scan does; missing numbers are 0."""
    mode = line[:1]
    values: list[int] = []
    position = 1
    for _ in range(4):
        if position >= len(line) or line[position] != ",":
            break
        match = _INT_FIELD.match(line, position + 1)
        if match is None:
            break
        values.append(int(match.group(1)))
        position = match.end()
    values.extend([0] * (4 - len(values)))
    return mode, values


def _tile_center(column: int, row: int) -> Vector2D:
    return Vector2D(float(column), float(row)) * OBJECT_SIZE + OBJECT_SIZE / 2.0


class InGameScene(SceneBase):
    """The maze scene; restarts when every dot is eaten or the player dies."""

    def __init__(
        self,
        input_manager: InputManager | None = None,
        resources: ResourceManager | None = None,
        stage: StageData | None = None,
        stage_map_path: str | Path = STAGE_MAP_PATH,
        food_map_path: str | Path = FOOD_MAP_PATH,
    ) -> None:
        super().__init__()
        self.input_manager = input_manager
        self.resources = resources
        self.stage = stage
        self.stage_map_path = stage_map_path
        self.food_map_path = food_map_path
        self.player: Player | None = None
        self.red: RedEnemy | None = None
        self.back_ground_image: Any = None
        self.back_ground_sound: Any = None
        self.pause_flag = False
        self.now_frightened = False
        self._font: pygame.font.Font | None = None

    def _input(self) -> InputManager:
        return self.input_manager if self.input_manager is not None else get_input_manager()

    def _resources(self) -> ResourceManager:
        return self.resources if self.resources is not None else get_resource_manager()

    def _spawn(self, cls: type, location: Vector2D, **kwargs: Any) -> Any:
        return self.create_object(partial(cls, **kwargs), location)  # type: ignore[arg-type]

    def initialize(self) -> None:
        """Build the maze from the map files and start the music."""
        self.load_stage_map(self.stage_map_path)
        self.load_food_map(self.food_map_path)

        self.screen_offset = Vector2D(0.0, OBJECT_SIZE * 3.0)

        resources = self._resources()
        self.back_ground_image = resources.get_images(BACKGROUND_IMAGE)[0]
        self.back_ground_sound = resources.get_sound(BACKGROUND_SOUND)
        self.back_ground_sound.play()

    def update(self, delta_second: float) -> SceneType:
        """Handle pausing, run the frame and decide whether to restart."""
        controls = self._input()
        if controls.get_key_down(KEY_P) or controls.get_button_down(BUTTON_START):
            self.pause_flag = not self.pause_flag

        if not self.pause_flag:
            super().update(delta_second)

            if self.player is not None:
                if self.player.food_count >= ALL_FOOD_COUNT:
                    return SceneType.RE_START
                if self.player.is_destroy:
                    return SceneType.RE_START

                if self.player.is_power_up:
                    if not self.now_frightened and self.red is not None:
                        self.red.frighten()
                        self.now_frightened = True
                else:
                    self.now_frightened = False

                if self.red is not None and self.red.powerdown:
                    self.player.power_down()

        return self.now_scene_type()

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the maze background, the objects and the pause banner."""
        if self.back_ground_image is not None:
            image = pygame.transform.rotozoom(self.back_ground_image, 0.0, BACKGROUND_SCALE)
            screen.blit(image, image.get_rect(center=BACKGROUND_CENTER))

        super().draw(screen)

        if self.pause_flag:
            if self._font is None:
                if not pygame.font.get_init():
                    pygame.font.init()
                self._font = pygame.font.Font(None, PAUSE_FONT_SIZE)
            text = self._font.render(PAUSE_TEXT, True, (255, 255, 255))
            screen.blit(text, (10, 10))

    def finalize(self) -> None:
        """Drop every object of the scene."""
        super().finalize()

    def now_scene_type(self) -> SceneType:
        """This is the in-game scene."""
        return SceneType.IN_GAME

    def check_collision(self, target: GameObject | None, partner: GameObject | None) -> None:
        """Notify both objects when their shapes overlap and either cares about the other."""
        if target is None or partner is None:
            return
        tc = target.collision
        pc = partner.collision
        if not (tc.is_hit_target(pc.object_type) or pc.is_hit_target(tc.object_type)):
            return
        if capsules_collide(tc.translated(target.location), pc.translated(partner.location)):
            target.on_hit_collision(partner)
            partner.on_hit_collision(target)

    def load_stage_map(self, path: str | Path) -> None:
        """Create walls, the player and the ghosts from the stage map file."""
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()

        if self.stage is None:
            self.stage = parse_stage(lines)

        for line in lines:
            mode, (x_size, y_size, spos_x, spos_y) = _scan_line(line)
            if not mode:
                continue
            location = _tile_center(spos_x - 1, spos_y - 1)
            if mode == "#":
                wall = self.create_object(Wall, location)
                wall.set_wall_data(x_size, y_size)
            elif mode == "P":
                self.player = self._spawn(
                    Player,
                    location,
                    input_manager=self.input_manager,
                    stage=self.stage,
                    resources=self.resources,
                )
            elif mode == "r":
                self.red = self._spawn(RedEnemy, location, resources=self.resources)
            elif mode in _ENEMY_MODES:
                self._spawn(_ENEMY_MODES[mode], location, resources=self.resources)

    def load_food_map(self, path: str | Path) -> None:
        """Place dots from the food map: ``.`` a dot, ``P`` a power dot, space nothing."""
        with open(path, encoding="utf-8") as handle:
            content = handle.read()

        x = 0
        y = 0
        for char in content:
            if char == ".":
                self._spawn(Food, _tile_center(x, y), resources=self.resources)
                x += 1
            elif char == "P":
                self._spawn(PowerFood, _tile_center(x, y), resources=self.resources)
                x += 1
            elif char == " ":
                x += 1
            elif char == "\n":
                x = 0
                y += 1