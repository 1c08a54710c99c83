import pygame
import pytest

from pacmaze.enemy import RedEnemy
from pacmaze.food import Food, PowerFood
from pacmaze.in_game_scene import ALL_FOOD_COUNT, InGameScene
from pacmaze.input_manager import BUTTON_MAX, BUTTON_START, KEY_P, InputManager, PadState
from pacmaze.player import Player
from pacmaze.resources import ResourceManager
from pacmaze.scene_base import SceneType
from pacmaze.config import OBJECT_SIZE
from pacmaze.stage_data import to_index
from pacmaze.vector2d import Vector2D
from pacmaze.wall import Wall


class _Sound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1

    def stop(self):
        pass


STAGE = "#,3,1,2,2\nP,1,1,14,24\nr,1,1,14,12\n"


@pytest.fixture
def sound():
    return _Sound()


@pytest.fixture
def resources(sound):
    return ResourceManager(
        image_loader=lambda path: pygame.Surface((640, 32)),
        sound_loader=lambda path: sound,
    )


@pytest.fixture
def controls():
    return InputManager()


def _scene(tmp_path, resources, controls, stage_text=STAGE, food_text=""):
    stage_file = tmp_path / "stage.csv"
    stage_file.write_text(stage_text, encoding="utf-8")
    food_file = tmp_path / "food.csv"
    food_file.write_text(food_text, encoding="utf-8")
    return InGameScene(
        input_manager=controls,
        resources=resources,
        stage_map_path=stage_file,
        food_map_path=food_file,
    )


def test_scene_type(tmp_path, resources, controls):
    assert _scene(tmp_path, resources, controls).now_scene_type() is SceneType.IN_GAME


def test_load_stage_map_creates_objects(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.load_stage_map(tmp_path / "stage.csv")
    walls = [obj for obj in scene.create_list if isinstance(obj, Wall)]
    assert len(walls) == 1
    assert walls[0].collision.point[1] == Vector2D(OBJECT_SIZE * 2, 0.0)
    assert isinstance(scene.player, Player)
    assert isinstance(scene.red, RedEnemy)
    assert to_index(scene.player.location) == (23, 13)
    assert to_index(scene.red.location) == (11, 13)


def test_stage_map_ignores_unknown_lines(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls, stage_text="x,1,1,1,1\n\n")
    scene.load_stage_map(tmp_path / "stage.csv")
    assert scene.create_list == []
    assert scene.player is None


def test_load_food_map_places_dots(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls, food_text=". P\n.")
    scene.load_food_map(tmp_path / "food.csv")
    kinds = [type(obj) for obj in scene.create_list]
    assert kinds == [Food, PowerFood, Food]
    assert [to_index(obj.location) for obj in scene.create_list] == [(0, 0), (0, 2), (1, 0)]


def test_missing_map_raises(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    with pytest.raises(FileNotFoundError):
        scene.load_stage_map(tmp_path / "missing.csv")


def test_initialize_sets_offset_and_plays_music(tmp_path, resources, controls, sound):
    scene = _scene(tmp_path, resources, controls, food_text="..")
    scene.initialize()
    assert scene.screen_offset == Vector2D(0.0, OBJECT_SIZE * 3.0)
    assert sound.plays == 1
    assert len(scene.create_list) == 5


def test_pause_toggles_with_key(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.initialize()
    controls.update(keys=[KEY_P])
    assert scene.update(0.016) is SceneType.IN_GAME
    assert scene.pause_flag is True
    assert scene.object_list == []
    controls.update(keys=[])
    scene.update(0.016)
    assert scene.object_list == []
    controls.update(keys=[KEY_P])
    scene.update(0.016)
    assert scene.pause_flag is False
    assert len(scene.object_list) == 3


def test_pause_toggles_with_start_button(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.initialize()
    controls.update(pad=PadState(buttons=[i == BUTTON_START for i in range(BUTTON_MAX)]))
    scene.update(0.016)
    assert scene.pause_flag is True


def test_all_food_eaten_restarts(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.initialize()
    assert scene.update(0.016) is SceneType.IN_GAME
    scene.player.food_count = ALL_FOOD_COUNT
    assert scene.update(0.016) is SceneType.RE_START


def test_player_destroyed_restarts(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.initialize()
    scene.player.is_destroy = True
    assert scene.update(0.016) is SceneType.RE_START


def test_power_up_frightens_red_once(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.initialize()
    scene.player.is_power_up = True
    scene.update(0.016)
    assert scene.red.is_frightened is True
    assert scene.now_frightened is True
    scene.red.is_frightened = False
    scene.update(0.016)
    assert scene.red.is_frightened is False


def test_red_power_down_ends_player_power_up(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    scene.initialize()
    scene.now_frightened = True
    scene.player.is_power_up = True
    scene.red.is_frightened = True
    scene.red.frightened_time = 0.001
    scene.update(0.016)
    assert scene.red.powerdown is True
    assert scene.player.is_power_up is False


def _placed(cls, scene, location, **kwargs):
    obj = cls(**kwargs)
    obj.set_owner_scene(scene)
    obj.initialize()
    obj.location = location
    return obj


def test_check_collision_notifies_both(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    player = _placed(Player, scene, Vector2D(100.0, 100.0), input_manager=controls, resources=resources)
    food = _placed(Food, scene, Vector2D(104.0, 100.0), resources=resources)
    scene.check_collision(player, food)
    assert player.food_count == 1
    assert scene.destroy_list == [food]


def test_check_collision_ignores_distant_and_missing(tmp_path, resources, controls):
    scene = _scene(tmp_path, resources, controls)
    player = _placed(Player, scene, Vector2D(100.0, 100.0), input_manager=controls, resources=resources)
    food = _placed(Food, scene, Vector2D(300.0, 300.0), resources=resources)
    scene.check_collision(player, food)
    scene.check_collision(None, food)
    assert player.food_count == 0
    assert scene.destroy_list == []