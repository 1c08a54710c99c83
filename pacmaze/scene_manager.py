"""Window set-up, the main loop and switching between scenes."""

from __future__ import annotations

import argparse
from collections.abc import Callable

import pygame

from pacmaze.config import (
    COLOR_BIT,
    DEFAULT_REFRESH_RATE,
    SUCCESS,
    WIN_MAX_X,
    WIN_MAX_Y,
    FrameTimer,
    report_error,
)
from pacmaze.in_game_scene import InGameScene
from pacmaze.input_manager import (
    BUTTON_A,
    BUTTON_B,
    BUTTON_BACK,
    BUTTON_DPAD_DOWN,
    BUTTON_DPAD_LEFT,
    BUTTON_DPAD_RIGHT,
    BUTTON_DPAD_UP,
    BUTTON_MAX,
    BUTTON_START,
    BUTTON_X,
    BUTTON_Y,
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_P,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    SHRT_MAX,
    UCHAR_MAX,
    InputManager,
    PadState,
    get_input_manager,
    reset_input_manager,
)
from pacmaze.resources import ResourceError, reset_resource_manager
from pacmaze.result_scene import ResultScene
from pacmaze.scene_base import SceneBase, SceneType
from pacmaze.title_scene import TitleScene

WINDOW_TITLE = "Game Development Pac-Man 2024"

_PYGAME_KEYS = {
    KEY_ESCAPE: pygame.K_ESCAPE,
    KEY_P: pygame.K_p,
    KEY_SPACE: pygame.K_SPACE,
    KEY_UP: pygame.K_UP,
    KEY_LEFT: pygame.K_LEFT,
    KEY_RIGHT: pygame.K_RIGHT,
    KEY_DOWN: pygame.K_DOWN,
}

_JOYSTICK_BUTTONS = {
    0: BUTTON_A,
    1: BUTTON_B,
    2: BUTTON_X,
    3: BUTTON_Y,
    6: BUTTON_BACK,
    7: BUTTON_START,
}


def create_scene(next_type: SceneType) -> SceneBase | None:
    """A new scene for ``next_type``, or None when there is none to make."""
    if next_type is SceneType.TITLE:
        return TitleScene()
    if next_type in (SceneType.IN_GAME, SceneType.RE_START):
        return InGameScene()
    if next_type is SceneType.RESULT:
        return ResultScene()
    return None


def _axis_to_short(value: float) -> int:
    return max(-SHRT_MAX - 1, min(SHRT_MAX, int(value * SHRT_MAX)))


def _axis_to_trigger(value: float) -> int:
    return max(0, min(UCHAR_MAX, int((value + 1.0) / 2.0 * UCHAR_MAX)))


class SceneManager:
    """Owns the current scene and drives it from the window's main loop."""

    def __init__(
        self,
        input_manager: InputManager | None = None,
        scene_factory: Callable[[SceneType], SceneBase | None] = create_scene,
    ) -> None:
        self.current_scene: SceneBase | None = None
        self.input_manager = input_manager
        self.scene_factory = scene_factory
        self.screen: pygame.Surface | None = None
        self.timer = FrameTimer()
        self._joystick: pygame.joystick.JoystickType | None = None

    def _input(self) -> InputManager:
        return self.input_manager if self.input_manager is not None else get_input_manager()

    def wake_up(self) -> None:
        """Open the window and start on the title scene."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WIN_MAX_X, WIN_MAX_Y), 0, COLOR_BIT)
        except pygame.error as exc:
            raise RuntimeError("failed to initialise the display") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.joystick.init()
        if pygame.joystick.get_count() > 0:
            self._joystick = pygame.joystick.Joystick(0)
            self._joystick.init()
        self.change_scene(SceneType.TITLE)

    def run(self) -> None:
        """Run frames until the window closes, the scene exits, or back/escape is released."""
        if self.current_scene is None:
            raise RuntimeError("the scene manager has not been woken up")
        controls = self._input()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break

            controls.update(self._held_keys(), self._read_pad())

            delta = self.timer.tick(refresh_rate=self._refresh_rate())
            next_type = self.current_scene.update(delta)

            self._graph()

            if (
                next_type is SceneType.EXIT
                or controls.get_button_up(BUTTON_BACK)
                or controls.get_key_up(KEY_ESCAPE)
            ):
                break

            if self.current_scene.now_scene_type() is not next_type:
                self.change_scene(next_type)

    def shutdown(self) -> None:
        """Finalize the scene, drop shared managers and close the window."""
        if self.current_scene is not None:
            self.current_scene.finalize()
            self.current_scene = None
        reset_input_manager()
        reset_resource_manager()
        self._joystick = None
        self.screen = None
        pygame.quit()

    def change_scene(self, next_type: SceneType) -> None:
        """Replace the current scene with a fresh, initialized one of ``next_type``."""
        next_scene = self.scene_factory(next_type)
        if next_scene is None:
            raise ValueError(f"no scene can be created for {next_type.name}")
        if self.current_scene is not None:
            self.current_scene.finalize()
        next_scene.initialize()
        self.current_scene = next_scene

    def _graph(self) -> None:
        if self.screen is None or self.current_scene is None:
            return
        self.screen.fill((0, 0, 0))
        self.current_scene.draw(self.screen)
        pygame.display.flip()

    @staticmethod
    def _held_keys() -> list[int]:
        pressed = pygame.key.get_pressed()
        return [code for code, key in _PYGAME_KEYS.items() if pressed[key]]

    @staticmethod
    def _refresh_rate() -> float:
        getter = getattr(pygame.display, "get_current_refresh_rate", None)
        rate = getter() if callable(getter) else 0
        return rate if rate and rate > 0 else DEFAULT_REFRESH_RATE

    def _read_pad(self) -> PadState:
        pad = self._joystick
        if pad is None:
            return PadState()
        buttons = [False] * BUTTON_MAX
        for index, button in _JOYSTICK_BUTTONS.items():
            if index < pad.get_numbuttons() and pad.get_button(index):
                buttons[button] = True
        if pad.get_numhats() > 0:
            hat_x, hat_y = pad.get_hat(0)
            buttons[BUTTON_DPAD_LEFT] = hat_x < 0
            buttons[BUTTON_DPAD_RIGHT] = hat_x > 0
            buttons[BUTTON_DPAD_UP] = hat_y > 0
            buttons[BUTTON_DPAD_DOWN] = hat_y < 0

        def axis(index: int, default: float = 0.0) -> float:
            return pad.get_axis(index) if index < pad.get_numaxes() else default

        return PadState(
            buttons=buttons,
            left_trigger=_axis_to_trigger(axis(4, -1.0)),
            right_trigger=_axis_to_trigger(axis(5, -1.0)),
            thumb_lx=_axis_to_short(axis(0)),
            thumb_ly=_axis_to_short(-axis(1)),
            thumb_rx=_axis_to_short(axis(2)),
            thumb_ry=_axis_to_short(-axis(3)),
        )


def main(argv: list[str] | None = None) -> int:
    """Start the game and return the exit status."""
    parser = argparse.ArgumentParser(prog="pacmaze", description="Maze chase arcade game.")
    parser.parse_args(argv)

    manager = SceneManager()
    try:
        manager.wake_up()
        manager.run()
    except (RuntimeError, ValueError, OSError, ResourceError, pygame.error) as exc:
        return report_error(str(exc))
    finally:
        manager.shutdown()
    return SUCCESS