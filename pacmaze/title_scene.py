"""Title screen that waits for the start key."""

from __future__ import annotations

import pygame

from pacmaze.input_manager import BUTTON_START, KEY_SPACE, InputManager, get_input_manager
from pacmaze.scene_base import SceneBase, SceneType

TITLE_TEXT = "P A C - M A N"
PROMPT_TEXT = "Space key pressed game start"


class TitleScene(SceneBase):
    """Shows the title and moves on to the game when start is pressed."""

    def __init__(self, input_manager: InputManager | None = None) -> None:
        super().__init__()
        self.input_manager = input_manager
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def update(self, delta_second: float) -> SceneType:
        """Go in game on space or the pad's start button, else run the frame."""
        controls = self.input_manager if self.input_manager is not None else get_input_manager()
        if controls.get_key_down(KEY_SPACE) or controls.get_button_down(BUTTON_START):
            return SceneType.IN_GAME
        return super().update(delta_second)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the objects, the title and the start prompt."""
        super().draw(screen)
        screen.blit(self._font(60).render(TITLE_TEXT, True, (255, 255, 0)), (120, 140))
        screen.blit(self._font(40).render(PROMPT_TEXT, True, (255, 0, 0)), (10, 640))

    def now_scene_type(self) -> SceneType:
        """This is the title scene."""
        return SceneType.TITLE