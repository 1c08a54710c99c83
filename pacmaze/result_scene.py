"""Result scene: runs its objects and stays put."""

from __future__ import annotations

from pacmaze.scene_base import SceneBase, SceneType


class ResultScene(SceneBase):
    """The scene shown after a game."""

    def update(self, delta_second: float) -> SceneType:
        """Run the frame and stay in this scene."""
        super().update(delta_second)
        return self.now_scene_type()

    def now_scene_type(self) -> SceneType:
        """This is the result scene."""
        return SceneType.RESULT