"""Keyboard and game pad state, tracked frame by frame."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import lru_cache

from pacmaze.vector2d import Vector2D

KEYCODE_MAX = 256
BUTTON_MAX = 16

UCHAR_MAX = 255
SHRT_MAX = 32767
SHRT_MIN = -32768

# Keyboard codes (scan-code numbering).
KEY_ESCAPE = 0x01
KEY_P = 0x19
KEY_SPACE = 0x39
KEY_UP = 0xC8
KEY_LEFT = 0xCB
KEY_RIGHT = 0xCD
KEY_DOWN = 0xD0

KEY_NAMES = {
    KEY_ESCAPE: "escape",
    KEY_P: "p",
    KEY_SPACE: "space",
    KEY_UP: "up",
    KEY_LEFT: "left",
    KEY_RIGHT: "right",
    KEY_DOWN: "down",
}
"""Key codes the game uses, with the key names a windowing layer knows them by."""

# Game pad button indices.
BUTTON_DPAD_UP = 0
BUTTON_DPAD_DOWN = 1
BUTTON_DPAD_LEFT = 2
BUTTON_DPAD_RIGHT = 3
BUTTON_START = 4
BUTTON_BACK = 5
BUTTON_LEFT_THUMB = 6
BUTTON_RIGHT_THUMB = 7
BUTTON_LEFT_SHOULDER = 8
BUTTON_RIGHT_SHOULDER = 9
BUTTON_A = 12
BUTTON_B = 13
BUTTON_X = 14
BUTTON_Y = 15


def _no_buttons() -> tuple[bool, ...]:
    return (False,) * BUTTON_MAX


@dataclass(frozen=True)
class PadState:
    """Raw state of one game pad: buttons, triggers (0..255) and sticks (short range)."""

    buttons: Sequence[bool] = field(default_factory=_no_buttons)
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


def normalize_trigger(value: int) -> float:
    """Map a trigger value 0..255 to 0.0..1.0."""
    return value / UCHAR_MAX


def normalize_stick(value: int) -> float:
    """Map a stick value in the short range to -1.0..1.0."""
    if value >= 0:
        return value / SHRT_MAX
    return -(value / SHRT_MIN)


def _key_in_range(key_code: int) -> bool:
    return 0 <= key_code < KEYCODE_MAX


def _button_in_range(button: int) -> bool:
    return 0 <= button < BUTTON_MAX


class InputManager:
    """Keeps the current and previous frame's input to detect presses and releases."""

    def __init__(self) -> None:
        self._now_keys: frozenset[int] = frozenset()
        self._old_keys: frozenset[int] = frozenset()
        self._now_buttons: tuple[bool, ...] = _no_buttons()
        self._old_buttons: tuple[bool, ...] = _no_buttons()
        self._triggers = (0.0, 0.0)
        self._sticks = (Vector2D(), Vector2D())

    def update(self, keys: Iterable[int] = (), pad: PadState | None = None) -> None:
        """Advance one frame: ``keys`` are the codes held now, ``pad`` the pad state."""
        self._old_keys = self._now_keys
        self._now_keys = frozenset(code for code in keys if _key_in_range(code))

        pad = pad if pad is not None else PadState()
        buttons = [bool(pressed) for pressed in list(pad.buttons)[:BUTTON_MAX]]
        buttons.extend([False] * (BUTTON_MAX - len(buttons)))
        self._old_buttons = self._now_buttons
        self._now_buttons = tuple(buttons)

        self._triggers = (
            normalize_trigger(pad.left_trigger),
            normalize_trigger(pad.right_trigger),
        )
        self._sticks = (
            Vector2D(normalize_stick(pad.thumb_lx), normalize_stick(pad.thumb_ly)),
            Vector2D(normalize_stick(pad.thumb_rx), normalize_stick(pad.thumb_ry)),
        )

    def get_key(self, key_code: int) -> bool:
        """Whether the key is held in this frame and the previous one."""
        return (
            _key_in_range(key_code)
            and key_code in self._now_keys
            and key_code in self._old_keys
        )

    def get_key_down(self, key_code: int) -> bool:
        """Whether the key was pressed in this frame."""
        return (
            _key_in_range(key_code)
            and key_code in self._now_keys
            and key_code not in self._old_keys
        )

    def get_key_up(self, key_code: int) -> bool:
        """Whether the key was released in this frame."""
        return (
            _key_in_range(key_code)
            and key_code not in self._now_keys
            and key_code in self._old_keys
        )

    def get_button(self, button: int) -> bool:
        """Whether the pad button is held in this frame and the previous one."""
        return (
            _button_in_range(button)
            and self._now_buttons[button]
            and self._old_buttons[button]
        )

    def get_button_down(self, button: int) -> bool:
        """Whether the pad button was pressed in this frame."""
        return (
            _button_in_range(button)
            and self._now_buttons[button]
            and not self._old_buttons[button]
        )

    def get_button_up(self, button: int) -> bool:
        """Whether the pad button was released in this frame."""
        return (
            _button_in_range(button)
            and not self._now_buttons[button]
            and self._old_buttons[button]
        )

    def left_trigger(self) -> float:
        """Left trigger, 0.0..1.0."""
        return self._triggers[0]

    def right_trigger(self) -> float:
        """Right trigger, 0.0..1.0."""
        return self._triggers[1]

    def left_stick(self) -> Vector2D:
        """Left stick, each axis -1.0..1.0."""
        return self._sticks[0]

    def right_stick(self) -> Vector2D:
        """Right stick, each axis -1.0..1.0."""
        return self._sticks[1]


@lru_cache(maxsize=1)
def get_input_manager() -> InputManager:
    """The shared input manager, created on first use."""
    return InputManager()


def reset_input_manager() -> None:
    """Drop the shared input manager; the next call creates a fresh one."""
    get_input_manager.cache_clear()