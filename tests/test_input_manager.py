import pytest

from pacmaze.input_manager import (
    BUTTON_BACK,
    BUTTON_MAX,
    BUTTON_START,
    KEY_SPACE,
    KEY_UP,
    KEYCODE_MAX,
    SHRT_MAX,
    SHRT_MIN,
    UCHAR_MAX,
    InputManager,
    PadState,
    get_input_manager,
    normalize_stick,
    normalize_trigger,
    reset_input_manager,
)
from pacmaze.vector2d import Vector2D


def _pad_with(*pressed):
    buttons = [False] * BUTTON_MAX
    for index in pressed:
        buttons[index] = True
    return PadState(buttons=tuple(buttons))


def test_key_press_hold_release_sequence():
    manager = InputManager()
    manager.update({KEY_SPACE})
    assert manager.get_key_down(KEY_SPACE) is True
    assert manager.get_key(KEY_SPACE) is False
    assert manager.get_key_up(KEY_SPACE) is False

    manager.update({KEY_SPACE})
    assert manager.get_key_down(KEY_SPACE) is False
    assert manager.get_key(KEY_SPACE) is True

    manager.update(set())
    assert manager.get_key_up(KEY_SPACE) is True
    assert manager.get_key(KEY_SPACE) is False
    assert manager.get_key_down(KEY_SPACE) is False


def test_other_keys_unaffected():
    manager = InputManager()
    manager.update({KEY_SPACE})
    assert manager.get_key_down(KEY_UP) is False


@pytest.mark.parametrize("code", [-1, KEYCODE_MAX, KEYCODE_MAX + 100])
def test_key_codes_out_of_range_are_never_pressed(code):
    manager = InputManager()
    manager.update({code})
    manager.update({code})
    assert manager.get_key(code) is False
    assert manager.get_key_down(code) is False
    assert manager.get_key_up(code) is False


def test_button_press_hold_release_sequence():
    manager = InputManager()
    manager.update(pad=_pad_with(BUTTON_START))
    assert manager.get_button_down(BUTTON_START) is True
    assert manager.get_button(BUTTON_START) is False

    manager.update(pad=_pad_with(BUTTON_START))
    assert manager.get_button(BUTTON_START) is True
    assert manager.get_button_down(BUTTON_START) is False

    manager.update(pad=_pad_with())
    assert manager.get_button_up(BUTTON_START) is True
    assert manager.get_button_up(BUTTON_BACK) is False


@pytest.mark.parametrize("button", [-1, BUTTON_MAX])
def test_buttons_out_of_range(button):
    manager = InputManager()
    manager.update(pad=_pad_with(*range(BUTTON_MAX)))
    assert manager.get_button_down(button) is False


def test_short_button_sequence_is_padded():
    manager = InputManager()
    manager.update(pad=PadState(buttons=(True,)))
    assert manager.get_button_down(0) is True
    assert manager.get_button_down(BUTTON_MAX - 1) is False


def test_trigger_normalization_bounds():
    assert normalize_trigger(0) == 0.0
    assert normalize_trigger(UCHAR_MAX) == 1.0


def test_stick_normalization_bounds():
    assert normalize_stick(0) == 0.0
    assert normalize_stick(SHRT_MAX) == 1.0
    assert normalize_stick(SHRT_MIN) == -1.0


def test_stick_normalization_sign_follows_input():
    assert normalize_stick(-100) < 0.0 < normalize_stick(100)


def test_analog_values_from_pad():
    manager = InputManager()
    pad = PadState(
        left_trigger=UCHAR_MAX,
        right_trigger=0,
        thumb_lx=SHRT_MAX,
        thumb_ly=SHRT_MIN,
        thumb_rx=0,
        thumb_ry=SHRT_MAX,
    )
    manager.update(pad=pad)
    assert manager.left_trigger() == 1.0
    assert manager.right_trigger() == 0.0
    assert manager.left_stick() == Vector2D(1.0, -1.0)
    assert manager.right_stick() == Vector2D(0.0, 1.0)


def test_shared_manager_and_reset():
    reset_input_manager()
    first = get_input_manager()
    assert get_input_manager() is first
    first.update({KEY_SPACE})
    reset_input_manager()
    fresh = get_input_manager()
    assert fresh is not first
    assert fresh.get_key_down(KEY_SPACE) is False
    reset_input_manager()