import pytest

from moteur.input import Input, Key, KeyState


class _Keyboard:
    def __init__(self):
        self.down = set()

    def __call__(self, key):
        return key in self.down


def test_initial_state_is_not_pressed():
    assert Input(_Keyboard())[65] is KeyState.NOT_PRESSED


def test_press_hold_release_cycle():
    keyboard = _Keyboard()
    keys = Input(keyboard)
    keyboard.down.add(65)
    assert keys.key_state(65) is KeyState.PRESSED
    assert keys.key_state(65) is KeyState.HOLD
    assert keys.key_state(65) is KeyState.HOLD
    keyboard.down.clear()
    assert keys.key_state(65) is KeyState.RELEASED
    assert keys.key_state(65) is KeyState.NOT_PRESSED


def test_quick_tap_releases_after_press():
    keyboard = _Keyboard()
    keys = Input(keyboard)
    keyboard.down.add(32)
    keys.key_state(32)
    keyboard.down.clear()
    assert keys.key_state(32) is KeyState.RELEASED


def test_repress_after_release():
    keyboard = _Keyboard()
    keys = Input(keyboard)
    keyboard.down.add(10)
    keys.key_state(10)
    keyboard.down.clear()
    keys.key_state(10)
    keyboard.down.add(10)
    assert keys.key_state(10) is KeyState.PRESSED


def test_update_polls_keys_one_to_254():
    keyboard = _Keyboard()
    keyboard.down.update({0, 1, 254, 255})
    keys = Input(keyboard)
    keys.update()
    assert keys[1] is KeyState.PRESSED
    assert keys[254] is KeyState.PRESSED
    assert keys[0] is KeyState.NOT_PRESSED
    assert keys[255] is KeyState.NOT_PRESSED
    assert keys[100] is KeyState.NOT_PRESSED


def test_out_of_range_key_raises():
    keys = Input(_Keyboard())
    with pytest.raises(ValueError):
        keys.key_state(256)
    with pytest.raises(ValueError):
        keys[-1]


def test_key_binding_defaults():
    binding = Key("jump", 32)
    assert binding.name == "jump"
    assert binding.key == 32
    assert binding.last_state is KeyState.NOT_PRESSED