"""Keyboard state tracking with press, hold and release edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable


class KeyState(IntEnum):
    """Where a key is in its press cycle."""

    NOT_PRESSED = 0
    HOLD = 1
    PRESSED = 2
    RELEASED = 3


_TRANSITIONS = {
    (KeyState.NOT_PRESSED, True): KeyState.PRESSED,
    (KeyState.NOT_PRESSED, False): KeyState.NOT_PRESSED,
    (KeyState.PRESSED, True): KeyState.HOLD,
    (KeyState.PRESSED, False): KeyState.RELEASED,
    (KeyState.HOLD, True): KeyState.HOLD,
    (KeyState.HOLD, False): KeyState.RELEASED,
    (KeyState.RELEASED, True): KeyState.PRESSED,
    (KeyState.RELEASED, False): KeyState.NOT_PRESSED,
}

_KEY_CODES = range(256)
_POLLED_KEYS = range(1, 255)


@dataclass
class Key:
    """A named key binding and the last state seen for it."""

    name: str
    key: int
    last_state: KeyState = KeyState.NOT_PRESSED


class Input:
    """Tracks the state of every key code, polling ``is_down`` for each."""

    def __init__(self, is_down: Callable[[int], bool]) -> None:
        self._is_down = is_down
        self._keys = {code: KeyState.NOT_PRESSED for code in _KEY_CODES}

    def __getitem__(self, key: int) -> KeyState:
        self._check(key)
        return self._keys[key]

    @staticmethod
    def _check(key: int) -> None:
        if key not in _KEY_CODES:
            raise ValueError(f"key code out of range: {key}")

    def update(self) -> None:
        """Advance every key from 1 to 254 by one poll."""
        for code in _POLLED_KEYS:
            self.key_state(code)

    def key_state(self, key: int) -> KeyState:
        """Poll ``key`` once, store and return its new state."""
        self._check(key)
        state = _TRANSITIONS[(self._keys[key], bool(self._is_down(key)))]
        self._keys[key] = state
        return state