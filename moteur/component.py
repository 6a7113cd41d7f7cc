"""Base class for everything attached to a game object."""

from __future__ import annotations


class Component:
    """A part of a game object that can be switched on and off."""

    def __init__(self) -> None:
        self.active = True

    def set_active(self, active: bool = True) -> None:
        """Switch the component on or off."""
        self.active = bool(active)