"""Objects in a scene: a transform plus a list of components."""

from __future__ import annotations

from typing import TypeVar

from moteur.component import Component
from moteur.transform import Transform
from moteur.vertice import Vertice

C = TypeVar("C", bound=Component)


class GameObject:
    """A scene object holding components."""

    MAX_COMPONENTS = 20

    def __init__(self, transform: Transform | None = None) -> None:
        self.transform = transform
        self.to_display = False
        self.components: list[Component] = []

    def add_component(self, component: Component) -> None:
        """Attach a component."""
        self.components.append(component)

    def remove_component(self, component: Component) -> None:
        """Detach ``component``; ValueError if it is not among the first MAX_COMPONENTS."""
        for position, candidate in enumerate(self.components[: self.MAX_COMPONENTS]):
            if candidate is component:
                del self.components[position]
                return
        raise ValueError("Component doesn't exist or belong to this GameObject")

    def get_component(self, index: int) -> Component:
        """Component at ``index``."""
        return self.components[index]

    def reset_component(self, index: int) -> None:
        """Replace the component at ``index`` with a fresh empty one."""
        self.components[index] = Component()

    def count_components(self) -> int:
        """Number of attached components."""
        return len(self.components)

    def find_component(self, component_type: type[C]) -> C | None:
        """First component of ``component_type``, or None."""
        return next(
            (c for c in self.components if isinstance(c, component_type)), None
        )

    def draw(self) -> Vertice | None:
        """The mesh to render this frame, or None if nothing is shown."""
        if not self.to_display:
            return None
        return self.find_component(Vertice)