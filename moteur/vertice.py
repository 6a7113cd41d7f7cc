"""Mesh data attached to a game object."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Sequence

from moteur.component import Component
from moteur.utils import CustomVertex


class PrimitiveType(IntEnum):
    """How a run of vertices is assembled into primitives."""

    POINT_LIST = 1
    LINE_LIST = 2
    LINE_STRIP = 3
    TRIANGLE_LIST = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def primitive_count(primitive_type: PrimitiveType, vertex_count: int) -> int:
    """Number of primitives that ``vertex_count`` vertices make."""
    kind = PrimitiveType(primitive_type)
    if kind is PrimitiveType.LINE_LIST:
        return _trunc_div(vertex_count, 2)
    if kind is PrimitiveType.LINE_STRIP:
        return vertex_count - 1
    if kind is PrimitiveType.TRIANGLE_LIST:
        return _trunc_div(vertex_count, 3)
    if kind in (PrimitiveType.TRIANGLE_STRIP, PrimitiveType.TRIANGLE_FAN):
        return vertex_count - 2
    return vertex_count


class Vertice(Component):
    """A vertex list with its primitive type and device buffers."""

    def __init__(
        self,
        vertices: Sequence[CustomVertex],
        point_count: int | None = None,
        primitive_type: PrimitiveType = PrimitiveType.TRIANGLE_LIST,
    ) -> None:
        super().__init__()
        self.vertices = list(vertices)
        self.vertex_count = len(self.vertices) if point_count is None else point_count
        self.primitive_type = PrimitiveType(primitive_type)
        self.primitive_count = primitive_count(self.primitive_type, self.vertex_count)
        self.vertex_buffer: Any = None
        self.index_buffer: Any = None

    @property
    def size(self) -> int:
        """Number of vertices the mesh declares."""
        return self.vertex_count