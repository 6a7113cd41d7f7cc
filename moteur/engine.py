"""Scene rendering against a device that records every draw request."""

from __future__ import annotations

import argparse
import math
from typing import Any, Sequence

import numpy as np

from moteur.gameobject import GameObject
from moteur.transform import Transform, deg_to_rad
from moteur.utils import CustomVertex, debug_log, xrgb
from moteur.vertice import PrimitiveType, Vertice

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 800

CLEAR_COLOR = xrgb(50, 0, 0)
FIELD_OF_VIEW = deg_to_rad(45)
NEAR_PLANE = 1.0
FAR_PLANE = 100.0
SPIN_STEP = 0.05

TRANSFORM_KINDS = frozenset({"world", "view", "projection"})

TRIANGLE_MESH = (
    CustomVertex(-2.5, -3.0, 0.0, xrgb(255, 0, 0)),
    CustomVertex(0.0, 3.0, 0.0, xrgb(0, 255, 0)),
    CustomVertex(2.5, -3.0, 0.0, xrgb(0, 0, 255)),
)


def _normalize(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return vector / norm


def look_at_lh(
    eye: Sequence[float], at: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Left-handed view matrix for row vectors."""
    eye_v = np.asarray(eye, dtype=float)
    z_axis = _normalize(np.asarray(at, dtype=float) - eye_v)
    x_axis = _normalize(np.cross(np.asarray(up, dtype=float), z_axis))
    y_axis = np.cross(z_axis, x_axis)
    matrix = np.identity(4)
    matrix[:3, 0] = x_axis
    matrix[:3, 1] = y_axis
    matrix[:3, 2] = z_axis
    matrix[3, :3] = (-x_axis @ eye_v, -y_axis @ eye_v, -z_axis @ eye_v)
    return matrix


def perspective_fov_lh(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection for row vectors, depth mapped to [0, 1]."""
    if aspect == 0 or near == far or math.sin(fovy / 2) == 0:
        raise ValueError("degenerate projection parameters")
    y_scale = 1.0 / math.tan(fovy / 2)
    x_scale = y_scale / aspect
    depth = far / (far - near)
    return np.array(
        [
            [x_scale, 0.0, 0.0, 0.0],
            [0.0, y_scale, 0.0, 0.0],
            [0.0, 0.0, depth, 1.0],
            [0.0, 0.0, -near * depth, 0.0],
        ]
    )


def rotation_y(angle: float) -> np.ndarray:
    """Row-vector rotation matrix about the y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


class RecordingDevice:
    """A drawing device that keeps what it was asked to do."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.transforms: dict[str, np.ndarray] = {}
        self.clear_color: int | None = None
        self.frames = 0

    def clear(self, color: int) -> None:
        """Clear the target and depth buffer to ``color``."""
        self.clear_color = color
        self.calls.append(("clear", color))

    def set_transform(self, kind: str, matrix: np.ndarray) -> None:
        """Set the world, view or projection matrix."""
        if kind not in TRANSFORM_KINDS:
            raise ValueError(f"unknown transform kind: {kind}")
        value = np.array(matrix, dtype=float)
        if value.shape != (4, 4):
            raise ValueError("transform must be a 4x4 matrix")
        self.transforms[kind] = value
        self.calls.append(("set_transform", kind))

    def create_vertex_buffer(self, vertices: Sequence[CustomVertex]) -> tuple[CustomVertex, ...]:
        """Copy vertices into a new buffer."""
        buffer = tuple(vertices)
        self.calls.append(("create_vertex_buffer", len(buffer)))
        return buffer

    def create_index_buffer(self, indices: Sequence[int]) -> tuple[int, ...]:
        """Copy 16-bit indices into a new buffer."""
        buffer = tuple(int(i) for i in indices)
        if any(not 0 <= i <= 0xFFFF for i in buffer):
            raise ValueError("index does not fit in 16 bits")
        self.calls.append(("create_index_buffer", len(buffer)))
        return buffer

    def draw_primitive(
        self, primitive_type: PrimitiveType, vertex_buffer: Any, primitive_count: int
    ) -> None:
        """Draw non-indexed primitives from ``vertex_buffer``."""
        self.calls.append(
            ("draw_primitive", PrimitiveType(primitive_type), vertex_buffer, primitive_count)
        )

    def draw_indexed_primitive(
        self,
        primitive_type: PrimitiveType,
        vertex_buffer: Any,
        index_buffer: Any,
        vertex_count: int,
        primitive_count: int,
    ) -> None:
        """Draw indexed primitives."""
        self.calls.append(
            (
                "draw_indexed_primitive",
                PrimitiveType(primitive_type),
                vertex_buffer,
                index_buffer,
                vertex_count,
                primitive_count,
            )
        )

    def present(self) -> None:
        """Finish the frame."""
        self.frames += 1
        self.calls.append(("present",))


class Engine:
    """Holds the scene and renders it frame by frame onto a device."""

    def __init__(
        self,
        width: int = SCREEN_HEIGHT,
        height: int = SCREEN_WIDTH,
        device: RecordingDevice | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen size must be positive")
        self.width = width
        self.height = height
        self.device = device if device is not None else RecordingDevice()
        self.game_objects: list[GameObject] = []
        self.index_buffer: Any = None
        self.lighting = False
        self.light: dict[str, Any] | None = None
        self.light_enabled = False
        self.material: dict[str, Any] | None = None
        self.closed = False
        self._spin = 0.0

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def aspect(self) -> float:
        """Width over height of the screen."""
        return self.width / self.height

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("engine is closed")

    def add_game_object(self, game_object: GameObject) -> None:
        """Add an object to the scene."""
        self.game_objects.append(game_object)

    def add_mesh_to_scene(self, vertice: Vertice) -> None:
        """Upload a mesh's vertices into a device buffer."""
        self._check_open()
        vertice.vertex_buffer = self.device.create_vertex_buffer(
            vertice.vertices[: vertice.size]
        )

    def create_index_buffer(self, indices: Sequence[int] | None) -> Any:
        """Upload indices into a device buffer and return it."""
        self._check_open()
        if indices is None:
            raise ValueError("no indices given")
        self.index_buffer = self.device.create_index_buffer(indices)
        return self.index_buffer

    def _set_projection(self) -> None:
        self.device.set_transform(
            "projection",
            perspective_fov_lh(FIELD_OF_VIEW, self.aspect, NEAR_PLANE, FAR_PLANE),
        )

    def set_up_render_camera(self) -> None:
        """Place the camera on the z axis looking at the origin."""
        self._check_open()
        self.device.set_transform(
            "view", look_at_lh((0.0, 0.0, 10.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        )
        self._set_projection()

    def init_light(self) -> None:
        """Set up a directional light, left disabled, and a white material."""
        self._check_open()
        self.light = {
            "type": "directional",
            "diffuse": (255.0, 0.5, 0.5, 1.0),
            "direction": (-1.0, -0.3, -1.0),
        }
        self.light_enabled = False
        self.material = {
            "diffuse": (1.0, 1.0, 1.0, 1.0),
            "ambient": (1.0, 1.0, 1.0, 1.0),
        }

    def render(self) -> None:
        """Render one frame of every displayed object that has a mesh."""
        self._check_open()
        device = self.device
        device.clear(CLEAR_COLOR)
        debug_log("---NOUVELLE FRAME---")
        for game_object in self.game_objects:
            mesh = game_object.draw()
            if mesh is None:
                continue
            self._spin += SPIN_STEP
            device.set_transform("world", rotation_y(self._spin))
            device.set_transform(
                "view",
                look_at_lh((20.0, 20.0, -80.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
            )
            self._set_projection()
            if mesh.index_buffer is None:
                device.draw_primitive(
                    mesh.primitive_type, mesh.vertex_buffer, mesh.primitive_count
                )
            else:
                device.draw_indexed_primitive(
                    mesh.primitive_type,
                    mesh.vertex_buffer,
                    mesh.index_buffer,
                    mesh.vertex_count,
                    mesh.primitive_count,
                )
            debug_log(mesh.primitive_count)
        device.present()

    def close(self) -> None:
        """Release the device; the engine cannot render afterwards."""
        self.closed = True


def main(argv: Sequence[str] | None = None) -> int:
    """Build the triangle scene and render a number of frames."""
    parser = argparse.ArgumentParser(prog="moteur")
    parser.add_argument("--frames", type=int, default=1)
    parser.add_argument("--width", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--height", type=int, default=SCREEN_WIDTH)
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    with Engine(args.width, args.height) as engine:
        triangle = GameObject(Transform())
        mesh = Vertice(TRIANGLE_MESH, 3, PrimitiveType.TRIANGLE_LIST)
        engine.add_mesh_to_scene(mesh)
        triangle.add_component(mesh)
        triangle.to_display = True
        engine.add_game_object(triangle)
        for _ in range(args.frames):
            engine.render()
        draws = sum(1 for call in engine.device.calls if call[0].startswith("draw"))
        print(f"{engine.device.frames} frame(s), {draws} draw call(s)")
    return 0