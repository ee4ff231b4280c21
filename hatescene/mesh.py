"""Triangle meshes, including the built-in cube and billboard shapes."""

from __future__ import annotations

import copy as _copy
from typing import Iterable, Optional

import numpy as np

from hatescene.scene_object import SceneObject


class Mesh(SceneObject):
    """Indexed triangle mesh with normals, UVs, colours and an axis-aligned bound."""

    def __init__(
        self,
        vertices: Iterable[float] = (),
        indices: Iterable[int] = (),
        normals: Iterable[float] = (),
    ) -> None:
        super().__init__()
        self._vertices: list[float] = []
        self.indices: list[int] = list(indices)
        self.normals: list[float] = list(normals)
        self.uv: list[float] = []
        self.light_uv: list[float] = []
        self.texture = None
        self.light_texture = None
        self.colors: list[float] = []
        self.color_channels = 4
        self.color_enabled = False
        self.light_shading = True
        self.face_culling = True
        self.correct_transparency = False
        self.max_light_dist = 0.0
        self._aabb_min = np.zeros(3)
        self._aabb_max = np.zeros(3)
        self._aabb_radius = 0.0
        vertices = list(vertices)
        if vertices:
            self.set_vertices(vertices)

    @property
    def vertices(self) -> list[float]:
        return list(self._vertices)

    @vertices.setter
    def vertices(self, value: Iterable[float]) -> None:
        self.set_vertices(value)

    @property
    def aabb_min(self) -> np.ndarray:
        return self._aabb_min.copy()

    @property
    def aabb_max(self) -> np.ndarray:
        return self._aabb_max.copy()

    @property
    def aabb_radius(self) -> float:
        """Half the diagonal of the bounding box."""
        return self._aabb_radius

    def set_vertices(self, vertices: Iterable[float]) -> None:
        """Replace the flat XYZ vertex list and recompute the bounds."""
        values = [float(v) for v in vertices]
        if len(values) % 3:
            raise ValueError("vertex list length must be a multiple of 3")
        self._vertices = values
        if values:
            points = np.array(values).reshape(-1, 3)
            self._aabb_min = points.min(axis=0)
            self._aabb_max = points.max(axis=0)
        else:
            self._aabb_min = np.zeros(3)
            self._aabb_max = np.zeros(3)
        self._aabb_radius = float(np.linalg.norm(self._aabb_max - self._aabb_min) / 2)

    def set_colors(self, colors: Iterable[float], channels: int = 4) -> None:
        self.colors = [float(c) for c in colors]
        self.color_channels = channels
        self.color_enabled = True

    def set_color(self, color: Iterable[float]) -> None:
        """Give every vertex the same RGB or RGBA colour."""
        rgba = [float(c) for c in color]
        if len(rgba) not in (3, 4):
            raise ValueError("colour must have 3 or 4 components")
        self.colors = rgba * (len(self._vertices) // 3)
        self.color_channels = len(rgba)
        self.color_enabled = True

    def aabb_distance_to_point(self, point: Iterable[float]) -> float:
        """Distance from ``point`` to the bounding box placed at the global position."""
        point = np.asarray(point, dtype=float)
        origin = self.global_position()
        clamped = np.clip(point, self._aabb_min + origin, self._aabb_max + origin)
        return float(np.linalg.norm(point - clamped))

    def copy(self, copy_texture: bool = False) -> "Mesh":
        """Copy geometry and transform into a new, unbound mesh with its own UUID."""
        mesh = Mesh()
        mesh._parent_position = self._parent_position.copy()
        mesh._parent_rotation_matrix = self._parent_rotation_matrix.copy()
        mesh._parent_scale = self._parent_scale.copy()
        mesh._position = self._position.copy()
        mesh._rotation_matrix = self._rotation_matrix.copy()
        mesh._scale = self._scale.copy()
        mesh._visible = self._visible
        mesh.set_vertices(self._vertices)
        mesh.indices = list(self.indices)
        mesh.normals = list(self.normals)
        mesh.uv = list(self.uv)
        mesh.name = self.name
        mesh.texture = self.texture
        if copy_texture and self.texture is not None:
            mesh.texture = _copy.deepcopy(self.texture)
        mesh._update_direction()
        return mesh


_CUBE_CORNERS = (
    (-1, -1, 1), (1, -1, 1), (1, 1, 1),
    (1, 1, 1), (-1, 1, 1), (-1, -1, 1),
    (1, -1, 1), (1, -1, -1), (1, 1, -1),
    (1, 1, -1), (1, 1, 1), (1, -1, 1),
    (-1, -1, -1), (-1, 1, -1), (1, 1, -1),
    (1, 1, -1), (1, -1, -1), (-1, -1, -1),
    (-1, -1, -1), (-1, -1, 1), (-1, 1, 1),
    (-1, 1, 1), (-1, 1, -1), (-1, -1, -1),
    (-1, 1, 1), (1, 1, 1), (1, 1, -1),
    (1, 1, -1), (-1, 1, -1), (-1, 1, 1),
    (-1, -1, 1), (-1, -1, -1), (1, -1, -1),
    (1, -1, -1), (1, -1, 1), (-1, -1, 1),
)

_CUBE_FACE_NORMALS = ((0, 0, 1), (1, 0, 0), (0, 0, -1), (-1, 0, 0), (0, 1, 0), (0, -1, 0))

_UV_A = (0, 1, 1, 1, 1, 0, 1, 0, 0, 0, 0, 1)
_UV_B = (1, 1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 1)
_CUBE_UV = _UV_A + _UV_A + _UV_B + _UV_A + _UV_A + _UV_B


class CubeMesh(Mesh):
    """Axis-aligned box centred on its origin, two triangles per face."""

    def __init__(self) -> None:
        super().__init__()
        self.set_size(1, 1, 1)
        self.indices = list(range(36))
        self.normals = [
            float(c) for normal in _CUBE_FACE_NORMALS for _ in range(6) for c in normal
        ]
        self.uv = [float(c) for c in _CUBE_UV]

    def set_size(self, width: float, height: float, length: float) -> None:
        half = (0.5 * width, 0.5 * height, 0.5 * length)
        self.set_vertices(
            sign * extent for corner in _CUBE_CORNERS for sign, extent in zip(corner, half)
        )


class BillboardMesh(Mesh):
    """Flat quad that can turn to face a target object."""

    def __init__(self, target: Optional[SceneObject] = None) -> None:
        super().__init__()
        self.target = target
        self.set_size(1, 1)
        self.indices = [0, 1, 2, 2, 3, 0]
        self.normals = [0.0, 0.0, 1.0] * 4
        self.uv = [0.0, 1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 0.0]

    def set_size(self, width: float, height: float) -> None:
        x, y = 0.5 * width, 0.5 * height
        self.set_vertices([-x, -y, 0, x, -y, 0, x, y, 0, -x, y, 0])

    def update(self) -> None:
        """Face the target, if one is set."""
        if self.target is not None:
            self.look_at(self.target.global_position())