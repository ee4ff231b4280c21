"""Perspective camera with an attached sky box."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from hatescene.mesh import CubeMesh

_NEAR = 0.1

# Cube-map regions as (x0, y0, x1, y1).
_LEFT = (0.0, 1 / 3, 1 / 4, 2 / 3)
_FRONT = (1 / 4, 1 / 3, 2 / 4, 2 / 3)
_RIGHT = (2 / 4, 1 / 3, 3 / 4, 2 / 3)
_BACK = (3 / 4, 1 / 3, 1.0, 2 / 3)
_TOP = (1 / 4, 0.0, 2 / 4, 1 / 3)
_BOTTOM = (1 / 4, 2 / 3, 2 / 4, 1.0)

# Corner orders as index pairs into a region tuple.
_SIDE_ORDER = ((2, 3), (0, 3), (0, 1), (0, 1), (2, 1), (2, 3))
_FRONT_ORDER = ((0, 3), (0, 1), (2, 1), (2, 1), (2, 3), (0, 3))
_TOP_ORDER = ((0, 1), (2, 1), (2, 3), (2, 3), (0, 3), (0, 1))


def _face_uv(region, order) -> list[float]:
    return [region[i] for pair in order for i in pair]


def _skybox_uv() -> list[float]:
    return (
        _face_uv(_BACK, _SIDE_ORDER)
        + _face_uv(_RIGHT, _SIDE_ORDER)
        + _face_uv(_FRONT, _FRONT_ORDER)
        + _face_uv(_LEFT, _SIDE_ORDER)
        + _face_uv(_TOP, _TOP_ORDER)
        + _face_uv(_BOTTOM, _FRONT_ORDER)
    )


def _perspective(fov_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    f = 1.0 / math.tan(fov_radians / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


class Camera(CubeMesh.__mro__[-2]):  # SceneObject
    """Camera whose sky box follows its position but not its rotation."""

    def __init__(self, fov: float = 60.0, render_dist: float = 100.0) -> None:
        super().__init__()
        self.skybox = CubeMesh()
        self.skybox.light_shading = False
        self.skybox.indices = list(range(35, -1, -1))
        self.skybox.uv = _skybox_uv()
        self.skybox_enabled = False
        self._fov = float(fov)
        self._render_dist = float(render_dist)
        self._prev_aspect: Optional[float] = None
        self._projection = np.eye(4)
        self.render_dist = render_dist
        self.bind_obj(self.skybox, True, False, False)

    @property
    def fov(self) -> float:
        """Vertical field of view in degrees."""
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = float(value)

    @property
    def render_dist(self) -> float:
        return self._render_dist

    @render_dist.setter
    def render_dist(self, value: float) -> None:
        self._render_dist = float(value)
        size = self._render_dist * 2 / math.sqrt(3)
        self.skybox.set_size(size, size, size)

    @property
    def skybox_texture(self):
        return self.skybox.texture

    @skybox_texture.setter
    def skybox_texture(self, texture) -> None:
        self.skybox.texture = texture

    def projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        """Perspective matrix; recomputed only when the aspect ratio changes."""
        if self._prev_aspect != aspect_ratio:
            self._prev_aspect = aspect_ratio
            self._projection = _perspective(
                math.radians(self._fov), aspect_ratio, _NEAR, self._render_dist
            )
        return self._projection.copy()

    def view_matrix(self) -> np.ndarray:
        rotation = self.global_rotation_matrix().T
        translation = np.eye(4)
        translation[:3, 3] = -self.global_position()
        return rotation @ translation

    def project_ray_from_screen(self, pos, screen) -> np.ndarray:
        """World-space unit direction through pixel ``pos`` of a ``screen``-sized view."""
        px, py = (float(v) for v in pos)
        width, height = (float(v) for v in screen)
        ndc_x = (2.0 * px) / width - 1.0
        ndc_y = 1.0 - (2.0 * py) / height
        clip = np.array([ndc_x, ndc_y, -1.0, 1.0])
        eye = np.linalg.inv(self.projection_matrix(width / height)) @ clip
        eye = np.array([eye[0], eye[1], -1.0, 0.0])
        world = np.linalg.inv(self.view_matrix()) @ eye
        direction = world[:3]
        return direction / np.linalg.norm(direction)