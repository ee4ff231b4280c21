"""Scene graph node with local and parent-relative transforms."""

from __future__ import annotations

import math
import uuid as _uuid_module
from dataclasses import dataclass
from typing import Iterable

import numpy as np


def _new_uuid() -> int:
    return _uuid_module.uuid4().int >> 64


def _vec3(value: Iterable[float]) -> np.ndarray:
    arr = np.array(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"expected 3 components, got {arr.size}")
    return arr


def _mat4(value) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def _axis_rotation(axis: int, angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    if axis == 0:
        m[1, 1], m[1, 2], m[2, 1], m[2, 2] = c, -s, s, c
    elif axis == 1:
        m[0, 0], m[0, 2], m[2, 0], m[2, 2] = c, s, -s, c
    else:
        m[0, 0], m[0, 1], m[1, 0], m[1, 1] = c, -s, s, c
    return m


def euler_xyz_matrix(radians: Iterable[float]) -> np.ndarray:
    """Rotation matrix X * Y * Z from angles in radians."""
    x, y, z = _vec3(radians)
    return _axis_rotation(0, x) @ _axis_rotation(1, y) @ _axis_rotation(2, z)


def _euler_degrees(m: np.ndarray) -> np.ndarray:
    """Decompose ``m`` as Y * Z * X; returns (x, y + 90, z) in degrees."""
    t1 = math.atan2(-m[2, 0], m[0, 0])
    c2 = math.hypot(m[1, 1], m[1, 2])
    t2 = math.atan2(m[1, 0], c2)
    s1, c1 = math.sin(t1), math.cos(t1)
    t3 = math.atan2(s1 * m[0, 1] + c1 * m[2, 1], s1 * m[0, 2] + c1 * m[2, 2])
    rot = np.degrees(np.array([t3, t1, t2]))
    rot[1] += 90.0
    return rot


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


@dataclass
class _Binding:
    obj: "SceneObject"
    pos: bool
    rot: bool
    scale: bool
    visible: bool


class SceneObject:
    """An object in the scene that can carry bound child objects."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.uuid = _new_uuid()
        self._position = np.zeros(3)
        self._rotation_matrix = np.eye(4)
        self._scale = np.ones(3)
        self._visible = True
        self._parent_position = np.zeros(3)
        self._parent_rotation_matrix = np.eye(4)
        self._parent_scale = np.ones(3)
        self._parent_visible = True
        self._bound = False
        self._bindings: dict[int, _Binding] = {}
        self._direction = np.array([0.0, 0.0, -1.0])
        self._update_direction()

    # ---- read access -------------------------------------------------
    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self.set_position(value)

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._rotation_matrix.copy()

    @rotation_matrix.setter
    def rotation_matrix(self, value) -> None:
        self.set_rotation_matrix(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self.set_scale(value)

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self.set_visible(value)

    @property
    def direction(self) -> np.ndarray:
        return self._direction.copy()

    @property
    def parent_position(self) -> np.ndarray:
        return self._parent_position.copy()

    @property
    def parent_rotation_matrix(self) -> np.ndarray:
        return self._parent_rotation_matrix.copy()

    @property
    def parent_scale(self) -> np.ndarray:
        return self._parent_scale.copy()

    @property
    def parent_visible(self) -> bool:
        return self._parent_visible

    @property
    def is_bound(self) -> bool:
        return self._bound

    @property
    def bindings(self) -> dict[int, "SceneObject"]:
        """Bound children by UUID."""
        return {key: b.obj for key, b in self._bindings.items()}

    # ---- propagation -------------------------------------------------
    def _update_direction(self) -> None:
        self._direction = (self.global_rotation_matrix() @ np.array([0.0, 0.0, -1.0, 0.0]))[:3]

    def _propagate(self, *, pos=False, rot=False, scale=False, visible=False) -> None:
        for binding in list(self._bindings.values()):
            if rot and binding.rot:
                binding.obj.set_parent_rotation_matrix(self.global_rotation_matrix())
            if pos and binding.pos:
                binding.obj.set_parent_position(self.global_position())
            if scale and binding.scale:
                binding.obj.set_parent_scale(self.global_scale())
            if visible and binding.visible:
                binding.obj.set_parent_visible(self.global_visible())

    def set_parent_position(self, vec) -> None:
        self._parent_position = _vec3(vec)
        self._propagate(pos=True)

    def set_parent_scale(self, vec) -> None:
        self._parent_scale = _vec3(vec)
        self._propagate(scale=True)

    def set_parent_rotation_matrix(self, mat) -> None:
        self._parent_rotation_matrix = _mat4(mat)
        self._propagate(rot=True)
        self._update_direction()

    def set_parent_visible(self, value: bool) -> None:
        self._parent_visible = bool(value)
        self._propagate(visible=True)

    # ---- local transform ---------------------------------------------
    def set_position(self, vec) -> None:
        self._position = _vec3(vec)
        self._propagate(pos=True)

    def set_rotation(self, degrees) -> None:
        """Set the rotation from X, Y, Z Euler angles in degrees."""
        self._rotation_matrix = euler_xyz_matrix(np.radians(_vec3(degrees)))
        self._propagate(rot=True, pos=True)
        self._update_direction()

    def set_rotation_matrix(self, mat) -> None:
        self._rotation_matrix = _mat4(mat)
        self._propagate(rot=True)
        self._update_direction()

    def set_scale(self, vec) -> None:
        self._scale = _vec3(vec)
        self._propagate(scale=True)

    def set_visible(self, visible: bool) -> None:
        self._visible = bool(visible)
        self._propagate(visible=True)

    def look_at(self, target) -> None:
        """Turn the object so its Z axis points at ``target``."""
        direction = _normalize(_vec3(target) - self.global_position())
        right = _normalize(np.cross([0.0, 1.0, 0.0], direction))
        up = np.cross(direction, right)
        rotation = np.eye(4)
        rotation[:3, 0] = right
        rotation[:3, 1] = up
        rotation[:3, 2] = direction
        self.set_rotation_matrix(rotation)

    def offset(self, vec) -> None:
        self.set_position(_vec3(vec) + self._position)

    def rotate(self, degrees, global_: bool = False) -> None:
        """Rotate by Y, then X, then Z angles in degrees."""
        x, y, z = np.radians(_vec3(degrees))
        step = _axis_rotation(1, y) @ _axis_rotation(0, x) @ _axis_rotation(2, z)
        if global_:
            self.set_rotation_matrix(self._rotation_matrix @ step)
        else:
            self.set_rotation_matrix(step @ self._rotation_matrix)
        self._propagate(rot=True, pos=True)

    # ---- derived values ----------------------------------------------
    def rotation_euler(self) -> np.ndarray:
        return _euler_degrees(self._rotation_matrix)

    def global_position(self) -> np.ndarray:
        if not self._bound:
            return self._position.copy()
        rotated = self._parent_rotation_matrix @ np.append(self._position, 1.0)
        return self._parent_position + rotated[:3]

    def global_rotation_matrix(self) -> np.ndarray:
        if not self._bound:
            return self._rotation_matrix.copy()
        return self._parent_rotation_matrix @ self._rotation_matrix

    def global_rotation_euler(self) -> np.ndarray:
        return _euler_degrees(self.global_rotation_matrix())

    def global_scale(self) -> np.ndarray:
        return self._scale * self._parent_scale

    def global_direction(self) -> np.ndarray:
        rot = self.global_rotation_euler()
        yaw = math.radians(-rot[1])
        pitch = math.radians(rot[0])
        direction = np.array(
            [
                math.cos(pitch) * math.cos(yaw),
                math.sin(pitch),
                math.cos(pitch) * math.sin(yaw),
            ]
        )
        return _normalize(direction)

    def global_visible(self) -> bool:
        if not self._bound:
            return self._visible
        return self._parent_visible and self._visible

    # ---- binding -----------------------------------------------------
    def bind_obj(
        self,
        obj: "SceneObject",
        bind_pos: bool = True,
        bind_rot: bool = True,
        bind_scale: bool = True,
        bind_visible: bool = True,
    ) -> int:
        """Attach ``obj`` so it follows the chosen parts of this object's transform."""
        self._bindings[obj.uuid] = _Binding(obj, bind_pos, bind_rot, bind_scale, bind_visible)
        obj._bound = True
        if bind_pos:
            obj.set_parent_position(self.global_position())
        if bind_rot:
            obj.set_parent_rotation_matrix(self.global_rotation_matrix())
        if bind_scale:
            obj.set_parent_scale(self.global_scale())
        if bind_visible:
            obj.set_parent_visible(self.global_visible())
        return obj.uuid

    def unbind_obj(self, uuid: int) -> bool:
        """Detach a bound object; returns False if it was not bound here."""
        binding = self._bindings.pop(uuid, None)
        if binding is None:
            return False
        binding.obj._bound = False
        return True