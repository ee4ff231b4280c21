"""Collision shapes that physical bodies are built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

import numpy as np

from hatescene import log
from hatescene.scene_object import SceneObject, euler_xyz_matrix

_MAX_BIT = 15


class ShapeType(Enum):
    """Geometric kind of a collision shape."""

    BOX = "box"
    SPHERE = "sphere"
    CAPSULE = "capsule"
    CONVEX = "convex"


def _rotation_from(rotation) -> np.ndarray:
    arr = np.array(rotation, dtype=float)
    if arr.shape == (4, 4):
        return arr
    if arr.reshape(-1).shape == (3,):
        return euler_xyz_matrix(np.radians(arr.reshape(-1)))
    raise ValueError("rotation must be three Euler angles in degrees or a 4x4 matrix")


class CollisionShape(SceneObject):
    """A shape with a fixed local transform, surface material and collision filter bits.

    The transform is set once at construction; moving the shape afterwards is
    not supported and only logs a warning.  ``collider`` is the handle a physics
    engine attaches when the shape is bound to a simulated body.
    """

    def __init__(
        self,
        shape_type: ShapeType,
        position: Iterable[float] = (0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
    ) -> None:
        super().__init__()
        self.shape_type = shape_type
        pos = np.array(position, dtype=float).reshape(-1)
        if pos.shape != (3,):
            raise ValueError("position must have 3 components")
        self._position = pos
        self._rotation_matrix = _rotation_from(rotation)
        self._update_direction()
        self._friction = 0.3
        self._bounciness = 0.5
        self._category_bits = 0x0001
        self._mask_bits = 0xFFFF
        self.collider: Optional[Any] = None

    @property
    def is_initialized(self) -> bool:
        """True once a physics engine has attached a collider to this shape."""
        return self.collider is not None

    # ---- the transform is fixed ----------------------------------------
    def set_position(self, vec) -> None:
        log.warning("setPosition is not supported for CollisionShape")

    def set_rotation(self, degrees) -> None:
        log.warning("setRotation is not supported for CollisionShape")

    def offset(self, vec) -> None:
        log.warning("offest is not supported for CollisionShape")

    def rotate(self, degrees, global_: bool = False) -> None:
        log.warning("rotate is not supported for CollisionShape")

    # ---- material ------------------------------------------------------
    @property
    def friction(self) -> float:
        return self._friction

    @friction.setter
    def friction(self, value: float) -> None:
        value = float(value)
        if value < 0.0:
            log.warning(f"CollisonShape [{self.uuid}]: friction cannot be negative")
            return
        self._friction = value

    @property
    def bounciness(self) -> float:
        return self._bounciness

    @bounciness.setter
    def bounciness(self, value: float) -> None:
        value = float(value)
        if value > 1.0 or value < 0.0:
            log.warning(
                f"CollisonShape [{self.uuid}]: bounciness cannot be greater than 1 or less than 0"
            )
            return
        self._bounciness = value

    # ---- collision filtering -------------------------------------------
    def set_collision_category(self, category: int) -> None:
        """Put the shape in category ``category`` (0 to 15)."""
        if category > _MAX_BIT:
            log.warning(f"CollisonShape [{self.uuid}]: category cannot be greater than 15")
            return
        self._category_bits = 1 << category

    @property
    def collision_category(self) -> int:
        """Index of the lowest category bit set, or 0 when none is."""
        bits = self._category_bits & 0xFFFF
        for index in range(_MAX_BIT + 1):
            if bits & (1 << index):
                return index
        return 0

    @property
    def collision_category_bits(self) -> int:
        return self._category_bits

    @collision_category_bits.setter
    def collision_category_bits(self, value: int) -> None:
        self._category_bits = int(value) & 0xFFFF

    def set_collision_mask_bit(self, bit: int, state: bool) -> None:
        """Turn collisions with category ``bit`` (0 to 15) on or off."""
        if bit > _MAX_BIT:
            log.warning(f"CollisonShape [{self.uuid}]: mask cannot be greater than 15")
            return
        if state:
            self._mask_bits |= 1 << bit
        else:
            self._mask_bits &= ~(1 << bit) & 0xFFFF

    def collision_mask_bit(self, bit: int) -> bool:
        return bool(self._mask_bits & (1 << bit))

    @property
    def collision_mask(self) -> int:
        return self._mask_bits

    @collision_mask.setter
    def collision_mask(self, value: int) -> None:
        self._mask_bits = int(value) & 0xFFFF

    def enabled_collision_mask_bits(self) -> list[int]:
        return [i for i in range(_MAX_BIT + 1) if self._mask_bits & (1 << i)]


class BoxShape(CollisionShape):
    """Box given by its full width (x), height (y) and length (z)."""

    def __init__(
        self,
        extents: Iterable[float] = (1.0, 1.0, 1.0),
        position: Iterable[float] = (0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(ShapeType.BOX, position, rotation)
        width, height, length = (float(v) for v in extents)
        self._half_extents = (0.0, 0.0, 0.0)
        self.change_size(width, height, length)

    @property
    def half_extents(self) -> tuple[float, float, float]:
        """Half sizes in the physics engine's (z, y, x) axis order."""
        return self._half_extents

    def change_size(self, width: float, height: float, length: float) -> None:
        self._half_extents = (length / 2, height / 2, width / 2)


class SphereShape(CollisionShape):
    """Sphere of a given radius."""

    def __init__(
        self,
        radius: float = 1.0,
        position: Iterable[float] = (0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(ShapeType.SPHERE, position, rotation)
        self._radius = 0.0
        self.change_radius(radius)

    @property
    def radius(self) -> float:
        return self._radius

    def change_radius(self, radius: float) -> None:
        self._radius = float(radius)


class CapsuleShape(CollisionShape):
    """Capsule; ``height`` passed in is the full height including both caps."""

    def __init__(
        self,
        radius: float = 0.5,
        height: float = 2.0,
        position: Iterable[float] = (0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(ShapeType.CAPSULE, position, rotation)
        self._radius = 0.0
        self._height = 0.0
        self.change_radius(radius)
        self.change_height(height)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def height(self) -> float:
        """Height of the cylindrical part between the two caps."""
        return self._height

    def change_radius(self, radius: float) -> None:
        self._radius = float(radius)

    def change_height(self, height: float) -> None:
        """Set the full height; the stored height excludes the caps at the current radius."""
        self._height = float(height) - self._radius * 2


@dataclass(frozen=True)
class PolygonFace:
    """One face of a convex shape: how many indices it uses and where they start."""

    index_count: int
    first_index: int


class ConvexShape(CollisionShape):
    """Convex polyhedron from flat XYZ vertices and a vertex-index list per face."""

    def __init__(
        self,
        vertices: Iterable[float],
        faces: Iterable[Iterable[int]],
        position: Iterable[float] = (0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(ShapeType.CONVEX, position, rotation)
        self.vertices: list[float] = [float(v) for v in vertices]
        if len(self.vertices) % 3:
            raise ValueError("vertex list length must be a multiple of 3")
        self.indices: list[int] = []
        self.faces: list[PolygonFace] = []
        for face in faces:
            face = [int(i) for i in face]
            self.faces.append(PolygonFace(len(face), len(self.indices)))
            self.indices.extend(face)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3