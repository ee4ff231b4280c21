"""Models made of meshes at several levels of detail."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from typing import Iterable

from hatescene.mesh import Mesh
from hatescene.scene_object import SceneObject


@dataclass
class LOD:
    """Meshes used from ``distance`` onward."""

    distance: float
    meshes: list[Mesh] = field(default_factory=list)


class Model(SceneObject):
    """A set of meshes with optional level-of-detail variants."""

    def __init__(self) -> None:
        super().__init__()
        self.lods: list[LOD] = []
        self.textures: list = []
        self.is_loaded = False

    @property
    def lod_count(self) -> int:
        return len(self.lods)

    def lod(self, index: int) -> list[Mesh]:
        return self.lods[index].meshes

    def add_lod(self, distance: float, meshes: Iterable[Mesh]) -> None:
        self.lods.append(LOD(float(distance), list(meshes)))

    def copy(self, copy_textures: bool = False) -> "Model":
        """Copy the transform and, when loaded, every mesh of every level."""
        model = Model()
        model.name = self.name
        model._position = self._position.copy()
        model._rotation_matrix = self._rotation_matrix.copy()
        model._scale = self._scale.copy()
        model._visible = self._visible
        model._parent_position = self._parent_position.copy()
        model._parent_rotation_matrix = self._parent_rotation_matrix.copy()
        model._parent_scale = self._parent_scale.copy()
        model._update_direction()
        if not self.is_loaded:
            return model
        model.lods = [LOD(lod.distance, [m.copy() for m in lod.meshes]) for lod in self.lods]
        if copy_textures:
            model.textures = [_copy.deepcopy(t) for t in self.textures]
        else:
            model.textures = list(self.textures)
        model.is_loaded = True
        return model

    def meshes_for(self, camera_pos) -> list[Mesh]:
        """Meshes to draw: each level-0 mesh beyond level 1's distance is swapped for its level-1 twin."""
        if not self.lods:
            return []
        if len(self.lods) == 1:
            return list(self.lods[0].meshes)
        near, far = self.lods[0], self.lods[1]
        return [
            far.meshes[i] if mesh.aabb_distance_to_point(camera_pos) > far.distance else mesh
            for i, mesh in enumerate(near.meshes)
        ]

    def set_visible(self, visible: bool) -> None:
        """Show or hide every mesh at every level."""
        for lod in self.lods:
            for mesh in lod.meshes:
                mesh.set_visible(visible)