"""Frame-by-frame mesh animation driven by mesh names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hatescene.mesh import Mesh
from hatescene.model import Model
from hatescene.scene_object import SceneObject


class AnimationNotFoundError(KeyError):
    """Raised when playing an animation that the model does not contain."""


@dataclass
class Animation:
    """Meshes shown in each frame of one animation."""

    frames: list[list[Mesh]] = field(default_factory=list)
    frame_count: int = 0


def _parse_name(name: str) -> tuple[str, int]:
    """Split ``[anim][frame]...`` into the animation name and a zero-based frame."""
    pos = name.index("]")
    anim = name[1:pos]
    end = name.index("]", pos + 1)
    return anim, int(name[pos + 2 : end]) - 1


class AnimationPlayer(SceneObject):
    """Plays animations whose frames are the meshes of a model's first level of detail."""

    def __init__(self, model: Model) -> None:
        super().__init__()
        self.model = model
        self.bind_obj(model)
        self.animations: dict[str, Animation] = {}
        self.frame_time = 1.0 / 24.0
        self.loop = True
        self.current_frame = 0
        self._elapsed = 0.0
        self._playing = False
        self._current: Optional[Animation] = None
        self._current_name = ""
        for mesh in model.lods[0].meshes:
            anim_name, frame = _parse_name(mesh.name)
            anim = self.animations.setdefault(anim_name, Animation())
            while len(anim.frames) <= frame:
                anim.frames.append([])
            anim.frames[frame].append(mesh)
            anim.frame_count = max(anim.frame_count, frame + 1)

    @property
    def fps(self) -> float:
        return 1.0 / self.frame_time

    @fps.setter
    def fps(self, value: float) -> None:
        self.frame_time = 1.0 / value

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def current_animation(self) -> str:
        return self._current_name

    def update(self, delta: float) -> None:
        """Advance by ``delta`` seconds, looping or stopping at the last frame."""
        if not self._playing or self._current is None:
            return
        self._elapsed += delta
        while self._elapsed >= self.frame_time:
            self._elapsed -= self.frame_time
            self.current_frame += 1
            if self.current_frame >= self._current.frame_count:
                if self.loop:
                    self.current_frame = 0
                else:
                    self._playing = False
                    return

    def current_meshes(self) -> list[Mesh]:
        """Meshes of the current frame; empty when nothing is selected."""
        if self._current is None:
            return []
        return list(self._current.frames[self.current_frame])

    def play(self, name: str) -> None:
        if name not in self.animations:
            raise AnimationNotFoundError(f"Animation not found: {name}")
        self._current = self.animations[name]
        self._current_name = name
        self._playing = True

    def stop(self) -> None:
        self._playing = False
        self._current_name = ""
        self._current = None