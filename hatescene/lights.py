"""Directional, omni and spot lights."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from hatescene import log
from hatescene.scene_object import SceneObject


class LightType(Enum):
    """Kind of light source."""

    DIRECTIONAL = "directional"
    OMNI = "omni"
    SPOT = "spot"


class Light(SceneObject):
    """A light with a colour and constant/linear/quadratic attenuation."""

    def __init__(self, light_type: LightType) -> None:
        super().__init__()
        self._light_type = light_type
        self._color = (1.0, 1.0, 1.0, 1.0)
        self._attenuation = (1.0, 0.0, 0.0)

    @property
    def light_type(self) -> LightType:
        return self._light_type

    @property
    def color(self) -> tuple[float, float, float, float]:
        return self._color

    @color.setter
    def color(self, value: Iterable[float]) -> None:
        rgba = tuple(float(c) for c in value)
        if len(rgba) != 4:
            raise ValueError("light colour must have 4 components")
        self._color = rgba

    @property
    def attenuation(self) -> tuple[float, float, float]:
        return self._attenuation

    def set_attenuation(self, constant: float, linear: float, quadratic: float) -> None:
        self._attenuation = (float(constant), float(linear), float(quadratic))

    @property
    def constant_attenuation(self) -> float:
        return self._attenuation[0]

    @constant_attenuation.setter
    def constant_attenuation(self, value: float) -> None:
        self._attenuation = (float(value), self._attenuation[1], self._attenuation[2])

    @property
    def linear_attenuation(self) -> float:
        return self._attenuation[1]

    @linear_attenuation.setter
    def linear_attenuation(self, value: float) -> None:
        self._attenuation = (self._attenuation[0], float(value), self._attenuation[2])

    @property
    def quadratic_attenuation(self) -> float:
        return self._attenuation[2]

    @quadratic_attenuation.setter
    def quadratic_attenuation(self, value: float) -> None:
        self._attenuation = (self._attenuation[0], self._attenuation[1], float(value))


class DirectionalLight(Light):
    """Light coming from one direction, like the sun."""

    def __init__(self) -> None:
        super().__init__(LightType.DIRECTIONAL)


class OmniLight(Light):
    """Point light shining in every direction."""

    def __init__(self) -> None:
        super().__init__(LightType.OMNI)


class SpotLight(Light):
    """Cone-shaped light with a cut-off angle and a focus exponent."""

    def __init__(self) -> None:
        super().__init__(LightType.SPOT)
        self._half_angle = 45.0
        self._exponent = 0.0

    @property
    def angle_cutoff(self) -> float:
        """Full cone angle in degrees, clamped to [0, 180]."""
        return self._half_angle * 2.0

    @angle_cutoff.setter
    def angle_cutoff(self, value: float) -> None:
        value = float(value)
        if value < 0.0:
            log.warning(f"SpotLight [{self.uuid}]: angleCutoff cannot be negative. Setting to 0.")
            value = 0.0
        if value > 180.0:
            log.warning(
                f"SpotLight [{self.uuid}]: angleCutoff cannot be greater than 180. Setting to 180."
            )
            value = 180.0
        self._half_angle = value * 0.5

    @property
    def half_angle_cutoff(self) -> float:
        """Angle between the axis and the edge of the cone."""
        return self._half_angle

    @property
    def exponent(self) -> float:
        """Focus exponent, clamped to [0, 128]."""
        return self._exponent

    @exponent.setter
    def exponent(self, value: float) -> None:
        value = float(value)
        if value < 0.0:
            log.warning(f"SpotLight [{self.uuid}]: exponent cannot be negative. Setting to 0.")
            value = 0.0
        if value > 128.0:
            log.warning(
                f"SpotLight [{self.uuid}]: exponent cannot be greater than 128. Setting to 128."
            )
            value = 128.0
        self._exponent = value