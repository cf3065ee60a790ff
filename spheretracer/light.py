from dataclasses import dataclass
import math
from typing import Union

from spheretracer.vector import Point, Vector


def _check_intensity(intensity: float) -> None:
    if not math.isfinite(intensity) or intensity < 0:
        raise ValueError(f"light intensity must be finite and non-negative, got {intensity}")


@dataclass(frozen=True)
class AmbientLight:
    intensity: float

    def __post_init__(self):
        _check_intensity(self.intensity)


@dataclass(frozen=True)
class PointLight:
    intensity: float
    position: Point

    def __post_init__(self):
        _check_intensity(self.intensity)


@dataclass(frozen=True)
class DirectionalLight:
    intensity: float
    direction: Vector

    def __post_init__(self):
        _check_intensity(self.intensity)


Light = Union[AmbientLight, PointLight, DirectionalLight]
