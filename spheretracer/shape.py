from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import Optional, Sequence, Tuple

from spheretracer.color import Color
from spheretracer.vector import Point, Vector

SPECULAR_NONE = -1.0


class Shape(ABC):
    """Capability interface for anything a ray can hit."""

    color: Color
    specular: float
    reflective: float

    @abstractmethod
    def intersect_ray(self, origin: Point, direction: Vector) -> Optional[Tuple[float, float]]:
        pass

    @abstractmethod
    def normal(self, point: Point) -> Vector:
        pass


@dataclass(frozen=True)
class Sphere(Shape):
    center: Point
    radius: float
    color: Color
    specular: float = SPECULAR_NONE
    reflective: float = 0.0

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"sphere radius must be positive, got {self.radius}")
        if not 0.0 <= self.reflective < 1.0:
            raise ValueError(f"reflectivity must be in [0, 1), got {self.reflective}")

    def intersect_ray(self, origin: Point, direction: Vector) -> Optional[Tuple[float, float]]:
        """Solve |O + tD - C|^2 = r^2 for t.

        Returns both roots, larger first, or None when the ray misses. The
        ray is a half-line, so a sphere lying entirely behind the origin is a
        miss, and a zero-length direction never intersects.
        """
        d = direction
        co = Vector.from_point(origin - self.center)

        a = d.dot(d)
        if a == 0.0:
            return None
        b = 2.0 * d.dot(co)
        c = co.dot(co) - self.radius ** 2

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None

        sqrt_discriminant = math.sqrt(discriminant)
        t1 = (-b + sqrt_discriminant) / (2.0 * a)
        t2 = (-b - sqrt_discriminant) / (2.0 * a)
        if t1 < 0.0:
            return None
        return t1, t2

    def normal(self, point: Point) -> Vector:
        return Vector.from_point(point - self.center).unit()


def closest_intersection(
    origin: Point,
    direction: Vector,
    shapes: Sequence[Shape],
    t_min: float,
    t_max: float,
) -> Optional[Tuple[float, Shape]]:
    """Nearest shape hit by the ray within [t_min, t_max].

    On exact ties the shape listed first wins.
    """
    closest_t = math.inf
    closest_shape: Optional[Shape] = None

    for shape in shapes:
        roots = shape.intersect_ray(origin, direction)
        if roots is None:
            continue
        for t in roots:
            if t_min <= t <= t_max and t < closest_t:
                closest_t = t
                closest_shape = shape

    if closest_shape is None:
        return None
    return closest_t, closest_shape
