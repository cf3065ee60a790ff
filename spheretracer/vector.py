from dataclasses import dataclass
import math

import numpy as np
from numpy.typing import NDArray


class DegenerateVectorError(ValueError):
    """Raised when a direction is required but the vector has zero length."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float

    @staticmethod
    def origin() -> "Point":
        return Point(0.0, 0.0, 0.0)

    @staticmethod
    def from_vector(v: "Vector") -> "Point":
        return Point(v.x, v.y, v.z)

    def scale(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s, self.z * s)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def to_array(self) -> NDArray[np.float64]:
        return np.array((self.x, self.y, self.z), dtype=np.float64)


@dataclass(frozen=True)
class Vector:
    x: float
    y: float
    z: float

    @staticmethod
    def from_point(p: Point) -> "Vector":
        return Vector(p.x, p.y, p.z)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def unit(self) -> "Vector":
        """Return the vector scaled to length one.

        Raises DegenerateVectorError for the zero vector, which has no
        direction.
        """
        length = self.length()
        if length == 0.0:
            raise DegenerateVectorError("cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)

    def cos(self, other: "Vector") -> float:
        """Cosine of the angle between two non-zero vectors."""
        denominator = self.length() * other.length()
        if denominator == 0.0:
            raise DegenerateVectorError("angle to a zero-length vector is undefined")
        return self.dot(other) / denominator

    def scale(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor, self.z * factor)

    def mul(self, other: "Vector") -> "Vector":
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def to_array(self) -> NDArray[np.float64]:
        return np.array((self.x, self.y, self.z), dtype=np.float64)


def reflect(normal: Vector, ray: Vector) -> Vector:
    # normal must be a unit vector
    return normal.scale(2.0 * normal.dot(ray)) - ray


def ray_at(origin: Point, direction: Vector, t: float) -> Point:
    return origin + Point.from_vector(direction.scale(t))
