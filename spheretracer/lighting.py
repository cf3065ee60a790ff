import math
from typing import Sequence

from spheretracer.light import AmbientLight, DirectionalLight, Light, PointLight
from spheretracer.shape import SPECULAR_NONE, Shape, closest_intersection
from spheretracer.vector import Point, Vector, reflect

EPSILON = 0.001


def is_in_shadow(
    point: Point,
    light_vec: Vector,
    shapes: Sequence[Shape],
    t_min: float,
    t_max: float,
) -> bool:
    return closest_intersection(point, light_vec, shapes, t_min, t_max) is not None


def compute_lighting(
    point: Point,
    normal: Vector,
    view: Vector,
    lights: Sequence[Light],
    specular: float,
    shapes: Sequence[Shape],
    epsilon: float = EPSILON,
) -> float:
    """Total light intensity reaching ``point``.

    ``normal`` is the surface normal at ``point`` and ``view`` points from the
    surface back toward the viewer. ``specular`` is the shininess exponent,
    SPECULAR_NONE for matte surfaces. Point and directional lights blocked by
    any shape are skipped entirely. The result is not clamped.
    """
    i = 0.0

    for light in lights:
        match light:
            case AmbientLight(intensity=intensity):
                i += intensity
                continue
            case PointLight(intensity=intensity, position=position):
                light_vec = Vector.from_point(position - point)
                t_max = 1.0
            case DirectionalLight(intensity=intensity, direction=direction):
                light_vec = direction
                t_max = math.inf
            case _:
                raise TypeError(f"unsupported light: {light!r}")

        if light_vec.is_zero():
            continue

        if is_in_shadow(point, light_vec, shapes, epsilon, t_max):
            continue

        # diffuse
        n_dot_l = normal.dot(light_vec)
        if n_dot_l > 0.0:
            i += intensity * n_dot_l / (normal.length() * light_vec.length())

        # specular
        if specular != SPECULAR_NONE and not view.is_zero():
            r = reflect(normal, light_vec)
            if r.is_zero():
                continue
            r_cos_v = r.cos(view)
            if r_cos_v > 0.0:
                i += intensity * r_cos_v ** specular

    return i
