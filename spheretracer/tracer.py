import logging
import math
from typing import Optional, Sequence

from tqdm import tqdm

from spheretracer.canvas import Canvas, PathLike
from spheretracer.color import BG_COLOR, Color
from spheretracer.common import RECURSION_DEPTH, Settings, Viewport
from spheretracer.light import Light
from spheretracer.lighting import EPSILON, compute_lighting
from spheretracer.shape import Shape, closest_intersection
from spheretracer.vector import Point, Vector, ray_at, reflect

logger = logging.getLogger(__name__)


def trace_ray(
    start: Point,
    direction: Vector,
    shapes: Sequence[Shape],
    lights: Sequence[Light],
    t_min: float,
    t_max: float,
    recursion_depth: int = RECURSION_DEPTH,
    background: Color = BG_COLOR,
    epsilon: float = EPSILON,
) -> Color:
    """Color seen along the ray ``start + t * direction`` for t in [t_min, t_max].

    Reflective surfaces blend their local shading with the color traced along
    the mirrored ray, down to ``recursion_depth`` bounces.
    """
    intersection = closest_intersection(start, direction, shapes, t_min, t_max)
    if intersection is None:
        return background

    closest_t, shape = intersection
    p = ray_at(start, direction, closest_t)
    normal = shape.normal(p)
    view = -direction

    local_color = shape.color.scale(
        compute_lighting(p, normal, view, lights, shape.specular, shapes, epsilon)
    )
    if recursion_depth <= 0 or shape.reflective <= 0.0:
        return local_color

    reflected_ray = reflect(normal, view)
    reflected_color = trace_ray(
        p,
        reflected_ray,
        shapes,
        lights,
        epsilon,
        math.inf,
        recursion_depth - 1,
        background,
        epsilon,
    )
    return local_color.scale(1.0 - shape.reflective) + reflected_color.scale(shape.reflective)


class Raytracer:
    def __init__(
        self,
        camera: Point,
        viewport: Viewport,
        canvas: Canvas,
        settings: Optional[Settings] = None,
    ):
        self.camera = camera
        self.vw = viewport
        self.canvas = canvas
        self.settings = settings or Settings(width=canvas.w, height=canvas.h, background=canvas.background)

    def viewport_point_from_canvas_point(self, x: float, y: float) -> Point:
        vx = x / self.canvas.w * self.vw.width
        vy = y / self.canvas.h * self.vw.height
        vz = self.vw.center.z
        return Point(vx, vy, vz)

    def fill_canvas(self, shapes: Sequence[Shape], lights: Sequence[Light]) -> None:
        settings = self.settings
        w, h = self.canvas.w, self.canvas.h
        logger.debug(
            "Rendering %d shapes and %d lights onto %dx%d canvas, recursion depth %d",
            len(shapes), len(lights), w, h, settings.recursion_depth,
        )

        # top row first; every buffer pixel is visited exactly once
        rows = range(h // 2, h // 2 - h, -1)
        for y in tqdm(rows, total=len(rows), disable=not settings.progress):
            for x in range(-(w // 2), w - w // 2):
                vp_point = self.viewport_point_from_canvas_point(x, y)
                color = trace_ray(
                    self.camera,
                    Vector.from_point(vp_point - self.camera),
                    shapes,
                    lights,
                    settings.t_min,
                    settings.t_max,
                    settings.recursion_depth,
                    settings.background,
                    settings.epsilon,
                )
                self.canvas.put_pixel(x, y, color)

        logger.debug("Finished rendering %dx%d canvas", w, h)

    def save_canvas_to_ppm_file(self, path: PathLike) -> None:
        self.canvas.save_to_ppm_file(path)
