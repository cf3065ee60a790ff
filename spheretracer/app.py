import logging

import numpy as np
from numpy.typing import NDArray

from spheretracer import color
from spheretracer.canvas import Canvas, PathLike
from spheretracer.common import Settings, World
from spheretracer.light import AmbientLight, DirectionalLight, PointLight
from spheretracer.rasterization import P2, draw_line
from spheretracer.shape import Sphere
from spheretracer.tracer import Raytracer
from spheretracer.vector import Point, Vector

logger = logging.getLogger(__name__)


class App:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.canvas = Canvas(settings.width, settings.height, settings.background)
        self.world = self.create_world()

    @property
    def image(self) -> NDArray[np.uint8]:
        return self.canvas.pixels

    def run(self):
        raise NotImplementedError

    def create_world(self) -> World:
        return World(settings=self.settings)

    def save(self, path: PathLike) -> None:
        self.canvas.save_to_ppm_file(path)

    def save_png(self, path: PathLike) -> None:
        self.canvas.save_png(path)


class RaytracerApp(App):
    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.raytracer = Raytracer(
            settings.camera_position,
            settings.viewport,
            self.canvas,
            settings,
        )

    def run(self):
        logger.info(
            "Ray tracing %d spheres at %dx%d",
            len(self.world.objs), self.settings.width, self.settings.height,
        )
        self.raytracer.fill_canvas(self.world.objs, self.world.lights)

    def create_world(self) -> World:
        sphere_red = Sphere(
            center=Point(0.0, -1.0, 3.0),
            radius=1.0,
            color=color.RED,
            specular=500.0,
            reflective=0.2,
        )
        sphere_green = Sphere(
            center=Point(-2.0, 0.0, 4.0),
            radius=1.0,
            color=color.GREEN,
            specular=500.0,
            reflective=0.3,
        )
        sphere_blue = Sphere(
            center=Point(2.0, 0.0, 4.0),
            radius=1.0,
            color=color.BLUE,
            specular=10.0,
            reflective=0.4,
        )
        sphere_floor = Sphere(
            center=Point(0.0, -5001.0, 0.0),
            radius=5000.0,
            color=color.YELLOW,
            specular=1000.0,
            reflective=0.5,
        )

        return World(
            objs=[
                sphere_red,
                sphere_green,
                sphere_blue,
                sphere_floor,
            ],
            lights=[
                AmbientLight(0.1),
                PointLight(0.6, Point(3.0, 10.0, -2.0)),
                DirectionalLight(0.3, Vector(3.0, 0.0, -1.0)),
            ],
            settings=self.settings,
        )


class LinesApp(App):
    def run(self):
        w, h = self.canvas.w, self.canvas.h
        logger.info("Rasterizing lines at %dx%d", w, h)

        draw_line(self.canvas, P2(-w // 3, -h // 8), P2(w // 3, h // 8), color.RED)
        draw_line(self.canvas, P2(-w // 8, -h // 3), P2(w // 8, h // 3), color.GREEN)
        draw_line(self.canvas, P2(-w // 3, h // 4), P2(w // 3, h // 4), color.YELLOW)
