from dataclasses import dataclass, field

from spheretracer.color import BG_COLOR, Color
from spheretracer.light import Light
from spheretracer.shape import Sphere
from spheretracer.vector import Point

RECURSION_DEPTH = 3


@dataclass(frozen=True)
class Viewport:
    center: Point = Point(0.0, 0.0, 1.0)
    width: float = 1.0
    height: float = 1.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewport must have a positive size, got {self.width}x{self.height}")


@dataclass
class Settings:
    width: int = 600
    height: int = 600
    recursion_depth: int = RECURSION_DEPTH
    epsilon: float = 0.001
    t_min: float = 1.0
    t_max: float = 5000.0
    background: Color = BG_COLOR
    camera_position: Point = Point(0.0, 0.0, 0.0)
    viewport: Viewport = Viewport()
    progress: bool = False


@dataclass
class World:
    objs: list[Sphere] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)
