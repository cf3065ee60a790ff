from dataclasses import dataclass
from typing import Iterable, List, Tuple

from spheretracer.canvas import Canvas
from spheretracer.color import Color


@dataclass(frozen=True)
class P2:
    x: int
    y: int


def interpolate(i0: int, d0: float, i1: int, d1: float) -> List[Tuple[int, int]]:
    """Sample the line from (i0, d0) to (i1, d1) at every integer i.

    Dependent values are truncated toward zero. Expects i0 <= i1.
    """
    if i0 == i1:
        return [(i0, int(d0))]

    values = []
    slope = (d1 - d0) / (i1 - i0)
    d = d0
    for i in range(i0, i1 + 1):
        values.append((i, int(d)))
        d += slope
    return values


def put_pixels(canvas: Canvas, pixels: Iterable[Tuple[int, int]], color: Color) -> None:
    for x, y in pixels:
        canvas.put_pixel(x, y, color)


def draw_line(canvas: Canvas, p0: P2, p1: P2, color: Color) -> None:
    dx = p1.x - p0.x
    dy = p1.y - p0.y

    if abs(dx) > abs(dy):
        # line is horizontal-ish
        if p0.x > p1.x:
            p0, p1 = p1, p0
        put_pixels(canvas, interpolate(p0.x, p0.y, p1.x, p1.y), color)
    else:
        # line is vertical-ish
        if p0.y > p1.y:
            p0, p1 = p1, p0
        put_pixels(canvas, ((x, y) for y, x in interpolate(p0.y, p0.x, p1.y, p1.x)), color)
