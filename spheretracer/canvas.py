import logging
import os
from typing import Iterable, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from spheretracer.color import BG_COLOR, Color

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class PPMFormatError(ValueError):
    pass


class Canvas:
    """The rectangular surface we color pixels on.

    Pixels are addressed in a centered coordinate system: (0, 0) is the
    middle of the image and y grows upwards. Storage is a row-major
    ``(height, width, 3)`` uint8 array whose first row is the top of the
    image. Writes that land outside the image are dropped.
    """

    def __init__(self, width: int, height: int, background: Color = BG_COLOR):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas must have a positive size, got {width}x{height}")

        self.w = width
        self.h = height
        self.background = background
        self.pixels: NDArray[np.uint8] = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    def canvas_to_screen_coordinate(self, x: int, y: int) -> Tuple[int, int]:
        sx = self.w // 2 + x
        sy = self.h // 2 - y
        return sx, sy

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        sx, sy = self.canvas_to_screen_coordinate(x, y)
        if 0 <= sx < self.w and 0 <= sy < self.h:
            self.pixels[sy, sx] = color.to_tuple()

    def get_pixel(self, x: int, y: int) -> Color:
        sx, sy = self.canvas_to_screen_coordinate(x, y)
        if not (0 <= sx < self.w and 0 <= sy < self.h):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.w}x{self.h} canvas")
        r, g, b = self.pixels[sy, sx]
        return Color(int(r), int(g), int(b))

    def clear(self) -> None:
        self.pixels[:, :] = self.background.to_tuple()

    def to_ppm(self) -> str:
        lines = ["P3", f"{self.w} {self.h}", "255"]
        lines.extend(f"{r} {g} {b}" for r, g, b in self.pixels.reshape(-1, 3).tolist())
        return "\n".join(lines) + "\n"

    def save_to_ppm_file(self, path: PathLike) -> None:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(self.to_ppm())
        logger.info("Saved %dx%d canvas to %s", self.w, self.h, path)

    def save_png(self, path: PathLike) -> None:
        Image.fromarray(self.pixels).save(path)
        logger.info("Saved %dx%d canvas to %s", self.w, self.h, path)

    @classmethod
    def from_ppm(cls, text: str) -> "Canvas":
        tokens = list(_ppm_tokens(text.splitlines()))
        if not tokens or tokens[0] != "P3":
            raise PPMFormatError("not a plain PPM (P3) image")

        try:
            width, height, max_value = (int(token) for token in tokens[1:4])
            values = [int(token) for token in tokens[4:]]
        except ValueError as e:
            raise PPMFormatError(f"malformed PPM data: {e}") from e

        if width <= 0 or height <= 0:
            raise PPMFormatError(f"image must have a positive size, got {width}x{height}")
        if max_value != 255:
            raise PPMFormatError(f"unsupported max channel value {max_value}")
        if len(values) != width * height * 3:
            raise PPMFormatError(f"expected {width * height * 3} channel values, got {len(values)}")
        if any(v < 0 or v > 255 for v in values):
            raise PPMFormatError("channel value out of range")

        canvas = cls(width, height)
        canvas.pixels[:, :] = np.array(values, dtype=np.uint8).reshape(height, width, 3)
        return canvas

    @classmethod
    def load_ppm_file(cls, path: PathLike) -> "Canvas":
        with open(path, "r", encoding="ascii") as f:
            return cls.from_ppm(f.read())


def _ppm_tokens(lines: Iterable[str]):
    for line in lines:
        yield from line.split("#", 1)[0].split()
