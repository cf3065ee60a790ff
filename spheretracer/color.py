from dataclasses import dataclass
import math


def _clamp_channel(value: float) -> int:
    if value > 255.0:
        return 255
    if value < 0.0:
        return 0
    return int(math.floor(value))


@dataclass(frozen=True)
class Color:
    """8-bit RGB triple.

    Addition saturates at 255 per channel, and ``scale`` floors and clamps
    the result into [0, 255], so a Color never leaves the valid range.
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"color channels must be ints in [0, 255], got {(self.r, self.g, self.b)}")

    def scale(self, factor: float) -> "Color":
        return Color(
            _clamp_channel(self.r * factor),
            _clamp_channel(self.g * factor),
            _clamp_channel(self.b * factor),
        )

    def __add__(self, other: "Color") -> "Color":
        return Color(
            min(self.r + other.r, 255),
            min(self.g + other.g, 255),
            min(self.b + other.b, 255),
        )

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def to_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
YELLOW = Color(255, 255, 0)

BG_COLOR = BLACK
