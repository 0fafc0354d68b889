from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Vec2:
    """Continuous 2D vector, used for world positions and piece offsets."""

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vec2":
        return Vec2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vec2":
        return Vec2(self.x / k, self.y / k)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def rotate90(self) -> "Vec2":
        """Quarter turn clockwise with +y pointing up."""
        return Vec2(self.y, -self.x)

    def floor(self) -> "GridPos":
        # floor, not int(): int(-0.25) == 0 but the cell is -1
        return GridPos(math.floor(self.x), math.floor(self.y))


@dataclass(frozen=True)
class GridPos:
    """Discrete column/row index; (0, 0) is the bottom-left cell."""

    x: int
    y: int

    def __add__(self, other: "GridPos") -> "GridPos":
        return GridPos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "GridPos") -> "GridPos":
        return GridPos(self.x - other.x, self.y - other.y)

    def to_vec2(self) -> Vec2:
        return Vec2(float(self.x), float(self.y))


@dataclass(frozen=True)
class Rect:
    center: Vec2
    size: Vec2

    def left(self) -> float:
        return self.center.x - self.size.x / 2

    def right(self) -> float:
        return self.center.x + self.size.x / 2

    def bottom(self) -> float:
        return self.center.y - self.size.y / 2

    def top(self) -> float:
        return self.center.y + self.size.y / 2

    def contains(self, point: Vec2) -> bool:
        return self.left() <= point.x <= self.right() and self.bottom() <= point.y <= self.top()

    def scaled(self, k: float) -> "Rect":
        """Same center, size multiplied by ``k``."""
        return Rect(self.center, self.size * k)

    def moved(self, delta: Vec2) -> "Rect":
        return Rect(self.center + delta, self.size)


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


WHITE = Rgb(255, 255, 255)
BLACK = Rgb(0, 0, 0)
BLUE = Rgb(0, 0, 255)
