"""Small 2-D geometry helpers: vectors, rectangles and angle conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec2:
    """A mutable 2-D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Direction of the vector in radians."""
        return math.atan2(self.y, self.x)

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside; the right and bottom edges are excluded."""
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def point_in_circle(point: Vec2, center: Vec2, radius: float) -> bool:
    """True when the point lies inside or on the circle."""
    dx = point.x - center.x
    dy = point.y - center.y
    return dx * dx + dy * dy <= radius * radius