"""2D geometry primitives used by the placement engine.

All positions are world units on the map plane; height is ignored.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D point / vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float = 0.0) -> "Vec2":
        """Project a 3D world position onto the map plane."""
        return cls(float(x), float(y))

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __truediv__(self, scalar: float) -> "Vec2":
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self):
        yield self.x
        yield self.y

    def floor(self) -> "Vec2":
        return Vec2(float(math.floor(self.x)), float(math.floor(self.y)))

    def ceil(self) -> "Vec2":
        return Vec2(float(math.ceil(self.x)), float(math.ceil(self.y)))

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance(self, other: "Vec2") -> float:
        return (self - other).length()

    def distance_squared(self, other: "Vec2") -> float:
        return (self - other).length_squared()


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle stored as normalised min/max corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_corners(cls, p0: Vec2, p1: Vec2) -> "Rect":
        return cls(
            Vec2(min(p0.x, p1.x), min(p0.y, p1.y)),
            Vec2(max(p0.x, p1.x), max(p0.y, p1.y)),
        )

    @classmethod
    def from_center(cls, center: Vec2, size: Vec2) -> "Rect":
        if size.x < 0 or size.y < 0:
            raise ValueError(f"Rect size must be non-negative, got {size}")
        half = size / 2.0
        return cls(center - half, center + half)

    @classmethod
    def bounding_points(cls, points: Iterable[Vec2]) -> Optional["Rect"]:
        """Smallest rectangle containing every point, or None for no points."""
        it = iter(points)
        first = next(it, None)
        if first is None:
            return None
        min_x = max_x = first.x
        min_y = max_y = first.y
        for p in it:
            min_x = min(min_x, p.x)
            max_x = max(max_x, p.x)
            min_y = min(min_y, p.y)
            max_y = max(max_y, p.y)
        return cls(Vec2(min_x, min_y), Vec2(max_x, max_y))

    def center(self) -> Vec2:
        return Vec2((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    def size(self) -> Vec2:
        return self.max - self.min

    def is_empty(self) -> bool:
        """True when the max corner lies below the min corner on either axis."""
        return self.max.x < self.min.x or self.max.y < self.min.y

    def contains(self, point: Vec2) -> bool:
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def overlaps(self, other: "Rect") -> bool:
        return (
            self.max.x > other.min.x
            and self.min.x < other.max.x
            and self.max.y > other.min.y
            and self.min.y < other.max.y
        )

    def min_distance_squared(self, other: "Rect") -> float:
        """Squared gap between two rectangles (0.0 when they touch or overlap).

        Each axis contributes the gap on whichever side separates the two
        rectangles; the per-axis gaps are squared and summed.
        """
        ux = max(0.0, self.min.x - other.max.x)
        uy = max(0.0, self.min.y - other.max.y)
        vx = max(0.0, other.min.x - self.max.x)
        vy = max(0.0, other.min.y - self.max.y)
        return ux * ux + uy * uy + vx * vx + vy * vy

    def min_distance(self, other: "Rect") -> float:
        return math.sqrt(self.min_distance_squared(other))
