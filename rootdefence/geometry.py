"""Plane vectors and axis-aligned rectangles used for positions and bounds."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return self
        return Vector2(self.x / size, self.y / size)

    def distance_to(self, other: Vector2) -> float:
        """Distance between the two points."""
        return (other - self).length()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with integer bounds."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles share a non-empty area."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )