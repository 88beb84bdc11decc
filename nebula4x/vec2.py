"""A two-dimensional vector for map and in-system coordinates."""

import math
from dataclasses import dataclass

__all__ = ["Vec2"]


@dataclass(frozen=True)
class Vec2:
    """A 2D point or offset; units depend on context (often million km)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Vec2":
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        """Return a unit vector in the same direction, or zero for a near-zero vector."""
        n = self.length()
        if n <= 1e-12:
            return Vec2()
        return Vec2(self.x / n, self.y / n)