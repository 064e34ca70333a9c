"""Two-dimensional integer vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


@dataclass
class Vec2D:
    """A point or displacement on the integer grid."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        self.x = int(self.x)
        self.y = int(self.y)

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2D | float) -> Vec2D:
        if isinstance(other, Vec2D):
            return Vec2D(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2D(int(self.x * other), int(self.y * other))
        return NotImplemented

    def __rmul__(self, other: float) -> Vec2D:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Vec2D | float) -> Vec2D:
        if isinstance(other, Vec2D):
            return Vec2D(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))
        if isinstance(other, Real):
            return Vec2D(int(self.x / other), int(self.y / other))
        return NotImplemented

    def __mod__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(_trunc_mod(self.x, other.x), _trunc_mod(self.y, other.y))

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __pos__(self) -> Vec2D:
        return Vec2D(self.x, self.y)

    def __lt__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.magnitude() < other.magnitude()

    def __le__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.magnitude() <= other.magnitude()

    def __gt__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.magnitude() > other.magnitude()

    def __ge__(self, other: Vec2D) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.magnitude() >= other.magnitude()

    def __str__(self) -> str:
        return f"X: {self.x}, Y: {self.y}"

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def is_colliding(self, first_corner: Vec2D, second_corner: Vec2D) -> bool:
        """Whether this vector lies between two corners, compared by magnitude."""
        low_x, high_x = sorted((first_corner.x, second_corner.x))
        low_y, high_y = sorted((first_corner.y, second_corner.y))
        return self >= Vec2D(low_x, low_y) and self <= Vec2D(high_x, high_y)

    @staticmethod
    def minimum(first: Vec2D, second: Vec2D) -> Vec2D:
        """The lower of two vectors, ordered by x then y; ties give the second."""
        if first.x < second.x:
            return first
        if first.x == second.x and first.y < second.y:
            return first
        return second

    @staticmethod
    def is_minimum(first: Vec2D, second: Vec2D) -> bool:
        """Whether the first vector equals the minimum of the two."""
        return first == Vec2D.minimum(first, second)