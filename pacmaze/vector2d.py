"""Immutable two-dimensional vector used for positions, velocities and sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

_EPSILON = 1e-6


def _coerce(value: object) -> Vector2D | None:
    """Turn a scalar into a uniform vector; leave vectors as they are."""
    if isinstance(value, Vector2D):
        return value
    if isinstance(value, Real):
        return Vector2D(float(value))
    return None


@dataclass(frozen=True, init=False)
class Vector2D:
    """A 2D vector. ``Vector2D(s)`` gives ``(s, s)``; ``Vector2D()`` gives the origin."""

    x: float
    y: float

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(x if y is None else y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vector2D:
        vec = _coerce(other)
        if vec is None:
            return NotImplemented
        return Vector2D(self.x + vec.x, self.y + vec.y)

    __radd__ = __add__

    def __sub__(self, other: object) -> Vector2D:
        vec = _coerce(other)
        if vec is None:
            return NotImplemented
        return Vector2D(self.x - vec.x, self.y - vec.y)

    def __rsub__(self, other: object) -> Vector2D:
        vec = _coerce(other)
        if vec is None:
            return NotImplemented
        return Vector2D(vec.x - self.x, vec.y - self.y)

    def __mul__(self, other: object) -> Vector2D:
        if isinstance(other, Vector2D):
            return Vector2D(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Vector2D:
        """Divide by a scalar or component-wise; a near-zero divisor gives the origin."""
        if isinstance(other, Vector2D):
            if abs(other.x) < _EPSILON or abs(other.y) < _EPSILON:
                return Vector2D()
            return Vector2D(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            if abs(other) < _EPSILON:
                return Vector2D()
            return Vector2D(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def sqr_length(self) -> float:
        """Squared length of the vector."""
        return Vector2D.dot(self)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.sqr_length())

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction; the origin for a zero vector."""
        return self / self.length()

    def to_int(self) -> tuple[int, int]:
        """Components truncated toward zero."""
        return int(self.x), int(self.y)

    @staticmethod
    def dot(a: Vector2D, b: Vector2D | None = None) -> float:
        """Dot product of ``a`` and ``b``, or of ``a`` with itself."""
        if b is None:
            b = a
        return a.x * b.x + a.y * b.y

    @staticmethod
    def cross(a: Vector2D, b: Vector2D) -> float:
        """Z component of the cross product."""
        return a.x * b.y - a.y * b.x

    @staticmethod
    def lerp(a: Vector2D, b: Vector2D, t: float) -> Vector2D:
        """Linear interpolation from ``a`` to ``b``."""
        return a + (b - a) * t

    @staticmethod
    def distance(a: Vector2D, b: Vector2D) -> float:
        """Squared distance between two points."""
        return (a - b).sqr_length()