"""Immutable 2D vector value type.

Every operation returns a new ``Vector2``; instances are never mutated.
Used for SVG user-space points, curve control points and the
normalised offsets inside the projector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from svg_plotter.core.exceptions import ContractError

if TYPE_CHECKING:
    from collections.abc import Sequence


class VectorError(ContractError, ValueError):
    """Raised when a vector is constructed from invalid input."""

    default_stage = "geometry"
    default_code = "VECTOR_INVALID"


@dataclass(frozen=True, slots=True)
class Vector2:
    """A point or direction in the plane."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_array(cls, values: Sequence[float]) -> Vector2:
        """Build a vector from an ``[x, y]`` sequence.

        Raises:
            VectorError: If ``values`` does not hold exactly two items.
        """
        if len(values) != 2:
            msg = f"Vector2.from_array expects exactly 2 values, got {len(values)}"
            raise VectorError(msg)
        return cls(float(values[0]), float(values[1]))

    @staticmethod
    def dot(u: Vector2, v: Vector2) -> float:
        return u.x * v.x + u.y * v.y

    @staticmethod
    def distance(u: Vector2, v: Vector2) -> float:
        return v.subtract(u).magnitude()

    @staticmethod
    def angle_between(a: Vector2, b: Vector2) -> float:
        """Signed angle in radians from ``a`` to ``b``, in ``(-pi, pi]``.

        The sign follows the 2D cross product. A zero-length operand has
        no direction and yields ``0.0``.
        """
        norm = math.sqrt((a.x**2 + a.y**2) * (b.x**2 + b.y**2))
        if norm == 0:
            return 0.0
        cosine = max(-1.0, min(1.0, Vector2.dot(a, b) / norm))
        sign = -1.0 if a.x * b.y - a.y * b.x < 0 else 1.0
        return sign * math.acos(cosine)

    def add(self, v: Vector2) -> Vector2:
        return Vector2(self.x + v.x, self.y + v.y)

    def subtract(self, v: Vector2) -> Vector2:
        return Vector2(self.x - v.x, self.y - v.y)

    def add_scalar(self, n: float) -> Vector2:
        return Vector2(self.x + n, self.y + n)

    def subtract_scalar(self, n: float) -> Vector2:
        return Vector2(self.x - n, self.y - n)

    def multiply_by_scalar(self, n: float) -> Vector2:
        return Vector2(self.x * n, self.y * n)

    def negate(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        magnitude = self.magnitude()
        if magnitude == 0:
            return Vector2()
        return Vector2(self.x / magnitude, self.y / magnitude)

    def perpendicular(self, clockwise: bool = True) -> Vector2:
        if clockwise:
            return Vector2(self.y, -self.x)
        return Vector2(-self.y, self.x)

    def rotate(self, degrees: float) -> Vector2:
        """Rotate by ``degrees``; clockwise on screen because SVG's y axis points down."""
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def to_array(self) -> list[float]:
        return [self.x, self.y]
