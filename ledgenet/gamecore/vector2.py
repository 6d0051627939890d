"""Two-dimensional vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, num: float) -> Vector2:
        return Vector2(self.x * num, self.y * num)

    __rmul__ = __mul__

    def __truediv__(self, num: float) -> Vector2:
        return Vector2(self.x / num, self.y / num)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def cross(self, other: Vector2) -> float:
        """The z component of the cross product."""
        return self.x * other.y - self.y * other.x