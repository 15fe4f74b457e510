"""Three-component vector used for positions, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

_NORMALIZE_EPSILON = 1e-8


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def dot(self, other: Vector3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction, or zero if too short."""
        length = self.length()
        if length > _NORMALIZE_EPSILON:
            return self * (1.0 / length)
        return Vector3.zero()

    def with_x(self, x: float) -> Vector3:
        return Vector3(x, self.y, self.z)

    def with_y(self, y: float) -> Vector3:
        return Vector3(self.x, y, self.z)

    def with_z(self, z: float) -> Vector3:
        return Vector3(self.x, self.y, z)

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def right(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)