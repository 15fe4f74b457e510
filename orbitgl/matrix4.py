"""Row-major 4x4 matrix for affine and projective transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import product
from numbers import Real
from typing import Iterable, Iterator

from orbitgl.vector3 import Vector3

_SINGULAR_PIVOT = 1e-10
_SIZE = 4


def _identity_data() -> tuple[float, ...]:
    return tuple(1.0 if row == col else 0.0 for row, col in product(range(_SIZE), repeat=2))


@dataclass(frozen=True)
class Decomposition:
    """Translation, Euler rotation (radians) and scale extracted from a matrix."""

    translation: Vector3
    rotation: Vector3
    scale: Vector3


class Matrix4:
    """An immutable 4x4 matrix stored in row-major order."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[float] | Iterable[Iterable[float]] | None = None) -> None:
        """Build from 16 numbers or 4 rows of 4; with no data, the identity."""
        if data is None:
            self._data = _identity_data()
            return
        items = list(data)
        if len(items) == _SIZE and all(not isinstance(item, Real) for item in items):
            rows = [list(row) for row in items]
            if any(len(row) != _SIZE for row in rows):
                raise ValueError("each row of a Matrix4 must hold 4 values")
            flat = [value for row in rows for value in row]
        else:
            flat = items
        if len(flat) != _SIZE * _SIZE:
            raise ValueError(f"a Matrix4 needs 16 values, got {len(flat)}")
        self._data = tuple(float(value) for value in flat)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"matrix index {key!r} out of range")
        return self._data[row * _SIZE + col]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Matrix4({[list(row) for row in self.rows()]!r})"

    def __mul__(self, other: Matrix4 | float) -> Matrix4:
        """Matrix product with another matrix, or scaling by a number."""
        if isinstance(other, Matrix4):
            other_rows = other.rows()
            return Matrix4(
                sum(self[i, k] * other_rows[k][j] for k in range(_SIZE))
                for i, j in product(range(_SIZE), repeat=2)
            )
        if isinstance(other, Real):
            return Matrix4(value * other for value in self._data)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix4:
        if isinstance(other, Real):
            return Matrix4(value * other for value in self._data)
        return NotImplemented

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a - b for a, b in zip(self._data, other._data))

    def __str__(self) -> str:
        return "\n".join(
            "| " + "".join(f"{value:8.3f} " for value in row) + "|" for row in self.rows()
        )

    @classmethod
    def identity(cls) -> Matrix4:
        return cls()

    @classmethod
    def zero(cls) -> Matrix4:
        return cls([0.0] * (_SIZE * _SIZE))

    @classmethod
    def translation(cls, offset: Vector3) -> Matrix4:
        return (
            cls()
            .with_entry(0, 3, offset.x)
            .with_entry(1, 3, offset.y)
            .with_entry(2, 3, offset.z)
        )

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix4:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, cos_a, -sin_a, 0.0],
                [0.0, sin_a, cos_a, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix4:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(
            [
                [cos_a, 0.0, sin_a, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-sin_a, 0.0, cos_a, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix4:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(
            [
                [cos_a, -sin_a, 0.0, 0.0],
                [sin_a, cos_a, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation(cls, axis: Vector3, angle: float) -> Matrix4:
        """Rotation about an arbitrary axis (Rodrigues' formula)."""
        x, y, z = axis.normalized()
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        t = 1.0 - cos_a
        return cls(
            [
                [cos_a + x * x * t, x * y * t - z * sin_a, x * z * t + y * sin_a, 0.0],
                [y * x * t + z * sin_a, cos_a + y * y * t, y * z * t - x * sin_a, 0.0],
                [z * x * t - y * sin_a, z * y * t + x * sin_a, cos_a + z * z * t, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def scale(cls, factor: Vector3 | float) -> Matrix4:
        """Scaling matrix from a per-axis vector or a uniform factor."""
        if isinstance(factor, Real):
            factor = Vector3(factor, factor, factor)
        return (
            cls()
            .with_entry(0, 0, factor.x)
            .with_entry(1, 1, factor.y)
            .with_entry(2, 2, factor.z)
        )

    @classmethod
    def perspective(cls, fov: float, aspect: float, near: float, far: float) -> Matrix4:
        tan_half_fov = math.tan(fov * 0.5)
        return (
            cls.zero()
            .with_entry(0, 0, 1.0 / (aspect * tan_half_fov))
            .with_entry(1, 1, 1.0 / tan_half_fov)
            .with_entry(2, 2, -(far + near) / (far - near))
            .with_entry(2, 3, -(2.0 * far * near) / (far - near))
            .with_entry(3, 2, -1.0)
        )

    @classmethod
    def orthographic(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Matrix4:
        return (
            cls.zero()
            .with_entry(0, 0, 2.0 / (right - left))
            .with_entry(1, 1, 2.0 / (top - bottom))
            .with_entry(2, 2, -2.0 / (far - near))
            .with_entry(0, 3, -(right + left) / (right - left))
            .with_entry(1, 3, -(top + bottom) / (top - bottom))
            .with_entry(2, 3, -(far + near) / (far - near))
            .with_entry(3, 3, 1.0)
        )

    @classmethod
    def look_at(cls, eye: Vector3, center: Vector3, up: Vector3) -> Matrix4:
        """View matrix placing the camera at ``eye`` looking towards ``center``."""
        f = (center - eye).normalized()
        s = f.cross(up).normalized()
        u = s.cross(f)
        return cls(
            [
                [s.x, s.y, s.z, -s.dot(eye)],
                [u.x, u.y, u.z, -u.dot(eye)],
                [-f.x, -f.y, -f.z, f.dot(eye)],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """The four rows as tuples."""
        return tuple(self._data[i * _SIZE:(i + 1) * _SIZE] for i in range(_SIZE))

    def with_entry(self, row: int, col: int, value: float) -> Matrix4:
        """Return a copy with one entry replaced."""
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"matrix index {(row, col)!r} out of range")
        data = list(self._data)
        data[row * _SIZE + col] = float(value)
        return Matrix4(data)

    def _combine(self, weights: tuple[float, ...]) -> Vector3:
        rows = self.rows()
        x, y, z = (sum(w * row[j] for w, row in zip(weights, rows)) for j in range(3))
        return Vector3(x, y, z)

    def transform_point(self, point: Vector3) -> Vector3:
        """Multiply the row vector ``(x, y, z, 1)`` by this matrix."""
        return self._combine((point.x, point.y, point.z, 1.0))

    def transform_vector(self, vector: Vector3) -> Vector3:
        """Multiply the row vector ``(x, y, z, 0)`` by this matrix."""
        return self._combine((vector.x, vector.y, vector.z, 0.0))

    def transpose(self) -> Matrix4:
        return Matrix4(zip(*self.rows()))

    def inverse(self) -> Matrix4:
        """Gauss-Jordan inverse; a singular matrix yields the identity."""
        augmented = [
            list(row) + [1.0 if i == j else 0.0 for j in range(_SIZE)]
            for i, row in enumerate(self.rows())
        ]
        for i in range(_SIZE):
            pivot_row = max(range(i, _SIZE), key=lambda k: abs(augmented[k][i]))
            if abs(augmented[pivot_row][i]) < _SINGULAR_PIVOT:
                return Matrix4.identity()
            augmented[i], augmented[pivot_row] = augmented[pivot_row], augmented[i]
            inv_pivot = 1.0 / augmented[i][i]
            augmented[i] = [value * inv_pivot for value in augmented[i]]
            pivot = augmented[i]
            for k, row in enumerate(augmented):
                if k != i:
                    factor = row[i]
                    augmented[k] = [a - factor * p for a, p in zip(row, pivot)]
        return Matrix4(row[_SIZE:] for row in augmented)

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        total = 0.0
        for col in range(_SIZE):
            m = [self[i, j] for i in range(1, _SIZE) for j in range(_SIZE) if j != col]
            minor = (
                m[0] * (m[4] * m[8] - m[5] * m[7])
                - m[1] * (m[3] * m[8] - m[5] * m[6])
                + m[2] * (m[3] * m[7] - m[4] * m[6])
            )
            sign = 1.0 if col % 2 == 0 else -1.0
            total += self[0, col] * sign * minor
        return total

    def is_invertible(self, epsilon: float = 1e-6) -> bool:
        return abs(self.determinant()) > epsilon

    def decompose(self) -> Decomposition:
        """Split into translation, Euler rotation and scale."""
        translation = Vector3(self[0, 3], self[1, 3], self[2, 3])
        columns = [Vector3(self[0, c], self[1, c], self[2, c]) for c in range(3)]
        scale = Vector3(*(column.length() for column in columns))
        if self.determinant() < 0:
            scale = scale * -1.0

        r = [list(row) for row in self.rows()]
        for col, factor in enumerate(scale):
            if factor != 0:
                for row in range(3):
                    r[row][col] /= factor

        rotation = Vector3(
            math.atan2(r[2][1], r[2][2]),
            math.atan2(-r[2][0], math.sqrt(r[2][1] ** 2 + r[2][2] ** 2)),
            math.atan2(r[1][0], r[0][0]),
        )
        return Decomposition(translation=translation, rotation=rotation, scale=scale)