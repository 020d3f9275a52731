"""Small 3D vector and matrix types used by the software renderer.

Matrices are stored row-major; vectors are treated as columns, so
``m.transform(v)`` computes ``m * v``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


def _as_values(values: Iterable[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} values, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def normalized(self) -> "Vec3":
        """Return the vector scaled to unit length."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if length == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return Vec3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z


@dataclass(frozen=True)
class Mat3:
    """A 3x3 matrix, nine values in row-major order."""

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _as_values(self.values, 9, "Mat3"))

    def transform(self, vec: Vec3) -> Vec3:
        m = self.values
        return Vec3(
            vec.x * m[0] + vec.y * m[1] + vec.z * m[2],
            vec.x * m[3] + vec.y * m[4] + vec.z * m[5],
            vec.x * m[6] + vec.y * m[7] + vec.z * m[8],
        )


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix, sixteen values in row-major order.

    The modifying operations return a new matrix and leave this one alone.
    """

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _as_values(self.values, 16, "Mat4"))

    @classmethod
    def identity(cls) -> "Mat4":
        return cls((1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1))

    @classmethod
    def ortho(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        znear: float,
        zfar: float,
    ) -> "Mat4":
        """Return an orthographic projection onto the unit cube."""
        return cls((
            2.0 / (right - left), 0.0, 0.0, 0.0,
            0.0, 2.0 / (top - bottom), 0.0, 0.0,
            0.0, 0.0, -2.0 / (zfar - znear), 0.0,
            -(right + left) / (right - left),
            -(top + bottom) / (top - bottom),
            -(zfar + znear) / (zfar - znear),
            1.0,
        ))

    def __matmul__(self, other: object) -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.values, other.values
        return Mat4(
            sum(a[row * 4 + k] * b[k * 4 + col] for k in range(4))
            for row in range(4)
            for col in range(4)
        )

    def transform(self, vec: Vec3) -> Vec3:
        """Apply the matrix to a point and divide by the resulting w."""
        m = self.values
        w = vec.x * m[12] + vec.y * m[13] + vec.z * m[14] + m[15]
        return Vec3(
            (vec.x * m[0] + vec.y * m[1] + vec.z * m[2] + m[3]) / w,
            (vec.x * m[4] + vec.y * m[5] + vec.z * m[6] + m[7]) / w,
            (vec.x * m[8] + vec.y * m[9] + vec.z * m[10] + m[11]) / w,
        )

    def rotate_x(self, angle: float) -> "Mat4":
        """Return this matrix with rows 1 and 2 rotated by angle radians."""
        s, c = math.sin(angle), math.cos(angle)
        m = list(self.values)
        row1, row2 = m[4:8], m[8:12]
        m[4:8] = [a * c + b * s for a, b in zip(row1, row2)]
        m[8:12] = [a * -s + b * c for a, b in zip(row1, row2)]
        return Mat4(m)

    def rotate_y(self, angle: float) -> "Mat4":
        """Return this matrix with rows 0 and 2 rotated by angle radians."""
        s, c = math.sin(angle), math.cos(angle)
        m = list(self.values)
        row0, row2 = m[0:4], m[8:12]
        m[0:4] = [a * c + b * -s for a, b in zip(row0, row2)]
        m[8:12] = [a * s + b * c for a, b in zip(row0, row2)]
        return Mat4(m)

    def translate(self, vec: Vec3) -> "Mat4":
        """Return this matrix with vec added to its translation column."""
        m = list(self.values)
        m[3] += vec.x
        m[7] += vec.y
        m[11] += vec.z
        return Mat4(m)

    def scale(self, factor: float) -> "Mat4":
        """Return this matrix with its top three rows multiplied by factor."""
        m = self.values
        return Mat4([v * factor for v in m[:12]] + list(m[12:]))

    def inverse_transpose_mat3(self) -> Mat3:
        """Return the inverse transpose of the upper 3x3 block, for normals."""
        m = self.values
        a00, a01, a02 = m[0], m[1], m[2]
        a10, a11, a12 = m[4], m[5], m[6]
        a20, a21, a22 = m[8], m[9], m[10]

        b01 = a22 * a11 - a12 * a21
        b11 = -a22 * a10 + a12 * a20
        b21 = a21 * a10 - a11 * a20

        d = a00 * b01 + a01 * b11 + a02 * b21
        if d == 0:
            raise ValueError("matrix is not invertible")
        inv = 1.0 / d

        return Mat3((
            b01 * inv,
            b11 * inv,
            b21 * inv,
            (-a22 * a01 + a02 * a21) * inv,
            (a22 * a00 - a02 * a20) * inv,
            (-a21 * a00 + a01 * a20) * inv,
            (a12 * a01 - a02 * a11) * inv,
            (-a12 * a00 + a02 * a10) * inv,
            (a11 * a00 - a01 * a10) * inv,
        ))

    def __str__(self) -> str:
        m = self.values
        return "\n".join(
            " ".join(f"{v:f}" for v in m[row * 4:row * 4 + 4]) for row in range(4)
        )