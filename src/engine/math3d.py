from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, List


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vec3":
        return normalize(self.x, self.y, self.z)

    def dot(self, other: "Vec3") -> float:
        return dot(self, other)

    def cross(self, other: "Vec3") -> "Vec3":
        return cross(self, other)

    def as_list(self) -> List[float]:
        return [self.x, self.y, self.z]


def normalize(x: float, y: float, z: float) -> Vec3:
    """Unit vector along (x, y, z); the zero vector maps to itself."""
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0:
        return Vec3(0.0, 0.0, 0.0)
    return Vec3(x / length, y / length, z / length)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


class Mat4:
    """4x4 matrix stored as 16 floats in column-major order.

    Element (row, col) lives at index ``col * 4 + row``, which is the layout
    ``glUniformMatrix4fv`` expects with ``transpose=GL_FALSE``.
    """

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self.values = [0.0] * 16
        else:
            self.values = [float(v) for v in values]
            if len(self.values) != 16:
                raise ValueError(f"Mat4 needs exactly 16 column-major values, got {len(self.values)}")

    def __repr__(self) -> str:
        return f"Mat4({self.values!r})"

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def at(self, row: int, col: int) -> float:
        return self.values[col * 4 + row]

    @staticmethod
    def identity() -> "Mat4":
        values = [0.0] * 16
        for i in range(4):
            values[i * 5] = 1.0
        return Mat4(values)

    @staticmethod
    def translation(pos: Vec3) -> "Mat4":
        mat = Mat4.identity()
        mat.values[12] = pos.x
        mat.values[13] = pos.y
        mat.values[14] = pos.z
        return mat

    @staticmethod
    def scale(scale: Vec3) -> "Mat4":
        mat = Mat4.identity()
        mat.values[0] = scale.x
        mat.values[5] = scale.y
        mat.values[10] = scale.z
        return mat

    @staticmethod
    def rotation_y(angle: float) -> "Mat4":
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4([
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def perspective(fov: float, aspect: float, near: float, far: float) -> "Mat4":
        """OpenGL-style projection. ``fov`` is the vertical field of view in radians.

        Callers guarantee ``0 < near < far`` and ``aspect > 0``; nothing is
        checked here.
        """
        f = 1.0 / math.tan(fov / 2.0)
        nf = 1.0 / (near - far)
        return Mat4([
            f / aspect, 0.0, 0.0, 0.0,
            0.0, f, 0.0, 0.0,
            0.0, 0.0, (far + near) * nf, -1.0,
            0.0, 0.0, (2 * far * near) * nf, 0.0,
        ])

    @staticmethod
    def look_at(eye: Vec3, center: Vec3, up: Vec3) -> "Mat4":
        forward = normalize(center.x - eye.x, center.y - eye.y, center.z - eye.z)
        # forward x up gives the right vector of a right-handed basis looking down -Z.
        right = forward.cross(up).normalized()
        # Recomputed so the basis stays orthogonal when `up` is not.
        up_vec = right.cross(forward)
        return Mat4([
            right.x, up_vec.x, -forward.x, 0.0,
            right.y, up_vec.y, -forward.y, 0.0,
            right.z, up_vec.z, -forward.z, 0.0,
            -right.dot(eye), -up_vec.dot(eye), forward.dot(eye), 1.0,
        ])

    def transform_point(self, v: Vec3) -> Vec3:
        """Apply to a point with w=1. No perspective divide."""
        m = self.values
        return Vec3(
            m[0] * v.x + m[4] * v.y + m[8] * v.z + m[12],
            m[1] * v.x + m[5] * v.y + m[9] * v.z + m[13],
            m[2] * v.x + m[6] * v.y + m[10] * v.z + m[14],
        )

    def __matmul__(self, other: "Mat4") -> "Mat4":
        """Product ``self @ other``; on a point, ``other`` is applied first."""
        a = self.values
        result = [0.0] * 16
        for col in range(4):
            x, y, z, w = other.values[col * 4:col * 4 + 4]
            for row in range(4):
                result[col * 4 + row] = a[row] * x + a[4 + row] * y + a[8 + row] * z + a[12 + row] * w
        return Mat4(result)

    def to_list(self) -> List[float]:
        return list(self.values)


def multiply(a: Mat4, b: Mat4) -> Mat4:
    return a @ b
