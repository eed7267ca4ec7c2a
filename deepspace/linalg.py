"""Vectors, 3x3 matrices, quaternions and physical constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

G = 6.67430e-11
"""Gravitational constant (m^3 kg^-1 s^-2)."""

R0 = 8.314462618
"""Universal gas constant (J K^-1 mol^-1)."""

G0 = 9.80665
"""Standard gravity at Earth sea level (m/s^2)."""

_SINGULAR_DETERMINANT = 1e-15


@dataclass(frozen=True)
class Vec3d:
    """An immutable three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3d) -> Vec3d:
        if not isinstance(other, Vec3d):
            return NotImplemented
        return Vec3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3d) -> Vec3d:
        if not isinstance(other, Vec3d):
            return NotImplemented
        return Vec3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3d:
        return Vec3d(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3d:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3d(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3d:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3d(self.x / scalar, self.y / scalar, self.z / scalar)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3d:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0.0:
            return self / length
        return Vec3d()

    def dot(self, other: Vec3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3d) -> Vec3d:
        return Vec3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


_IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Mat3x3:
    """A row-major 3x3 matrix; ``@`` multiplies by a matrix or a vector."""

    m: tuple = _IDENTITY

    def __post_init__(self):
        values = tuple(float(v) for v in self.m)
        if len(values) != 9:
            raise ValueError(f"a 3x3 matrix needs 9 elements, got {len(values)}")
        object.__setattr__(self, "m", values)

    @classmethod
    def identity(cls) -> Mat3x3:
        return cls(_IDENTITY)

    @classmethod
    def from_diagonal(cls, ix: float, iy: float, iz: float) -> Mat3x3:
        return cls((ix, 0.0, 0.0, 0.0, iy, 0.0, 0.0, 0.0, iz))

    @classmethod
    def rotation(cls, axis: Vec3d, angle: float) -> Mat3x3:
        """Rotation by ``angle`` radians about ``axis``."""
        n = axis.normalized()
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1.0 - c
        return cls((
            t * n.x * n.x + c, t * n.x * n.y - n.z * s, t * n.x * n.z + n.y * s,
            t * n.x * n.y + n.z * s, t * n.y * n.y + c, t * n.y * n.z - n.x * s,
            t * n.x * n.z - n.y * s, t * n.y * n.z + n.x * s, t * n.z * n.z + c,
        ))

    def _rows(self):
        m = self.m
        return (m[0:3], m[3:6], m[6:9])

    def _columns(self):
        m = self.m
        return (m[0::3], m[1::3], m[2::3])

    def __matmul__(self, other):
        if isinstance(other, Mat3x3):
            return Mat3x3(tuple(
                sum(a * b for a, b in zip(row, col))
                for row in self._rows()
                for col in other._columns()
            ))
        if isinstance(other, Vec3d):
            return Vec3d(*(sum(a * b for a, b in zip(row, other)) for row in self._rows()))
        return NotImplemented

    def __mul__(self, scalar: float) -> Mat3x3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Mat3x3(tuple(v * scalar for v in self.m))

    __rmul__ = __mul__

    def transpose(self) -> Mat3x3:
        return Mat3x3(tuple(v for col in self._columns() for v in col))

    def determinant(self) -> float:
        m = self.m
        return (m[0] * (m[4] * m[8] - m[5] * m[7])
                - m[1] * (m[3] * m[8] - m[5] * m[6])
                + m[2] * (m[3] * m[7] - m[4] * m[6]))

    def inverse(self) -> Mat3x3:
        """The inverse matrix, or the identity when the matrix is singular."""
        det = self.determinant()
        if abs(det) < _SINGULAR_DETERMINANT:
            return Mat3x3.identity()
        inv = 1.0 / det
        m = self.m
        return Mat3x3((
            (m[4] * m[8] - m[5] * m[7]) * inv,
            (m[2] * m[7] - m[1] * m[8]) * inv,
            (m[1] * m[5] - m[2] * m[4]) * inv,
            (m[5] * m[6] - m[3] * m[8]) * inv,
            (m[0] * m[8] - m[2] * m[6]) * inv,
            (m[2] * m[3] - m[0] * m[5]) * inv,
            (m[3] * m[7] - m[4] * m[6]) * inv,
            (m[1] * m[6] - m[0] * m[7]) * inv,
            (m[0] * m[4] - m[1] * m[3]) * inv,
        ))


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; ``*`` composes quaternions or rotates a vector."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vec3d, angle: float) -> Quaternion:
        half = angle * 0.5
        s = math.sin(half)
        n = axis.normalized()
        return cls(math.cos(half), n.x * s, n.y * s, n.z * s)

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> Quaternion:
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return cls(
            cr * cp * cy + sr * sp * sy,
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            w, x, y, z = self.w, self.x, self.y, self.z
            return Quaternion(
                w * other.w - x * other.x - y * other.y - z * other.z,
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
            )
        if isinstance(other, Vec3d):
            return self.rotate(other)
        return NotImplemented

    def rotate(self, vector: Vec3d) -> Vec3d:
        """Rotate ``vector`` by this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        ix = w * vector.x + y * vector.z - z * vector.y
        iy = w * vector.y + z * vector.x - x * vector.z
        iz = w * vector.z + x * vector.y - y * vector.x
        iw = -x * vector.x - y * vector.y - z * vector.z
        return Vec3d(
            ix * w + iw * -x + iy * -z - iz * -y,
            iy * w + iw * -y + iz * -x - ix * -z,
            iz * w + iw * -z + ix * -y - iy * -x,
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def normalized(self) -> Quaternion:
        """Unit quaternion; a zero quaternion becomes the identity."""
        m = self.magnitude()
        if m > 0:
            return Quaternion(self.w / m, self.x / m, self.y / m, self.z / m)
        return Quaternion.identity()

    def magnitude(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def to_euler_angles(self) -> Vec3d:
        """Euler angles as ``Vec3d(pitch, yaw, roll)`` in radians."""
        w, x, y, z = self.w, self.x, self.y, self.z
        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))

        sinp = 2.0 * (w * y - z * x)
        if abs(sinp) >= 1.0:
            pitch = math.copysign(math.pi / 2.0, sinp)
        else:
            pitch = math.asin(sinp)

        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return Vec3d(pitch, yaw, roll)