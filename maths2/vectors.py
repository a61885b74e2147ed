"""Two- and three-dimensional vectors and a homogeneous quaternion."""

from __future__ import annotations

import math
from dataclasses import dataclass

from maths2.scalar import FLOAT_EPSILON


@dataclass(frozen=True)
class Quaternion:
    """Four-component value, used here for homogeneous coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def scale(self, scalar: float) -> Vec2:
        """Multiply every component by scalar."""
        return Vec2(self.x * scalar, self.y * scalar)

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def distance2(self, other: Vec2) -> float:
        """Squared distance to other."""
        d = self - other
        return d.x * d.x + d.y * d.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays unchanged."""
        length = self.length()
        if length > 0.0:
            return Vec2(self.x / length, self.y / length)
        return self

    def to_homogeneous(self) -> Quaternion:
        return Quaternion(self.x, self.y, 0.0, 1.0)

    def is_close(self, other: Vec2) -> bool:
        """Whether every component differs by less than FLOAT_EPSILON."""
        return (
            abs(self.x - other.x) < FLOAT_EPSILON
            and abs(self.y - other.y) < FLOAT_EPSILON
        )

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        """Unit vector at angle radians from the x axis."""
        return cls(math.cos(angle), math.sin(angle))

    def to_vec3(self) -> Vec3:
        return Vec3(self.x, self.y, 0.0)


@dataclass(frozen=True)
class Vec3:
    """Immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def scale(self, scalar: float) -> Vec3:
        """Multiply every component by scalar."""
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def distance2(self, other: Vec3) -> float:
        """Squared distance to other."""
        d = self - other
        return d.x * d.x + d.y * d.y + d.z * d.z

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays unchanged."""
        length = self.length()
        if length > 0.0:
            return Vec3(self.x / length, self.y / length, self.z / length)
        return self

    def to_homogeneous(self) -> Quaternion:
        return Quaternion(self.x, self.y, self.z, 1.0)

    def is_close(self, other: Vec3) -> bool:
        """Whether every component differs by less than FLOAT_EPSILON."""
        return (
            abs(self.x - other.x) < FLOAT_EPSILON
            and abs(self.y - other.y) < FLOAT_EPSILON
            and abs(self.z - other.z) < FLOAT_EPSILON
        )

    @classmethod
    def from_angle(cls, angle: float) -> Vec3:
        """Unit vector in the XZ plane at angle radians from the x axis."""
        return cls(math.cos(angle), 0.0, math.sin(angle))

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)