"""Three-component vectors and 3x3 matrices used by the tracer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)

    def __rmul__(self, k: float) -> Vec3:
        return self.__mul__(k)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __bool__(self) -> bool:
        """True unless every component is zero."""
        return bool(self.x or self.y or self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector with the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return self
        return Vec3(self.x / size, self.y / size, self.z / size)


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 matrix stored as its three column vectors."""

    vx: Vec3 = field(default_factory=lambda: Vec3(1.0, 0.0, 0.0))
    vy: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    vz: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))

    def apply(self, v: Vec3) -> Vec3:
        """Multiply the matrix by a column vector."""
        return self.vx * v.x + self.vy * v.y + self.vz * v.z