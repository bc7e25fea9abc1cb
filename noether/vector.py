"""Two-, three- and four-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union

from noether.maths import lerp as _lerp
from noether.maths import lerp_clamped as _lerp_clamped

DEG2RAD = math.pi / 180.0


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @classmethod
    def up(cls) -> "Vec2":
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> "Vec2":
        return cls(0.0, -1.0)

    @classmethod
    def right(cls) -> "Vec2":
        return cls(1.0, 0.0)

    @classmethod
    def left(cls) -> "Vec2":
        return cls(-1.0, 0.0)

    def _combine(self, other, op) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(op(self.x, other.x), op(self.y, other.y))
        if isinstance(other, Real):
            return Vec2(op(self.x, other), op(self.y, other))
        return NotImplemented

    def __add__(self, other: Union["Vec2", float]) -> "Vec2":
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Union["Vec2", float]) -> "Vec2":
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Union["Vec2", float]) -> "Vec2":
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: float) -> "Vec2":
        return self._combine(other, lambda a, b: a * b)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalised(self) -> "Vec2":
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        inv = 1.0 / self.magnitude()
        return Vec2(self.x * inv, self.y * inv)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def hadamard(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x * other.x, self.y * other.y)

    def lerp(self, other: "Vec2", t: float) -> "Vec2":
        return Vec2(_lerp(self.x, other.x, t), _lerp(self.y, other.y, t))

    def lerp_clamped(self, other: "Vec2", t: float) -> "Vec2":
        return Vec2(_lerp_clamped(self.x, other.x, t), _lerp_clamped(self.y, other.y, t))

    def add_scaled(self, other: "Vec2", scale: float) -> "Vec2":
        """Return self + other * scale."""
        return Vec2(self.x + other.x * scale, self.y + other.y * scale)


@dataclass(frozen=True)
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w


Color = Vec4


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_vec4(cls, v: Vec4) -> "Vec3":
        """Drop the w component."""
        return cls(v.x, v.y, v.z)

    @classmethod
    def up(cls) -> "Vec3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> "Vec3":
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def right(cls) -> "Vec3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def left(cls) -> "Vec3":
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> "Vec3":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def back(cls) -> "Vec3":
        return cls(0.0, 0.0, 1.0)

    def _combine(self, other, op) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, Real):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other: Union["Vec3", float]) -> "Vec3":
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Union["Vec3", float]) -> "Vec3":
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Union["Vec3", float]) -> "Vec3":
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: float) -> "Vec3":
        return self._combine(other, lambda a, b: a * b)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalised(self) -> "Vec3":
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        inv = 1.0 / self.magnitude()
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def hadamard(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def lerp(self, other: "Vec3", t: float) -> "Vec3":
        return Vec3(
            _lerp(self.x, other.x, t),
            _lerp(self.y, other.y, t),
            _lerp(self.z, other.z, t),
        )

    def lerp_clamped(self, other: "Vec3", t: float) -> "Vec3":
        return Vec3(
            _lerp_clamped(self.x, other.x, t),
            _lerp_clamped(self.y, other.y, t),
            _lerp_clamped(self.z, other.z, t),
        )

    def add_scaled(self, other: "Vec3", scale: float) -> "Vec3":
        """Return self + other * scale."""
        return Vec3(self.x + other.x * scale, self.y + other.y * scale, self.z + other.z * scale)

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    @classmethod
    def direction_from_euler(cls, euler: "Vec3") -> "Vec3":
        """Unit look direction for a pitch (x) and yaw (y) in degrees."""
        pitch = DEG2RAD * euler.x
        yaw = DEG2RAD * euler.y
        direction = cls(
            math.cos(pitch) * math.sin(yaw),
            -math.sin(pitch),
            math.cos(pitch) * math.cos(yaw),
        )
        return direction.normalised()