"""Column-major square matrices and the 4x4 transforms built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterable, Iterator, Optional, Tuple, Union

from noether.vector import DEG2RAD, Vec3, Vec4

Components = Tuple[float, ...]


class _SquareMatrix:
    """Shared behaviour for fixed-size matrices stored column by column."""

    SIZE = 0
    data: Components

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.data)
        expected = self.SIZE * self.SIZE
        if len(values) != expected:
            raise ValueError(
                f"{type(self).__name__} needs {expected} components, got {len(values)}"
            )
        object.__setattr__(self, "data", values)

    def __getitem__(self, index: int) -> float:
        return self.data[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def element(self, row: int, column: int) -> float:
        return self.data[column * self.SIZE + row]


@dataclass(frozen=True)
class Mat2(_SquareMatrix):
    SIZE = 2
    data: Components = field(default=(0.0,) * 4)


@dataclass(frozen=True)
class Mat3(_SquareMatrix):
    SIZE = 3
    data: Components = field(default=(0.0,) * 9)


def _components(x, y, z) -> Tuple[float, float, float]:
    """Accept either one Vec3 or three scalars."""
    if isinstance(x, Vec3) and y is None and z is None:
        return x.x, x.y, x.z
    if y is None or z is None:
        raise TypeError("expected a Vec3 or three scalar components")
    return float(x), float(y), float(z)


@dataclass(frozen=True)
class Mat4(_SquareMatrix):
    """A 4x4 matrix stored column-major, as sent to shaders."""

    SIZE = 4
    data: Components = field(default=(0.0,) * 16)

    def _elementwise(self, other, op) -> "Mat4":
        if isinstance(other, Mat4):
            return Mat4(tuple(op(a, b) for a, b in zip(self.data, other.data)))
        if isinstance(other, Real):
            return Mat4(tuple(op(a, other) for a in self.data))
        return NotImplemented

    def __add__(self, other: Union["Mat4", float]) -> "Mat4":
        return self._elementwise(other, lambda a, b: a + b)

    def __radd__(self, other: float) -> "Mat4":
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other: Union["Mat4", float]) -> "Mat4":
        return self._elementwise(other, lambda a, b: a - b)

    def __mul__(self, other):
        if isinstance(other, Mat4):
            a, b = self.data, other.data
            return Mat4(
                tuple(
                    sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
                    for col in range(4)
                    for row in range(4)
                )
            )
        if isinstance(other, Vec4):
            a = self.data
            v = tuple(other)
            return Vec4(*(sum(a[k * 4 + row] * v[k] for k in range(4)) for row in range(4)))
        return self._elementwise(other, lambda x, y: x * y)

    def __rmul__(self, other: float) -> "Mat4":
        if isinstance(other, Real):
            return self._elementwise(other, lambda x, y: x * y)
        return NotImplemented

    def transposed(self) -> "Mat4":
        return Mat4(tuple(self.data[row * 4 + col] for col in range(4) for row in range(4)))

    @classmethod
    def _from(cls, entries: Iterable[Tuple[int, float]]) -> "Mat4":
        values = list(cls.identity().data)
        for index, value in entries:
            values[index] = value
        return cls(tuple(values))

    @classmethod
    def identity(cls) -> "Mat4":
        return cls(tuple(1.0 if i % 5 == 0 else 0.0 for i in range(16)))

    @classmethod
    def translation(cls, x, y=None, z=None) -> "Mat4":
        """Translation by a Vec3 or by three scalars."""
        tx, ty, tz = _components(x, y, z)
        return cls._from([(12, tx), (13, ty), (14, tz)])

    @classmethod
    def rotation(cls, x, y=None, z=None) -> "Mat4":
        """Rotation from Euler angles in degrees, applied Z, then Y, then X."""
        ax, ay, az = _components(x, y, z)
        sin_x, cos_x = math.sin(DEG2RAD * ax), math.cos(DEG2RAD * ax)
        sin_y, cos_y = math.sin(DEG2RAD * ay), math.cos(DEG2RAD * ay)
        sin_z, cos_z = math.sin(DEG2RAD * az), math.cos(DEG2RAD * az)
        return cls._from(
            [
                (0, cos_y * cos_z),
                (1, cos_y * sin_z),
                (2, -sin_y),
                (4, sin_x * sin_y * cos_z - cos_x * sin_z),
                (5, sin_x * sin_y * sin_z + cos_x * cos_z),
                (6, sin_x * cos_y),
                (8, cos_x * sin_y * cos_z + sin_x * sin_z),
                (9, cos_x * sin_y * sin_z - sin_x * cos_z),
                (10, cos_x * cos_y),
            ]
        )

    @classmethod
    def scale(cls, x, y=None, z=None) -> "Mat4":
        sx, sy, sz = _components(x, y, z)
        return cls._from([(0, sx), (5, sy), (10, sz)])

    @classmethod
    def view_look_dir(cls, position: Vec3, forward: Vec3, up: Optional[Vec3] = None) -> "Mat4":
        """View matrix for a camera at position looking along forward."""
        up = (up if up is not None else Vec3.up()).normalised()
        forward = forward.normalised()
        left = up.cross(forward).normalised()
        up = forward.cross(left).normalised()
        return cls._from(
            [
                (0, left.x), (4, left.y), (8, left.z),
                (1, up.x), (5, up.y), (9, up.z),
                (2, forward.x), (6, forward.y), (10, forward.z),
                (12, -left.dot(position)),
                (13, -up.dot(position)),
                (14, -forward.dot(position)),
            ]
        )

    @classmethod
    def view_look_at(cls, position: Vec3, target: Vec3, up: Optional[Vec3] = None) -> "Mat4":
        return cls.view_look_dir(position, target - position, up)

    @classmethod
    def orthographic(cls, left, right, bottom, top, near, far) -> "Mat4":
        inv_width = 1.0 / (right - left)
        inv_height = 1.0 / (top - bottom)
        inv_depth = 1.0 / (far - near)
        return cls._from(
            [
                (0, 2.0 * inv_width),
                (5, 2.0 * inv_height),
                (10, -2.0 * inv_depth),
                (12, -(right + left) * inv_width),
                (13, -(top + bottom) * inv_height),
                (14, -(far + near) * inv_depth),
                (15, 1.0),
            ]
        )

    @classmethod
    def perspective(cls, fovy_deg, aspect, near, far) -> "Mat4":
        """Perspective projection with a vertical field of view in degrees."""
        inv_tan = 1.0 / math.tan(DEG2RAD * fovy_deg / 2.0)
        inv_z = 1.0 / (far - near)
        return cls._from(
            [
                (0, (1.0 / aspect) * inv_tan),
                (5, inv_tan),
                (10, -(far + near) * inv_z),
                (14, -2.0 * far * near * inv_z),
                (11, -1.0),
                (15, 0.0),
            ]
        )

    def rotated(self, x, y=None, z=None) -> "Mat4":
        """This matrix with a rotation applied after it."""
        return Mat4.rotation(x, y, z) * self