"""Quaternions with a real part r and imaginary parts i, j, k."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Quat:
    r: float = 1.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    @classmethod
    def identity(cls) -> "Quat":
        return cls(1.0, 0.0, 0.0, 0.0)

    def normalised(self) -> "Quat":
        """Unit quaternion in the same direction; the identity for a zero quaternion."""
        norm = self.r * self.r + self.i * self.i + self.j * self.j + self.k * self.k
        if norm == 0.0:
            return Quat.identity()
        inv = 1.0 / math.sqrt(norm)
        return Quat(self.r * inv, self.i * inv, self.j * inv, self.k * inv)