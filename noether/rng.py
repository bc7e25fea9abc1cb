"""Seeded pseudo-random numbers built on the PCG hash."""

from __future__ import annotations

from noether.hashing import hash_pcg
from noether.maths import lerp
from noether.vector import Vec2, Vec3

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class Rng:
    """A generator whose whole state is one 32-bit seed."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed & _MASK32

    def u32(self) -> int:
        self.seed = hash_pcg(self.seed)
        return self.seed

    def u32_range(self, low: int, high: int) -> int:
        """Integer in [low, high]."""
        if high < low:
            raise ValueError(f"empty range: {low}..{high}")
        return low + self.u32() % (high - low + 1)

    def f32(self) -> float:
        """Float in [0, 1]."""
        return self.u32() / _MASK32

    def f32_range(self, low: float, high: float) -> float:
        return lerp(low, high, self.f32())

    def u64(self) -> int:
        """64-bit value from two chained hashes; the seed becomes the upper half."""
        bottom = hash_pcg(self.seed)
        top = hash_pcg(bottom)
        self.seed = top
        return ((top << 32) | bottom) & _MASK64

    def u64_range(self, low: int, high: int) -> int:
        """Integer in [low, high]."""
        if high < low:
            raise ValueError(f"empty range: {low}..{high}")
        return low + self.u64() % (high - low + 1)

    def vec2(self) -> Vec2:
        x = self.f32()
        y = self.f32()
        return Vec2(x, y)

    def vec3(self) -> Vec3:
        x = self.f32()
        y = self.f32()
        z = self.f32()
        return Vec3(x, y, z)