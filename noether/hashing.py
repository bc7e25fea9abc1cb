"""Integer hashing used for seeded pseudo-random numbers."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def hash_pcg(value: int) -> int:
    """Hash a 32-bit unsigned integer with the PCG output permutation."""
    state = ((value & _MASK32) * 747796405 + 2891336453) & _MASK32
    word = (((state >> ((state >> 28) + 4)) ^ state) * 277803737) & _MASK32
    return ((word >> 22) ^ word) & _MASK32