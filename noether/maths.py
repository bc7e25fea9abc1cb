"""Scalar helpers and an integer rectangle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class IRect2D:
    x: int
    y: int
    w: int
    h: int


def clamp(x: float, low: float, high: float) -> float:
    """Limit x to the range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_clamped(a: float, b: float, t: float) -> float:
    return a + (b - a) * clamp(t, 0.0, 1.0)


def unlerp(a: float, b: float, y: float) -> float:
    """Return the t for which lerp(a, b, t) equals y."""
    return (y - a) / (b - a)