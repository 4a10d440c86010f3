"""Angle constants and polar to cartesian conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass

Angle = float

# One full revolution in radians.
COMPLETE: Angle = 2.0 * math.pi

# Direction signs applied to angular magnitudes.
CLOCKWISE: Angle = -1.0
COUNTER_CLOCKWISE: Angle = 1.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


def rectangular(angle: Angle, radius: float) -> Point:
    """Return the cartesian point at ``angle`` on a circle of ``radius``."""

    return Point(radius * math.cos(angle), radius * math.sin(angle))


def normalize(angle: Angle) -> Angle:
    """Map ``angle`` into ``[0, COMPLETE)``."""

    wrapped = math.fmod(angle, COMPLETE)
    if wrapped < 0.0:
        wrapped += COMPLETE
    # fmod of a tiny negative value can round up to exactly COMPLETE
    if wrapped >= COMPLETE:
        wrapped = 0.0
    return wrapped


def degrees(angle: Angle) -> float:
    return angle * 360.0 / COMPLETE


def from_degrees(value: float) -> Angle:
    return value * COMPLETE / 360.0


__all__ = [
    "Angle",
    "COMPLETE",
    "CLOCKWISE",
    "COUNTER_CLOCKWISE",
    "Point",
    "rectangular",
    "normalize",
    "degrees",
    "from_degrees",
]
