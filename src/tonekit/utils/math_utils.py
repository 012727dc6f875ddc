"""Numeric helpers shared by the color model and the tone resolver."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

__all__ = [
    "signum",
    "lerp",
    "clamp_int",
    "clamp_double",
    "sanitize_degrees_int",
    "sanitize_degrees_double",
    "difference_degrees",
    "rotation_direction",
    "matrix_multiply",
]


def signum(num: float) -> int:
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    return (1.0 - amount) * start + amount * stop


def clamp_int(lo: int, hi: int, value: int) -> int:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def clamp_double(lo: float, hi: float, value: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def sanitize_degrees_int(degrees: int) -> int:
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def difference_degrees(a: float, b: float) -> float:
    """Distance of two points on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(start: float, end: float) -> float:
    """Return 1.0 when the shortest path from start to end is counter-clockwise."""
    increasing_difference = sanitize_degrees_double(end - start)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def matrix_multiply(
    row: Sequence[float], matrix: Sequence[Sequence[float]]
) -> Tuple[float, float, float]:
    a = row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2]
    b = row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2]
    c = row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2]
    return a, b, c
