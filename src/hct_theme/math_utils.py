# math_utils.py – scalar helpers and 3×3 matrix plumbing shared by the color math

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Matrix3 = np.ndarray  # shape (3, 3), float64


# --- scalars -----------------------------------------------------------------


def signum(x: float) -> int:
    if x < 0.0:
        return -1
    if x == 0.0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    return (1.0 - amount) * start + amount * stop


def clamp_int(lo: int, hi: int, x: int) -> int:
    return lo if x < lo else hi if x > hi else x


def clamp(lo: float, hi: float, x: float) -> float:
    return lo if x < lo else hi if x > hi else x


def round_half_up(x: float) -> int:
    """Round .5 away from negative infinity, as Java's Math.round does."""
    return int(math.floor(x + 0.5))


def sanitize_degrees_int(degrees: int) -> int:
    degrees %= 360
    return degrees + 360 if degrees < 0 else degrees


def sanitize_degrees(degrees: float) -> float:
    degrees = math.fmod(degrees, 360.0)
    return degrees + 360.0 if degrees < 0.0 else degrees


def sanitize_radians(angle: float) -> float:
    return (angle + 8.0 * math.pi) % (2.0 * math.pi)


# --- matrices ----------------------------------------------------------------


def matrix(rows: Sequence[Sequence[float]]) -> Matrix3:
    m = np.asarray(rows, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
    m.setflags(write=False)
    return m


def multiply(a: Matrix3, b: Matrix3) -> Matrix3:
    out = a @ b
    out.setflags(write=False)
    return out


def invert(m: Matrix3) -> Matrix3:
    out = np.linalg.inv(m)
    out.setflags(write=False)
    return out


def matrix_multiply(vec: Sequence[float], m: Matrix3) -> tuple[float, float, float]:
    """Matrix–vector product returned as plain floats."""
    r0, r1, r2 = vec
    return (
        float(r0 * m[0, 0] + r1 * m[0, 1] + r2 * m[0, 2]),
        float(r0 * m[1, 0] + r1 * m[1, 1] + r2 * m[1, 2]),
        float(r0 * m[2, 0] + r1 * m[2, 1] + r2 * m[2, 2]),
    )


__all__ = [
    "Matrix3",
    "clamp",
    "clamp_int",
    "invert",
    "lerp",
    "matrix",
    "matrix_multiply",
    "multiply",
    "round_half_up",
    "sanitize_degrees",
    "sanitize_degrees_int",
    "sanitize_radians",
    "signum",
]
