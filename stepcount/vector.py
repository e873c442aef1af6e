"""
3D vector helpers for stepcount.

Vectors are plain (x, y, z) float tuples. Kept dependency-free so the
core math runs the same on a laptop and on a Pi.
"""

import math
from typing import Iterable, Tuple

from .errors import DegenerateInputError

Vec3 = Tuple[float, float, float]

ZERO: Vec3 = (0.0, 0.0, 0.0)


def vec_sum(vectors: Iterable[Vec3]) -> Vec3:
    """
    Componentwise sum of a sequence of vectors.

    Accumulates in input order. Returns the zero vector for empty input.
    """
    sx, sy, sz = ZERO
    for x, y, z in vectors:
        sx += x
        sy += y
        sz += z
    return (sx, sy, sz)


def magnitude(v: Vec3) -> float:
    """Euclidean length of v, without under/overflow on extreme components."""
    return math.hypot(*v)


def scale(v: Vec3, a: float) -> Vec3:
    x, y, z = v
    return (x * a, y * a, z * a)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def normalize(v: Vec3) -> Vec3:
    """
    Scale v to unit length.

    Raises:
        DegenerateInputError: if v has zero or non-finite magnitude
    """
    m = magnitude(v)
    if m == 0.0 or not math.isfinite(m):
        raise DegenerateInputError(f"cannot normalize vector with magnitude {m}")
    return scale(v, 1.0 / m)
