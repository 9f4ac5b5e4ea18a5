"""Small 3D vector helpers shared by the projector and the mesh types."""
from __future__ import annotations

import math
from typing import Iterable, NamedTuple

from .errors import DegenerateVectorError


class Vector3(NamedTuple):
    x: float
    y: float
    z: float


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a[0] - b[0], a[1] - b[1], a[2] - b[2])


def dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Vector3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def normalize(v: Vector3) -> Vector3:
    """Scale ``v`` to unit length.

    Raises :class:`DegenerateVectorError` for the zero vector instead of
    handing back NaN components.
    """

    size = length(v)
    if size == 0.0:
        raise DegenerateVectorError(f"cannot normalize zero-length vector {tuple(v)}")
    return Vector3(v[0] / size, v[1] / size, v[2] / size)


def mean(points: Iterable[Vector3]) -> Vector3:
    sx = sy = sz = 0.0
    count = 0
    for p in points:
        sx += p[0]
        sy += p[1]
        sz += p[2]
        count += 1
    if count == 0:
        raise ValueError("mean of an empty point set")
    return Vector3(sx / count, sy / count, sz / count)


__all__ = ["Vector3", "subtract", "dot", "cross", "length", "normalize", "mean"]
