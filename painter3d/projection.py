"""Perspective projection and the Euler rotation used for the camera forward vector.

The projector and :func:`rotate` deliberately use two different rotation
compositions. ``project`` applies a coupled transform in which the Z-rotated
coordinates feed the Y rotation, whose output in turn feeds the X rotation.
``rotate`` multiplies three independent axis matrices, X first. The face
culling heuristic was tuned against exactly this pairing.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Tuple

import numpy as np

from .camera import Camera
from .errors import SingularProjectionError
from .vector import Vector3


class ScreenPoint(NamedTuple):
    x: float
    y: float


def eye_distance(fov: float) -> float:
    """Distance from the eye to the image plane for a field of view in degrees."""
    return 1.0 / math.tan(math.radians(fov) / 2.0)


def camera_space(point: Vector3, camera: Camera) -> Vector3:
    x1 = point[0] - camera.x
    y1 = point[1] - camera.y
    z1 = point[2] - camera.z

    tx, ty, tz = math.radians(camera.rx), math.radians(camera.ry), math.radians(camera.rz)
    cx, sx = math.cos(tx), math.sin(tx)
    cy, sy = math.cos(ty), math.sin(ty)
    cz, sz = math.cos(tz), math.sin(tz)

    # Z rotation of the translated point, shared by the Y and X stages.
    zx = cz * x1 + sz * y1
    zy = cz * y1 - sz * x1
    yz = cy * z1 + sy * zx

    dx = cy * zx - sy * z1
    dy = sx * yz + cx * zy
    dz = cx * yz - sx * zy
    return Vector3(dx, dy, dz)


def project(point: Vector3, camera: Camera) -> ScreenPoint:
    """Project a world-space point to screen space.

    No clipping is done: points behind the camera (negative depth) come back
    mirrored. A point on the camera plane raises :class:`SingularProjectionError`.
    """

    dx, dy, dz = camera_space(point, camera)
    if dz == 0.0:
        raise SingularProjectionError(point)
    scale = eye_distance(camera.fov) / dz
    return ScreenPoint(scale * dx, scale * dy)


def to_pixels(screen: ScreenPoint, width: float, height: float) -> Tuple[float, float]:
    aspect = width / height
    return screen[0] * width / aspect, screen[1] * height


def _rotation_matrices(rx: float, ry: float, rz: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    ax, ay, az = math.radians(rx), math.radians(ry), math.radians(rz)
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)

    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rot_z = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rot_x, rot_y, rot_z


def rotate(vector: Vector3, rx: float, ry: float, rz: float) -> Vector3:
    """Rotate ``vector`` about X, then Y, then Z (angles in degrees)."""
    rot_x, rot_y, rot_z = _rotation_matrices(rx, ry, rz)
    rotated = rot_z @ (rot_y @ (rot_x @ np.asarray(vector, dtype=float)))
    return Vector3(float(rotated[0]), float(rotated[1]), float(rotated[2]))


def forward_vector(camera: Camera) -> Vector3:
    return rotate(Vector3(0.0, 0.0, -1.0), camera.rx, camera.ry, camera.rz)


__all__ = [
    "ScreenPoint",
    "eye_distance",
    "camera_space",
    "project",
    "to_pixels",
    "rotate",
    "forward_vector",
]
