"""First-person camera pose."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .vector import Vector3


def check_fov(fov: float) -> float:
    """Return ``fov`` if it is a usable field of view, strictly between 0 and 180 degrees."""
    if not 0.0 < fov < 180.0:
        raise ValueError(f"fov must be between 0 and 180 degrees, got {fov}")
    return fov


def clamp_pitch(pitch: float, limit: float = 90.0) -> float:
    """Clamp a pitch angle (degrees) to ``[-limit, limit]``."""
    if pitch > limit:
        return limit
    if pitch < -limit:
        return -limit
    return pitch


@dataclass
class Camera:
    """Camera position plus Euler rotation (degrees, X then Y then Z) and field of view."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    fov: float = 100.0

    def __setattr__(self, name: str, value) -> None:
        # Checked on every assignment, including the one made by __init__.
        if name == "fov":
            check_fov(value)
        super().__setattr__(name, value)

    @property
    def position(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @property
    def rotation(self) -> Vector3:
        return Vector3(self.rx, self.ry, self.rz)

    def look(self, dyaw: float, dpitch: float, limit: float = 90.0) -> None:
        """Turn by the given degrees; pitch stays within ``limit``."""
        self.ry += dyaw
        self.rx = clamp_pitch(self.rx + dpitch, limit)

    def snapshot(self) -> "Camera":
        # Frames read a copy so a motion tick cannot change the pose mid-render.
        return dataclasses.replace(self)


__all__ = ["Camera", "check_fov", "clamp_pitch"]
