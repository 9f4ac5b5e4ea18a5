"""Exceptions raised by the renderer."""
from __future__ import annotations


class RendererError(Exception):
    """Base class for every renderer error."""


class DegenerateVectorError(RendererError, ValueError):
    """A zero-length vector cannot be normalized."""


class SingularProjectionError(RendererError, ArithmeticError):
    """The point lies on the camera plane (camera-space depth is zero)."""

    def __init__(self, point) -> None:
        super().__init__(f"cannot project {tuple(point)}: camera-space depth is zero")
        self.point = point


class DuplicateObjectError(RendererError, KeyError):
    """A scene object was added under a name that is already taken."""

    def __str__(self) -> str:
        return f"scene already contains an object named {self.args[0]!r}"


class DegenerateFaceError(RendererError, ValueError):
    """A face needs at least three vertices."""


__all__ = [
    "RendererError",
    "DegenerateVectorError",
    "SingularProjectionError",
    "DuplicateObjectError",
    "DegenerateFaceError",
]
