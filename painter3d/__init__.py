"""Software 3D renderer that projects polygon meshes with a painter's-algorithm face sort."""
from __future__ import annotations

from typing import TYPE_CHECKING

from .camera import Camera, check_fov, clamp_pitch
from .config import RendererConfig
from .controls import Action, InputState, MotionController, unit_circle
from .errors import (
    DegenerateFaceError,
    DegenerateVectorError,
    DuplicateObjectError,
    RendererError,
    SingularProjectionError,
)
from .mesh import Cube, Face, Mesh, Vertex, random_color
from .projection import ScreenPoint, project, rotate
from .renderer import Renderer, RenderStats
from .scene import Scene
from .vector import Vector3

__all__ = [
    "Action",
    "Camera",
    "Cube",
    "DegenerateFaceError",
    "DegenerateVectorError",
    "DuplicateObjectError",
    "Face",
    "InputState",
    "Mesh",
    "MotionController",
    "Renderer",
    "RendererConfig",
    "RendererError",
    "RenderStats",
    "Scene",
    "ScreenPoint",
    "SingularProjectionError",
    "Vector3",
    "Vertex",
    "Viewer",
    "check_fov",
    "clamp_pitch",
    "project",
    "random_color",
    "rotate",
    "unit_circle",
]

if TYPE_CHECKING:  # pragma: no cover
    from .viewer import Viewer


def __getattr__(name: str):
    # pyplot is only imported once a window is actually wanted.
    if name == "Viewer":
        from .viewer import Viewer as _Viewer

        return _Viewer
    raise AttributeError(name)
