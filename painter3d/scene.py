"""Named collection of meshes rendered together."""
from __future__ import annotations

import logging
from typing import Dict, List

from .camera import Camera
from .errors import DuplicateObjectError
from .mesh import Face, Mesh, Vertex
from .renderer import Renderer, RenderStats
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class Scene:
    """Insertion-ordered registry of meshes keyed by name.

    Geometry is flattened again on every draw; nothing is cached.
    """

    def __init__(self) -> None:
        self.objects: Dict[str, Mesh] = {}

    def add(self, name: str, mesh: Mesh, replace: bool = True) -> None:
        """Register ``mesh`` under ``name``.

        A reused name replaces the earlier object (with a warning) unless
        ``replace`` is false, in which case :class:`DuplicateObjectError` is raised.
        Faces must be :class:`Face` objects over the mesh's own vertices.
        """

        if not (hasattr(mesh, "vertices") and hasattr(mesh, "faces")):
            raise TypeError(f"{name!r} does not expose vertices and faces")
        owned = set(mesh.vertices)
        for face in mesh.faces:
            if not isinstance(face, Face):
                raise TypeError(f"{name!r} has a face of type {type(face).__name__}, expected Face")
            if any(vertex not in owned for vertex in face.vertices):
                raise ValueError(f"{name!r} has a face using vertices outside its vertex list")
        if name in self.objects:
            if not replace:
                raise DuplicateObjectError(name)
            logger.warning("Replacing scene object %r", name)
        self.objects[name] = mesh

    def remove(self, name: str) -> Mesh:
        return self.objects.pop(name)

    def names(self) -> List[str]:
        return list(self.objects)

    def __contains__(self, name: object) -> bool:
        return name in self.objects

    def __len__(self) -> int:
        return len(self.objects)

    def vertices(self) -> List[Vertex]:
        return [vertex for mesh in self.objects.values() for vertex in mesh.vertices]

    def faces(self) -> List[Face]:
        return [face for mesh in self.objects.values() for face in mesh.faces]

    def draw(self, camera: Camera, surface: DrawingSurface, renderer: Renderer | None = None) -> RenderStats:
        renderer = renderer or Renderer()
        return renderer.draw(self.vertices(), self.faces(), camera, surface)


__all__ = ["Scene"]
