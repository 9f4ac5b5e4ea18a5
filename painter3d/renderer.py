"""Painter's-algorithm frame pipeline.

Per frame: snapshot the camera, project every vertex, sort faces by their
order key, skip faces that fail the forward-distance cull and fill the rest
in sorted order. There is no depth buffer, so intersecting or interleaved
faces can come out in the wrong order; that is a property of the method.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .camera import Camera
from .config import RendererConfig
from .errors import SingularProjectionError
from .mesh import Face, Vertex
from .projection import forward_vector, project, to_pixels
from .surface import DrawingSurface
from .vector import Vector3, dot, subtract

logger = logging.getLogger(__name__)

ScreenMap = Dict[Vertex, Tuple[float, float]]


@dataclass
class RenderStats:
    vertices: int = 0
    projected: int = 0
    faces: int = 0
    drawn: int = 0
    culled: int = 0
    skipped: int = 0


def order_key(face: Face, camera: Camera) -> float:
    return dot(subtract(camera.position, face.centroid), face.normal)


def sort_faces(faces: Sequence[Face], camera: Camera) -> List[Face]:
    """Faces in ascending order-key order; ties keep their input order."""
    return sorted(faces, key=lambda face: order_key(face, camera))


def should_render_face(face: Face, camera: Camera, forward: Vector3, threshold: float = 2.0) -> bool:
    return dot(subtract(camera.position, face.centroid), forward) > threshold


def project_vertices(vertices: Sequence[Vertex], camera: Camera, width: float, height: float) -> ScreenMap:
    """Pixel positions for every vertex that can be projected.

    Vertices on the camera plane are left out of the mapping.
    """

    screen: ScreenMap = {}
    for vertex in vertices:
        try:
            point = project(vertex.position, camera)
        except SingularProjectionError as exc:
            logger.debug("Skipping vertex: %s", exc)
            continue
        screen[vertex] = to_pixels(point, width, height)
    return screen


class Renderer:
    """Draw flattened scene geometry onto a :class:`DrawingSurface`."""

    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig()
        self._last_skipped = 0

    def draw(
        self,
        vertices: Sequence[Vertex],
        faces: Sequence[Face],
        camera: Camera,
        surface: DrawingSurface,
    ) -> RenderStats:
        config = self.config
        cam = camera.snapshot()
        stats = RenderStats(vertices=len(vertices), faces=len(faces))

        screen = project_vertices(vertices, cam, surface.width, surface.height)
        stats.projected = len(screen)

        if config.show_vertices:
            size = config.vertex_size
            for vertex in vertices:
                if vertex in screen:
                    px, py = screen[vertex]
                    surface.fill_rect(px, py, size, size, config.vertex_color)

        forward = forward_vector(cam)
        for face in sort_faces(faces, cam):
            if not should_render_face(face, cam, forward, config.cull_threshold):
                stats.culled += 1
                continue
            points = [screen.get(vertex) for vertex in face.vertices]
            if any(point is None for point in points):
                stats.skipped += 1
                continue
            surface.fill_polygon(points, face.color)
            stats.drawn += 1

        # Only on change; an unmoved camera redraws the same frame.
        if stats.skipped and stats.skipped != self._last_skipped:
            logger.warning("%d face(s) touch the camera plane and were not drawn", stats.skipped)
        self._last_skipped = stats.skipped
        logger.debug("Frame: %s", stats)
        return stats


__all__ = [
    "Renderer",
    "RenderStats",
    "ScreenMap",
    "order_key",
    "sort_faces",
    "should_render_face",
    "project_vertices",
]
