"""Mesh entities: shared vertices, flat-coloured faces and the cube factory."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence

from .errors import DegenerateFaceError
from .vector import Vector3, mean

HEX_DIGITS = "0123456789abcdef"


@dataclass(eq=False)
class Vertex:
    """A world-space point shared by the faces of one mesh.

    Vertices compare and hash by identity, so the projection pass can key
    its screen coordinates on them.
    """

    x: float
    y: float
    z: float

    @property
    def position(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


class Face:
    """Polygon over shared vertices with a fixed outward normal.

    The centroid is taken once, from the vertex coordinates at construction
    time, and is not refreshed if a vertex moves afterwards. The normal is
    stored as given and never re-derived from the vertices.
    """

    __slots__ = ("vertices", "normal", "color", "centroid")

    def __init__(self, vertices: Sequence[Vertex], color: str, normal: Sequence[float]) -> None:
        if len(vertices) < 3:
            raise DegenerateFaceError(f"a face needs at least 3 vertices, got {len(vertices)}")
        self.vertices: List[Vertex] = list(vertices)
        self.normal = Vector3(*(float(c) for c in normal))
        self.color = color
        self.centroid = mean(v.position for v in self.vertices)

    def __repr__(self) -> str:
        return f"Face(n={len(self.vertices)}, normal={tuple(self.normal)}, color={self.color!r})"


def random_color(rng: random.Random | None = None) -> str:
    """Opaque ``#rrggbb`` colour with every hex digit drawn uniformly."""
    rng = rng or random.Random()
    return "#" + "".join(rng.choice(HEX_DIGITS) for _ in range(6))


@dataclass
class Mesh:
    """Container exposing the vertex and face lists a scene flattens."""

    vertices: List[Vertex] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)


class Cube(Mesh):
    """Axis-aligned cube of edge ``size`` around ``center``, one random colour per side."""

    def __init__(self, center: Sequence[float], size: float, rng: random.Random | None = None) -> None:
        if size <= 0:
            raise ValueError(f"cube size must be positive, got {size}")
        rng = rng or random.Random()
        cx, cy, cz = (float(c) for c in center)
        d = size / 2.0

        v = [
            Vertex(cx - d, cy - d, cz + d),
            Vertex(cx - d, cy - d, cz - d),
            Vertex(cx + d, cy - d, cz - d),
            Vertex(cx + d, cy - d, cz + d),
            Vertex(cx + d, cy + d, cz + d),
            Vertex(cx + d, cy + d, cz - d),
            Vertex(cx - d, cy + d, cz - d),
            Vertex(cx - d, cy + d, cz + d),
        ]
        faces = [
            Face([v[0], v[1], v[2], v[3]], random_color(rng), (0, -1, 0)),  # y-
            Face([v[3], v[2], v[5], v[4]], random_color(rng), (1, 0, 0)),   # x+
            Face([v[4], v[5], v[6], v[7]], random_color(rng), (0, 1, 0)),   # y+
            Face([v[7], v[6], v[1], v[0]], random_color(rng), (-1, 0, 0)),  # x-
            Face([v[7], v[0], v[3], v[4]], random_color(rng), (0, 0, 1)),   # z+
            Face([v[1], v[6], v[5], v[2]], random_color(rng), (0, 0, -1)),  # z-
        ]
        super().__init__(v, faces)
        self.center = Vector3(cx, cy, cz)
        self.size = float(size)


__all__ = ["Vertex", "Face", "Mesh", "Cube", "random_color"]
