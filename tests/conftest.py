from __future__ import annotations

import random
from typing import List, Tuple

import matplotlib

matplotlib.use("Agg")

import pytest

from painter3d.camera import Camera
from painter3d.mesh import Cube
from painter3d.scene import Scene


class RecordingSurface:
    """Drawing surface that records calls instead of painting."""

    def __init__(self, width: float = 800, height: float = 600) -> None:
        self.width = width
        self.height = height
        self.calls: List[Tuple] = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", (x, y, w, h), color))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", [tuple(p) for p in points], color))

    def polygons(self):
        return [call for call in self.calls if call[0] == "polygon"]

    def rects(self):
        return [call for call in self.calls if call[0] == "rect"]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def cube() -> Cube:
    return Cube((0.0, 0.0, 10.0), 2.0, random.Random(1234))


@pytest.fixture
def camera() -> Camera:
    return Camera(fov=100.0)


@pytest.fixture
def scene(cube) -> Scene:
    s = Scene()
    s.add("cube", cube)
    return s
