"""Drawing surfaces the renderer paints on."""
from __future__ import annotations

from typing import List, Protocol, Sequence, Tuple

from matplotlib.axes import Axes
from matplotlib.patches import Patch, Polygon, Rectangle

Point2 = Tuple[float, float]


class DrawingSurface(Protocol):
    width: float
    height: float

    def clear(self, color: str) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None: ...

    def fill_polygon(self, points: Sequence[Point2], color: str) -> None: ...


class MatplotlibSurface:
    """Paint onto a Matplotlib axes laid out like a canvas.

    The origin sits at the centre of the axes and y grows downward, so
    renderer pixel coordinates can be used without further mapping. Shapes
    outside the limits are clipped by Matplotlib.
    """

    def __init__(self, ax: Axes, width: float, height: float) -> None:
        self.ax = ax
        self.width = width
        self.height = height
        self.patches: List[Patch] = []
        self._init_axes()

    def _init_axes(self) -> None:
        ax = self.ax
        ax.set_position([0.0, 0.0, 1.0, 1.0])
        ax.set_xlim(-self.width / 2, self.width / 2)
        ax.set_ylim(self.height / 2, -self.height / 2)
        ax.set_autoscale_on(False)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    def clear(self, color: str) -> None:
        while self.patches:
            self.patches.pop().remove()
        self.ax.set_facecolor(color)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        rect = Rectangle((x, y), w, h, facecolor=color, edgecolor="none", linewidth=0)
        self.ax.add_patch(rect)
        self.patches.append(rect)

    def fill_polygon(self, points: Sequence[Point2], color: str) -> None:
        poly = Polygon(list(points), closed=True, facecolor=color, edgecolor="none", linewidth=0)
        self.ax.add_patch(poly)
        self.patches.append(poly)


__all__ = ["DrawingSurface", "MatplotlibSurface", "Point2"]
