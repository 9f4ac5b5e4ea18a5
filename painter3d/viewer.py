"""Interactive Matplotlib window hosting the renderer."""
from __future__ import annotations

import logging
from typing import List

import matplotlib.pyplot as plt
from matplotlib import animation
from matplotlib.patches import Patch

from .camera import Camera
from .config import RendererConfig
from .controls import InputState, MotionController
from .renderer import Renderer, RenderStats
from .scene import Scene
from .surface import MatplotlibSurface

logger = logging.getLogger(__name__)

# Matplotlib binds "s" to save-figure by default.
_CONFLICTING_KEYMAPS = ("keymap.save",)


class Viewer:
    """Render ``scene`` from ``camera`` in a Matplotlib figure.

    Frames are scheduled by :class:`~matplotlib.animation.FuncAnimation` and
    camera motion by a separate canvas timer, both on the GUI event loop.
    Pointer motion is turned into deltas between successive mouse positions.
    """

    def __init__(
        self,
        scene: Scene,
        camera: Camera,
        config: RendererConfig | None = None,
        inputs: InputState | None = None,
    ) -> None:
        self.scene = scene
        self.camera = camera
        self.config = config or RendererConfig()
        self.inputs = inputs or InputState()
        self.renderer = Renderer(self.config)
        self.controller = MotionController(camera, self.inputs, self.config)
        self.last_stats: RenderStats | None = None
        self._last_mouse: tuple[float, float] | None = None
        self._anim: animation.FuncAnimation | None = None

        dpi = 100
        self.fig = plt.figure(figsize=(self.config.width / dpi, self.config.height / dpi), dpi=dpi)
        self.fig.set_facecolor(self.config.background)
        self.ax = self.fig.add_subplot(111)
        self.surface = MatplotlibSurface(self.ax, self.config.width, self.config.height)

        self.timer = self.fig.canvas.new_timer(interval=self.config.tick_interval_ms)
        self.timer.add_callback(self.controller.tick)
        self._connect_events()

    def _connect_events(self) -> None:
        canvas = self.fig.canvas
        canvas.mpl_connect("key_press_event", self._on_key_press)
        canvas.mpl_connect("key_release_event", self._on_key_release)
        canvas.mpl_connect("motion_notify_event", self._on_mouse_move)
        canvas.mpl_connect("figure_leave_event", self._on_leave)

    def _on_key_press(self, event) -> None:
        self.inputs.key_down(event.key)

    def _on_key_release(self, event) -> None:
        self.inputs.key_up(event.key)

    def _on_mouse_move(self, event) -> None:
        if event.x is None or event.y is None:
            return
        if self._last_mouse is not None:
            last_x, last_y = self._last_mouse
            # Display y grows upward; pointer deltas are reported screen-down.
            self.inputs.add_mouse_delta(event.x - last_x, last_y - event.y)
        self._last_mouse = (event.x, event.y)

    def _on_leave(self, _event) -> None:
        self._last_mouse = None

    def _update_frame(self, _frame: int) -> List[Patch]:
        self.surface.clear(self.config.background)
        self.last_stats = self.scene.draw(self.camera, self.surface, self.renderer)
        return self.surface.patches

    def animate(self) -> animation.FuncAnimation:
        """Start the motion timer and the frame loop, then block in ``plt.show``."""
        with plt.rc_context({name: [] for name in _CONFLICTING_KEYMAPS}):
            self._anim = animation.FuncAnimation(
                self.fig,
                self._update_frame,
                interval=self.config.frame_interval_ms,
                blit=False,
                cache_frame_data=False,
            )
            self.timer.start()
            logger.info(
                "Viewer running: %d object(s), tick %d ms, frame %d ms",
                len(self.scene),
                self.config.tick_interval_ms,
                self.config.frame_interval_ms,
            )
            plt.show()
        self.timer.stop()
        return self._anim

    def render_single_frame(self, save_path: str | None = None) -> RenderStats:
        self._update_frame(0)
        if save_path:
            self.fig.savefig(save_path, facecolor=self.config.background)
            logger.info("Saved frame to %s", save_path)
        assert self.last_stats is not None
        return self.last_stats

    def close(self) -> None:
        self.timer.stop()
        plt.close(self.fig)


__all__ = ["Viewer"]
