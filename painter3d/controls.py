"""Keyboard / mouse state and the fixed-tick camera motion update."""
from __future__ import annotations

import enum
import math
import threading
from typing import Dict, Set, Tuple

from .camera import Camera
from .config import RendererConfig


class Action(enum.Enum):
    MOVE_FORWARD = "forward"
    MOVE_LEFT = "left"
    MOVE_BACK = "back"
    MOVE_RIGHT = "right"
    MOVE_UP = "up"
    MOVE_DOWN = "down"


DEFAULT_KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.MOVE_FORWARD,
    "a": Action.MOVE_LEFT,
    "s": Action.MOVE_BACK,
    "d": Action.MOVE_RIGHT,
    " ": Action.MOVE_UP,
    "space": Action.MOVE_UP,
    "shift": Action.MOVE_DOWN,
}


def unit_circle(angle: float) -> Tuple[float, float]:
    return math.cos(angle), math.sin(angle)


class InputState:
    """Held actions plus pointer motion accumulated between motion ticks."""

    def __init__(self, bindings: Dict[str, Action] | None = None) -> None:
        self.bindings = dict(DEFAULT_KEY_BINDINGS if bindings is None else bindings)
        self.active: Set[Action] = set()
        self._mouse_dx = 0.0
        self._mouse_dy = 0.0
        self._lock = threading.Lock()

    def action_for(self, key: str | None) -> Action | None:
        if not key:
            return None
        return self.bindings.get(key) or self.bindings.get(key.lower())

    def press(self, action: Action) -> None:
        self.active.add(action)

    def release(self, action: Action) -> None:
        self.active.discard(action)

    def key_down(self, key: str | None) -> bool:
        action = self.action_for(key)
        if action is None:
            return False
        self.press(action)
        return True

    def key_up(self, key: str | None) -> bool:
        action = self.action_for(key)
        if action is None:
            return False
        self.release(action)
        return True

    def is_active(self, action: Action) -> bool:
        return action in self.active

    def add_mouse_delta(self, dx: float, dy: float) -> None:
        with self._lock:
            self._mouse_dx += dx
            self._mouse_dy += dy

    def consume_mouse_delta(self) -> Tuple[float, float]:
        """Return the motion summed since the last call and reset it to zero."""
        with self._lock:
            delta = (self._mouse_dx, self._mouse_dy)
            self._mouse_dx = 0.0
            self._mouse_dy = 0.0
        return delta


class MotionController:
    """Move and turn the camera once per tick from the current input state.

    Ticks are independent of frames; a renderer may see several ticks per
    frame or none.
    """

    def __init__(self, camera: Camera, inputs: InputState, config: RendererConfig | None = None) -> None:
        self.camera = camera
        self.inputs = inputs
        self.config = config or RendererConfig()
        self.ticks = 0

    def tick(self) -> None:
        camera = self.camera
        inputs = self.inputs
        step = self.config.move_step
        cos_yaw, sin_yaw = unit_circle(math.radians(camera.ry))

        if inputs.is_active(Action.MOVE_FORWARD):
            camera.z += cos_yaw * step
            camera.x += sin_yaw * step
        if inputs.is_active(Action.MOVE_LEFT):
            camera.x -= cos_yaw * step
            camera.z += sin_yaw * step
        if inputs.is_active(Action.MOVE_BACK):
            camera.z -= cos_yaw * step
            camera.x -= sin_yaw * step
        if inputs.is_active(Action.MOVE_RIGHT):
            camera.x += cos_yaw * step
            camera.z -= sin_yaw * step
        # Screen y grows downward, so "up" decreases y.
        if inputs.is_active(Action.MOVE_UP):
            camera.y -= step
        if inputs.is_active(Action.MOVE_DOWN):
            camera.y += step

        dx, dy = inputs.consume_mouse_delta()
        sensitivity = self.config.mouse_sensitivity
        camera.look(dx / sensitivity, -dy / sensitivity, self.config.pitch_limit)
        self.ticks += 1


__all__ = ["Action", "DEFAULT_KEY_BINDINGS", "InputState", "MotionController", "unit_circle"]
