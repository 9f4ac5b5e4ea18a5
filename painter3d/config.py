"""Tunable renderer and motion settings."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RendererConfig:
    """Named values for what would otherwise be magic numbers in the render loop."""

    width: int = 800
    height: int = 600
    cull_threshold: float = 2.0
    tick_interval_ms: int = 5
    frame_interval_ms: int = 16
    move_step: float = 0.1
    mouse_sensitivity: float = 3.0
    pitch_limit: float = 90.0
    show_vertices: bool = True
    vertex_size: float = 5.0
    vertex_color: str = "blue"
    background: str = "black"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"surface size must be positive, got {self.width}x{self.height}")
        if self.tick_interval_ms <= 0 or self.frame_interval_ms <= 0:
            raise ValueError("tick and frame intervals must be positive")
        if self.mouse_sensitivity <= 0:
            raise ValueError(f"mouse_sensitivity must be positive, got {self.mouse_sensitivity}")
        if self.pitch_limit < 0:
            raise ValueError(f"pitch_limit must not be negative, got {self.pitch_limit}")


__all__ = ["RendererConfig"]
