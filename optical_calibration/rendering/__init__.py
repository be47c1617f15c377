"""Rendering module for the calibration marker."""

from .renderer import MarkerRenderer, RenderStats, circle_outline, square_outline

__all__ = [
    "MarkerRenderer",
    "RenderStats",
    "circle_outline",
    "square_outline",
]
