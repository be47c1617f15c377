"""Calibration of a single display surface."""

import logging
from typing import Protocol

import numpy as np

from .models import CalibrationResult, MarkerState, Number, SurfaceGeometry, Viewport
from .projection import ProjectionMapper

logger = logging.getLogger(__name__)


class MarkerCanvas(Protocol):
    """Drawing operations a surface calibrator needs from a renderer."""

    def set_viewport(self, viewport: Viewport) -> None: ...

    def set_projection(self, matrix: np.ndarray) -> None: ...

    def reset_model(self) -> None: ...

    def draw_marker(self, center: tuple[Number, Number], radius: Number) -> None: ...


class SurfaceCalibrator:
    """Owns the marker and projection of the surface being calibrated.

    The render pass visits every surface of the display; only the surface
    whose identity matches the target gets the marker drawn into it.
    Marker movement and resizing are not bounds checked, so the operator may
    push the marker past the viewport edges or shrink it to a zero or
    negative radius.
    """

    def __init__(self, surface: SurfaceGeometry):
        """Initialize calibration for a surface.

        Args:
            surface: Target surface geometry
        """
        self.surface = surface
        self.marker = MarkerState.from_viewport(surface.viewport)
        self.projection = ProjectionMapper(surface.viewport)

        logger.debug(
            f"SurfaceCalibrator for {surface.label}: center={self.marker.center}, "
            f"radius={self.marker.radius}"
        )

    @property
    def center(self) -> tuple[Number, Number]:
        return self.marker.center

    @property
    def radius(self) -> Number:
        return self.marker.radius

    def get_center(self) -> tuple[Number, Number]:
        return self.marker.center

    def get_radius(self) -> Number:
        return self.marker.radius

    def matches(self, visited: SurfaceGeometry) -> bool:
        """Check whether a visited surface is the calibration target."""
        return visited.key == self.surface.key

    def render(self, visited: SurfaceGeometry, canvas: MarkerCanvas) -> bool:
        """Draw the marker if the visited surface is the target.

        Args:
            visited: Surface currently visited by the render pass
            canvas: Renderer to draw with

        Returns:
            True if the marker was drawn
        """
        if not self.matches(visited):
            return False

        canvas.set_viewport(self.surface.viewport)
        canvas.set_projection(self.projection.matrix)
        canvas.reset_model()
        canvas.draw_marker(self.marker.center, self.marker.radius)
        return True

    def move(self, offset: tuple[Number, Number]) -> None:
        """Translate the marker center by a pixel offset."""
        x, y = self.marker.center
        self.marker.center = (x + offset[0], y + offset[1])

    def change_size(self, delta: Number) -> None:
        """Grow or shrink the marker radius."""
        self.marker.radius += delta

    def result(self) -> CalibrationResult:
        """Snapshot the current marker geometry as a calibration result."""
        return CalibrationResult(
            key=self.surface.key,
            label=self.surface.label,
            center=self.marker.center,
            radius=self.marker.radius,
        )

    def __repr__(self) -> str:
        return (
            f"SurfaceCalibrator(surface={self.surface.label}, "
            f"center={self.marker.center}, radius={self.marker.radius})"
        )
