"""Per-surface marker calibration.

This module holds the calibration core: surface and marker models, the
orthographic projection for surface pixel space, keyboard input handling,
the single-surface calibrator and the session sequencing all surfaces.
"""

from .input import InputAction, InputDispatcher
from .models import (
    CalibrationResult,
    MarkerState,
    SessionStatus,
    SurfaceGeometry,
    SurfaceKey,
    Viewport,
)
from .projection import ProjectionMapper, orthographic_projection
from .session import CalibrationSession, FrameSource
from .surface import MarkerCanvas, SurfaceCalibrator

__all__ = [
    # Models
    "CalibrationResult",
    "MarkerState",
    "SessionStatus",
    "SurfaceGeometry",
    "SurfaceKey",
    "Viewport",
    # Projection
    "ProjectionMapper",
    "orthographic_projection",
    # Input
    "InputAction",
    "InputDispatcher",
    # Calibration
    "CalibrationSession",
    "FrameSource",
    "MarkerCanvas",
    "SurfaceCalibrator",
]
