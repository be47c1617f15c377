"""Interactive optical calibration for head-mounted display surfaces.

The operator aligns an on-screen marker on each viewer/eye surface of the
display in turn; the final marker geometry of every surface is reported.
"""

from .calibration import (
    CalibrationResult,
    CalibrationSession,
    InputDispatcher,
    MarkerState,
    ProjectionMapper,
    SessionStatus,
    SurfaceCalibrator,
    SurfaceGeometry,
    SurfaceKey,
    Viewport,
)
from .config import CalibrationConfig, DisplayConfig, MarkerConfig, MarkerShape
from .errors import CalibrationError

__version__ = "0.1.0"

__all__ = [
    "CalibrationConfig",
    "CalibrationError",
    "CalibrationResult",
    "CalibrationSession",
    "DisplayConfig",
    "InputDispatcher",
    "MarkerConfig",
    "MarkerShape",
    "MarkerState",
    "ProjectionMapper",
    "SessionStatus",
    "SurfaceCalibrator",
    "SurfaceGeometry",
    "SurfaceKey",
    "Viewport",
]
