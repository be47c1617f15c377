"""Data models for per-surface calibration.

Surface geometry is supplied by the display configuration and never changes
once retrieved. Marker state is the only mutable data and lives for as long
as its surface is being calibrated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

Number = Union[int, float]


class SessionStatus(Enum):
    """Control signal driving the per-surface and session loops."""

    RUNNING = "running"
    SURFACE_DONE = "surface_done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Viewport:
    """Pixel rectangle a surface occupies on the display."""

    left: Number
    bottom: Number
    width: Number
    height: Number

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to an integer ``(x, y, width, height)`` tuple."""
        return (int(self.left), int(self.bottom), int(self.width), int(self.height))


@dataclass(frozen=True)
class SurfaceKey:
    """Identity of a surface within the display configuration."""

    viewer_id: int
    eye_id: int
    surface_id: int


@dataclass(frozen=True)
class SurfaceGeometry:
    """Identity and pixel rectangle of one viewer/eye surface."""

    viewer_id: int
    eye_id: int
    surface_id: int
    viewport: Viewport
    name: Optional[str] = None

    @property
    def key(self) -> SurfaceKey:
        return SurfaceKey(self.viewer_id, self.eye_id, self.surface_id)

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return f"viewer{self.viewer_id}/eye{self.eye_id}/surface{self.surface_id}"


@dataclass
class MarkerState:
    """Calibration marker geometry in the surface's pixel space."""

    center: tuple[Number, Number]
    radius: Number

    @classmethod
    def from_viewport(cls, viewport: Viewport) -> "MarkerState":
        """Create the initial marker for a viewport.

        The marker starts at the viewport midpoint with a radius equal to the
        shorter viewport dimension.
        """
        return cls(
            center=(viewport.width / 2, viewport.height / 2),
            radius=min(viewport.width, viewport.height),
        )


def _fmt(value: Number) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(float(value))
    return str(value)


@dataclass(frozen=True)
class CalibrationResult:
    """Final marker geometry recorded for a completed surface."""

    key: SurfaceKey
    label: str
    center: tuple[Number, Number]
    radius: Number

    def format_line(self) -> str:
        """Render the result as a single report line."""
        x, y = self.center
        return (
            f"{self.label}: center=({_fmt(x)},{_fmt(y)}), radius={_fmt(self.radius)}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "viewer_id": self.key.viewer_id,
            "eye_id": self.key.eye_id,
            "surface_id": self.key.surface_id,
            "label": self.label,
            "center": list(self.center),
            "radius": self.radius,
        }
