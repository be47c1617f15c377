"""Configuration for the calibration tool.

All settings are compiled-in defaults; the tool reads no configuration file,
command-line flags or environment variables.
"""

from dataclasses import dataclass, field
from enum import Enum


class MarkerShape(Enum):
    """Shape used to draw the calibration marker."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


@dataclass
class DisplayConfig:
    """Configuration for the calibration window."""

    title: str = "OSVR"
    position: tuple[int, int] = (0, 0)
    resolution: tuple[int, int] = (1920, 1080)
    borderless: bool = True
    vsync: bool = True
    gl_version: tuple[int, int] = (3, 3)
    background_color: tuple[int, int, int] = (0, 0, 0)


@dataclass
class MarkerConfig:
    """Appearance of the calibration marker."""

    shape: MarkerShape = MarkerShape.CIRCLE
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    # Core profiles only guarantee width 1; wider lines are best-effort.
    line_width: float = 1.0
    circle_segments: int = 128


@dataclass
class InputBindings:
    """Unit steps applied per key press."""

    move_step: int = 1
    size_step: int = 1


@dataclass
class CalibrationConfig:
    """Complete tool configuration."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    marker: MarkerConfig = field(default_factory=MarkerConfig)
    bindings: InputBindings = field(default_factory=InputBindings)
    # Number of eyes sharing each viewer's window, side by side.
    eyes_per_viewer: int = 2
    viewers: int = 1
