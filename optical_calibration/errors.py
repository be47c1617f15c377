"""Exception hierarchy for the calibration tool."""


class CalibrationError(Exception):
    """Base class for calibration tool errors."""

    pass


class DisplayError(CalibrationError):
    """Window or OpenGL context errors."""

    pass


class DisplayServiceError(CalibrationError):
    """The display configuration could not be obtained or is invalid."""

    pass


class RendererError(CalibrationError):
    """Renderer-related errors."""

    pass
