"""Entry point for the optical calibration tool.

Opens a borderless window over the head-mounted display, waits for the
display configuration to start up, then calibrates every surface in turn.
One line is printed per completed surface. Pressing Escape (or closing the
window) ends the session early; the surfaces completed so far are still
reported.
"""

import logging
import sys
from typing import Optional

from .calibration import CalibrationResult, CalibrationSession, InputDispatcher
from .config import CalibrationConfig
from .display import (
    DisplayManager,
    StaticDisplayConfig,
    validate_service,
    wait_for_startup,
)
from .errors import CalibrationError
from .rendering import MarkerRenderer

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure console logging for the tool."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run_calibration(config: CalibrationConfig) -> list[CalibrationResult]:
    """Run a full calibration session.

    Args:
        config: Tool configuration

    Returns:
        Results of the completed surfaces

    Raises:
        CalibrationError: If the display or its configuration cannot be set up
    """
    with DisplayManager(config.display) as display:
        width, height = config.display.resolution
        service = StaticDisplayConfig(
            width, height, viewers=config.viewers, eyes=config.eyes_per_viewer
        )
        validate_service(service)
        wait_for_startup(service)

        renderer = MarkerRenderer(display.gl_context, config.marker)
        try:
            session = CalibrationSession(
                service, display, renderer, InputDispatcher(config.bindings)
            )
            return session.run()
        finally:
            renderer.release()


def main(config: Optional[CalibrationConfig] = None) -> int:
    """Run the tool and return the process exit code."""
    setup_logging()
    config = config or CalibrationConfig()

    try:
        results = run_calibration(config)
    except CalibrationError as e:
        logger.error(f"Calibration could not start: {e}")
        print(f"\n{e}, exiting.", file=sys.stderr)
        return 1

    for result in results:
        print(result.format_line())
    return 0
