"""Display configuration service.

The display configuration describes which viewers and eyes the display has,
the surfaces each eye renders into, and supplies per-frame pose updates. The
calibration core only relies on the ``DisplayConfigService`` interface; the
built-in ``StaticDisplayConfig`` describes a side-by-side head-mounted
display filling one window.
"""

import logging
from abc import ABC, abstractmethod

from ..calibration.models import SurfaceGeometry, Viewport
from ..errors import DisplayServiceError

logger = logging.getLogger(__name__)


class DisplayConfigService(ABC):
    """Source of surface topology and pose updates."""

    @abstractmethod
    def valid(self) -> bool:
        """Check whether a display configuration was obtained."""

    @abstractmethod
    def check_startup(self) -> bool:
        """Check whether the display has fully started, including initial pose."""

    @abstractmethod
    def update(self) -> None:
        """Refresh pose and configuration data."""

    @abstractmethod
    def surfaces(self) -> list[SurfaceGeometry]:
        """Enumerate all surfaces in viewer, eye, surface order."""


def validate_service(service: DisplayConfigService) -> None:
    """Ensure the display configuration is usable.

    Raises:
        DisplayServiceError: If no valid display configuration is available
    """
    if not service.valid():
        raise DisplayServiceError(
            "Could not get display config (server probably not running or not behaving)"
        )


def wait_for_startup(service: DisplayConfigService) -> int:
    """Pump updates until the display reports it has started.

    This waits indefinitely.

    Returns:
        Number of updates that were needed
    """
    logger.info(
        "Waiting for the display to fully start up, including receiving initial pose update..."
    )
    updates = 0
    while not service.check_startup():
        service.update()
        updates += 1
    logger.info("OK, display startup status is good!")
    return updates


class StaticDisplayConfig(DisplayConfigService):
    """Side-by-side head-mounted display layout.

    Each viewer's eyes split the window horizontally into equal viewports,
    with one surface per eye. Viewers are stacked vertically when there is
    more than one.
    """

    def __init__(
        self,
        width: int,
        height: int,
        viewers: int = 1,
        eyes: int = 2,
        startup_updates: int = 1,
    ):
        """Initialize the layout.

        Args:
            width: Window width in pixels
            height: Window height in pixels
            viewers: Number of viewers sharing the window
            eyes: Number of eyes per viewer
            startup_updates: Updates required before startup completes

        Raises:
            DisplayServiceError: If the layout is degenerate
        """
        if width <= 0 or height <= 0:
            raise DisplayServiceError(f"Invalid display size {width}x{height}")
        if viewers < 1 or eyes < 1:
            raise DisplayServiceError(
                f"Display needs at least one viewer and eye, got {viewers}/{eyes}"
            )
        if width < eyes or height < viewers:
            raise DisplayServiceError(
                f"Display {width}x{height} too small for {viewers} viewer(s) x {eyes} eye(s)"
            )

        self.width = width
        self.height = height
        self.viewers = viewers
        self.eyes = eyes
        self.startup_updates = max(0, startup_updates)
        self.update_count = 0
        self._surfaces = self._build_surfaces()

        logger.debug(
            f"StaticDisplayConfig: {width}x{height}, {viewers} viewer(s), "
            f"{eyes} eye(s), {len(self._surfaces)} surface(s)"
        )

    def _build_surfaces(self) -> list[SurfaceGeometry]:
        eye_width = self.width // self.eyes
        viewer_height = self.height // self.viewers
        surfaces = []
        for viewer in range(self.viewers):
            # Viewer 0 occupies the top band; GL viewports count from the bottom.
            bottom = (self.viewers - 1 - viewer) * viewer_height
            for eye in range(self.eyes):
                surfaces.append(
                    SurfaceGeometry(
                        viewer_id=viewer,
                        eye_id=eye,
                        surface_id=0,
                        viewport=Viewport(
                            left=eye * eye_width,
                            bottom=bottom,
                            width=eye_width,
                            height=viewer_height,
                        ),
                    )
                )
        return surfaces

    def valid(self) -> bool:
        return bool(self._surfaces)

    def check_startup(self) -> bool:
        return self.update_count >= self.startup_updates

    def update(self) -> None:
        self.update_count += 1

    def surfaces(self) -> list[SurfaceGeometry]:
        return list(self._surfaces)

    def __repr__(self) -> str:
        return (
            f"StaticDisplayConfig({self.width}x{self.height}, "
            f"viewers={self.viewers}, eyes={self.eyes})"
        )
