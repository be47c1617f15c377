"""Calibration session driving every surface of the display in turn.

Each surface gets its own frame loop. Per frame the session dispatches
pending input to the active surface calibrator, requests a pose update,
renders one pass over all surfaces and presents the frame. The loop status
is consumed at the top of every iteration: ``SURFACE_DONE`` records the
surface's result and moves on, ``ABORTED`` ends the whole session and keeps
only the results recorded so far.
"""

import logging
from collections import deque
from typing import Iterable, Optional, Protocol

import pygame

from ..display.service import DisplayConfigService
from .input import InputDispatcher
from .models import CalibrationResult, SessionStatus, SurfaceGeometry
from .surface import MarkerCanvas, SurfaceCalibrator

logger = logging.getLogger(__name__)


class FrameSource(Protocol):
    """Window operations used by the frame loop."""

    def poll_events(self) -> Iterable[pygame.event.Event]: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...


class CalibrationSession:
    """Sequences calibration through all surfaces of the display."""

    def __init__(
        self,
        service: DisplayConfigService,
        frames: FrameSource,
        canvas: MarkerCanvas,
        dispatcher: Optional[InputDispatcher] = None,
    ):
        """Initialize the session.

        Args:
            service: Display configuration providing surfaces and pose updates
            frames: Window to poll input from and present frames to
            canvas: Renderer the marker is drawn with
            dispatcher: Input dispatcher, uses default bindings if None
        """
        self.service = service
        self.frames = frames
        self.canvas = canvas
        self.dispatcher = dispatcher or InputDispatcher()

        self.status = SessionStatus.RUNNING
        self.frame_count = 0
        self.active: Optional[SurfaceCalibrator] = None
        self._results: list[CalibrationResult] = []
        # Events left undispatched when a surface finished mid-batch.
        self._pending: deque[pygame.event.Event] = deque()

    @property
    def results(self) -> list[CalibrationResult]:
        return list(self._results)

    def run(self) -> list[CalibrationResult]:
        """Calibrate every surface until completion or abort.

        Returns:
            Results of the surfaces that were completed, in calibration order
        """
        surfaces = self.service.surfaces()
        logger.info(f"Starting calibration of {len(surfaces)} surface(s)")

        for index, surface in enumerate(surfaces, start=1):
            logger.info(f"Calibrating surface {index}/{len(surfaces)}: {surface.label}")
            self.status = self._calibrate_surface(surface)

            if self.status == SessionStatus.ABORTED:
                logger.info(
                    f"Calibration aborted on {surface.label}; "
                    f"{len(self._results)} surface(s) completed"
                )
                break

            result = self.active.result()
            self._results.append(result)
            logger.info(f"Surface complete: {result.format_line()}")
        else:
            self.status = SessionStatus.SURFACE_DONE
            logger.info(f"Calibration finished for {len(self._results)} surface(s)")

        self.active = None
        return self.results

    def _calibrate_surface(self, surface: SurfaceGeometry) -> SessionStatus:
        self.active = SurfaceCalibrator(surface)
        status = SessionStatus.RUNNING

        while status == SessionStatus.RUNNING:
            status = self._handle_input()
            self.service.update()
            self._render_pass()
            self.frames.present()
            self.frame_count += 1

        return status

    def _handle_input(self) -> SessionStatus:
        self._pending.extend(self.frames.poll_events())

        while self._pending:
            event = self._pending.popleft()
            status = self.dispatcher.dispatch(event, self.active)
            if status != SessionStatus.RUNNING:
                return status

        return SessionStatus.RUNNING

    def _render_pass(self) -> None:
        self.frames.clear()
        for visited in self.service.surfaces():
            self.active.render(visited, self.canvas)

    def __repr__(self) -> str:
        return (
            f"CalibrationSession(status={self.status.value}, "
            f"results={len(self._results)}, frames={self.frame_count})"
        )
