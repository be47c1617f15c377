"""Display management for the calibration tool.

This module handles the creation and release of the calibration window,
including pygame/OpenGL initialization, buffer presentation and event
polling.
"""

import logging
import os
from enum import Enum
from typing import Optional

import moderngl
import pygame

from ..config import DisplayConfig
from ..errors import DisplayError

logger = logging.getLogger(__name__)


class DisplayStatus(Enum):
    """Display status states."""

    INITIALIZED = "initialized"
    RUNNING = "running"
    STOPPED = "stopped"
    ERROR = "error"


class DisplayManager:
    """Manages the calibration window and its OpenGL context.

    The window and context are acquired in ``start_display`` and released in
    ``stop_display``. Used as a context manager, the display is started on
    entry and released on every exit path.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """Initialize the display manager.

        Args:
            config: Display configuration, uses defaults if None
        """
        self.config = config or DisplayConfig()
        self.status = DisplayStatus.INITIALIZED

        self.screen: Optional[pygame.Surface] = None
        self.gl_context: Optional[moderngl.Context] = None
        self.width, self.height = self.config.resolution

    def start_display(self) -> None:
        """Open the window and create the OpenGL context.

        Raises:
            DisplayError: If the window or context cannot be created
        """
        if self.status == DisplayStatus.RUNNING:
            logger.warning("Display already running")
            return

        try:
            x, y = self.config.position
            os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"

            pygame.display.init()
            self._set_gl_attributes()
            self._create_window()
            self._initialize_opengl()

            self.status = DisplayStatus.RUNNING
            logger.info(f"Display started successfully: {self.width}x{self.height}")

        except Exception as e:
            self.status = DisplayStatus.ERROR
            logger.error(f"Failed to start display: {e}")
            self._release()
            raise DisplayError(f"Display startup failed: {e}") from e

    def _set_gl_attributes(self) -> None:
        major, minor = self.config.gl_version
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, major)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, minor)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )
        pygame.display.gl_set_attribute(pygame.GL_DOUBLEBUFFER, 1)

    def _create_window(self) -> None:
        flags = pygame.OPENGL | pygame.DOUBLEBUF
        if self.config.borderless:
            flags |= pygame.NOFRAME

        vsync = 1 if self.config.vsync else 0
        try:
            self.screen = pygame.display.set_mode(
                (self.width, self.height), flags, vsync=vsync
            )
        except pygame.error as e:
            if not vsync:
                raise
            # Some drivers refuse to honour a vsync request.
            logger.warning(f"V-sync unavailable, continuing without it: {e}")
            self.screen = pygame.display.set_mode((self.width, self.height), flags)

        pygame.display.set_caption(self.config.title)
        # Keyboard input only; keep the on-screen keyboard from popping up.
        pygame.key.stop_text_input()

    def _initialize_opengl(self) -> None:
        self.gl_context = moderngl.create_context()
        self.gl_context.enable(moderngl.BLEND)
        self.gl_context.blend_func = (
            moderngl.SRC_ALPHA,
            moderngl.ONE_MINUS_SRC_ALPHA,
        )
        self.gl_context.viewport = (0, 0, self.width, self.height)

        bg = self.config.background_color
        self.gl_context.clear_color = (bg[0] / 255, bg[1] / 255, bg[2] / 255, 1.0)

        logger.debug(
            f"OpenGL context initialized: {self.gl_context.info['GL_VERSION']}"
        )

    def stop_display(self) -> None:
        """Release the OpenGL context and close the window."""
        if self.status not in (DisplayStatus.RUNNING, DisplayStatus.ERROR):
            return

        logger.info("Stopping display")
        self._release()
        self.status = DisplayStatus.STOPPED

    def _release(self) -> None:
        if self.gl_context is not None:
            self.gl_context.release()
            self.gl_context = None
        self.screen = None
        pygame.display.quit()

    def clear(self) -> None:
        """Clear the whole window to the background color."""
        if not self.gl_context:
            return
        # The calibrated surface changes the viewport; clear the full window.
        self.gl_context.viewport = (0, 0, self.width, self.height)
        self.gl_context.clear(depth=1.0)

    def present(self) -> None:
        """Swap the back buffer onto the window."""
        if not self.screen:
            return

        pygame.display.flip()

    def poll_events(self) -> list[pygame.event.Event]:
        """Drain all queued events without blocking."""
        if self.status != DisplayStatus.RUNNING:
            return []
        return pygame.event.get()

    def is_running(self) -> bool:
        """Check if display is currently running."""
        return self.status == DisplayStatus.RUNNING

    def __enter__(self) -> "DisplayManager":
        self.start_display()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop_display()

    def __repr__(self) -> str:
        return (
            f"DisplayManager("
            f"status={self.status.value}, "
            f"resolution={self.width}x{self.height}"
            f")"
        )
