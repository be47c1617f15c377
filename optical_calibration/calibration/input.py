"""Keyboard input handling for marker calibration.

Every key-down event maps to at most one action. Held keys produce repeated
single-unit steps through the event source's key repeat; there is no
acceleration.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame

from ..config import InputBindings
from .models import SessionStatus
from .surface import SurfaceCalibrator

logger = logging.getLogger(__name__)


class InputAction(Enum):
    """Actions an operator can trigger from the keyboard."""

    ABORT = "abort"
    MOVE_RIGHT = "move_right"
    MOVE_LEFT = "move_left"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    GROW = "grow"
    SHRINK = "shrink"
    ACCEPT = "accept"


KEY_ACTIONS: dict[int, InputAction] = {
    pygame.K_ESCAPE: InputAction.ABORT,
    pygame.K_RIGHT: InputAction.MOVE_RIGHT,
    pygame.K_LEFT: InputAction.MOVE_LEFT,
    pygame.K_UP: InputAction.MOVE_UP,
    pygame.K_DOWN: InputAction.MOVE_DOWN,
    pygame.K_PLUS: InputAction.GROW,
    # Shift+= on US-style layouts.
    pygame.K_EQUALS: InputAction.GROW,
    pygame.K_KP_PLUS: InputAction.GROW,
    pygame.K_MINUS: InputAction.SHRINK,
    pygame.K_KP_MINUS: InputAction.SHRINK,
    pygame.K_RETURN: InputAction.ACCEPT,
    pygame.K_KP_ENTER: InputAction.ACCEPT,
}

# Typed characters take precedence over the physical key.
CHAR_ACTIONS: dict[str, InputAction] = {
    "+": InputAction.GROW,
    "-": InputAction.SHRINK,
}


@dataclass(frozen=True)
class _Move:
    dx: int
    dy: int


MOVE_DIRECTIONS: dict[InputAction, _Move] = {
    InputAction.MOVE_RIGHT: _Move(1, 0),
    InputAction.MOVE_LEFT: _Move(-1, 0),
    InputAction.MOVE_UP: _Move(0, 1),
    InputAction.MOVE_DOWN: _Move(0, -1),
}


class InputDispatcher:
    """Translates pygame events into marker edits and session signals."""

    def __init__(self, bindings: Optional[InputBindings] = None):
        """Initialize the dispatcher.

        Args:
            bindings: Step sizes per key press, uses defaults if None
        """
        self.bindings = bindings or InputBindings()

    def action_for(self, event: pygame.event.Event) -> Optional[InputAction]:
        """Look up the action for an event.

        Args:
            event: Event from the pygame queue

        Returns:
            The mapped action, or None if the event is ignored
        """
        if event.type == pygame.QUIT:
            return InputAction.ABORT
        if event.type == pygame.KEYDOWN:
            char = getattr(event, "unicode", "")
            if char in CHAR_ACTIONS:
                return CHAR_ACTIONS[char]
            return KEY_ACTIONS.get(event.key)
        return None

    def dispatch(
        self, event: pygame.event.Event, calibrator: SurfaceCalibrator
    ) -> SessionStatus:
        """Apply one event to the active calibrator.

        Args:
            event: Event from the pygame queue
            calibrator: Calibrator of the surface currently being edited

        Returns:
            Session signal produced by the event
        """
        action = self.action_for(event)
        if action is None:
            return SessionStatus.RUNNING

        if action == InputAction.ABORT:
            logger.debug("Abort requested")
            return SessionStatus.ABORTED
        if action == InputAction.ACCEPT:
            return SessionStatus.SURFACE_DONE

        if action in MOVE_DIRECTIONS:
            step = self.bindings.move_step
            direction = MOVE_DIRECTIONS[action]
            calibrator.move((direction.dx * step, direction.dy * step))
        elif action == InputAction.GROW:
            calibrator.change_size(self.bindings.size_step)
        elif action == InputAction.SHRINK:
            calibrator.change_size(-self.bindings.size_step)

        return SessionStatus.RUNNING
