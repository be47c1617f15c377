"""Test doubles for driving calibration sessions without a window."""

import numpy as np
import pygame

from optical_calibration.display.service import DisplayConfigService


def key(code: int) -> pygame.event.Event:
    """Create a key-down event."""
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def quit_event() -> pygame.event.Event:
    return pygame.event.Event(pygame.QUIT)


class FakeDisplayService(DisplayConfigService):
    """Display configuration with a fixed surface list."""

    def __init__(self, surfaces, startup_after=0, is_valid=True):
        self._surfaces = list(surfaces)
        self.startup_after = startup_after
        self.is_valid = is_valid
        self.update_count = 0
        self.enumerations = 0

    def valid(self):
        return self.is_valid

    def check_startup(self):
        return self.update_count >= self.startup_after

    def update(self):
        self.update_count += 1

    def surfaces(self):
        self.enumerations += 1
        return list(self._surfaces)


class ScriptedFrames:
    """Frame source replaying one batch of events per frame."""

    def __init__(self, batches):
        self.batches = list(batches)
        self.polls = 0
        self.clears = 0
        self.presents = 0

    def poll_events(self):
        if self.polls >= len(self.batches):
            raise RuntimeError("Event script exhausted")
        batch = self.batches[self.polls]
        self.polls += 1
        return list(batch)

    def clear(self):
        self.clears += 1

    def present(self):
        self.presents += 1


class RecordingCanvas:
    """Renderer stand-in recording every drawing call."""

    def __init__(self):
        self.calls = []

    def set_viewport(self, viewport):
        self.calls.append(("set_viewport", viewport))

    def set_projection(self, matrix):
        self.calls.append(("set_projection", np.array(matrix)))

    def reset_model(self):
        self.calls.append(("reset_model",))

    def draw_marker(self, center, radius):
        self.calls.append(("draw_marker", center, radius))

    @property
    def markers(self):
        return [call[1:] for call in self.calls if call[0] == "draw_marker"]

    @property
    def viewports(self):
        return [call[1] for call in self.calls if call[0] == "set_viewport"]


