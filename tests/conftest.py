"""Shared test configuration and fixtures for the calibration tool."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from optical_calibration.calibration.models import SurfaceGeometry, Viewport
from tests.helpers import RecordingCanvas


@pytest.fixture()
def wide_surface():
    """A 960x540 surface on the right half of a 1920x540 panel."""
    return SurfaceGeometry(
        viewer_id=0,
        eye_id=1,
        surface_id=0,
        viewport=Viewport(left=960, bottom=0, width=960, height=540),
    )


@pytest.fixture()
def stereo_surfaces():
    """Left and right eye surfaces of a 1600x600 panel."""
    return [
        SurfaceGeometry(0, 0, 0, Viewport(0, 0, 800, 600), name="S1"),
        SurfaceGeometry(0, 1, 0, Viewport(800, 0, 800, 600), name="S2"),
    ]


@pytest.fixture()
def canvas():
    return RecordingCanvas()
