"""Unit tests for calibration data models."""

import dataclasses

import pytest

from optical_calibration.calibration.models import (
    CalibrationResult,
    MarkerState,
    SurfaceGeometry,
    SurfaceKey,
    Viewport,
)


@pytest.mark.unit()
class TestMarkerState:
    """Test initial marker geometry."""

    def test_initial_marker_from_wide_viewport(self):
        marker = MarkerState.from_viewport(Viewport(0, 0, 960, 540))

        assert marker.center == (480, 270)
        assert marker.radius == 540

    def test_initial_marker_ignores_viewport_offset(self):
        marker = MarkerState.from_viewport(Viewport(960, 100, 960, 540))

        assert marker.center == (480, 270)

    def test_initial_radius_uses_shorter_side_of_tall_viewport(self):
        marker = MarkerState.from_viewport(Viewport(0, 0, 600, 1200))

        assert marker.center == (300, 600)
        assert marker.radius == 600


@pytest.mark.unit()
class TestSurfaceGeometry:
    """Test surface identity and labels."""

    def test_key(self, wide_surface):
        assert wide_surface.key == SurfaceKey(viewer_id=0, eye_id=1, surface_id=0)

    def test_default_label(self, wide_surface):
        assert wide_surface.label == "viewer0/eye1/surface0"

    def test_named_label(self, stereo_surfaces):
        assert [s.label for s in stereo_surfaces] == ["S1", "S2"]

    def test_geometry_is_immutable(self, wide_surface):
        with pytest.raises(dataclasses.FrozenInstanceError):
            wide_surface.eye_id = 0

    def test_same_identity_different_name_matches(self):
        a = SurfaceGeometry(1, 0, 2, Viewport(0, 0, 10, 10))
        b = SurfaceGeometry(1, 0, 2, Viewport(0, 0, 10, 10), name="left")
        assert a.key == b.key


@pytest.mark.unit()
class TestCalibrationResult:
    """Test result reporting."""

    def test_format_line_drops_trailing_zero(self):
        result = CalibrationResult(
            key=SurfaceKey(0, 0, 0), label="S1", center=(402.0, 300.0), radius=600
        )
        assert result.format_line() == "S1: center=(402,300), radius=600"

    def test_format_line_keeps_fractions_and_negatives(self):
        result = CalibrationResult(
            key=SurfaceKey(0, 0, 0), label="S1", center=(-3.5, 12.0), radius=-2
        )
        assert result.format_line() == "S1: center=(-3.5,12), radius=-2"

    def test_format_line_keeps_full_precision(self):
        result = CalibrationResult(
            key=SurfaceKey(0, 0, 0),
            label="S1",
            center=(1234567.5, 2000000.0),
            radius=0.1 + 0.2,
        )
        assert result.format_line() == (
            "S1: center=(1234567.5,2000000), radius=0.30000000000000004"
        )

    def test_to_dict(self):
        result = CalibrationResult(
            key=SurfaceKey(0, 1, 0), label="S2", center=(400.0, 300.0), radius=599
        )
        assert result.to_dict() == {
            "viewer_id": 0,
            "eye_id": 1,
            "surface_id": 0,
            "label": "S2",
            "center": [400.0, 300.0],
            "radius": 599,
        }
