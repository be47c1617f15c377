"""Unit tests for the entry point."""

from unittest.mock import MagicMock, patch

import pytest

from optical_calibration import main as main_module
from optical_calibration.calibration.models import CalibrationResult, SurfaceKey
from optical_calibration.config import CalibrationConfig, DisplayConfig
from optical_calibration.errors import DisplayError, DisplayServiceError


@pytest.mark.unit()
class TestMain:
    """Test output and exit codes."""

    def test_prints_one_line_per_result(self, capsys):
        results = [
            CalibrationResult(SurfaceKey(0, 0, 0), "S1", (402.0, 300.0), 600),
            CalibrationResult(SurfaceKey(0, 1, 0), "S2", (400.0, 300.0), 599),
        ]
        with patch.object(main_module, "run_calibration", return_value=results):
            assert main_module.main() == 0

        assert capsys.readouterr().out.splitlines() == [
            "S1: center=(402,300), radius=600",
            "S2: center=(400,300), radius=599",
        ]

    def test_abort_without_results_exits_zero(self, capsys):
        with patch.object(main_module, "run_calibration", return_value=[]):
            assert main_module.main() == 0

        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize(
        "error",
        [DisplayError("Display startup failed"), DisplayServiceError("no config")],
    )
    def test_startup_failure_exits_non_zero(self, capsys, error):
        with patch.object(main_module, "run_calibration", side_effect=error):
            assert main_module.main() == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "exiting" in captured.err


@pytest.mark.unit()
class TestRunCalibration:
    """Test wiring of display, service and session."""

    def test_session_runs_inside_display_scope(self):
        display = MagicMock()
        display.__enter__.return_value = display
        display.__exit__.return_value = False
        results = [CalibrationResult(SurfaceKey(0, 0, 0), "S1", (1, 2), 3)]

        with patch.object(
            main_module, "DisplayManager", return_value=display
        ), patch.object(main_module, "MarkerRenderer") as renderer_cls, patch.object(
            main_module, "CalibrationSession"
        ) as session_cls:
            session_cls.return_value.run.return_value = results
            config = CalibrationConfig(display=DisplayConfig(resolution=(1600, 600)))

            assert main_module.run_calibration(config) == results

        service = session_cls.call_args[0][0]
        assert [s.viewport.width for s in service.surfaces()] == [800, 800]
        assert service.check_startup()
        renderer_cls.assert_called_once_with(display.gl_context, config.marker)
        renderer_cls.return_value.release.assert_called_once()
        display.__exit__.assert_called_once()

    def test_renderer_released_on_session_error(self):
        display = MagicMock()
        display.__enter__.return_value = display
        display.__exit__.return_value = False

        with patch.object(
            main_module, "DisplayManager", return_value=display
        ), patch.object(main_module, "MarkerRenderer") as renderer_cls, patch.object(
            main_module, "CalibrationSession"
        ) as session_cls:
            session_cls.return_value.run.side_effect = RuntimeError("GL lost")

            with pytest.raises(RuntimeError):
                main_module.run_calibration(CalibrationConfig())

        renderer_cls.return_value.release.assert_called_once()
        display.__exit__.assert_called_once()
