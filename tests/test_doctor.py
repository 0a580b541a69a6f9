"""Tests for the ``liferay-theme doctor`` command (cli/doctor.py).

The node toolchain is mocked — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from liferay_theme_generator.cli import exit_codes
from liferay_theme_generator.cli.doctor import (
    _config_check,
    _python_version_check,
    _status_plain,
    _tool_check,
    run_doctor,
)
from liferay_theme_generator.config import GeneratorSettings
from liferay_theme_generator.infra.tool_detector import ToolStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _found(name: str) -> ToolStatus:
    return ToolStatus(name=name, found=True, path=Path(f"/usr/bin/{name}"), install_commands=())


def _missing(name: str) -> ToolStatus:
    return ToolStatus(name=name, found=False, path=None, install_commands=("brew install node",))


def _settings(tmp_path: Path) -> GeneratorSettings:
    return GeneratorSettings(config_file=tmp_path / "config.json", _env_file=None)


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

class TestChecks:
    def test_python_version(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status

    def test_tool_found(self) -> None:
        label, value, status = _tool_check(_found("node"))
        assert label == "node"
        assert "node" in value
        assert "OK" in status

    def test_tool_missing_is_warning(self) -> None:
        _, value, status = _tool_check(_missing("npm"))
        assert value == "not found"
        assert "WARN" in status

    def test_answers_file_missing(self, tmp_path: Path) -> None:
        _, value, status = _config_check(_settings(tmp_path))
        assert value.endswith("(not created)")
        assert "OK" in status

    def test_answers_file_present(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text("{}", encoding="utf-8")
        _, value, _ = _config_check(_settings(tmp_path))
        assert value == str(tmp_path / "config.json")

    def test_status_plain(self) -> None:
        assert _status_plain("[yellow]WARN[/yellow]") == "WARN"
        assert _status_plain("[red]FAIL (>=3.10 required)[/red]") == "FAIL"


# ---------------------------------------------------------------------------
# run_doctor
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("liferay_theme_generator.cli.doctor.detect_node_toolchain")
    def test_all_present(self, mock_detect: MagicMock, tmp_path: Path, mock_console: MagicMock) -> None:
        mock_detect.return_value = (_found("node"), _found("npm"))
        assert run_doctor(_settings(tmp_path)) == exit_codes.SUCCESS

    @patch("liferay_theme_generator.cli.doctor.detect_node_toolchain")
    def test_missing_node_is_not_fatal(
        self, mock_detect: MagicMock, tmp_path: Path, mock_console: MagicMock
    ) -> None:
        mock_detect.return_value = (_missing("node"), _missing("npm"))

        assert run_doctor(_settings(tmp_path)) == exit_codes.SUCCESS
        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "node, npm not found" in printed
        assert "brew install node" in printed

    @patch("liferay_theme_generator.cli.doctor._python_version_check")
    @patch("liferay_theme_generator.cli.doctor.detect_node_toolchain")
    def test_python_failure(
        self, mock_detect: MagicMock, mock_python: MagicMock,
        tmp_path: Path, mock_console: MagicMock,
    ) -> None:
        mock_detect.return_value = (_found("node"), _found("npm"))
        mock_python.return_value = ("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]")

        assert run_doctor(_settings(tmp_path)) == exit_codes.GENERAL_ERROR
