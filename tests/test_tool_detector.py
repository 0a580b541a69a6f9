"""Tests for Node.js toolchain detection (infra/tool_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path
from unittest.mock import patch

import pytest

from liferay_theme_generator.infra.tool_detector import (
    ToolStatus,
    _platform_install_commands,
    detect_node_toolchain,
    detect_tool,
)


# ---------------------------------------------------------------------------
# detect_tool
# ---------------------------------------------------------------------------

class TestDetectTool:
    @patch("liferay_theme_generator.infra.tool_detector.shutil.which")
    def test_found(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/bin/node"  # type: ignore[union-attr]
        status = detect_tool("node")

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.name == "node"
        assert status.install_commands == ()

    @patch("liferay_theme_generator.infra.tool_detector.shutil.which")
    def test_not_found(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[union-attr]
        status = detect_tool("npm")

        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0

    @patch("liferay_theme_generator.infra.tool_detector.shutil.which")
    def test_toolchain_order(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[union-attr]
        node, npm = detect_node_toolchain()

        assert (node.name, npm.name) == ("node", "npm")


# ---------------------------------------------------------------------------
# Install guidance
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("Windows", "winget install OpenJS.NodeJS.LTS"),
            ("Linux", "sudo apt install nodejs npm"),
            ("Darwin", "brew install node"),
        ],
    )
    def test_known_platforms(self, system: str, expected: str) -> None:
        with patch("liferay_theme_generator.infra.tool_detector.platform.system", return_value=system):
            assert expected in _platform_install_commands()

    def test_unknown_platform(self) -> None:
        with patch("liferay_theme_generator.infra.tool_detector.platform.system", return_value="Plan9"):
            commands = _platform_install_commands()
        assert len(commands) == 1
        assert "nodejs.org" in commands[0]


class TestToolStatus:
    def test_frozen(self) -> None:
        status = ToolStatus(name="node", found=False, path=None, install_commands=())
        with pytest.raises(FrozenInstanceError):
            status.found = True  # type: ignore[misc]
