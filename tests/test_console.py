"""Tests for generator output (cli/console.py).

Output goes to stderr and is read back with ``capsys``.
"""

from __future__ import annotations

import sys

import pytest

from liferay_theme_generator.cli.console import GeneratorConsole
from liferay_theme_generator.exceptions import ThemeExistsError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


# ---------------------------------------------------------------------------
# Rich output
# ---------------------------------------------------------------------------

class TestGeneratorConsole:
    def test_error_with_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        GeneratorConsole().error(ThemeExistsError("exists", hint="pick another id"))

        err = capsys.readouterr().err
        assert "Error: exists" in err
        assert "Hint: pick another id" in err

    def test_error_without_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        GeneratorConsole().error(ThemeExistsError("exists"))
        assert "Hint" not in capsys.readouterr().err

    def test_rail_with_detail(self, capsys: pytest.CaptureFixture[str]) -> None:
        GeneratorConsole().rail("package.json", "manifest")
        assert "│  package.json — manifest" in capsys.readouterr().err

    def test_warn_keeps_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        GeneratorConsole().warn("Warning: Invalid value set for --template")
        assert "Warning: Invalid value set for --template" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Plain fallback
# ---------------------------------------------------------------------------

class TestPlainFallback:
    def test_markup_stripped(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _hide_rich(monkeypatch)

        GeneratorConsole().step("Creating acme-theme/...")

        assert capsys.readouterr().err == "◇  Creating acme-theme/...\n"

    def test_empty_rail(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _hide_rich(monkeypatch)

        GeneratorConsole().rail()

        assert capsys.readouterr().err == "│\n"
