"""Tests for settings, the answer store, deployment answers and logging setup."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from liferay_theme_generator.config import GeneratorSettings, get_user_config_dir, load_settings
from liferay_theme_generator.core.deployment import build_deployment_answers
from liferay_theme_generator.exceptions import ConfigurationError
from liferay_theme_generator.infra.answer_store import AnswerStore
from liferay_theme_generator.logging_config import configure_logging


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("LIFERAY_THEME_CONFIG_FILE", str(tmp_path / "answers.json"))
        monkeypatch.setenv("LIFERAY_THEME_BATCH_MODE", "true")
        monkeypatch.setenv("LIFERAY_THEME_OUTPUT_DIR", str(tmp_path))

        settings = GeneratorSettings()

        assert settings.config_file == tmp_path / "answers.json"
        assert settings.batch_mode is True
        assert settings.output_dir == tmp_path

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("LIFERAY_THEME_CONFIG_FILE", "LIFERAY_THEME_BATCH_MODE", "LIFERAY_THEME_OUTPUT_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = GeneratorSettings(_env_file=None)

        assert settings.batch_mode is None
        assert settings.config_file.name == "config.json"

    def test_invalid_env_mapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LIFERAY_THEME_BATCH_MODE", "sometimes")
        with pytest.raises(ConfigurationError):
            load_settings()

    @pytest.mark.skipif(os.name == "nt", reason="XDG layout")
    def test_xdg_config_dir(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_config_dir() == tmp_path / "liferay-theme-generator"


# ---------------------------------------------------------------------------
# Answer store
# ---------------------------------------------------------------------------

class TestAnswerStore:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = AnswerStore.load(tmp_path / "nope.json")

        assert store.batch_mode() is False
        assert store.get_default_answer("theme", "themeName", "dflt") == "dflt"

    def test_reads_answers(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"batchMode": True, "answers": {"theme": {"themeName": "Acme"}}}),
            encoding="utf-8",
        )
        store = AnswerStore.load(path)

        assert store.batch_mode() is True
        assert store.get_default_answer("theme", "themeName") == "Acme"
        assert store.get_default_answer("init", "url", "x") == "x"
        assert store.path == path

    def test_batch_override(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"batchMode": True}), encoding="utf-8")

        assert AnswerStore.load(path, batch_override=False).batch_mode() is False

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_malformed_file(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "config.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            AnswerStore.load(path)

    def test_odd_sections_ignored(self) -> None:
        store = AnswerStore({"answers": {"theme": "oops"}})
        assert store.answers("theme") == {}
        assert AnswerStore({"answers": []}).answers("theme") == {}


# ---------------------------------------------------------------------------
# Deployment answers
# ---------------------------------------------------------------------------

class TestDeploymentAnswers:
    def test_local_defaults(self, tmp_path: Path) -> None:
        theme_dir = tmp_path / "acme-theme"
        answers = build_deployment_answers(theme_dir, AnswerStore().get_default_answer)

        app_server = os.path.join(str(tmp_path), "tomcat")
        assert answers == {
            "deployed": False,
            "pluginName": "acme-theme",
            "deploymentStrategy": "LocalAppServer",
            "appServerPath": app_server,
            "deployPath": os.path.join(app_server, "..", "deploy"),
            "url": "http://localhost:8080",
            "appServerPathPlugin": os.path.join(app_server, "webapps", "acme-theme"),
        }

    def test_docker_uses_posix_paths(self, tmp_path: Path) -> None:
        store = AnswerStore(
            {
                "answers": {
                    "init": {
                        "deploymentStrategy": "DockerContainer",
                        "appServerPath": "/opt/liferay/tomcat",
                    },
                },
            },
        )
        answers = build_deployment_answers(tmp_path / "acme-theme", store.get_default_answer)

        assert answers["dockerContainerName"] == "liferay_portal_1"
        assert answers["appServerPathPlugin"] == "/opt/liferay/tomcat/webapps/acme-theme"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestConfigureLogging:
    @patch("liferay_theme_generator.logging_config.logger")
    def test_quiet_by_default(self, mock_logger: object) -> None:
        configure_logging(debug=False)

        mock_logger.remove.assert_called_once()  # type: ignore[attr-defined]
        mock_logger.add.assert_not_called()  # type: ignore[attr-defined]

    @patch("liferay_theme_generator.logging_config.logger")
    def test_verbose_is_info(self, mock_logger: object) -> None:
        configure_logging(debug=False, verbose=True)

        kwargs = mock_logger.add.call_args.kwargs  # type: ignore[attr-defined]
        assert kwargs["level"] == "INFO"
        assert kwargs["backtrace"] is False

    @patch("liferay_theme_generator.logging_config.logger")
    def test_debug(self, mock_logger: object) -> None:
        configure_logging(debug=True)

        kwargs = mock_logger.add.call_args.kwargs  # type: ignore[attr-defined]
        assert kwargs["level"] == "DEBUG"
        assert kwargs["diagnose"] is True
