"""Shared pytest fixtures and configuration for the liferay-theme test suite.

Guidelines
----------
* No terminal interaction — questionary is mocked at the prompt boundary.
* File output goes to ``tmp_path`` only.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from liferay_theme_generator.infra.answer_store import AnswerStore


@pytest.fixture
def empty_store() -> AnswerStore:
    return AnswerStore()


@pytest.fixture
def batch_store() -> AnswerStore:
    return AnswerStore(batch_override=True)


def _make_questionary(*answers: Any) -> MagicMock:
    """Questionary double whose prompts return *answers* in order."""
    questionary = MagicMock()
    replies = iter(answers)

    def _prompt(*_args: Any, **_kwargs: Any) -> MagicMock:
        question = MagicMock()
        question.ask.return_value = next(replies)
        return question

    questionary.text.side_effect = _prompt
    questionary.select.side_effect = _prompt
    questionary.confirm.side_effect = _prompt
    return questionary


@pytest.fixture
def fake_questionary() -> Callable[..., MagicMock]:
    """Factory: ``fake_questionary("Name", "id")`` answers prompts in order."""
    return _make_questionary


@pytest.fixture
def mock_console() -> Iterator[MagicMock]:
    """Replace every CLI module's console with one shared mock."""
    console = MagicMock()
    with (
        patch("liferay_theme_generator.cli.console.console", console),
        patch("liferay_theme_generator.cli.prompts.console", console),
        patch("liferay_theme_generator.cli.create.console", console),
        patch("liferay_theme_generator.cli.upgrade.console", console),
        patch("liferay_theme_generator.cli.doctor.console", console),
        patch("liferay_theme_generator.cli.app.console", console),
    ):
        yield console
