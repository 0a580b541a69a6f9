"""Pure predicates used to vet command-line flag values."""

from __future__ import annotations

from typing import Any

from liferay_theme_generator.core.models import Answers
from liferay_theme_generator.core.versions import GENERATOR_VERSIONS, get_profile


def is_defined(value: Any) -> bool:
    """A flag value counts as supplied unless it is ``None``."""
    return value is not None


def is_string(value: Any, answers: Answers | None = None) -> bool:
    return isinstance(value, str)


def is_liferay_version(value: Any, answers: Answers | None = None) -> bool:
    """Whether *value* is a version a new theme may target."""
    return value in GENERATOR_VERSIONS


def is_template_language(value: Any, answers: Answers) -> bool:
    """Whether *value* is offered for ``answers["liferayVersion"]``.

    Raises :class:`UnsupportedVersionError` when the answers carry a version
    without a profile.
    """
    return get_profile(answers.get("liferayVersion")).is_template_language(value)
