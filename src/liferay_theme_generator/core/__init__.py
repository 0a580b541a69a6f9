"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from liferay_theme_generator.core.models import (
    LiferayVersion,
    Resolution,
    ResolutionContext,
    ResolutionRequest,
    TemplateLanguage,
    ThemeProperties,
    VersionProfile,
)
from liferay_theme_generator.core.resolver import ArgumentResolver, mix_args, resolve
from liferay_theme_generator.core.versions import get_profile, select_warning

__all__: list[str] = [
    "ArgumentResolver",
    "LiferayVersion",
    "Resolution",
    "ResolutionContext",
    "ResolutionRequest",
    "TemplateLanguage",
    "ThemeProperties",
    "VersionProfile",
    "get_profile",
    "mix_args",
    "resolve",
    "select_warning",
]
