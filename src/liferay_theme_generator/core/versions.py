"""Per-version behaviour table.

Each supported :class:`LiferayVersion` maps to one :class:`VersionProfile`
bundling its template choices, warning lines and dependency lists.  The
table is resolved once per run via :func:`get_profile`; unknown versions
raise :class:`UnsupportedVersionError` and are not recovered from.
"""

from __future__ import annotations

from types import MappingProxyType

from liferay_theme_generator.core.models import (
    LiferayVersion,
    TemplateLanguage,
    VersionProfile,
)
from liferay_theme_generator.exceptions import UnsupportedVersionError

VELOCITY_DEPRECATED_WARNING: str = (
    "   Warning: Velocity is deprecated for 7.0, "
    "some features will be removed in the next release."
)
VELOCITY_REMOVED_WARNING: str = "   Warning: Velocity support was removed in 7.1."

GENERATOR_VERSIONS: tuple[str, ...] = (
    LiferayVersion.V7_1.value,
    LiferayVersion.V7_0.value,
)
"""Versions a new theme may target, default first."""


_PROFILES: dict[LiferayVersion, VersionProfile] = {
    LiferayVersion.V7_0: VersionProfile(
        version=LiferayVersion.V7_0,
        template_choices=(TemplateLanguage.FREEMARKER, TemplateLanguage.VELOCITY),
        warnings=MappingProxyType({TemplateLanguage.VELOCITY: VELOCITY_DEPRECATED_WARNING}),
        dev_dependencies=MappingProxyType({
            "gulp": "3.9.1",
            "liferay-theme-deps-7.0": "8.0.0",
            "liferay-theme-tasks": "8.0.0",
        }),
    ),
    LiferayVersion.V7_1: VersionProfile(
        version=LiferayVersion.V7_1,
        template_choices=(TemplateLanguage.FREEMARKER,),
        warnings=MappingProxyType({TemplateLanguage.VELOCITY: VELOCITY_REMOVED_WARNING}),
        dev_dependencies=MappingProxyType({
            "gulp": "3.9.1",
            "liferay-theme-deps-7.1": "8.0.0",
            "liferay-theme-tasks": "8.0.0",
        }),
    ),
    LiferayVersion.V7_2: VersionProfile(
        version=LiferayVersion.V7_2,
        template_choices=(TemplateLanguage.FREEMARKER,),
        warnings=MappingProxyType({TemplateLanguage.VELOCITY: VELOCITY_REMOVED_WARNING}),
        dev_dependencies=MappingProxyType({
            "compass-mixins": "0.12.10",
            "gulp": "3.9.1",
            "liferay-frontend-css-common": "3.0.0",
            "liferay-frontend-theme-styled": "4.0.0",
            "liferay-frontend-theme-unstyled": "4.0.0",
            "liferay-theme-tasks": "9.0.0",
        }),
        optional_dependencies=MappingProxyType({
            "liferay-font-awesome": "3.4.0",
        }),
    ),
}


def get_profile(version: str | LiferayVersion) -> VersionProfile:
    """Return the profile for *version*.

    Raises
    ------
    UnsupportedVersionError
        When *version* is not a known Liferay release.
    """
    try:
        key = LiferayVersion(version)
    except ValueError:
        raise UnsupportedVersionError(
            str(version),
            hint="Supported versions: " + ", ".join(v.value for v in LiferayVersion),
        ) from None
    return _PROFILES[key]


def template_choices(version: str) -> tuple[TemplateLanguage, ...]:
    """Template languages offered for *version*, default first."""
    return get_profile(version).template_choices


def select_warning(props: dict[str, object]) -> str | None:
    """Pick the single warning line for the resolved *props*, if any."""
    profile = get_profile(str(props.get("liferayVersion")))
    template_language = props.get("templateLanguage")
    return profile.warning_for(template_language if isinstance(template_language, str) else None)
