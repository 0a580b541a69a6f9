"""7.1 → 7.2 theme upgrade — pure transforms over a theme's ``package.json``.

The infrastructure layer reads and writes the files; this module only
computes the new content.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from copy import deepcopy
from typing import Any

from liferay_theme_generator.core.models import LiferayVersion
from liferay_theme_generator.core.versions import get_profile
from liferay_theme_generator.exceptions import UpgradeNotApplicableError

UPGRADE_FROM: LiferayVersion = LiferayVersion.V7_1
UPGRADE_TO: LiferayVersion = LiferayVersion.V7_2

FONT_AWESOME_PACKAGE: str = "liferay-font-awesome"
FONT_AWESOME_IMPORTS: str = (
    "@import 'liferay-font-awesome/scss/font-awesome';\n"
    "@import 'liferay-font-awesome/scss/glyphicons';\n\n"
)

_OBSOLETE_DEPENDENCIES: tuple[str, ...] = ("liferay-theme-deps-7.1",)


def remove_dependencies(package_json: dict[str, Any], names: Iterable[str]) -> None:
    """Drop *names* from both ``dependencies`` and ``devDependencies``."""
    for section in ("dependencies", "devDependencies"):
        deps = package_json.get(section)
        if not isinstance(deps, dict):
            continue
        for name in names:
            deps.pop(name, None)


def set_dependencies(
    package_json: dict[str, Any],
    dependencies: Mapping[str, str],
    dev: bool = False,
) -> None:
    section = "devDependencies" if dev else "dependencies"
    package_json.setdefault(section, {}).update(dependencies)


def set_theme_config(package_json: dict[str, Any], **values: Any) -> None:
    """Merge *values* into the ``liferayTheme`` block."""
    package_json.setdefault("liferayTheme", {}).update(values)


def theme_version(package_json: Mapping[str, Any]) -> str | None:
    config = package_json.get("liferayTheme")
    if not isinstance(config, Mapping):
        return None
    version = config.get("version")
    return str(version) if version is not None else None


def upgrade_package_json(
    package_json: Mapping[str, Any],
    include_font_awesome: bool,
) -> dict[str, Any]:
    """Return an upgraded copy of *package_json*.

    Raises
    ------
    UpgradeNotApplicableError
        When the theme does not target the version the upgrade starts from.
    """
    current = theme_version(package_json)
    if current != UPGRADE_FROM.value:
        raise UpgradeNotApplicableError(
            f"Theme targets Liferay {current or 'unknown'}, "
            f"expected {UPGRADE_FROM.value}.",
            hint=f"Only {UPGRADE_FROM.value} themes can be upgraded to {UPGRADE_TO.value}.",
        )

    profile = get_profile(UPGRADE_TO)
    upgraded = deepcopy(dict(package_json))

    remove_dependencies(upgraded, _OBSOLETE_DEPENDENCIES)
    set_dependencies(upgraded, profile.dev_dependencies, dev=True)

    if include_font_awesome:
        set_dependencies(
            upgraded,
            {FONT_AWESOME_PACKAGE: profile.optional_dependencies[FONT_AWESOME_PACKAGE]},
            dev=True,
        )
    else:
        remove_dependencies(upgraded, (FONT_AWESOME_PACKAGE,))

    set_theme_config(upgraded, fontAwesome=include_font_awesome, version=UPGRADE_TO.value)
    return upgraded


def prepend_font_awesome(custom_scss: str) -> str:
    """Prefix the Font Awesome imports unless they are already present."""
    if custom_scss.startswith(FONT_AWESOME_IMPORTS):
        return custom_scss
    return FONT_AWESOME_IMPORTS + custom_scss
