"""``liferay-theme upgrade`` — move a 7.1 theme to 7.2."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from liferay_theme_generator.cli import exit_codes
from liferay_theme_generator.cli.console import console
from liferay_theme_generator.cli.prompts import ask_confirm
from liferay_theme_generator.core.upgrade import UPGRADE_TO, prepend_font_awesome, upgrade_package_json
from liferay_theme_generator.infra.theme_project import (
    read_custom_scss,
    read_package_json,
    write_custom_scss,
    write_package_json,
)


def run_upgrade(theme_dir: Path, include_font_awesome: bool | None = None) -> int:
    """Upgrade the theme in *theme_dir*.

    *include_font_awesome* skips the question when given.  The
    ``package.json`` is validated before anything is asked or written.
    """
    package_json = read_package_json(theme_dir)
    # fail before prompting if the theme is not a 7.1 theme
    upgrade_package_json(package_json, include_font_awesome=False)

    if include_font_awesome is None:
        include_font_awesome = ask_confirm("Do you want to include Font Awesome in your theme?", default=True)

    write_package_json(theme_dir, upgrade_package_json(package_json, include_font_awesome))
    console.step(f"Updated package.json for Liferay {UPGRADE_TO.value}")

    if include_font_awesome:
        custom_scss = read_custom_scss(theme_dir)
        if custom_scss is None:
            logger.info("No _custom.scss in {}, skipping Font Awesome imports", theme_dir)
        else:
            write_custom_scss(theme_dir, prepend_font_awesome(custom_scss))
            console.step("Added Font Awesome imports to src/css/_custom.scss")

    console.banner(f"Done! Run npm install in {theme_dir} to fetch the new dependencies.")
    return exit_codes.SUCCESS
