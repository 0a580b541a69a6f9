"""Infrastructure: reads and writes files of an existing theme project."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from liferay_theme_generator.exceptions import ThemeConfigError

PACKAGE_JSON: str = "package.json"
CUSTOM_SCSS: str = "src/css/_custom.scss"


def read_package_json(theme_dir: Path) -> dict[str, Any]:
    path = theme_dir / PACKAGE_JSON
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ThemeConfigError(
            f"No {PACKAGE_JSON} found in '{theme_dir}'.",
            hint="Run the upgrade from the theme's root directory or pass --dir.",
        ) from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ThemeConfigError(f"Cannot read {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ThemeConfigError(f"{path} must contain a JSON object.")
    return data


def write_package_json(theme_dir: Path, data: dict[str, Any]) -> Path:
    path = theme_dir / PACKAGE_JSON
    try:
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ThemeConfigError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Updated {}", path)
    return path


def read_custom_scss(theme_dir: Path) -> str | None:
    """Content of ``_custom.scss``, or ``None`` when the theme has none."""
    path = theme_dir / CUSTOM_SCSS
    if not path.exists():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ThemeConfigError(f"Cannot read {path}: {exc}") from exc


def write_custom_scss(theme_dir: Path, content: str) -> Path:
    path = theme_dir / CUSTOM_SCSS
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ThemeConfigError(f"Cannot write {path}: {exc}") from exc
    return path
