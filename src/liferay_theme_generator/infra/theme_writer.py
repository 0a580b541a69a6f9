"""Infrastructure: renders a new theme project to disk.

Templates live in the ``liferay_theme_generator.templates`` package data
and are rendered with Jinja2.  ``package.json`` is built from a dict and
serialised with :mod:`json`.

Rules
-----
* No ``print()`` — callers report the created files.
* ``OSError`` and Jinja2 errors are re-raised as
  :class:`TemplateRenderError`.
* A failed write leaves no theme directory behind.
"""

from __future__ import annotations

import json
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape
from loguru import logger

from liferay_theme_generator.core.models import ThemeProperties
from liferay_theme_generator.core.versions import get_profile
from liferay_theme_generator.exceptions import InvalidThemeIdError, TemplateRenderError, ThemeExistsError

_STATIC_FILES: dict[str, str] = {
    "gitignore": ".gitignore",
    "src/css/_custom.scss": "src/css/_custom.scss",
    "src/js/main.js": "src/js/main.js",
}

_RENDERED_FILES: dict[str, str] = {
    "gulpfile.js.j2": "gulpfile.js",
    "src/WEB-INF/liferay-plugin-package.properties.j2": (
        "src/WEB-INF/liferay-plugin-package.properties"
    ),
    "src/WEB-INF/liferay-look-and-feel.xml.j2": "src/WEB-INF/liferay-look-and-feel.xml",
}

THEME_CONFIG_FILE: str = "liferay-theme.json"


def _get_env() -> Environment:
    return Environment(
        loader=PackageLoader("liferay_theme_generator", "templates"),
        autoescape=select_autoescape(["xml.j2"], default_for_string=False, default=False),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def build_package_json(theme: ThemeProperties) -> dict[str, Any]:
    """The generated theme's ``package.json`` content."""
    profile = get_profile(theme.liferay_version)
    return {
        "name": theme.theme_id,
        "version": theme.package_version,
        "main": "package.json",
        "keywords": ["liferay-theme"],
        "liferayTheme": {
            "baseTheme": "styled",
            "screenshot": "",
            "rubySass": False,
            "templateLanguage": theme.template_language,
            "version": theme.liferay_version,
        },
        "devDependencies": dict(profile.dev_dependencies),
        "scripts": {
            "build": "gulp build",
            "deploy": "gulp deploy",
            "init": "gulp init",
            "watch": "gulp watch",
        },
        "private": True,
    }


def _template_context(theme: ThemeProperties) -> dict[str, Any]:
    return {
        "theme": theme,
        "theme_display_name": theme.theme_name,
        "liferay_versions": theme.liferay_versions,
        "dtd_version": f"{theme.liferay_version}.0",
    }


def render_files(theme: ThemeProperties) -> dict[str, str]:
    """Render every project file in memory; relative path → content."""
    env = _get_env()
    context = _template_context(theme)
    files: dict[str, str] = {
        "package.json": json.dumps(build_package_json(theme), indent=2) + "\n",
    }

    try:
        for source, target in _STATIC_FILES.items():
            loader_source = env.loader.get_source(env, source)  # type: ignore[union-attr]
            files[target] = loader_source[0]
        for source, target in _RENDERED_FILES.items():
            files[target] = env.get_template(source).render(**context)
    except TemplateError as exc:
        raise TemplateRenderError(f"Failed to render theme templates: {exc}") from exc

    return files


def _check_theme_id(theme_id: str) -> None:
    if not theme_id.strip():
        raise InvalidThemeIdError(
            "The theme id is empty.",
            hint="Pass one with --id, or use a theme name with letters or digits.",
        )
    if "/" in theme_id or "\\" in theme_id or theme_id in (".", ".."):
        raise InvalidThemeIdError(
            f"Theme id {theme_id!r} is not a valid directory name.",
            hint="Use letters, digits and dashes only, e.g. --id my-theme.",
        )


def write_theme(theme: ThemeProperties, output_dir: Path) -> tuple[Path, list[str]]:
    """Render *theme* into ``output_dir / theme.theme_dir_name``.

    Returns
    -------
    tuple[Path, list[str]]
        The theme directory and the relative paths written, in order.

    Raises
    ------
    InvalidThemeIdError
        When the theme id is blank or contains a path separator.
    ThemeExistsError
        When the theme directory already exists.
    TemplateRenderError
        When rendering or writing fails; the partial directory is removed.
    """
    _check_theme_id(theme.theme_id)
    theme_dir = output_dir / theme.theme_dir_name
    if theme_dir.exists():
        raise ThemeExistsError(
            f"Directory '{theme_dir}' already exists.",
            hint="Choose another theme id or remove the directory.",
        )

    files = render_files(theme)

    try:
        for relative, content in files.items():
            path = theme_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.debug("Wrote {}", path)
    except OSError as exc:
        shutil.rmtree(theme_dir, ignore_errors=True)
        raise TemplateRenderError(f"Failed to write theme files: {exc}") from exc

    return theme_dir, list(files)


def write_deployment_config(theme_dir: Path, answers: Mapping[str, Any]) -> Path:
    """Write ``liferay-theme.json`` holding the deployment *answers*."""
    path = theme_dir / THEME_CONFIG_FILE
    try:
        path.write_text(json.dumps({"LiferayTheme": dict(answers)}, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise TemplateRenderError(f"Failed to write {THEME_CONFIG_FILE}: {exc}") from exc
    return path
