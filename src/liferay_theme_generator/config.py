"""Runtime settings for liferay-theme-generator.

Settings come from ``LIFERAY_THEME_*`` environment variables (and an
optional ``.env`` file); command-line flags override them.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from liferay_theme_generator.exceptions import ConfigurationError

APP_NAME: str = "liferay-theme-generator"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (XDG on Linux)."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def default_config_file() -> Path:
    return get_user_config_dir() / "config.json"


class GeneratorSettings(BaseSettings):
    """Environment-driven defaults for every command."""

    model_config = SettingsConfigDict(
        env_prefix="LIFERAY_THEME_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    config_file: Path = Field(
        default_factory=default_config_file,
        description="JSON file holding stored answers and the batch-mode switch.",
    )
    batch_mode: bool | None = Field(
        default=None,
        description="Force batch mode on/off regardless of the stored answers file.",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Directory new themes are created in.",
    )


def load_settings() -> GeneratorSettings:
    """Build :class:`GeneratorSettings`, mapping validation errors to ours."""
    try:
        return GeneratorSettings()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid LIFERAY_THEME_* environment configuration.",
            hint=str(exc),
        ) from exc
