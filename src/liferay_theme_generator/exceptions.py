"""Custom exception hierarchy for liferay-theme-generator.

All exceptions that cross layer boundaries must inherit from
:class:`ThemeGeneratorError`.  Raw third-party exceptions (``OSError``,
``json.JSONDecodeError``, Jinja2 and pydantic errors) must NEVER propagate
beyond the infrastructure layer — they are caught and re-raised as a
typed subclass defined here.

Hierarchy
---------
ThemeGeneratorError
├── UnsupportedVersionError
├── PromptCancelledError
├── ConfigurationError
├── InvalidThemeIdError
├── ThemeExistsError
├── TemplateRenderError
├── ThemeConfigError
│   └── UpgradeNotApplicableError
└── EnvironmentError
"""

from __future__ import annotations


class ThemeGeneratorError(Exception):
    """Base exception for all liferay-theme-generator errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Version lookup --------------------------------------------------------

class UnsupportedVersionError(ThemeGeneratorError):
    """Raised when no version profile exists for a target Liferay version."""

    def __init__(self, version: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unsupported Liferay version: {version!r}", hint=hint)
        self.version: str = version


# --- Interaction -----------------------------------------------------------

class PromptCancelledError(ThemeGeneratorError):
    """Raised when the user dismisses an interactive prompt (Esc / Ctrl+C)."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(ThemeGeneratorError):
    """Raised when settings or the stored answers file cannot be loaded."""


# --- Rendering -------------------------------------------------------------

class InvalidThemeIdError(ThemeGeneratorError):
    """Raised when a theme id cannot name a theme directory."""


class ThemeExistsError(ThemeGeneratorError):
    """Raised when the target theme directory already exists."""


class TemplateRenderError(ThemeGeneratorError):
    """Raised when a project template cannot be rendered or written."""


# --- Existing theme projects -----------------------------------------------

class ThemeConfigError(ThemeGeneratorError):
    """Raised when a theme's ``package.json`` is missing or malformed."""


class UpgradeNotApplicableError(ThemeConfigError):
    """Raised when a theme is not on the version an upgrade starts from."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ThemeGeneratorError):
    """Raised when a required runtime dependency is not available."""
