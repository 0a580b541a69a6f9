"""Domain models for liferay-theme-generator.

Value objects are **frozen** dataclasses with no behaviour beyond data
access and trivial derivations.  The one mutable object,
:class:`ResolutionContext`, is owned by a single generator run.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Answers = dict[str, Any]
"""In-progress answer set keyed by property name (``themeName`` …)."""

Validator = Callable[[Any, Answers], bool]
"""Predicate ``(value, answers) -> bool`` applied to a supplied flag."""


# ---------------------------------------------------------------------------
# Target versions
# ---------------------------------------------------------------------------

class LiferayVersion(str, Enum):
    """Liferay platform releases a theme can target."""

    V7_0 = "7.0"
    V7_1 = "7.1"
    V7_2 = "7.2"

    @property
    def label(self) -> str:
        return f"Liferay {self.value}"


class TemplateLanguage(str, Enum):
    """Templating syntaxes for theme view templates."""

    FREEMARKER = "ftl"
    VELOCITY = "vm"

    @property
    def label(self) -> str:
        labels: dict[TemplateLanguage, str] = {
            TemplateLanguage.FREEMARKER: "Freemarker (.ftl)",
            TemplateLanguage.VELOCITY: "Velocity (.vm)",
        }
        return labels[self]


# ---------------------------------------------------------------------------
# Per-version profile
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VersionProfile:
    """Everything that varies with the target Liferay version."""

    version: LiferayVersion

    template_choices: tuple[TemplateLanguage, ...]
    """Template languages offered for this version, default first."""

    warnings: Mapping[TemplateLanguage, str]
    """Warning line printed when the chosen language is deprecated/removed."""

    dev_dependencies: Mapping[str, str]
    """Default ``devDependencies`` written into ``package.json``."""

    optional_dependencies: Mapping[str, str] = field(default_factory=dict)
    """Extra packages added on request (e.g. ``liferay-font-awesome``)."""

    def is_template_language(self, value: object) -> bool:
        return any(value == choice.value for choice in self.template_choices)

    def warning_for(self, template_language: str | None) -> str | None:
        for language, text in self.warnings.items():
            if language.value == template_language:
                return text
        return None


# ---------------------------------------------------------------------------
# Property resolution
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """Declares how one configuration property is resolved."""

    property_name: str
    """Key in the answer set and the argument bag (e.g. ``templateLanguage``)."""

    flag_name: str
    """Key in the parsed command-line flags (e.g. ``template``)."""

    validator: Validator | None = None


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a single :class:`ResolutionRequest`."""

    prompt: bool
    """Whether the user must be asked for the property."""

    value: Any = None
    """Accepted flag value, or ``None`` when nothing was accepted."""

    warning: str | None = None
    """One-line warning to show the user, if the flag was rejected."""


@dataclass
class ResolutionContext:
    """Per-run state shared by every property resolution.

    Parameters
    ----------
    flags:
        Parsed command-line flags keyed by flag name.  Absent flags are
        either missing or ``None``.
    deprecation_map:
        Property name → versions for which that prompt is deprecated.
        ``None`` disables deprecation gating entirely.
    show_deprecated:
        Ask deprecated prompts anyway (``--deprecated``).
    """

    flags: Mapping[str, Any] = field(default_factory=dict)
    deprecation_map: Mapping[str, tuple[str, ...]] | None = None
    show_deprecated: bool = False
    _args: Answers | None = field(default=None, repr=False)

    def get_args(self) -> Answers:
        """Return the argument bag, creating it on first access only."""
        if self._args is None:
            self._args = {}
        return self._args


# ---------------------------------------------------------------------------
# Final theme description
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ThemeProperties:
    """Fully resolved theme metadata used to render the project."""

    theme_name: str
    theme_id: str
    liferay_version: str
    template_language: str = TemplateLanguage.FREEMARKER.value
    package_version: str = "1.0.0"

    @property
    def theme_dir_name(self) -> str:
        """Directory name for the theme; always ends with ``-theme``."""
        if self.theme_id.endswith("-theme"):
            return self.theme_id
        return f"{self.theme_id}-theme"

    @property
    def liferay_versions(self) -> str:
        """Value of ``liferay-versions`` in the plugin properties (``7.1.0+``)."""
        return f"{self.liferay_version}.0+"
