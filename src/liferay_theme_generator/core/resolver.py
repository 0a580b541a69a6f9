"""Argument resolution — decides, per property, whether to prompt.

Three sources feed a theme's properties: command-line flags, stored
answers and interactive answers.  :func:`resolve` looks at one
:class:`ResolutionRequest` and returns an explicit :class:`Resolution`;
accepted flag values accumulate in the run's argument bag, which
:func:`mix_args` finally lays over the interactive answers.

Guarantees
----------
* No ``print()`` — rejected flags are reported through
  :attr:`Resolution.warning`, the CLI decides how to show them.
* The only mutations are writes to the argument bag (and removal of a
  rejected property from it) and to the ``liferayVersion`` answer, so
  resolving twice gives the same state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from liferay_theme_generator.core.models import (
    Answers,
    Resolution,
    ResolutionContext,
    ResolutionRequest,
)
from liferay_theme_generator.core.validators import (
    is_defined,
    is_liferay_version,
    is_string,
    is_template_language,
)

VERSION_PROPERTY: str = "liferayVersion"
"""Answer key of the target version; flag of the same name."""

PROMPT_DEPRECATION_MAP: Mapping[str, tuple[str, ...]] = {
    "templateLanguage": ("7.0",),
}
"""Prompts hidden for the listed versions unless ``--deprecated`` is given."""


THEME_REQUESTS: tuple[ResolutionRequest, ...] = (
    ResolutionRequest("themeName", "name", is_string),
    ResolutionRequest("themeId", "id", is_string),
    ResolutionRequest(VERSION_PROPERTY, VERSION_PROPERTY, is_liferay_version),
    ResolutionRequest("templateLanguage", "template", is_template_language),
)
"""Theme prompts in the order they are asked."""


def invalid_flag_warning(flag_name: str) -> str:
    return f"Warning: Invalid value set for --{flag_name}"


def _sync_version(context: ResolutionContext, answers: Answers) -> Any:
    """Copy a ``--liferayVersion`` flag into the answers and the bag.

    Later properties (template language) can only be validated once the
    version is known, so the flag is recorded before any of them resolve.
    """
    args = context.get_args()
    flag_version = context.flags.get(VERSION_PROPERTY)
    version = answers.get(VERSION_PROPERTY) or flag_version

    if flag_version and (not answers.get(VERSION_PROPERTY) or not args.get(VERSION_PROPERTY)):
        answers[VERSION_PROPERTY] = version
        args[VERSION_PROPERTY] = version

    return version


def resolve(
    request: ResolutionRequest,
    context: ResolutionContext,
    answers: Answers,
) -> Resolution:
    """Resolve *request* against the flags and the in-progress *answers*.

    Parameters
    ----------
    request:
        Property, flag and optional validator to resolve.
    context:
        Per-run flags, deprecation policy and argument bag.
    answers:
        Answers collected so far.  ``liferayVersion`` may be filled in
        from the flags.

    Returns
    -------
    Resolution
        ``prompt=False`` with the accepted value when the flag was usable,
        otherwise ``prompt`` per the deprecation policy.
    """
    value = context.flags.get(request.flag_name)
    version = _sync_version(context, answers)
    warning: str | None = None

    if request.validator is not None and is_defined(value) and not request.validator(value, answers):
        logger.debug("Rejected --{}={!r} for {}", request.flag_name, value, request.property_name)
        value = None
        warning = invalid_flag_warning(request.flag_name)
        # a rejected --liferayVersion may already have been copied in above
        context.get_args().pop(request.property_name, None)

    if is_defined(value):
        context.get_args()[request.property_name] = value
        logger.debug("Using --{} for {}", request.flag_name, request.property_name)
        return Resolution(prompt=False, value=value, warning=warning)

    prompt = True
    if context.deprecation_map is not None:
        deprecated_versions = context.deprecation_map.get(request.property_name)
        prompt = not deprecated_versions
        if context.show_deprecated and deprecated_versions and version in deprecated_versions:
            prompt = True

    logger.debug("Prompt for {}: {}", request.property_name, prompt)
    return Resolution(prompt=prompt, warning=warning)


class ArgumentResolver:
    """Builds "should-prompt" predicates bound to one run's context.

    Suited to prompt libraries that take a ``when(answers)`` hook; each
    rejected flag is reported through *on_warning*.
    """

    def __init__(
        self,
        context: ResolutionContext,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self._context: ResolutionContext = context
        self._on_warning = on_warning

    @property
    def context(self) -> ResolutionContext:
        return self._context

    def get_args(self) -> Answers:
        return self._context.get_args()

    def when(self, request: ResolutionRequest) -> Callable[[Answers], bool]:
        """Return ``when(answers) -> bool`` for *request*."""

        def should_prompt(answers: Answers) -> bool:
            resolution = resolve(request, self._context, answers)
            if resolution.warning and self._on_warning is not None:
                self._on_warning(resolution.warning)
            return resolution.prompt

        return should_prompt


def mix_args(props: Answers, args: Mapping[str, Any]) -> Answers:
    """Overlay the argument bag on the answers; flag values win."""
    props.update(args)
    return props
