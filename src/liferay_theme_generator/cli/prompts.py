"""Interactive prompts for the CLI layer.

This module is responsible for:

* Asking single questions via questionary (text, select, confirm).
* Walking the theme :data:`THEME_REQUESTS` in order, asking only where
  the resolver's ``when`` predicate says so.
* Answering from stored defaults instead of asking in batch mode.

No file output and no business rules live here; resolution decisions
come from :mod:`liferay_theme_generator.core.resolver`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from loguru import logger

from liferay_theme_generator.cli.console import console
from liferay_theme_generator.core.models import Answers, ResolutionContext, ResolutionRequest
from liferay_theme_generator.core.naming import default_theme_id
from liferay_theme_generator.core.resolver import THEME_REQUESTS, ArgumentResolver
from liferay_theme_generator.core.versions import GENERATOR_VERSIONS, template_choices
from liferay_theme_generator.exceptions import EnvironmentError, PromptCancelledError
from liferay_theme_generator.infra.answer_store import AnswerStore

THEME_NAMESPACE: str = "theme"
DEFAULT_THEME_NAME: str = "My Liferay Theme"

_CANCEL_HINT: str = "Answer the question and press Enter, or pass the value as a flag."


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Single questions
# ---------------------------------------------------------------------------

def _checked(answer: Any, message: str) -> Any:
    # questionary returns None on Ctrl+C / Esc
    if answer is None:
        raise PromptCancelledError(f"No answer given to: {message}", hint=_CANCEL_HINT)
    return answer


def ask_text(message: str, default: str = "") -> str:
    questionary = _import_questionary()
    return _checked(questionary.text(message, default=default).ask(), message)


def ask_select(message: str, choices: Sequence[tuple[str, str]], default: str | None = None) -> str:
    """Arrow-key selection; *choices* are ``(title, value)`` pairs."""
    questionary = _import_questionary()
    options = [questionary.Choice(title=title, value=value) for title, value in choices]
    return _checked(
        questionary.select(
            message,
            choices=options,
            default=default,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask(),
        message,
    )


def ask_confirm(message: str, default: bool = True) -> bool:
    questionary = _import_questionary()
    return bool(_checked(questionary.confirm(message, default=default).ask(), message))


# ---------------------------------------------------------------------------
# Theme questions
# ---------------------------------------------------------------------------

def _theme_name(answers: Answers, args: Answers) -> str | None:
    return answers.get("themeName") or args.get("themeName")


def _template_choices(answers: Answers) -> list[tuple[str, str]]:
    return [(language.label, language.value) for language in template_choices(answers["liferayVersion"])]


def _default_for(property_name: str, answers: Answers, args: Answers, store: AnswerStore) -> str:
    """Stored answer when there is a usable one, else the built-in default."""
    stored = store.get_default_answer(THEME_NAMESPACE, property_name)

    if property_name == "themeName":
        return stored or DEFAULT_THEME_NAME
    if property_name == "themeId":
        return stored or default_theme_id(_theme_name(answers, args))
    if property_name == "liferayVersion":
        return stored if stored in GENERATOR_VERSIONS else GENERATOR_VERSIONS[0]
    if property_name == "templateLanguage":
        values = [value for _, value in _template_choices(answers)]
        return stored if stored in values else values[0]
    return stored or ""


def _ask(request: ResolutionRequest, default: str, answers: Answers) -> str:
    name = request.property_name
    if name == "themeName":
        return ask_text("What would you like to call your theme?", default)
    if name == "themeId":
        return ask_text("Would you like to use this as the themeId?", default)
    if name == "liferayVersion":
        return ask_select(
            "Which version of Liferay is this theme for?",
            [(version, version) for version in GENERATOR_VERSIONS],
            default,
        )
    if name == "templateLanguage":
        return ask_select(
            "What template language would you like this theme to use?",
            _template_choices(answers),
            default,
        )
    return ask_text(name, default)


def collect_theme_answers(
    context: ResolutionContext,
    store: AnswerStore,
    requests: Sequence[ResolutionRequest] = THEME_REQUESTS,
    on_warning: Callable[[str], None] | None = None,
) -> Answers:
    """Resolve *requests* in order, prompting where nothing was supplied.

    Returns the interactive answers only; accepted flag values stay in
    ``context.get_args()`` and are merged by the caller.

    Raises
    ------
    PromptCancelledError
        If the user dismisses a prompt.
    """
    resolver = ArgumentResolver(context, on_warning=on_warning or console.warn)
    answers: Answers = {}
    args = resolver.get_args()
    batch = store.batch_mode()

    for request in requests:
        if not resolver.when(request)(answers):
            continue

        default = _default_for(request.property_name, answers, args, store)
        if batch:
            logger.info("Batch mode: {} = {!r}", request.property_name, default)
            answers[request.property_name] = default
        else:
            answers[request.property_name] = _ask(request, default, answers)

    return answers
