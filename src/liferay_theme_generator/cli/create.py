"""``liferay-theme create`` — the theme generator pipeline.

Flow:
1. Build the run's :class:`ResolutionContext` from the parsed flags.
2. Collect answers for whatever the flags left open.
3. Merge flags over answers and derive :class:`ThemeProperties`.
4. Print at most one version warning.
5. Render the project (plus ``liferay-theme.json`` in batch mode).
"""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from liferay_theme_generator.cli import exit_codes
from liferay_theme_generator.cli.console import console
from liferay_theme_generator.cli.prompts import collect_theme_answers
from liferay_theme_generator.core.deployment import build_deployment_answers
from liferay_theme_generator.core.models import Answers, ResolutionContext, TemplateLanguage, ThemeProperties
from liferay_theme_generator.core.resolver import PROMPT_DEPRECATION_MAP, mix_args
from liferay_theme_generator.core.versions import select_warning
from liferay_theme_generator.exceptions import TemplateRenderError
from liferay_theme_generator.infra.answer_store import AnswerStore
from liferay_theme_generator.infra.theme_writer import write_deployment_config, write_theme
from liferay_theme_generator.version import __version__

_FILE_DESCRIPTIONS: dict[str, str] = {
    "package.json": "npm manifest and theme settings",
    "gulpfile.js": "build tasks",
    "src/WEB-INF/liferay-look-and-feel.xml": "theme descriptor",
    "src/WEB-INF/liferay-plugin-package.properties": "plugin metadata",
    "src/css/_custom.scss": "your styles",
    "liferay-theme.json": "deployment settings",
}


class ThemeGenerator:
    """One generator run: owns the resolution context and its argument bag."""

    def __init__(self, flags: Mapping[str, Any], store: AnswerStore, output_dir: Path) -> None:
        self.context = ResolutionContext(
            flags=flags,
            deprecation_map=PROMPT_DEPRECATION_MAP,
            show_deprecated=bool(flags.get("deprecated")),
        )
        self.store = store
        self.output_dir = output_dir

    def get_args(self) -> Answers:
        return self.context.get_args()

    def resolve_properties(self) -> ThemeProperties:
        answers = collect_theme_answers(self.context, self.store)
        props = mix_args(answers, self.get_args())
        logger.debug("Resolved properties: {}", props)

        warning = select_warning(props)
        if warning:
            console.warn(warning)

        return ThemeProperties(
            theme_name=props["themeName"],
            theme_id=props["themeId"],
            liferay_version=props["liferayVersion"],
            template_language=props.get("templateLanguage") or TemplateLanguage.FREEMARKER.value,
        )

    def write(self, theme: ThemeProperties) -> tuple[Path, list[str]]:
        theme_dir, created = write_theme(theme, self.output_dir)
        if self.store.batch_mode():
            answers = build_deployment_answers(theme_dir.resolve(), self.store.get_default_answer)
            try:
                write_deployment_config(theme_dir, answers)
            except TemplateRenderError:
                shutil.rmtree(theme_dir, ignore_errors=True)
                raise
            created.append("liferay-theme.json")
        return theme_dir, created

    def run(self) -> int:
        console.print()
        console.banner(f"Welcome to the liferay-theme generator v{__version__}")
        console.rail()

        theme = self.resolve_properties()

        console.step(f"Creating {theme.theme_dir_name}/...")
        theme_dir, created = self.write(theme)
        logger.info("Theme written to {}", theme_dir)

        for name in created:
            console.rail(name, _FILE_DESCRIPTIONS.get(name, ""))

        console.rail()
        console.banner(f"Done! cd {theme_dir} && npm install && gulp init")
        console.print()
        return exit_codes.SUCCESS


def run_create(flags: Mapping[str, Any], store: AnswerStore, output_dir: Path) -> int:
    return ThemeGenerator(flags, store, output_dir).run()
