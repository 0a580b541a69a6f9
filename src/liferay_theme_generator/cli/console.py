"""Terminal output for the generator commands.

Every command writes to stderr through the module-level :data:`console`.
Rich is imported on first use only, so ``--help`` and ``--version`` work
without it; markup is stripped when the plain fallback is in use.

Output vocabulary used by ``create`` and ``upgrade``::

    ●  Welcome to the liferay-theme generator     (banner)
    │  package.json — npm manifest                (rail)
    ◇  Creating acme-theme/...                    (step)
"""

from __future__ import annotations

import re
import sys
from typing import Any

from liferay_theme_generator.exceptions import EnvironmentError, ThemeGeneratorError

_MARKUP_RE = re.compile(r"\[/?[a-z ]*\]")


def _rich_console() -> Any:
    """Return a stderr Rich console or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console(stderr=True)


class GeneratorConsole:
    """Rich-backed printer for generator output, plain stderr as fallback."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = _rich_console()
        except EnvironmentError:
            print(*(_MARKUP_RE.sub("", o) if isinstance(o, str) else o for o in objects), file=sys.stderr)
            return
        rich_console.print(*objects)

    def banner(self, message: str) -> None:
        self.print(f"[bold cyan]●[/]  {message}")

    def step(self, message: str) -> None:
        self.print(f"[bold green]◇[/]  {message}")

    def rail(self, message: str = "", detail: str = "") -> None:
        """Continuation line; *detail* is dimmed after *message*."""
        suffix = f" [dim]— {detail}[/]" if detail else ""
        self.print(f"[dim]│[/]  {message}{suffix}".rstrip())

    def warn(self, message: str) -> None:
        self.print(f"[yellow]{message}[/yellow]")

    def error(self, exc: ThemeGeneratorError) -> None:
        self.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            self.print(f"[yellow]Hint:[/yellow] {exc.hint}")


console = GeneratorConsole()
