"""``liferay-theme doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the environment can build the generated themes.  Python is
critical; node and npm are only needed after generation and are
reported as warnings.
"""

from __future__ import annotations

import platform
import sys

from liferay_theme_generator.cli import exit_codes
from liferay_theme_generator.cli.console import console
from liferay_theme_generator.config import GeneratorSettings
from liferay_theme_generator.infra.tool_detector import ToolStatus, detect_node_toolchain
from liferay_theme_generator.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _generator_version_check() -> Check:
    return "liferay-theme", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(status: ToolStatus) -> Check:
    if status.found:
        return status.name, str(status.path) if status.path else "found", "[green]OK[/green]"
    return status.name, "not found", "[yellow]WARN[/yellow]"


def _config_check(settings: GeneratorSettings) -> Check:
    path = settings.config_file
    value = str(path) if path.exists() else f"{path} (not created)"
    return "answers", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nliferay-theme doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(checks: list[Check]) -> None:
    from rich.table import Table

    table = Table(
        title="liferay-theme doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=14)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: GeneratorSettings) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    tools = detect_node_toolchain()
    checks = [
        _generator_version_check(),
        _python_version_check(),
        *(_tool_check(tool) for tool in tools),
        _config_check(settings),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        _print_rich_table(checks)
    except ModuleNotFoundError:
        _print_plain_table(checks)

    missing = [tool for tool in tools if not tool.found]
    if missing:
        console.print(f"[yellow]{', '.join(t.name for t in missing)} not found.[/yellow]")
        console.print("Generated themes need Node.js; install using one of:\n")
        for cmd in missing[0].install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
