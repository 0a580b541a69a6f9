"""CLI application entry point and command routing for liferay-theme.

This module is the **sole error boundary** for the entire application.
It catches :class:`~liferay_theme_generator.exceptions.ThemeGeneratorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Commands are dispatched to ``cli.create``, ``cli.upgrade`` and
  ``cli.doctor``; no business logic lives here.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from liferay_theme_generator.cli import exit_codes
from liferay_theme_generator.cli.console import console
from liferay_theme_generator.exceptions import ThemeGeneratorError
from liferay_theme_generator.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_create_parser(subparsers: argparse._SubParsersAction) -> None:
    create = subparsers.add_parser(
        "create",
        help="Generate a new theme project.",
        description="Generate a new Liferay theme. Omitted values are asked for.",
    )
    create.add_argument("-n", "--name", dest="name", help="Theme display name.")
    create.add_argument("-i", "--id", dest="id", help="Theme id (package name).")
    create.add_argument(
        "-l",
        "--liferay-version",
        "--liferayVersion",
        dest="liferayVersion",
        help="Target Liferay version (7.1 or 7.0).",
    )
    create.add_argument(
        "-t",
        "--template",
        dest="template",
        help="Template language (ftl; vm on 7.0).",
    )
    create.add_argument(
        "--deprecated",
        action="store_true",
        help="Also ask questions that are deprecated for the chosen version.",
    )
    create.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to create the theme in (default: current directory).",
    )
    create.add_argument(
        "--batch",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Never prompt; use stored answers and defaults.",
    )


def _add_upgrade_parser(subparsers: argparse._SubParsersAction) -> None:
    upgrade = subparsers.add_parser(
        "upgrade",
        help="Upgrade a 7.1 theme to 7.2.",
        description="Rewrite a 7.1 theme's package.json for Liferay 7.2.",
    )
    upgrade.add_argument(
        "-d",
        "--dir",
        dest="theme_dir",
        type=Path,
        default=Path("."),
        help="Theme root directory (default: current directory).",
    )
    upgrade.add_argument(
        "--font-awesome",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include Font Awesome (asked when omitted).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``liferay-theme create [flags]`` — generate a theme
    * ``liferay-theme upgrade [flags]`` — upgrade a 7.1 theme to 7.2
    * ``liferay-theme doctor``        — environment diagnostics
    * ``liferay-theme --version``
    """
    parser = argparse.ArgumentParser(
        prog="liferay-theme",
        description="Liferay theme generator.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr.")
    parser.add_argument("--debug", action="store_true", help="Log debug details to stderr.")

    subparsers = parser.add_subparsers(dest="command")
    _add_create_parser(subparsers)
    _add_upgrade_parser(subparsers)
    subparsers.add_parser("doctor", help="Check the environment.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_create(args: argparse.Namespace) -> int:
    from liferay_theme_generator.cli.create import run_create
    from liferay_theme_generator.config import load_settings
    from liferay_theme_generator.infra.answer_store import AnswerStore

    settings = load_settings()
    batch_override = args.batch if args.batch is not None else settings.batch_mode
    store = AnswerStore.load(settings.config_file, batch_override=batch_override)
    output_dir = args.output_dir or settings.output_dir

    return run_create(vars(args), store, output_dir)


def _handle_upgrade(args: argparse.Namespace) -> int:
    from liferay_theme_generator.cli.upgrade import run_upgrade

    return run_upgrade(args.theme_dir, args.font_awesome)


def _handle_doctor() -> int:
    from liferay_theme_generator.cli.doctor import run_doctor
    from liferay_theme_generator.config import load_settings

    return run_doctor(load_settings())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the liferay-theme CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from liferay_theme_generator.logging_config import configure_logging

    configure_logging(debug=args.debug, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if args.command == "doctor":
        return _handle_doctor()
    if args.command == "upgrade":
        return _handle_upgrade(args)
    return _handle_create(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ThemeGeneratorError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
