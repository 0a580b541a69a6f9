"""Allow ``python -m liferay_theme_generator`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m liferay_theme_generator`` behaves identically to the
``liferay-theme`` console script.
"""

from __future__ import annotations

from liferay_theme_generator.cli.app import cli

if __name__ == "__main__":
    cli()
