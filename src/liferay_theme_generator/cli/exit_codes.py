"""Process exit codes returned by ``liferay-theme``.

Every command returns one of these; :func:`liferay_theme_generator.cli.app.cli`
maps escaped exceptions onto them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Theme generated, upgraded or diagnosed without error."""

GENERAL_ERROR: int = 1
"""A ThemeGeneratorError was reported, or a critical doctor check failed."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
