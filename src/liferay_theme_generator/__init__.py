"""liferay-theme-generator — interactive Liferay theme scaffolding.

Resolves theme properties from flags, stored answers and prompts, then
renders a ready-to-build theme project.
"""

from liferay_theme_generator.version import __version__

__all__: list[str] = ["__version__"]
