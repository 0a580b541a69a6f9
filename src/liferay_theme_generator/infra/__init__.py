"""Infrastructure layer — filesystem, templates and the operating system.

Every raw third-party or OS exception must be caught here and re-raised
as a :class:`~liferay_theme_generator.exceptions.ThemeGeneratorError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from liferay_theme_generator.infra.answer_store import AnswerStore
from liferay_theme_generator.infra.theme_writer import (
    render_files,
    write_deployment_config,
    write_theme,
)
from liferay_theme_generator.infra.tool_detector import ToolStatus, detect_node_toolchain, detect_tool

__all__: list[str] = [
    "AnswerStore",
    "ToolStatus",
    "detect_node_toolchain",
    "detect_tool",
    "render_files",
    "write_deployment_config",
    "write_theme",
]
