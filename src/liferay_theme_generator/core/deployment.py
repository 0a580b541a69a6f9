"""Deployment answers written for themes generated in batch mode.

Interactive runs leave deployment setup to ``gulp init``; batch runs
cannot prompt, so the answers are derived from the stored ``init``
namespace with path-based defaults.
"""

from __future__ import annotations

import os.path
import posixpath
from collections.abc import Callable
from pathlib import Path
from typing import Any

INIT_NAMESPACE: str = "init"
DOCKER_STRATEGY: str = "DockerContainer"

DefaultAnswer = Callable[[str, str, Any], Any]
"""``(namespace, name, default) -> value`` lookup into stored answers."""


def build_deployment_answers(theme_dir: Path, get_default_answer: DefaultAnswer) -> dict[str, Any]:
    """Deployment answers for the theme in *theme_dir*.

    Docker deployments address the container filesystem, so their plugin
    path is always POSIX-joined.
    """
    answers: dict[str, Any] = {
        "deployed": False,
        "pluginName": theme_dir.name,
    }

    answers["deploymentStrategy"] = get_default_answer(
        INIT_NAMESPACE, "deploymentStrategy", "LocalAppServer"
    )
    answers["appServerPath"] = get_default_answer(
        INIT_NAMESPACE, "appServerPath", os.path.join(str(theme_dir.parent), "tomcat")
    )
    answers["deployPath"] = get_default_answer(
        INIT_NAMESPACE, "deployPath", os.path.join(answers["appServerPath"], "..", "deploy")
    )
    answers["url"] = get_default_answer(INIT_NAMESPACE, "url", "http://localhost:8080")

    if answers["deploymentStrategy"] == DOCKER_STRATEGY:
        answers["dockerContainerName"] = get_default_answer(
            INIT_NAMESPACE, "dockerContainerName", "liferay_portal_1"
        )
        answers["appServerPathPlugin"] = posixpath.join(
            answers["appServerPath"], "webapps", answers["pluginName"]
        )
    else:
        answers["appServerPathPlugin"] = os.path.join(
            answers["appServerPath"], "webapps", answers["pluginName"]
        )

    return answers
