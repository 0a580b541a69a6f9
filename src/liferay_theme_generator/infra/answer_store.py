"""Infrastructure: persisted default answers.

The store is a JSON document::

    {
      "batchMode": false,
      "answers": {
        "theme": {"themeName": "Acme", "liferayVersion": "7.0"},
        "init": {"deploymentStrategy": "LocalAppServer"}
      }
    }

A missing file is an empty store.  An unreadable or malformed file raises
:class:`ConfigurationError`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from liferay_theme_generator.exceptions import ConfigurationError


class AnswerStore:
    """Read-only view over the stored answers file.

    Parameters
    ----------
    data:
        Parsed document; see the module docstring for its shape.
    batch_override:
        When not ``None``, replaces the document's ``batchMode`` flag.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        batch_override: bool | None = None,
        path: Path | None = None,
    ) -> None:
        self._data: Mapping[str, Any] = data or {}
        self._batch_override = batch_override
        self.path: Path | None = path

    @classmethod
    def load(cls, path: Path, *, batch_override: bool | None = None) -> AnswerStore:
        if not path.exists():
            logger.debug("No answer store at {}", path)
            return cls(batch_override=batch_override, path=path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(
                f"Cannot read stored answers from {path}: {exc}",
                hint="Fix or delete the file, or point LIFERAY_THEME_CONFIG_FILE elsewhere.",
            ) from exc

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Stored answers in {path} must be a JSON object.",
            )

        logger.debug("Loaded answer store from {}", path)
        return cls(data, batch_override=batch_override, path=path)

    def batch_mode(self) -> bool:
        if self._batch_override is not None:
            return self._batch_override
        return bool(self._data.get("batchMode", False))

    def answers(self, namespace: str) -> dict[str, Any]:
        section = self._data.get("answers", {})
        if not isinstance(section, Mapping):
            return {}
        stored = section.get(namespace, {})
        return dict(stored) if isinstance(stored, Mapping) else {}

    def get_default_answer(self, namespace: str, name: str, default: Any = None) -> Any:
        """Stored answer for *name* in *namespace*, else *default*."""
        return self.answers(namespace).get(name, default)
