"""
Settings Stores

Persistence for a settings page's value mapping. The admin page only needs
``load()`` and ``save()``; JsonFileSettingsStore keeps the mapping in a JSON
file, InMemorySettingsStore keeps it in a dict (tests, previews).
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from adminkit.exceptions import SettingsStoreError

logger = logging.getLogger(__name__)


@runtime_checkable
class SettingsStore(Protocol):
    """Anything that can load and save a settings mapping."""

    def load(self) -> dict[str, Any]: ...

    def save(self, settings: dict[str, Any]) -> None: ...


class InMemorySettingsStore:
    """Settings kept in process memory."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._settings: dict[str, Any] = copy.deepcopy(initial or {})

    def load(self) -> dict[str, Any]:
        return copy.deepcopy(self._settings)

    def save(self, settings: dict[str, Any]) -> None:
        self._settings = copy.deepcopy(settings)


class JsonFileSettingsStore:
    """
    Settings kept in a JSON file.

    Returns the defaults if the file does not exist or cannot be parsed.
    """

    def __init__(self, path: str | Path, defaults: dict[str, Any] | None = None) -> None:
        self.path = Path(path)
        self.defaults: dict[str, Any] = defaults or {}

    def load(self) -> dict[str, Any]:
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to read settings file %s: %s", self.path, exc)
            else:
                if isinstance(data, dict):
                    return data
                logger.warning("Settings file %s does not hold an object, using defaults", self.path)
        return copy.deepcopy(self.defaults)

    def save(self, settings: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(settings, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as exc:
            raise SettingsStoreError(f"Failed to save settings: {exc}", location=str(self.path)) from exc
