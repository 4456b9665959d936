"""
Settings Manager

Module-oriented access to the shared settings mapping. Module settings are
stored flat under ``<module_slug>_<key>``; a module is enabled unless
``<module_slug>_enabled`` says otherwise.
"""

from __future__ import annotations

import logging
from typing import Any

from adminkit.settings.store import SettingsStore

logger = logging.getLogger(__name__)


class SettingsManager:
    """Cached reader/writer over a SettingsStore."""

    def __init__(self, store: SettingsStore) -> None:
        self.store = store
        self._cache: dict[str, Any] | None = None

    def get_all_settings(self) -> dict[str, Any]:
        """Return every stored setting, loading from the store once."""
        if self._cache is None:
            self._cache = self.store.load()
        return self._cache

    def clear_cache(self) -> None:
        """Forget the cached mapping, e.g. after the store was written elsewhere."""
        self._cache = None

    def is_module_enabled(self, module_slug: str, default: bool = True) -> bool:
        settings = self.get_all_settings()
        key = f"{module_slug}_enabled"
        if key not in settings:
            return default
        value = settings[key]
        if isinstance(value, str):
            return value.strip() not in ("", "0")
        return bool(value)

    def get_module_setting(self, module_slug: str, setting_key: str, default: Any = None) -> Any:
        return self.get_all_settings().get(f"{module_slug}_{setting_key}", default)

    def update_module_setting(self, module_slug: str, setting_key: str, value: Any) -> None:
        settings = dict(self.get_all_settings())
        settings[f"{module_slug}_{setting_key}"] = value
        self.store.save(settings)
        self._cache = settings

    def update_multiple_settings(self, values: dict[str, Any]) -> None:
        """Merge values into the stored mapping and persist it."""
        settings = {**self.get_all_settings(), **values}
        self.store.save(settings)
        self._cache = settings
        logger.info("Settings updated: %s", sorted(values))

    def get_module_settings_with_defaults(self, module_slug: str, defaults: dict[str, Any]) -> dict[str, Any]:
        """
        Merge a module's defaults with the stored values.

        Default keys may be given with or without the module prefix; the
        result is keyed the same way as defaults.
        """
        current = self.get_all_settings()
        prefix = f"{module_slug}_"
        merged: dict[str, Any] = {}
        for key, default_value in defaults.items():
            bare = key[len(prefix):] if key.startswith(prefix) else key
            merged[key] = current.get(prefix + bare, default_value)
        return merged
