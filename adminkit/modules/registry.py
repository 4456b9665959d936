"""
Module Registry

ModuleRegistry: stores feature modules by slug and wires enabled modules into
a settings page through the page's structure and fields filters.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from adminkit.hooks import (
    HOOK_ADMINKIT_FIELDS,
    HOOK_ADMINKIT_SAVE_FIELDS,
    HOOK_ADMINKIT_STRUCTURE,
    HOOK_POST_SAVE_SETTINGS,
)

if TYPE_CHECKING:
    from adminkit.framework import AdminKit
    from adminkit.modules.base import ModuleBase
    from adminkit.settings.manager import SettingsManager

logger = logging.getLogger(__name__)

MODULES_TAB = "modules"
MODULES_SECTION = "available_modules"


class ModuleRegistry:
    """In-process registry of feature modules."""

    def __init__(self) -> None:
        self._modules: dict[str, ModuleBase] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, module: ModuleBase) -> None:
        self._modules[module.meta.slug] = module
        logger.info("Module registered: %s v%s", module.meta.slug, module.meta.version)

    async def unregister(self, slug: str) -> bool:
        """Remove a module, calling its on_unload(). Returns False if unknown."""
        module = self._modules.pop(slug, None)
        if module is None:
            return False
        await module.on_unload()
        logger.info("Module unregistered: %s", slug)
        return True

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, slug: str) -> ModuleBase | None:
        return self._modules.get(slug)

    def all_modules(self) -> list[ModuleBase]:
        """Return all registered modules in registration order."""
        return list(self._modules.values())

    def is_registered(self, slug: str) -> bool:
        return slug in self._modules

    # ── Page wiring ───────────────────────────────────────────────────────────

    def attach(self, kit: AdminKit, manager: SettingsManager) -> None:
        """
        Contribute module toggles and enabled modules' sections/fields to kit.

        Every module gets a ``<slug>_enabled`` checkbox in the modules tab;
        only enabled modules add their own sections and fields. Saves see the
        fields of every module, so values for a disabled module (or one being
        switched on in the same request) are still sanitized and validated.
        """

        def add_structure(structure: dict[str, Any]) -> dict[str, Any]:
            tab = structure.setdefault(MODULES_TAB, {"title": "Modules", "display_mode": "cards", "sections": {}})
            sections = tab.setdefault("sections", {})
            sections.setdefault(MODULES_SECTION, "Available Modules")
            for module in self.all_modules():
                if self._is_enabled(module, manager):
                    sections.update(module.get_admin_structure())
            return structure

        def add_fields(fields: dict[str, list[Any]]) -> dict[str, list[Any]]:
            tab_fields = fields.setdefault(MODULES_TAB, [])
            for module in self.all_modules():
                tab_fields.append(
                    {
                        "id": f"{module.meta.slug}_enabled",
                        "name": module.meta.name,
                        "desc": module.meta.description,
                        "type": "checkbox",
                        "std": module.enabled_by_default,
                        "section": MODULES_SECTION,
                    }
                )
            for module in self.all_modules():
                if self._is_enabled(module, manager):
                    tab_fields.extend(module.get_field_definitions())
            return fields

        def add_save_fields(definitions: list[Any]) -> list[Any]:
            for module in self.all_modules():
                definitions.extend(module.get_field_definitions())
            return definitions

        kit.hooks.add_filter(kit.hook(HOOK_ADMINKIT_STRUCTURE), add_structure)
        kit.hooks.add_filter(kit.hook(HOOK_ADMINKIT_FIELDS), add_fields)
        kit.hooks.add_filter(kit.hook(HOOK_ADMINKIT_SAVE_FIELDS), add_save_fields)
        kit.hooks.add_action(kit.hook(HOOK_POST_SAVE_SETTINGS), lambda settings: manager.clear_cache())

    @staticmethod
    def _is_enabled(module: ModuleBase, manager: SettingsManager) -> bool:
        return manager.is_module_enabled(module.meta.slug, module.enabled_by_default)
