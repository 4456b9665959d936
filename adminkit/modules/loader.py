"""
Module Loader

Initialises the built-in feature modules at application startup: each module
receives its stored settings merged over its defaults, then is registered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adminkit.modules.registry import ModuleRegistry
    from adminkit.settings.manager import SettingsManager

logger = logging.getLogger(__name__)


async def initialize_modules(registry: ModuleRegistry, manager: SettingsManager) -> None:
    """
    Load and register all built-in modules.

    Deferred imports keep the module classes out of adminkit.modules import time.
    """
    from adminkit.modules.analytics import AnalyticsModule
    from adminkit.modules.layout_guides import LayoutGuidesModule

    for module_class in [LayoutGuidesModule, AnalyticsModule]:
        module = module_class()
        settings = manager.get_module_settings_with_defaults(module.meta.slug, module.meta.defaults)
        await module.on_load(settings)
        registry.register(module)

    logger.info("Module initialisation complete: %d modules loaded", len(registry.all_modules()))
