"""
Application factory.

Builds the FastAPI app that serves the AdminKit settings pages: one page
(``settings.page_slug``) backed by a JSON file, with the built-in modules
attached.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adminkit.config import Settings, settings as default_settings
from adminkit.exception_handlers import register_exception_handlers
from adminkit.framework import AdminKit
from adminkit.hooks import HookRegistry
from adminkit.logging_config import configure_logging
from adminkit.modules.loader import initialize_modules
from adminkit.modules.registry import ModuleRegistry
from adminkit.routes import settings as settings_routes
from adminkit.settings import JsonFileSettingsStore, SettingsManager, SettingsStore

logger = logging.getLogger(__name__)


def build_page(config: Settings, store: SettingsStore, hooks: HookRegistry) -> AdminKit:
    """Create the main settings page with its general tab."""
    page = AdminKit(
        config.page_slug,
        store,
        hooks,
        option_name=config.option_name,
        title=config.app_name,
        description="Settings for the editor suite and its modules.",
    )
    page.add_tab("general", "General", sections={"general": "General"})
    page.add_fields(
        "general",
        [
            {
                "id": "general_site_label",
                "name": "Site Label",
                "desc": "Name shown in the editor toolbar.",
                "type": "text",
                "std": "",
                "max_length": 60,
                "section": "general",
            },
            {
                "id": "general_editor_notes",
                "name": "Editor Notes",
                "desc": "Notes shown to editors on the dashboard.",
                "type": "textarea",
                "rows": 4,
                "section": "general",
            },
        ],
    )
    return page


def create_app(config: Settings | None = None, store: SettingsStore | None = None) -> FastAPI:
    """Create the FastAPI application."""
    config = config or default_settings
    configure_logging(config.log_level)

    store = store or JsonFileSettingsStore(config.settings_file)
    hooks = HookRegistry()
    manager = SettingsManager(store)
    modules = ModuleRegistry()
    page = build_page(config, store, hooks)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await initialize_modules(modules, manager)
        modules.attach(page, manager)
        yield
        for module in modules.all_modules():
            await modules.unregister(module.meta.slug)

    app = FastAPI(
        title=config.app_name,
        description="Declarative settings pages with sanitized, validated fields",
        debug=config.debug,
        version=config.app_version,
        lifespan=lifespan,
    )
    app.state.adminkit_pages = {page.slug: page}
    app.state.hooks = hooks
    app.state.modules = modules
    app.state.settings_manager = manager

    register_exception_handlers(app)
    app.include_router(settings_routes.router)

    if config.debug:
        logger.info("Running %s in debug mode", config.app_name)

    return app
