"""
Module Base Classes

ModuleMeta: declarative metadata for a feature module (slug, version, defaults).
ModuleBase: abstract base class all feature modules must subclass.

A module contributes admin sections and field definitions to a settings
page; its stored values live under ``<slug>_<key>`` in the page's mapping.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ModuleMeta:
    """
    Declarative metadata describing a module.

    Attributes:
        slug:        Machine-readable slug, e.g. "layout_guides".
        name:        Human-readable name shown in the admin UI.
        version:     Semver string, e.g. "1.0.0".
        description: Short description shown next to the module toggle.
        author:      Module author (defaults to "OrbiTools").
        category:    Grouping used by the admin UI.
        defaults:    Default values keyed by full setting key.
    """

    slug: str
    name: str
    version: str
    description: str
    author: str = "OrbiTools"
    category: str = "general"
    defaults: dict[str, Any] = field(default_factory=dict)


class ModuleBase(ABC):
    """
    Abstract base class for feature modules.

    Subclasses must implement the `meta` property. Lifecycle methods and the
    admin contributions default to no-ops.
    """

    def __init__(self) -> None:
        self.settings: dict[str, Any] = {}

    @property
    @abstractmethod
    def meta(self) -> ModuleMeta:
        """Return the module's metadata."""
        ...

    @property
    def enabled_by_default(self) -> bool:
        return bool(self.meta.defaults.get(f"{self.meta.slug}_enabled", True))

    async def on_load(self, settings: dict[str, Any]) -> None:
        """
        Called once at startup with the module's settings merged over its defaults.
        """
        self.settings = settings

    async def on_unload(self) -> None:  # noqa: B027
        """Called when the module is removed from the registry."""

    def get_admin_structure(self) -> dict[str, Any]:
        """Sections this module adds to the modules tab, keyed by section key."""
        return {}

    def get_field_definitions(self) -> list[dict[str, Any]]:
        """Field definitions for this module's sections."""
        return []
