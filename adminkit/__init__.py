"""
AdminKit: declarative settings fields with rendering, sanitization and
validation, plus the settings pages and modules built on them.
"""

from .exceptions import AdminKitError, ValidationError
from .fields import FieldBase, FieldDefinition, FieldRegistry
from .framework import AdminKit
from .hooks import HookRegistry
from .settings import InMemorySettingsStore, JsonFileSettingsStore, SettingsManager

__all__ = [
    "AdminKit",
    "AdminKitError",
    "FieldBase",
    "FieldDefinition",
    "FieldRegistry",
    "HookRegistry",
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "SettingsManager",
    "ValidationError",
]
