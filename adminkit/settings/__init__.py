from .manager import SettingsManager
from .store import InMemorySettingsStore, JsonFileSettingsStore, SettingsStore

__all__ = ["InMemorySettingsStore", "JsonFileSettingsStore", "SettingsManager", "SettingsStore"]
