"""
Feature modules.

Public API:
    ModuleMeta      - module metadata dataclass
    ModuleBase      - abstract base class for all modules
    ModuleRegistry  - registry + settings page wiring
"""

from .base import ModuleBase, ModuleMeta
from .registry import ModuleRegistry

__all__ = ["ModuleBase", "ModuleMeta", "ModuleRegistry"]
