"""
Pytest configuration and fixtures for AdminKit tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from adminkit.fields.registry import FieldRegistry  # noqa: E402
from adminkit.framework import AdminKit  # noqa: E402
from adminkit.hooks import HookRegistry  # noqa: E402
from adminkit.settings.store import InMemorySettingsStore  # noqa: E402


@pytest.fixture
def hooks():
    return HookRegistry()


@pytest.fixture
def field_registry(hooks):
    return FieldRegistry(hooks)


@pytest.fixture
def store():
    return InMemorySettingsStore()


@pytest.fixture
def page(store, hooks):
    """A small settings page with one tab and a handful of fields."""
    kit = AdminKit("demo", store, hooks)
    kit.add_tab("general", "General", sections={"main": "Main", "advanced": "Advanced"})
    kit.add_fields(
        "general",
        [
            {"id": "title", "name": "Title", "type": "text", "required": True, "section": "main"},
            {"id": "count", "name": "Count", "type": "number", "min": 1, "max": 10, "std": 3, "section": "main"},
            {"id": "mode", "name": "Mode", "type": "select", "options": {"a": "A", "b": "B"}, "section": "main"},
            {"id": "agree", "name": "Agree", "type": "checkbox", "section": "advanced"},
            {
                "id": "b_only",
                "name": "B Only",
                "type": "text",
                "required": True,
                "section": "advanced",
                "show_if": {"field": "mode", "operator": "===", "value": "b"},
            },
        ],
    )
    return kit
