"""
Option-backed value handling shared by select, checkbox-group and radio-group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from adminkit.fields.base import FieldBase, is_empty
from adminkit.utils.sanitize import sanitize_text_field, to_text


def match_option(value: Any, options: Mapping[str, str]) -> str | None:
    """Return the option key value refers to, or None."""
    if isinstance(value, (list, tuple, set, dict)):
        return None
    key = to_text(value)
    if key in options:
        return key
    key = sanitize_text_field(key)
    return key if key in options else None


def sanitize_choice(value: Any, options: Mapping[str, str]) -> str:
    """Return the option key value refers to, else ""."""
    key = match_option(value, options)
    return "" if key is None else key


def sanitize_choices(value: Any, options: Mapping[str, str]) -> list[str]:
    """Keep the allowed option keys of a submitted list, in order, without duplicates."""
    if not isinstance(value, (list, tuple)):
        return []

    sanitized: list[str] = []
    for item in value:
        key = match_option(item, options)
        if key is not None and key not in sanitized:
            sanitized.append(key)
    return sanitized


def validate_choices(field: FieldBase, value: Any) -> None:
    """Validate a multi-valued selection (multi-select and checkbox groups)."""
    values = list(value) if isinstance(value, (list, tuple)) else []
    definition = field.field

    if definition.required and not values:
        field.fail(f"At least one option must be selected for {field.field_name}.")

    if definition.min_selections is not None and len(values) < definition.min_selections:
        field.fail(f"At least {definition.min_selections} option(s) must be selected for {field.field_name}.")

    if definition.max_selections is not None and len(values) > definition.max_selections:
        field.fail(f"No more than {definition.max_selections} option(s) can be selected for {field.field_name}.")

    options = definition.options or {}
    for item in values:
        if to_text(item) not in options:
            field.fail(f"Invalid option selected for {field.field_name} field.")


def selected_keys(value: Any) -> list[str]:
    if isinstance(value, (list, tuple, set)):
        return [to_text(item) for item in value]
    if is_empty(value):
        return []
    return [to_text(value)]
