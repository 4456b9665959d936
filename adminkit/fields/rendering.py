"""
Field rendering helpers.

Jinja2 environment for the field templates and the attribute serializer
shared by every field type.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=None)
def get_template_environment(template_dir: str | None = None) -> Environment:
    """Return the (cached) Jinja2 environment used to render fields."""
    return Environment(
        loader=FileSystemLoader(template_dir or str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def format_attribute_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_attributes(attributes: Mapping[str, Any]) -> Markup:
    """
    Serialize attributes in insertion order.

    True renders a bare attribute, False and None drop it, anything else
    renders as an escaped ``key="value"`` pair.
    """
    parts: list[str] = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(key)}")
        else:
            parts.append(f' {escape(key)}="{escape(format_attribute_value(value))}"')
    return Markup("".join(parts))
