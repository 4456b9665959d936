"""
Text Field

Single-line text input.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase, is_empty
from adminkit.utils.sanitize import sanitize_text_field, to_text


class TextField(FieldBase):
    """Text input with optional length bounds."""

    field_type = "text"

    def render(self) -> Markup:
        return self.render_template(
            "input.html",
            input_type="text",
            attributes=self.render_attributes({"value": to_text(self.value)}),
        )

    def sanitize(self, value: Any) -> str:
        return sanitize_text_field(value)

    def validate(self, value: Any) -> None:
        if self.field.required and is_empty(value):
            self.fail(f"The {self.field_name} field is required.")

        # Nothing else to check on an optional empty value
        if is_empty(value):
            return

        check_length(self, to_text(value))


def check_length(field: FieldBase, text: str) -> None:
    """Apply min_length / max_length to text (shared with textarea)."""
    min_length = field.field.min_length
    if min_length is not None and len(text) < min_length:
        field.fail(f"The {field.field_name} field must be at least {min_length} characters long.")

    max_length = field.field.max_length
    if max_length is not None and len(text) > max_length:
        field.fail(f"The {field.field_name} field must be no more than {max_length} characters long.")
