"""
Checkbox Fields

CheckboxField: a single on/off checkbox stored as "1" or "".
CheckboxGroupField: one checkbox per option, stored as a list of option keys.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase, is_checked
from adminkit.fields.choices import sanitize_choices, selected_keys, validate_choices


class CheckboxField(FieldBase):
    field_type = "checkbox"

    def render(self) -> Markup:
        checked = is_checked(self.value)
        return self.render_template(
            "single-checkbox.html",
            checked=checked,
            attributes=self.render_attributes({"value": "1", "checked": checked}),
        )

    def sanitize(self, value: Any) -> str:
        return "1" if is_checked(value) else ""

    def validate(self, value: Any) -> None:
        if self.field.required and not is_checked(value):
            self.fail(f"The {self.field_name} field must be checked.")


class CheckboxGroupField(FieldBase):
    field_type = "checkbox_group"

    def input_classes(self) -> str:
        return "field__input field__input--checkbox"

    def render(self) -> Markup:
        return self.render_template(
            "multi-checkbox.html",
            options=self.field.options or {},
            values=selected_keys(self.value if isinstance(self.value, (list, tuple, set)) else []),
        )

    def sanitize(self, value: Any) -> list[str]:
        return sanitize_choices(value, self.field.options or {})

    def validate(self, value: Any) -> None:
        validate_choices(self, value)
