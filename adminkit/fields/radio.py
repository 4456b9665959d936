"""
Radio Fields

RadioField: a lone radio button stored as "1" or "".
RadioGroupField: a radio set restricted to the definition's options.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase, is_checked, is_empty
from adminkit.fields.choices import sanitize_choice
from adminkit.utils.sanitize import to_text


class RadioField(FieldBase):
    field_type = "radio"

    def render(self) -> Markup:
        checked = is_checked(self.value)
        return self.render_template(
            "single-radio.html",
            checked=checked,
            attributes=self.render_attributes({"value": "1", "checked": checked}),
        )

    def sanitize(self, value: Any) -> str:
        return "1" if is_checked(value) else ""

    def validate(self, value: Any) -> None:
        if self.field.required and not is_checked(value):
            self.fail(f"The {self.field_name} field must be selected.")


class RadioGroupField(FieldBase):
    field_type = "radio_group"

    def input_classes(self) -> str:
        return "field__input field__input--radio"

    def render(self) -> Markup:
        return self.render_template(
            "multi-radio.html",
            options=self.field.options or {},
            value=to_text(self.value),
        )

    def sanitize(self, value: Any) -> str:
        return sanitize_choice(value, self.field.options or {})

    def validate(self, value: Any) -> None:
        if self.field.required and is_empty(value):
            self.fail(f"An option must be selected for {self.field_name}.")

        if not is_empty(value) and to_text(value) not in (self.field.options or {}):
            self.fail(f"Invalid option selected for {self.field_name} field.")
