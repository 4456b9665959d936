"""
Select Field

Dropdown restricted to the definition's options. With ``multiple`` the value
is a list of option keys.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase, is_empty
from adminkit.fields.choices import sanitize_choice, sanitize_choices, selected_keys, validate_choices
from adminkit.utils.sanitize import sanitize_text_field, to_text


class SelectField(FieldBase):
    field_type = "select"

    def render(self) -> Markup:
        if self.field.options is None:
            return self.render_template("error.html", message="Select field requires options array.")

        extra: dict[str, Any] = {}
        if self.field.multiple:
            extra["multiple"] = True
            if self.field.size is None:
                extra["size"] = min(len(self.field.options), 8)
        if self.field.size is not None:
            extra["size"] = self.field.size

        selected = selected_keys(self.value) if self.field.multiple else selected_keys(to_text(self.value))

        return self.render_template(
            "select.html",
            attributes=self.render_attributes(extra),
            options=self.field.options,
            selected=selected,
            # The empty placeholder option only makes sense for single selects
            placeholder=None if self.field.multiple else self.field.placeholder,
        )

    def field_attributes(self) -> dict[str, Any]:
        attributes = super().field_attributes()
        # Placeholder is rendered as the first option instead
        attributes.pop("placeholder", None)
        return attributes

    def sanitize(self, value: Any) -> Any:
        if self.field.multiple:
            return sanitize_choices(value, self.field.options or {})
        if self.field.options is not None:
            return sanitize_choice(value, self.field.options)
        return sanitize_text_field(value)

    def validate(self, value: Any) -> None:
        if self.field.multiple:
            validate_choices(self, value)
            return

        if self.field.required and is_empty(value):
            self.fail(f"The {self.field_name} field is required.")

        if not is_empty(value) and self.field.options is not None:
            if to_text(value) not in self.field.options:
                self.fail(f"Invalid value selected for {self.field_name} field.")
