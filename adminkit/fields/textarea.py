"""
Textarea Field

Multi-line text. With ``allow_html`` the value keeps the tags allowed in post
content; otherwise all markup is stripped and line breaks are preserved.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase, is_empty
from adminkit.fields.text import check_length
from adminkit.utils.sanitize import sanitize_post_html, sanitize_textarea_field, to_text


class TextareaField(FieldBase):
    field_type = "textarea"

    def render(self) -> Markup:
        return self.render_template(
            "textarea.html",
            attributes=self.render_attributes({"rows": self.field.rows, "cols": self.field.cols}),
            value=to_text(self.value),
        )

    def sanitize(self, value: Any) -> str:
        if self.field.allow_html:
            return sanitize_post_html(value)
        return sanitize_textarea_field(value)

    def validate(self, value: Any) -> None:
        text = to_text(value)

        # Whitespace-only input does not satisfy required
        if self.field.required and not text.strip():
            self.fail(f"The {self.field_name} field is required.")

        if is_empty(value):
            return

        check_length(self, text)
