"""
HTML Field

Static markup shown on the settings page. It never stores anything: the
sanitized value is always "" and validation always passes.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase
from adminkit.hooks import HOOK_HTML_FIELD_CONTENT
from adminkit.utils.sanitize import sanitize_post_html


class HtmlField(FieldBase):
    field_type = "html"

    def render(self) -> Markup:
        content = self.field.std if self.field.std is not None else ""
        if self.hooks is not None:
            content = self.hooks.apply_filters(HOOK_HTML_FIELD_CONTENT, content, self.field)
        return self.render_template("html.html", content=Markup(sanitize_post_html(content)))

    def sanitize(self, value: Any) -> str:
        return ""

    def validate(self, value: Any) -> None:
        return None
