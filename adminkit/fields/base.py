"""
Field Base Class

FieldBase: abstract base class every field type subclasses. A field is a
FieldDefinition bound to its current value; it renders itself as HTML,
sanitizes submitted input and validates sanitized values.

Field ids must be unique across a settings page: the id is the HTML id, the
input name (``settings[<id>]``) and the storage key.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from jinja2 import Environment
from markupsafe import Markup

from adminkit.exceptions import ValidationError
from adminkit.fields.definition import FieldDefinition
from adminkit.fields.rendering import get_template_environment, render_attributes
from adminkit.utils.sanitize import sanitize_text_field

if TYPE_CHECKING:
    from adminkit.hooks import HookRegistry


def is_empty(value: Any) -> bool:
    """True for None, empty strings, empty collections and False."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    return False


def is_checked(value: Any) -> bool:
    """Checkbox semantics: empty values, "0" and numeric zero are unchecked."""
    if is_empty(value):
        return False
    if isinstance(value, str):
        return value.strip() != "0"
    if isinstance(value, (int, float)):
        return value != 0
    return True


class FieldBase(ABC):
    """
    Abstract base class for all field types.

    Subclasses set ``field_type`` and implement ``render()``; ``sanitize()``
    and ``validate()`` default to plain-text cleaning and no constraints.
    """

    field_type: ClassVar[str] = ""

    def __init__(
        self,
        definition: FieldDefinition | Mapping[str, Any],
        value: Any = None,
        *,
        option_name: str = "settings",
        hooks: HookRegistry | None = None,
        environment: Environment | None = None,
    ) -> None:
        self.field = FieldDefinition.coerce(definition)
        self.value = value
        self.option_name = option_name
        self.hooks = hooks
        self._environment = environment or get_template_environment()

    # ── Contract ──────────────────────────────────────────────────────────────

    @abstractmethod
    def render(self) -> Markup:
        """Render the control itself (no label, no description)."""
        ...

    def sanitize(self, value: Any) -> Any:
        """Return a storable version of value. Never raises."""
        return sanitize_text_field(value)

    def validate(self, value: Any) -> None:
        """
        Check a sanitized value against the definition.

        Raises:
            ValidationError: describing the first violated constraint.
        """
        return None

    def get_assets(self) -> list[dict[str, Any]]:
        """Static CSS/JS assets the field needs on the page."""
        return []

    # ── Identity ──────────────────────────────────────────────────────────────

    @property
    def field_id(self) -> str:
        return self.field.id

    @property
    def field_name(self) -> str:
        return self.field.name

    @property
    def description(self) -> str:
        return self.field.desc

    @property
    def input_name(self) -> str:
        return f"{self.option_name}[{self.field_id}]"

    def fail(self, message: str) -> None:
        raise ValidationError(message, field=self.field_id or None)

    # ── Markup helpers ────────────────────────────────────────────────────────

    def wrapper_classes(self) -> str:
        """BEM classes for the wrapper element."""
        classes = ["field", f"field--{self.field.type}", *self.field.classes]
        if self.field.required:
            classes.append("field--required")
        if self.field.disabled:
            classes.append("field--disabled")
        if self.has_conditions():
            classes.append("field--conditional")
        return " ".join(c for c in classes if c)

    def input_classes(self) -> str:
        return f"field__input field__input--{self.field.type}"

    def field_attributes(self) -> dict[str, Any]:
        """Common input attributes, including the accessibility ones."""
        attributes: dict[str, Any] = {
            "id": self.field_id,
            "name": self.input_name,
            "class": self.input_classes(),
        }

        if self.description:
            attributes["aria-describedby"] = f"{self.field_id}-description"

        if self.field.required:
            attributes["required"] = True
            attributes["aria-required"] = "true"

        if self.field.disabled:
            attributes["disabled"] = True
            attributes["aria-disabled"] = "true"

        if self.field.placeholder is not None:
            attributes["placeholder"] = self.field.placeholder

        attributes.update(self.field.attributes)
        return attributes

    def render_attributes(self, extra: Mapping[str, Any] | None = None) -> Markup:
        attributes = self.field_attributes()
        if extra:
            attributes.update(extra)
        return render_attributes(attributes)

    def render_template(self, template_name: str, **context: Any) -> Markup:
        template = self._environment.get_template(template_name)
        context.setdefault("field", self.field)
        context.setdefault("field_id", self.field_id)
        context.setdefault("field_name", self.field_name)
        context.setdefault("input_name", self.input_name)
        return Markup(template.render(**context))

    def render_label(self) -> Markup:
        if not self.field_name:
            return Markup("")
        return self.render_template("label.html")

    def render_description(self) -> Markup:
        if not self.description:
            return Markup("")
        return self.render_template("description.html", description=self.description)

    # ── Conditional display ───────────────────────────────────────────────────

    def has_conditions(self) -> bool:
        return bool(self.field.show_if)

    def conditional_data_attributes(self) -> dict[str, str]:
        if not self.has_conditions():
            return {}
        return {"data-show-if": json.dumps(self.field.show_if, separators=(",", ":"))}
