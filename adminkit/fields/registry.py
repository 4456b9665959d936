"""
Field Registry

FieldRegistry: maps type tags to field classes and builds field instances
from definitions. Core types are registered on construction; modules can add
their own from a ``fields.register`` action.

A ``checkbox`` or ``radio`` definition that carries options is dispatched to
the group variant of the type.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from adminkit.exceptions import UnknownFieldTypeError, ValidationError
from adminkit.fields.base import FieldBase
from adminkit.fields.checkbox import CheckboxField, CheckboxGroupField
from adminkit.fields.definition import FieldDefinition
from adminkit.fields.html import HtmlField
from adminkit.fields.number import NumberField
from adminkit.fields.radio import RadioField, RadioGroupField
from adminkit.fields.select import SelectField
from adminkit.fields.text import TextField
from adminkit.fields.textarea import TextareaField
from adminkit.hooks import HOOK_REGISTER_FIELDS
from adminkit.utils.sanitize import sanitize_text_field

if TYPE_CHECKING:
    from jinja2 import Environment

    from adminkit.hooks import HookRegistry

logger = logging.getLogger(__name__)

CORE_FIELD_TYPES: tuple[type[FieldBase], ...] = (
    TextField,
    TextareaField,
    NumberField,
    SelectField,
    CheckboxField,
    CheckboxGroupField,
    RadioField,
    RadioGroupField,
    HtmlField,
)

# Types whose definition switches to a group variant when options are present
_GROUPED_TYPES = {"checkbox": "checkbox_group", "radio": "radio_group"}


class FieldRegistry:
    """
    Registry of field types.

    Stores field classes by type tag and creates bound field instances.
    """

    def __init__(
        self,
        hooks: HookRegistry | None = None,
        option_name: str = "settings",
        environment: Environment | None = None,
    ) -> None:
        self._field_types: dict[str, type[FieldBase]] = {}
        self.hooks = hooks
        self.option_name = option_name
        self.environment = environment

        for field_class in CORE_FIELD_TYPES:
            self.register_field_type(field_class.field_type, field_class)

        if hooks is not None:
            hooks.do_action(HOOK_REGISTER_FIELDS, self)

    # ── Registration ──────────────────────────────────────────────────────────

    def register_field_type(self, field_type: str, field_class: type[FieldBase]) -> None:
        """Register (or replace) the class handling field_type."""
        if not (isinstance(field_class, type) and issubclass(field_class, FieldBase)):
            raise TypeError(f"{field_class!r} is not a FieldBase subclass")
        self._field_types[field_type] = field_class
        logger.debug("Field type registered: %s -> %s", field_type, field_class.__name__)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def is_field_type_registered(self, field_type: str) -> bool:
        return field_type in self._field_types

    def get_field_types(self) -> dict[str, type[FieldBase]]:
        """Return a copy of the type tag -> class mapping."""
        return dict(self._field_types)

    def resolve_type(self, definition: FieldDefinition) -> str:
        grouped = _GROUPED_TYPES.get(definition.type)
        if grouped and definition.has_options and grouped in self._field_types:
            return grouped
        return definition.type

    # ── Instances ─────────────────────────────────────────────────────────────

    def create_field(self, definition: FieldDefinition | Mapping[str, Any], value: Any = None) -> FieldBase:
        """
        Create a field instance bound to value.

        Raises:
            UnknownFieldTypeError: if the definition's type is not registered.
            FieldDefinitionError:  if the definition cannot be parsed.
        """
        definition = FieldDefinition.coerce(definition)
        field_type = self.resolve_type(definition)
        field_class = self._field_types.get(field_type)
        if field_class is None:
            raise UnknownFieldTypeError(definition.type, definition.id or None)

        return field_class(
            definition,
            value,
            option_name=self.option_name,
            hooks=self.hooks,
            environment=self.environment,
        )

    def sanitize_field_value(self, definition: FieldDefinition | Mapping[str, Any], value: Any) -> Any:
        """Sanitize value with the definition's field type (plain text for unknown types)."""
        try:
            field = self.create_field(definition, value)
        except UnknownFieldTypeError:
            return sanitize_text_field(value)
        return field.sanitize(value)

    def validate_field_value(self, definition: FieldDefinition | Mapping[str, Any], value: Any) -> None:
        """Validate value with the definition's field type (unknown types always pass)."""
        try:
            field = self.create_field(definition, value)
        except UnknownFieldTypeError:
            return
        field.validate(value)

    def process(
        self, definition: FieldDefinition | Mapping[str, Any], raw_value: Any
    ) -> tuple[Any, ValidationError | None]:
        """
        Sanitize then validate a raw submitted value.

        Returns:
            (clean value, None) on success, (clean value, ValidationError) otherwise.
        """
        clean = self.sanitize_field_value(definition, raw_value)
        try:
            self.validate_field_value(definition, clean)
        except ValidationError as exc:
            return clean, exc
        return clean, None
