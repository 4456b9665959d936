"""
Field Definition

FieldDefinition: the declarative configuration of one form control, parsed
once from a plain mapping and frozen for the rest of the render/save cycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from adminkit.exceptions import FieldDefinitionError


class FieldDefinition(BaseModel):
    """
    Declarative configuration for a single settings field.

    Attributes:
        id:             Unique key. Used for the HTML id, the input name
                        (``settings[<id>]``) and the storage key.
        type:           Field type tag ("text", "number", "select", ...).
        name:           Display label, also used in error messages.
        desc:           Help text rendered below the control.
        section:        Section key the field belongs to within its tab.
        std:            Default value (html fields: the markup to show).
        options:        Ordered mapping of option value -> label. Keys are
                        always strings; a plain list uses each item as both.
        show_if:        Conditional display rules, see adminkit.fields.conditions.

    Keys the framework does not know are kept as extra attributes.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str = ""
    type: str = "text"
    name: str = ""
    desc: str = ""
    section: str | None = None
    std: Any = None

    required: bool = False
    disabled: bool = False
    placeholder: str | None = None

    # Numeric bounds
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | str | None = None

    # Length bounds
    min_length: int | None = None
    max_length: int | None = None

    # Choices
    options: dict[str, str] | None = None
    multiple: bool = False
    size: int | None = None
    min_selections: int | None = None
    max_selections: int | None = None

    # Textarea
    allow_html: bool = False
    rows: int = 5
    cols: int = 50

    css_class: str | list[str] | None = Field(default=None, alias="class")
    attributes: dict[str, Any] = Field(default_factory=dict)
    show_if: Any = None

    @field_validator("options", mode="before")
    @classmethod
    def _normalize_options(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, Mapping):
            return {str(key): str(label) for key, label in value.items()}
        if isinstance(value, (list, tuple)):
            return {str(item): str(item) for item in value}
        return value

    @field_validator("placeholder", mode="before")
    @classmethod
    def _stringify_placeholder(cls, value: Any) -> Any:
        return None if value is None else str(value)

    @classmethod
    def coerce(cls, definition: FieldDefinition | Mapping[str, Any]) -> FieldDefinition:
        """
        Return definition as a FieldDefinition.

        Raises:
            FieldDefinitionError: if the mapping cannot be parsed.
        """
        if isinstance(definition, cls):
            return definition
        if not isinstance(definition, Mapping):
            raise FieldDefinitionError(f"Field definition must be a mapping, got {type(definition).__name__}")
        try:
            return cls.model_validate(dict(definition))
        except PydanticValidationError as exc:
            raise FieldDefinitionError(
                f"Invalid definition for field '{definition.get('id', '')}': {exc.errors()[0]['msg']}",
                field_id=str(definition.get("id", "")) or None,
            ) from exc

    @property
    def has_options(self) -> bool:
        return self.options is not None

    @property
    def classes(self) -> list[str]:
        """Extra wrapper classes as a list."""
        if not self.css_class:
            return []
        if isinstance(self.css_class, str):
            return self.css_class.split()
        return [c for c in self.css_class if c]
