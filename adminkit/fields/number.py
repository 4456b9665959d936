"""
Number Field

Numeric input. Values are stored as int, or as float when the definition's
step is fractional (contains a decimal point and is not 1).
"""

from __future__ import annotations

import math
import re
from typing import Any

from markupsafe import Markup

from adminkit.fields.base import FieldBase
from adminkit.fields.rendering import format_attribute_value
from adminkit.utils.sanitize import to_text

# Leading numeric prefix, e.g. "12px" -> "12", " -3.5e2 " -> "-3.5e2"
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_NUMERIC = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def is_fractional_step(step: Any) -> bool:
    if step is None:
        return False
    try:
        if float(step) == 1:
            return False
    except (TypeError, ValueError):
        pass
    return "." in str(step)


def as_number(value: Any) -> float | None:
    """Return value as a float if it is numeric (numbers or numeric strings), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str) and _NUMERIC.match(value):
        return float(value)
    return None


class NumberField(FieldBase):
    """Number input with optional min / max / step."""

    field_type = "number"

    def render(self) -> Markup:
        attributes: dict[str, Any] = {"value": to_text(self.value)}

        # Only emit the bounds the definition actually sets
        if self.field.min is not None:
            attributes["min"] = self.field.min
        if self.field.max is not None:
            attributes["max"] = self.field.max
        if self.field.step is not None:
            attributes["step"] = self.field.step

        return self.render_template(
            "input.html",
            input_type="number",
            attributes=self.render_attributes(attributes),
        )

    def sanitize(self, value: Any) -> int | float | str:
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "" or isinstance(value, (list, tuple, set, dict)):
            return ""

        if isinstance(value, (bool, int, float)):
            try:
                number = float(value)
            except OverflowError:
                return 0
        else:
            match = _NUMERIC_PREFIX.match(str(value))
            number = float(match.group(0)) if match else 0.0

        if not math.isfinite(number):
            return 0

        if is_fractional_step(self.field.step):
            return number
        return int(number)

    def validate(self, value: Any) -> None:
        if self.field.required and (value is None or value == ""):
            self.fail(f"The {self.field_name} field is required.")

        if value is None or value == "":
            return

        number = as_number(value)
        if number is None:
            self.fail(f"The {self.field_name} field must be a number.")

        if self.field.min is not None and number < self.field.min:
            self.fail(f"The {self.field_name} field must be at least {format_attribute_value(self.field.min)}.")

        if self.field.max is not None and number > self.field.max:
            self.fail(f"The {self.field_name} field must be no more than {format_attribute_value(self.field.max)}.")
