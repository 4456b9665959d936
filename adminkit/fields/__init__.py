"""
AdminKit field framework.

Public API:
    FieldDefinition  - declarative field configuration
    FieldBase        - abstract base class for field types
    FieldRegistry    - type tag -> field class registry
    evaluate_conditions - show_if evaluation
"""

from .base import FieldBase
from .checkbox import CheckboxField, CheckboxGroupField
from .conditions import evaluate_conditions
from .definition import FieldDefinition
from .html import HtmlField
from .number import NumberField
from .radio import RadioField, RadioGroupField
from .registry import FieldRegistry
from .select import SelectField
from .text import TextField
from .textarea import TextareaField

__all__ = [
    "CheckboxField",
    "CheckboxGroupField",
    "FieldBase",
    "FieldDefinition",
    "FieldRegistry",
    "HtmlField",
    "NumberField",
    "RadioField",
    "RadioGroupField",
    "SelectField",
    "TextField",
    "TextareaField",
    "evaluate_conditions",
]
