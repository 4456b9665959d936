"""
Field registry tests
"""

import pytest
from markupsafe import Markup

# ══════════════════════════════════════════════════════════════════════════════
# 1. Registration
# ══════════════════════════════════════════════════════════════════════════════


class TestFieldRegistration:
    def test_core_types_registered(self, field_registry):
        for field_type in ("text", "textarea", "number", "select", "checkbox", "radio", "html"):
            assert field_registry.is_field_type_registered(field_type)

    def test_get_field_types_is_a_copy(self, field_registry):
        types = field_registry.get_field_types()
        types.pop("text")
        assert field_registry.is_field_type_registered("text")

    def test_register_custom_type(self, field_registry):
        from adminkit.fields.base import FieldBase

        class ColorField(FieldBase):
            field_type = "color"

            def render(self):
                return Markup("<input type=\"color\">")

        field_registry.register_field_type("color", ColorField)
        field = field_registry.create_field({"id": "c", "type": "color"})
        assert isinstance(field, ColorField)

    def test_register_rejects_non_field_class(self, field_registry):
        with pytest.raises(TypeError):
            field_registry.register_field_type("bad", dict)

    def test_register_hook_receives_registry(self, hooks):
        from adminkit.fields.registry import FieldRegistry
        from adminkit.hooks import HOOK_REGISTER_FIELDS

        seen = []
        hooks.add_action(HOOK_REGISTER_FIELDS, seen.append)
        registry = FieldRegistry(hooks)
        assert seen == [registry]


# ══════════════════════════════════════════════════════════════════════════════
# 2. Dispatch
# ══════════════════════════════════════════════════════════════════════════════


class TestFieldDispatch:
    def test_checkbox_without_options_is_single(self, field_registry):
        from adminkit.fields.checkbox import CheckboxField

        assert type(field_registry.create_field({"id": "x", "type": "checkbox"})) is CheckboxField

    def test_unknown_type_raises(self, field_registry):
        from adminkit.exceptions import UnknownFieldTypeError

        with pytest.raises(UnknownFieldTypeError) as exc_info:
            field_registry.create_field({"id": "x", "type": "colorpicker"})
        assert exc_info.value.message == "Unknown field type: colorpicker"

    def test_unknown_type_sanitizes_as_text(self, field_registry):
        assert field_registry.sanitize_field_value({"id": "x", "type": "mystery"}, " <b>v</b> ") == "v"

    def test_unknown_type_validates(self, field_registry):
        assert field_registry.validate_field_value({"id": "x", "type": "mystery", "required": True}, "") is None

    def test_process_success(self, field_registry):
        clean, error = field_registry.process({"id": "n", "type": "number", "min": 1}, "5")
        assert clean == 5
        assert error is None

    def test_process_failure(self, field_registry):
        from adminkit.exceptions import ValidationError

        clean, error = field_registry.process({"id": "n", "name": "N", "type": "number", "min": 10}, "5")
        assert clean == 5
        assert isinstance(error, ValidationError)
        assert error.message == "The N field must be at least 10."

    def test_sanitize_never_raises(self, field_registry):
        weird = [None, "", "abc", 0, 1.5, True, [], ["a"], {"k": "v"}, object(), 10**400, -(10**400), "Tom & Jerry"]
        definitions = [
            {"id": "t", "type": "text"},
            {"id": "ta", "type": "textarea"},
            {"id": "n", "type": "number", "step": "0.5"},
            {"id": "s", "type": "select", "options": ["a"]},
            {"id": "sm", "type": "select", "options": ["a"], "multiple": True},
            {"id": "c", "type": "checkbox"},
            {"id": "cg", "type": "checkbox", "options": ["a"]},
            {"id": "r", "type": "radio"},
            {"id": "rg", "type": "radio", "options": ["a"]},
            {"id": "h", "type": "html"},
        ]
        for definition in definitions:
            for value in weird:
                field_registry.sanitize_field_value(definition, value)

    def test_sanitize_is_idempotent(self, field_registry):
        cases = [
            ({"id": "t", "type": "text"}, "  <i>x</i>  y "),
            ({"id": "ta", "type": "textarea"}, "a\r\n <b>b</b>"),
            ({"id": "n", "type": "number", "step": "0.1"}, "3.25abc"),
            ({"id": "s", "type": "select", "options": ["a", "b"]}, "b"),
            ({"id": "cg", "type": "checkbox", "options": ["a", "b"]}, ["b", "a", "b"]),
            ({"id": "c", "type": "checkbox"}, "on"),
        ]
        for definition, raw in cases:
            once = field_registry.sanitize_field_value(definition, raw)
            assert field_registry.sanitize_field_value(definition, once) == once
