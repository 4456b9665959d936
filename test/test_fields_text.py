"""
Text and textarea field tests
"""

import pytest

from adminkit.exceptions import ValidationError


def text_field(value=None, **definition):
    from adminkit.fields.text import TextField

    return TextField({"id": "title", "name": "Title", "type": "text", **definition}, value)


def textarea_field(value=None, **definition):
    from adminkit.fields.textarea import TextareaField

    return TextareaField({"id": "notes", "name": "Notes", "type": "textarea", **definition}, value)


# ══════════════════════════════════════════════════════════════════════════════
# 1. TextField
# ══════════════════════════════════════════════════════════════════════════════


class TestTextField:
    def test_render_exact_markup(self):
        field = text_field("Hello", desc="Shown in header", required=True, placeholder="My site")
        assert str(field.render()) == (
            '<input type="text" id="title" name="settings[title]" class="field__input field__input--text"'
            ' aria-describedby="title-description" required aria-required="true" placeholder="My site"'
            ' value="Hello">'
        )

    def test_render_escapes_value(self):
        html = str(text_field('"><script>alert(1)</script>').render())
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_render_disabled(self):
        html = str(text_field("x", disabled=True).render())
        assert " disabled" in html
        assert 'aria-disabled="true"' in html

    def test_render_custom_attributes(self):
        html = str(text_field("x", attributes={"maxlength": 7, "data-role": "color"}).render())
        assert 'maxlength="7"' in html
        assert 'data-role="color"' in html

    def test_input_name_uses_option_name(self):
        from adminkit.fields.text import TextField

        field = TextField({"id": "title"}, option_name="orbitools_settings")
        assert field.input_name == "orbitools_settings[title]"

    def test_sanitize_strips_markup(self):
        assert text_field().sanitize("<b>Bold</b>  title ") == "Bold title"

    def test_required_empty_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            text_field(required=True).validate("")
        assert exc_info.value.message == "The Title field is required."
        assert exc_info.value.field == "title"

    def test_optional_empty_skips_length_checks(self):
        assert text_field(min_length=3).validate("") is None

    def test_min_length(self):
        with pytest.raises(ValidationError) as exc_info:
            text_field(min_length=3).validate("ab")
        assert exc_info.value.message == "The Title field must be at least 3 characters long."

    def test_max_length(self):
        with pytest.raises(ValidationError) as exc_info:
            text_field(max_length=5).validate("abcdef")
        assert exc_info.value.message == "The Title field must be no more than 5 characters long."

    def test_length_counts_characters(self):
        assert text_field(max_length=5).validate("ééééé") is None

    def test_ampersand_is_stored_unchanged(self):
        field = text_field(max_length=11)
        clean = field.sanitize("Tom & Jerry")
        assert clean == "Tom & Jerry"
        assert field.validate(clean) is None

    def test_ampersand_rendered_once_escaped(self):
        assert 'value="Tom &amp; Jerry"' in str(text_field("Tom & Jerry").render())

    def test_comparison_text_kept(self):
        assert text_field().sanitize("1 < 2 > 0") == "1 < 2 > 0"

    def test_valid_value_passes(self):
        assert text_field(required=True, min_length=2, max_length=10).validate("Hello") is None


# ══════════════════════════════════════════════════════════════════════════════
# 2. TextareaField
# ══════════════════════════════════════════════════════════════════════════════


class TestTextareaField:
    def test_render_exact_markup(self):
        assert str(textarea_field("a <b>").render()) == (
            '<textarea id="notes" name="settings[notes]" class="field__input field__input--textarea"'
            ' rows="5" cols="50">a &lt;b&gt;</textarea>'
        )

    def test_render_custom_size(self):
        html = str(textarea_field("", rows=4, cols=80).render())
        assert 'rows="4"' in html
        assert 'cols="80"' in html

    def test_sanitize_keeps_line_breaks(self):
        assert textarea_field().sanitize("first\r\n<i>second</i>") == "first\nsecond"

    def test_sanitize_keeps_plain_characters(self):
        field = textarea_field(max_length=9)
        clean = field.sanitize("R&D\n<b>x</b> < y")
        assert clean == "R&D\nx < y"
        assert field.validate(clean) is None

    def test_sanitize_allow_html(self):
        field = textarea_field(allow_html=True)
        assert field.sanitize("<p>Hi <em>there</em></p><script>x()</script>").startswith("<p>Hi <em>there</em></p>")
        assert "<script" not in field.sanitize("<script>x()</script>")

    def test_required_whitespace_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            textarea_field(required=True).validate("   ")
        assert exc_info.value.message == "The Notes field is required."

    def test_max_length(self):
        with pytest.raises(ValidationError) as exc_info:
            textarea_field(max_length=4).validate("line\nline")
        assert exc_info.value.message == "The Notes field must be no more than 4 characters long."
