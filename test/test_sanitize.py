"""
Tests for the input sanitization utilities
"""

from adminkit.utils.sanitize import (
    sanitize_key,
    sanitize_post_html,
    sanitize_text_field,
    sanitize_textarea_field,
    to_text,
)


class TestToText:
    def test_none_and_collections_are_empty(self):
        assert to_text(None) == ""
        assert to_text([]) == ""
        assert to_text(["a"]) == ""
        assert to_text({"a": 1}) == ""

    def test_booleans(self):
        assert to_text(True) == "1"
        assert to_text(False) == ""

    def test_numbers(self):
        assert to_text(5) == "5"
        assert to_text(10**400).startswith("1000")
        assert to_text(2.5) == "2.5"


class TestSanitizeTextField:
    def test_strips_script_tags(self):
        clean = sanitize_text_field("<script>alert(1)</script>Hello World")
        assert "<script>" not in clean
        assert "Hello World" in clean

    def test_strips_formatting_tags(self):
        assert sanitize_text_field("<b>Bold</b> text") == "Bold text"

    def test_collapses_whitespace(self):
        assert sanitize_text_field("  one \n\t two   three ") == "one two three"

    def test_non_text_input(self):
        assert sanitize_text_field(None) == ""
        assert sanitize_text_field(["x"]) == ""
        assert sanitize_text_field(42) == "42"

    def test_does_not_entity_encode(self):
        assert sanitize_text_field("Tom & Jerry") == "Tom & Jerry"
        assert sanitize_text_field("a < b") == "a < b"

    def test_encoded_tags_do_not_survive(self):
        assert sanitize_text_field("&lt;b&gt;bold&lt;/b&gt;") == "bold"

    def test_idempotent(self):
        for raw in ("  <i>Hi</i>   there ", "Tom &amp; Jerry", "&lt;i&gt;x", "1 < 2 & 3 > 0"):
            once = sanitize_text_field(raw)
            assert sanitize_text_field(once) == once


class TestSanitizeTextareaField:
    def test_keeps_line_breaks(self):
        assert sanitize_textarea_field("line one\n<b>line</b> two") == "line one\nline two"

    def test_normalizes_carriage_returns_and_spaces(self):
        assert sanitize_textarea_field("a  \t b\r\nc") == "a b\nc"

    def test_empty(self):
        assert sanitize_textarea_field("") == ""
        assert sanitize_textarea_field(None) == ""


class TestSanitizePostHtml:
    def test_keeps_allowed_tags(self):
        html = "<p>Hello <strong>world</strong></p>"
        assert sanitize_post_html(html) == html

    def test_removes_script(self):
        clean = sanitize_post_html("<p>Hi</p><script>alert(1)</script>")
        assert "<script" not in clean
        assert "<p>Hi</p>" in clean

    def test_removes_event_handlers(self):
        clean = sanitize_post_html('<p onclick="steal()">Hi</p>')
        assert "onclick" not in clean

    def test_rejects_javascript_links(self):
        clean = sanitize_post_html('<a href="javascript:alert(1)">x</a>')
        assert "javascript:" not in clean


class TestSanitizeKey:
    def test_lowercases_and_filters(self):
        assert sanitize_key("General Tab!") == "generaltab"
        assert sanitize_key("layout_guides-2") == "layout_guides-2"

    def test_none(self):
        assert sanitize_key(None) == ""
