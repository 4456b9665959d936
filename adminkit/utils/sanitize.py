"""
Input Sanitization Utilities

Text, textarea and post-HTML cleaners used by the field types before a
value is stored.
"""

import bleach
import html
from typing import Any, Optional
import re


# Allowed tags for post content (textarea with allow_html, html fields)
POST_CONTENT_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'b', 'i', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'code', 'pre', 'hr', 'ul', 'ol', 'li', 'a', 'img',
    'table', 'thead', 'tbody', 'tr', 'th', 'td', 'div', 'span'
]

# Allowed attributes for post content
POST_CONTENT_ATTRS = {
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'code': ['class'],
    'pre': ['class'],
    'div': ['class'],
    'span': ['class'],
    'table': ['class'],
    'ul': ['class'],
    'li': ['class'],
}

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']


def to_text(value: Any) -> str:
    """
    Coerce a submitted scalar to a string.

    Lists, dicts and None become an empty string, booleans become "1" or "".
    """
    if value is None or isinstance(value, (list, tuple, set, dict)):
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    try:
        return str(value)
    except ValueError:
        # ints past the interpreter's digit limit
        return ""


def strip_all_tags(text: str) -> str:
    """
    Remove every HTML tag and return plain text.

    bleach escapes the characters it leaves behind, so the result is decoded
    again. Decoding can expose new tags (e.g. "&lt;b&gt;"), so this repeats
    until nothing changes.
    """
    while True:
        stripped = html.unescape(bleach.clean(text, tags=[], strip=True))
        if stripped == text:
            return stripped
        text = stripped


def sanitize_text_field(value: Any) -> str:
    """
    Strip all HTML tags, collapse whitespace and trim.

    Args:
        value: The submitted value

    Returns:
        Single-line plain text
    """
    text = to_text(value)
    if not text:
        return ""

    cleaned = strip_all_tags(text)

    # Line breaks, tabs and runs of spaces collapse to one space
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()

    return cleaned


def sanitize_textarea_field(value: Any) -> str:
    """
    Strip all HTML tags but keep line breaks.

    Args:
        value: The submitted value

    Returns:
        Multi-line plain text
    """
    text = to_text(value)
    if not text:
        return ""

    cleaned = strip_all_tags(text).replace('\r\n', '\n').replace('\r', '\n')

    # Collapse spaces and tabs inside each line, keep the lines themselves
    lines = [re.sub(r'[ \t\f\v]+', ' ', line).strip() for line in cleaned.split('\n')]

    return '\n'.join(lines).strip()


def sanitize_post_html(value: Optional[Any]) -> str:
    """
    Sanitize HTML content, keeping tags that are safe in post content.

    Args:
        value: The HTML text to sanitize

    Returns:
        Sanitized HTML string
    """
    text = to_text(value)
    if not text:
        return ""

    return bleach.clean(
        text,
        tags=POST_CONTENT_TAGS,
        attributes=POST_CONTENT_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True
    )


def sanitize_key(value: Any) -> str:
    """Lowercase a key and drop everything but letters, digits, dashes and underscores"""
    return re.sub(r'[^a-z0-9_\-]', '', to_text(value).lower())
