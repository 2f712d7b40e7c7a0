"""HTML-related utility helpers."""

from __future__ import annotations

import re
from html import escape as _html_escape
from html import unescape as _html_unescape
from html.entities import html5 as _HTML5_ENTITIES

# Named, decimal and hexadecimal references; the trailing semicolon is required
_CHARACTER_REFERENCE = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Exactly five characters are replaced: ``&`` -> ``&amp;``, ``<`` -> ``&lt;``,
    ``>`` -> ``&gt;``, ``"`` -> ``&quot;`` and ``'`` -> ``&#x27;``.
    """
    return _html_escape(text, quote=True)


def _decode_reference(match: re.Match[str]) -> str:
    reference = match.group(0)
    if reference[1] == "#":
        return _html_unescape(reference)
    # Exact lookup; html.unescape would also expand legacy prefixes like "&ampx;"
    return _HTML5_ENTITIES.get(reference[1:], reference)


def decode_character_references(text: str) -> str:
    """Decode character references written in markdown source.

    Only complete references (``&amp;``, ``&#39;``, ``&#x27;``) are decoded.
    A bare ``&`` or an unknown name such as ``&bogus;`` is left as-is, so
    the result can go through ``escape_html`` without being escaped twice.

    Examples
    --------
        >>> decode_character_references("Tom &amp; Jerry &copy AT&T")
        'Tom & Jerry &copy AT&T'
        >>> decode_character_references("it&#39;s &bogus;")
        "it's &bogus;"

    """
    if "&" not in text:
        return text
    return _CHARACTER_REFERENCE.sub(_decode_reference, text)


def class_attribute(css_class: str | None) -> str:
    """Build a ``class`` attribute fragment, or nothing when unset.

    The value is emitted verbatim. Class names come from developer-controlled
    configuration and are validated by ``MarkdownConfig``, not escaped here.
    """
    if css_class is None:
        return ""
    return f' class="{css_class}"'
