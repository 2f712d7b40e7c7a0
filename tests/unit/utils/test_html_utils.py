#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_html_utils.py
"""Unit tests for HTML escaping, reference decoding and class attribute helpers."""

import pytest

from hearthmd.utils import class_attribute, decode_character_references, escape_html


@pytest.mark.unit
class TestEscapeHtml:
    """Tests for escape_html."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("&", "&amp;"),
            ("<", "&lt;"),
            (">", "&gt;"),
            ('"', "&quot;"),
            ("'", "&#x27;"),
        ],
    )
    def test_five_characters(self, text, expected):
        """Test each escaped character."""
        assert escape_html(text) == expected

    def test_ampersand_escaped_first(self):
        """Test existing entities are escaped again, not preserved."""
        assert escape_html("&lt;") == "&amp;lt;"

    def test_other_characters_untouched(self):
        """Test nothing else is rewritten."""
        text = "café / \\ ` * _ # é 日本"
        assert escape_html(text) == text

    def test_empty(self):
        """Test the empty string."""
        assert escape_html("") == ""


@pytest.mark.unit
class TestClassAttribute:
    """Tests for class_attribute."""

    def test_none(self):
        """Test an unset class gives nothing."""
        assert class_attribute(None) == ""

    def test_value(self):
        """Test a class gives a leading-space attribute."""
        assert class_attribute("text-orange-500") == ' class="text-orange-500"'

    def test_empty_string(self):
        """Test an empty string still emits the attribute."""
        assert class_attribute("") == ' class=""'


@pytest.mark.unit
class TestDecodeCharacterReferences:
    """Tests for decode_character_references."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Tom &amp; Jerry", "Tom & Jerry"),
            ("&copy; 2025", "© 2025"),
            ("it&#39;s", "it's"),
            ("it&#x27;s", "it's"),
            ("&lt;b&gt;", "<b>"),
            ("&quot;hi&quot;", '"hi"'),
        ],
    )
    def test_complete_references(self, text, expected):
        """Test named and numeric references are decoded."""
        assert decode_character_references(text) == expected

    @pytest.mark.parametrize("text", ["AT&T", "a & b", "&copy 2025", "&bogus;", "&ampx;", "&#;", "&"])
    def test_incomplete_or_unknown_left_alone(self, text):
        """Test text that is not a complete known reference is unchanged."""
        assert decode_character_references(text) == text

    def test_escape_after_decode_is_single(self):
        """Test decoding then escaping escapes each character once."""
        assert escape_html(decode_character_references("Tom &amp; Jerry")) == "Tom &amp; Jerry"
