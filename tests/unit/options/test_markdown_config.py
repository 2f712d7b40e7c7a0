#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_markdown_config.py
"""Unit tests for MarkdownConfig."""

from dataclasses import FrozenInstanceError, fields

import pytest

from hearthmd.constants import DEFAULT_QUOTE_CLASS, ELEMENT_KINDS
from hearthmd.exceptions import InvalidConfigError, ValidationError
from hearthmd.options import MarkdownConfig


@pytest.mark.unit
class TestMarkdownConfigDefaults:
    """Tests for default values."""

    def test_only_quote_class_set_by_default(self):
        """Every class except the quote class is unset."""
        config = MarkdownConfig()
        for kind in ELEMENT_KINDS:
            expected = DEFAULT_QUOTE_CLASS if kind == "quote" else None
            assert config.class_for(kind) == expected

    def test_default_quote_class(self):
        """Quotes are highlighted out of the box."""
        assert MarkdownConfig().quote_class == "text-orange-500"

    def test_one_field_per_kind(self):
        """Each element kind has exactly one field."""
        names = [f.name for f in fields(MarkdownConfig)]
        assert names == [f"{kind}_class" for kind in ELEMENT_KINDS]

    def test_fields_have_help(self):
        """Every field documents itself."""
        for f in fields(MarkdownConfig):
            assert f.metadata.get("help")


@pytest.mark.unit
class TestMarkdownConfigClasses:
    """Tests for class lookups."""

    def test_class_attr_set(self):
        """A configured class becomes a class attribute fragment."""
        assert MarkdownConfig(heading_class="text-2xl").class_attr("heading") == ' class="text-2xl"'

    def test_class_attr_unset(self):
        """An unset class gives an empty fragment."""
        assert MarkdownConfig().class_attr("paragraph") == ""

    def test_empty_string_class_is_emitted(self):
        """An empty string is a configured class, not an absent one."""
        assert MarkdownConfig(td_class="").class_attr("td") == ' class=""'

    def test_multiple_classes_verbatim(self):
        """Space-separated class lists are emitted unchanged."""
        config = MarkdownConfig(link_class="underline text-blue-600")
        assert config.class_attr("link") == ' class="underline text-blue-600"'

    def test_unknown_kind(self):
        """Unknown element kinds are rejected."""
        with pytest.raises(ValueError):
            MarkdownConfig().class_for("span")  # type: ignore[arg-type]


@pytest.mark.unit
class TestMarkdownConfigValidation:
    """Tests for value validation."""

    def test_non_string_rejected(self):
        """Class values must be strings."""
        with pytest.raises(InvalidConfigError) as exc_info:
            MarkdownConfig(heading_class=42)  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "heading_class"
        assert exc_info.value.parameter_value == 42

    def test_double_quote_rejected(self):
        """Class values may not close the attribute early."""
        with pytest.raises(InvalidConfigError) as exc_info:
            MarkdownConfig(quote_class='x" onclick="y')
        assert exc_info.value.parameter_name == "quote_class"

    def test_invalid_config_is_validation_error(self):
        """Config errors belong to the validation family."""
        with pytest.raises(ValidationError):
            MarkdownConfig(hr_class=["a"])  # type: ignore[arg-type]


@pytest.mark.unit
class TestMarkdownConfigImmutability:
    """Tests for frozen behavior and cloning."""

    def test_frozen(self):
        """Configs cannot be mutated."""
        config = MarkdownConfig()
        with pytest.raises(FrozenInstanceError):
            config.heading_class = "x"  # type: ignore[misc]

    def test_create_updated(self):
        """create_updated returns a modified copy."""
        original = MarkdownConfig(heading_class="a")
        updated = original.create_updated(heading_class="b", quote_class=None)

        assert original.heading_class == "a"
        assert original.quote_class == DEFAULT_QUOTE_CLASS
        assert updated.heading_class == "b"
        assert updated.quote_class is None

    def test_create_updated_validates(self):
        """Updated copies are validated too."""
        with pytest.raises(InvalidConfigError):
            MarkdownConfig().create_updated(li_class=1)

    def test_equality_and_hash(self):
        """Equal configs compare and hash equal."""
        assert MarkdownConfig(ul_class="x") == MarkdownConfig(ul_class="x")
        assert hash(MarkdownConfig(ul_class="x")) == hash(MarkdownConfig(ul_class="x"))


@pytest.mark.unit
class TestMarkdownConfigFromMapping:
    """Tests for building configs from plain mappings."""

    def test_field_names(self):
        """Full field names are accepted."""
        config = MarkdownConfig.from_mapping({"heading_class": "h", "quote_class": None})
        assert config.heading_class == "h"
        assert config.quote_class is None

    def test_bare_kinds(self):
        """Bare element kinds are accepted."""
        config = MarkdownConfig.from_mapping({"heading": "h", "td": "cell"})
        assert config.heading_class == "h"
        assert config.td_class == "cell"

    def test_missing_keys_keep_defaults(self):
        """Keys absent from the mapping keep their defaults."""
        assert MarkdownConfig.from_mapping({}) == MarkdownConfig()

    def test_unknown_keys_rejected(self):
        """Unknown keys are reported together."""
        with pytest.raises(InvalidConfigError) as exc_info:
            MarkdownConfig.from_mapping({"heading": "h", "span": "x", "bogus_class": "y"})
        assert "bogus_class" in str(exc_info.value)
        assert "span" in str(exc_info.value)
