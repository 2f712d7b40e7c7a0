#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy."""

import pytest

from hearthmd.exceptions import (
    HearthMdError,
    InvalidConfigError,
    ParseError,
    ParsingError,
    RenderError,
    RenderingError,
    ValidationError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for exception relationships and attributes."""

    def test_aliases(self):
        """Test the short aliases."""
        assert ParseError is ParsingError
        assert RenderError is HearthMdError

    @pytest.mark.parametrize("exc_type", [ValidationError, InvalidConfigError, ParsingError, RenderingError])
    def test_all_derive_from_base(self, exc_type):
        """Test every error is catchable as the base error."""
        assert issubclass(exc_type, HearthMdError)

    def test_parsing_error_attributes(self):
        """Test ParsingError keeps its stage and cause."""
        cause = ValueError("bad")
        error = ParsingError("failed", "markdown", cause)

        assert str(error) == "failed"
        assert error.message == "failed"
        assert error.parsing_stage == "markdown"
        assert error.original_error is cause

    def test_invalid_config_attributes(self):
        """Test InvalidConfigError keeps parameter details."""
        error = InvalidConfigError("nope", parameter_name="hr_class", parameter_value=1, config_path="x.toml")

        assert isinstance(error, ValidationError)
        assert error.parameter_name == "hr_class"
        assert error.parameter_value == 1
        assert error.config_path == "x.toml"

    def test_rendering_error_defaults(self):
        """Test RenderingError defaults."""
        error = RenderingError("write failed")
        assert error.output_path is None
        assert error.original_error is None
