#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_config_files.py
"""Unit tests for loading MarkdownConfig from configuration files."""

import json

import pytest

from hearthmd.exceptions import InvalidConfigError
from hearthmd.options import MarkdownConfig, load_config_file


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / "hearthmd.toml"
        path.write_text('heading_class = "text-2xl"\nquote = "dialogue"\n', encoding="utf-8")

        config = load_config_file(path)
        assert config.heading_class == "text-2xl"
        assert config.quote_class == "dialogue"

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "hearthmd.yaml"
        path.write_text("paragraph: mb-4\nquote_class: null\n", encoding="utf-8")

        config = load_config_file(path)
        assert config.paragraph_class == "mb-4"
        assert config.quote_class is None

    def test_yml_extension(self, tmp_path):
        """Test the .yml extension."""
        path = tmp_path / "hearthmd.yml"
        path.write_text("hr: my-8\n", encoding="utf-8")
        assert load_config_file(path).hr_class == "my-8"

    def test_empty_yaml(self, tmp_path):
        """Test an empty YAML file gives the default config."""
        path = tmp_path / "hearthmd.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == MarkdownConfig()

    def test_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "hearthmd.json"
        path.write_text(json.dumps({"link_class": "underline", "ol": "list-decimal"}), encoding="utf-8")

        config = load_config_file(str(path))
        assert config.link_class == "underline"
        assert config.ol_class == "list-decimal"

    def test_pyproject(self, tmp_path):
        """Test loading the [tool.hearthmd] table of a pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n\n[tool.hearthmd]\ncode = "font-mono"\n', encoding="utf-8")
        assert load_config_file(path).code_class == "font-mono"

    def test_pyproject_without_section(self, tmp_path):
        """Test a pyproject.toml without the table gives the default config."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n', encoding="utf-8")
        assert load_config_file(path) == MarkdownConfig()

    def test_pyproject_section_not_table(self, tmp_path):
        """Test a non-table [tool] entry is rejected."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool]\nhearthmd = "oops"\n', encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config_file(path)

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported."""
        path = tmp_path / "absent.toml"
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.config_path == str(path)

    def test_unsupported_extension(self, tmp_path):
        """Test unsupported formats are rejected."""
        path = tmp_path / "hearthmd.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError, match="Unsupported config file format"):
            load_config_file(path)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON is reported with the decoder error."""
        path = tmp_path / "hearthmd.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config_file(path)
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_json_not_object(self, tmp_path):
        """Test a JSON array is rejected."""
        path = tmp_path / "hearthmd.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config_file(path)

    def test_invalid_toml(self, tmp_path):
        """Test malformed TOML is reported."""
        path = tmp_path / "hearthmd.toml"
        path.write_text("heading = \n", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config_file(path)

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML is reported."""
        path = tmp_path / "hearthmd.yaml"
        path.write_text("heading: [unclosed\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config_file(path)

    def test_yaml_not_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "hearthmd.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config_file(path)

    def test_unknown_key_carries_path(self, tmp_path):
        """Test errors from unknown keys name the file."""
        path = tmp_path / "hearthmd.toml"
        path.write_text('span = "x"\n', encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.config_path == str(path)

    def test_invalid_value_carries_path(self, tmp_path):
        """Test errors from bad values name the file."""
        path = tmp_path / "hearthmd.toml"
        path.write_text("heading = 3\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.config_path == str(path)
        assert exc_info.value.parameter_name == "heading_class"
