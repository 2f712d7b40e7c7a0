#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Loading MarkdownConfig from configuration files.

Supports JSON, TOML and YAML files, plus the ``[tool.hearthmd]`` table of a
``pyproject.toml``. Keys are either config field names (``heading_class``)
or bare element kinds (``heading``).
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict

import yaml

from hearthmd.constants import CONFIG_FILE_EXTENSIONS, PYPROJECT_TOOL_SECTION
from hearthmd.exceptions import InvalidConfigError
from hearthmd.options.markdown import MarkdownConfig

logger = logging.getLogger(__name__)


def _load_pyproject_section(config_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.hearthmd]`` table from a pyproject.toml file.

    A pyproject without the table yields an empty dict, i.e. the default config.
    """
    config = _load_toml_config(config_path)
    section = config.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise InvalidConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {config_path} must be a table, got {type(section).__name__}",
            config_path=str(config_path),
        )
    return section


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise InvalidConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    # An empty YAML file decodes to None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_file(config_path: Path | str) -> MarkdownConfig:
    """Load a MarkdownConfig from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    MarkdownConfig
        Config built from the file; fields absent from the file keep their defaults

    Raises
    ------
    InvalidConfigError
        If the file is missing, has an unsupported extension, cannot be
        decoded, or contains unknown keys or invalid values

    Examples
    --------
    >>> config = load_config_file("hearthmd.toml")
    >>> config.heading_class
    'text-2xl'

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise InvalidConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        data = _load_pyproject_section(config_path)
    elif ext == ".toml":
        data = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        data = _load_yaml_config(config_path)
    elif ext == ".json":
        data = _load_json_config(config_path)
    else:
        raise InvalidConfigError(
            f"Unsupported config file format: {ext or filename}. Use one of {', '.join(CONFIG_FILE_EXTENSIONS)}",
            config_path=str(config_path),
        )

    logger.debug("Loaded markdown config from %s: %s", config_path, sorted(data))

    try:
        return MarkdownConfig.from_mapping(data)
    except InvalidConfigError as e:
        e.config_path = str(config_path)
        raise
