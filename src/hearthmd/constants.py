#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the hearthmd library.

This module centralizes the hardcoded values used across hearthmd so the
quote sentinel, the default styling and the parser extension set are all
discoverable in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Quote Sentinel - Markup carrying quote spans through the parser
3. Rendering Defaults - Default CSS classes
4. Parser Defaults - Markdown extensions and frontmatter delimiters
5. Config Files - Recognised configuration file formats
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

# Element kinds that accept a configurable CSS class
ElementKind = Literal[
    "heading",
    "paragraph",
    "italic",
    "strong",
    "link",
    "blockquote",
    "code",
    "pre",
    "ul",
    "ol",
    "li",
    "table",
    "th",
    "td",
    "hr",
    "quote",
]

ELEMENT_KINDS: tuple[ElementKind, ...] = (
    "heading",
    "paragraph",
    "italic",
    "strong",
    "link",
    "blockquote",
    "code",
    "pre",
    "ul",
    "ol",
    "li",
    "table",
    "th",
    "td",
    "hr",
    "quote",
)

FrontmatterFormat = Literal["yaml", "toml"]

# =============================================================================
# Quote Sentinel
# =============================================================================

QUOTE_SENTINEL_TAG = "hearth-quote"
QUOTE_OPEN_TAG = f"<{QUOTE_SENTINEL_TAG}>"
QUOTE_CLOSE_TAG = f"</{QUOTE_SENTINEL_TAG}>"

QUOTE_CHAR = '"'
QUOTE_ESCAPE_CHAR = "\\"
QUOTE_STOP_CHARS = ("\n", "\r")

BACKTICK = "`"
MIN_FENCE_WIDTH = 3

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_QUOTE_CLASS = "text-orange-500"
ERROR_MESSAGE_PREFIX = "Error parsing markdown"

# =============================================================================
# Parser Defaults
# =============================================================================

# mistune plugin names
DEFAULT_MARKDOWN_EXTENSIONS: tuple[str, ...] = ("table", "strikethrough", "task_lists")

FRONTMATTER_DELIMITERS: dict[str, FrontmatterFormat] = {
    "---": "yaml",
    "+++": "toml",
}

# =============================================================================
# Config Files
# =============================================================================

CONFIG_FILE_EXTENSIONS = (".toml", ".yaml", ".yml", ".json")
PYPROJECT_TOOL_SECTION = "hearthmd"
