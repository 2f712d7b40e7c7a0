#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/utils/__init__.py
"""Utility modules for the hearthmd package."""

from hearthmd.utils.html_utils import class_attribute, decode_character_references, escape_html
from hearthmd.utils.io_utils import write_content

__all__ = [
    "class_attribute",
    "decode_character_references",
    "escape_html",
    "write_content",
]
