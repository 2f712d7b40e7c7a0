#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the hearthmd rendering pipeline.

Options are frozen dataclasses: build one, share it freely, and derive
variants with ``create_updated``.
"""

from __future__ import annotations

from hearthmd.options.base import CloneFrozenMixin
from hearthmd.options.config import load_config_file
from hearthmd.options.markdown import MarkdownConfig

__all__ = [
    "CloneFrozenMixin",
    "MarkdownConfig",
    "load_config_file",
]
