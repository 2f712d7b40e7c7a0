#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/renderers/__init__.py
"""AST renderers."""

from hearthmd.renderers.base import BaseRenderer, InlineContentMixin
from hearthmd.renderers.html import HtmlRenderer, ast_to_html

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
    "ast_to_html",
]
