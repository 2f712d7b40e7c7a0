#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/parsers/__init__.py
"""Markdown parsing into the hearthmd AST."""

from hearthmd.parsers.markdown import DEFAULT_EXTENSIONS, MarkdownTreeBuilder, markdown_to_ast

__all__ = [
    "DEFAULT_EXTENSIONS",
    "MarkdownTreeBuilder",
    "markdown_to_ast",
]
