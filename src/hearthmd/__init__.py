"""hearthmd - markdown to styled HTML with "smart quote" highlighting.

hearthmd renders author-written markdown into a compact HTML fragment. Each
element kind can carry a CSS class, and double-quoted dialogue outside code
is wrapped in a styled ``<span>``, so that

    She said "come in" and smiled.

renders as

    <p>She said <span class="text-orange-500">&quot;come in&quot;</span> and smiled.</p>

The pipeline has four stages, each usable on its own:

- ``tag_quotes`` marks quote spans in the markdown source
- ``MarkdownTreeBuilder`` parses the source into an AST (mistune)
- ``HtmlRenderer`` turns the AST into HTML
- ``unwrap_quotes`` replaces the quote markers with ``<span>`` elements

Examples
--------
Render with custom classes:

    >>> from hearthmd import MarkdownConfig, render_document
    >>> config = MarkdownConfig(heading_class="text-2xl", quote_class="dialogue")
    >>> render_document('# Chapter 1\\n\\n"Hello," she said.', config)
    '<h1 class="text-2xl">Chapter 1</h1><p><span class="dialogue">&quot;Hello,&quot;</span> she said.</p>'

Load the classes from a config file:

    >>> from hearthmd import load_config_file
    >>> config = load_config_file("pyproject.toml")

See Also
--------
hearthmd.ast : AST node definitions
hearthmd.quotes : quote tagging and unwrapping

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "hearthmd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from hearthmd.api import markdown_to_html, render_document, render_markdown_block
from hearthmd.logging_utils import configure_logging, reset_logging
from hearthmd.exceptions import (
    HearthMdError,
    InvalidConfigError,
    ParseError,
    ParsingError,
    RenderError,
    RenderingError,
    ValidationError,
)
from hearthmd.options import MarkdownConfig, load_config_file
from hearthmd.parsers import MarkdownTreeBuilder, markdown_to_ast
from hearthmd.quotes import tag_quotes, try_parse_quote, unwrap_quotes
from hearthmd.renderers import HtmlRenderer, ast_to_html

__all__ = [
    "__version__",
    "render_document",
    "markdown_to_html",
    "render_markdown_block",
    "MarkdownConfig",
    "load_config_file",
    "configure_logging",
    "reset_logging",
    "MarkdownTreeBuilder",
    "markdown_to_ast",
    "HtmlRenderer",
    "ast_to_html",
    "tag_quotes",
    "try_parse_quote",
    "unwrap_quotes",
    "HearthMdError",
    "ValidationError",
    "InvalidConfigError",
    "ParsingError",
    "ParseError",
    "RenderingError",
    "RenderError",
]
