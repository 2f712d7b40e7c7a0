"""The exported API functions for rendering markdown to HTML."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/hearthmd/api.py
import logging
from typing import Optional

from hearthmd.constants import ERROR_MESSAGE_PREFIX
from hearthmd.exceptions import ParsingError
from hearthmd.options.markdown import MarkdownConfig
from hearthmd.parsers.markdown import MarkdownTreeBuilder
from hearthmd.quotes.postprocessor import unwrap_quotes
from hearthmd.quotes.scanner import tag_quotes
from hearthmd.renderers.html import HtmlRenderer
from hearthmd.utils.decorators import debug_timer
from hearthmd.utils.html_utils import class_attribute, escape_html

logger = logging.getLogger(__name__)


def render_document(source: str, config: Optional[MarkdownConfig] = None) -> str:
    """Render markdown, with ``"smart quotes"``, to an HTML fragment.

    The pipeline runs in four steps:

    1. Frontmatter, if any, is split off the source.
    2. Quote spans outside code are tagged with a sentinel element.
    3. The tagged body is parsed with mistune and rendered by ``HtmlRenderer``.
    4. Sentinel pairs in the HTML become ``<span class="...">`` elements.

    Parameters
    ----------
    source : str
        Markdown text. May be empty.
    config : MarkdownConfig, optional
        CSS classes per element kind. Defaults to ``MarkdownConfig()``, which
        styles quotes with ``text-orange-500`` and nothing else.

    Returns
    -------
    str
        HTML fragment with no surrounding document structure

    Raises
    ------
    ParsingError
        If the frontmatter is malformed or the markdown parser fails. This
        is the only error the pipeline produces.

    Examples
    --------
    >>> render_document('This is "quoted text" here.')
    '<p>This is <span class="text-orange-500">&quot;quoted text&quot;</span> here.</p>'

    >>> render_document("# Heading", MarkdownConfig(heading_class="text-2xl"))
    '<h1 class="text-2xl">Heading</h1>'

    """
    config = config or MarkdownConfig()
    builder = MarkdownTreeBuilder()

    with debug_timer(logger, "Parsing (markdown)"):
        body, metadata = builder.split_frontmatter(source)
        doc = builder.parse_body(tag_quotes(body, config), metadata)

    with debug_timer(logger, "Rendering (html)"):
        html = HtmlRenderer(config).render_to_string(doc)

    return unwrap_quotes(html, config)


# Older name for the same entry point
markdown_to_html = render_document


def render_markdown_block(
    content: str, config: Optional[MarkdownConfig] = None, *, container_class: Optional[str] = None
) -> str:
    """Render markdown inside a ``<div>`` for embedding in a page.

    Unlike ``render_document`` this never raises for bad input: a parse
    failure is logged and rendered as an error paragraph in place of the
    content.

    Parameters
    ----------
    content : str
        Markdown text
    config : MarkdownConfig, optional
        CSS classes per element kind
    container_class : str, optional
        Class for the wrapping ``<div>``. None or an empty string omits
        the attribute.

    Returns
    -------
    str
        ``<div>`` holding the rendered HTML or the error message

    Examples
    --------
    >>> render_markdown_block("*hi*", container_class="prose")
    '<div class="prose"><p><em>hi</em></p></div>'

    """
    try:
        inner = render_document(content, config)
    except ParsingError as e:
        logger.error("Failed to parse markdown: %s", e)
        inner = f"<p>{ERROR_MESSAGE_PREFIX}: {escape_html(str(e))}</p>"

    return f"<div{class_attribute(container_class or None)}>{inner}</div>"
