#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts AST nodes to an
HTML fragment. Every element kind can carry a CSS class taken from
``MarkdownConfig``. Output is compact: children are concatenated with no
separators and no newlines are added between blocks.

Text and attribute values are escaped; raw HTML nodes are not. Raw HTML is
how the quote sentinels reach the post-processor, so it is passed through
verbatim and must come from a trusted author.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from hearthmd.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from hearthmd.ast.visitors import NodeVisitor
from hearthmd.options.markdown import MarkdownConfig
from hearthmd.renderers.base import BaseRenderer, InlineContentMixin
from hearthmd.utils.html_utils import escape_html

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Parameters
    ----------
    config : MarkdownConfig or None, default = None
        CSS classes per element kind

    Examples
    --------
    Basic usage:

        >>> from hearthmd.ast import Document, Heading, Text
        >>> from hearthmd.options import MarkdownConfig
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> renderer = HtmlRenderer(MarkdownConfig(heading_class="text-2xl"))
        >>> renderer.render_to_string(doc)
        '<h1 class="text-2xl">Title</h1>'

    """

    def __init__(self, config: MarkdownConfig | None = None):
        """Initialize the HTML renderer with a config."""
        BaseRenderer._validate_options_type(config, MarkdownConfig, "html")
        config = config or MarkdownConfig()
        BaseRenderer.__init__(self, config)
        self.options: MarkdownConfig = config
        self._output: list[str] = []

    def render_to_string(self, node: Node) -> str:
        """Render a node, typically a Document, to an HTML string.

        Parameters
        ----------
        node : Node
            Root of the subtree to render

        Returns
        -------
        str
            HTML text

        """
        self._output = []
        node.accept(self)
        html = "".join(self._output)
        self._output = []
        logger.debug("Rendered %s to %d characters of HTML", type(node).__name__, len(html))
        return html

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to HTML and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        RenderingError
            If the output cannot be written

        """
        html_text = self.render_to_string(doc)
        self.write_text_output(html_text, output)

    def _render_children(self, children: list[Node]) -> None:
        for child in children:
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self._render_children(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as ``<h1>`` through ``<h6>``."""
        content = self._render_inline_content(node.content)
        css_class = self.options.class_attr("heading")
        self._output.append(f"<h{node.level}{css_class}>{content}</h{node.level}>")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<p{self.options.class_attr('paragraph')}>{content}</p>")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The language goes in a ``data-lang`` attribute rather than a
        ``language-*`` class, leaving ``class`` to ``MarkdownConfig``.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        pre_class = self.options.class_attr("pre")
        code_class = self.options.class_attr("code")
        lang_attr = f' data-lang="{escape_html(node.language)}"' if node.language is not None else ""
        escaped_content = escape_html(node.content)
        self._output.append(f"<pre{pre_class}><code{code_class}{lang_attr}>{escaped_content}</code></pre>")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append(f"<blockquote{self.options.class_attr('blockquote')}>")
        self._render_children(node.children)
        self._output.append("</blockquote>")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Ordered lists carry ``start`` only when it is set and not 1.

        Parameters
        ----------
        node : List
            List to render

        """
        if node.ordered:
            start_attr = f' start="{node.start}"' if node.start is not None and node.start != 1 else ""
            self._output.append(f"<ol{self.options.class_attr('ol')}{start_attr}>")
        else:
            self._output.append(f"<ul{self.options.class_attr('ul')}>")

        for item in node.items:
            item.accept(self)

        self._output.append("</ol>" if node.ordered else "</ul>")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append(f"<li{self.options.class_attr('li')}>")
        self._render_children(node.children)
        self._output.append("</li>")

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        The header row, when present, is emitted first as an ordinary
        ``<tr>``; there is no ``<thead>`` or ``<tbody>``.

        Parameters
        ----------
        node : Table
            Table to render

        """
        self._output.append(f"<table{self.options.class_attr('table')}>")
        if node.header is not None:
            node.header.accept(self)
        for row in node.rows:
            row.accept(self)
        self._output.append("</table>")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        self._output.append("<tr>")
        for cell in node.cells:
            cell.accept(self)
        self._output.append("</tr>")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node.

        Header cells are also ``<td>``: ``th_class`` is reserved and not
        applied.

        Parameters
        ----------
        node : TableCell
            Table cell to render

        """
        content = self._render_inline_content(node.content)
        self._output.append(f"<td{self.options.class_attr('td')}>{content}</td>")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append(f"<hr{self.options.class_attr('hr')} />")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node verbatim."""
        self._output.append(node.content)

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<em{self.options.class_attr('italic')}>{content}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<strong{self.options.class_attr('strong')}>{content}</strong>")

    def visit_code(self, node: Code) -> None:
        """Render a Code (inline) node."""
        self._output.append(f"<code{self.options.class_attr('code')}>{escape_html(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        The URL is escaped but its scheme is not checked.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        href = escape_html(node.url)
        css_class = self.options.class_attr("link")
        title_attr = f' title="{escape_html(node.title)}"' if node.title is not None else ""
        self._output.append(f'<a href="{href}"{css_class}{title_attr}>{content}</a>')

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node.

        Hard breaks become ``<br />``; soft breaks stay a newline.

        Parameters
        ----------
        node : LineBreak
            Line break to render

        """
        self._output.append("\n" if node.soft else "<br />")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<del>{content}</del>")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node verbatim."""
        self._output.append(node.content)


def ast_to_html(node: Node, config: MarkdownConfig | None = None) -> str:
    """Render an AST node to HTML.

    Convenience wrapper around ``HtmlRenderer(config).render_to_string``.

    Parameters
    ----------
    node : Node
        Node to render
    config : MarkdownConfig, optional
        CSS classes per element kind

    Returns
    -------
    str
        HTML fragment

    Examples
    --------
    >>> from hearthmd.ast import Paragraph, Text
    >>> ast_to_html(Paragraph(content=[Text(content="a < b")]))
    '<p>a &lt; b</p>'

    """
    return HtmlRenderer(config).render_to_string(node)
