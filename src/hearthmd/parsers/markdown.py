#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/parsers/markdown.py
"""Markdown to AST converter.

This module parses markdown into the ``hearthmd.ast`` tree using mistune.
Frontmatter (YAML between ``---`` lines or TOML between ``+++`` lines) is
split off first and stored as the document metadata.

Quote sentinels added by ``tag_quotes`` are ordinary inline HTML to
mistune and come out of the parser as ``HTMLInline`` nodes.

"""

from __future__ import annotations

import logging
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Literal, Optional

import mistune
import yaml

from hearthmd.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
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
    iter_nodes,
)
from hearthmd.constants import DEFAULT_MARKDOWN_EXTENSIONS, FRONTMATTER_DELIMITERS, QUOTE_OPEN_TAG
from hearthmd.exceptions import ParsingError
from hearthmd.utils.html_utils import decode_character_references

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = DEFAULT_MARKDOWN_EXTENSIONS


class MarkdownTreeBuilder:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    extensions : tuple of str, default ("table", "strikethrough", "task_lists")
        mistune plugin names to enable. Frontmatter is always recognised.

    Examples
    --------
    Basic parsing:

        >>> builder = MarkdownTreeBuilder()
        >>> doc = builder.parse("# Hello\n\nThis is **bold**.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    With frontmatter:

        >>> doc = builder.parse("---\ntitle: Notes\n---\nBody")
        >>> doc.metadata
        {'title': 'Notes'}

    """

    def __init__(self, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS):
        """Initialize the builder with a set of mistune plugins."""
        self.extensions = tuple(extensions)

    def parse(self, text: str) -> Document:
        """Parse markdown, including any frontmatter, into a Document.

        Raises
        ------
        ParsingError
            If the frontmatter is malformed or mistune fails

        """
        body, metadata = self.split_frontmatter(text)
        return self.parse_body(body, metadata)

    def split_frontmatter(self, text: str) -> tuple[str, dict[str, Any]]:
        """Separate a leading frontmatter block from the markdown body.

        The block must start on the first line with ``---`` (YAML) or
        ``+++`` (TOML) and end at the next line holding the same delimiter.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        tuple[str, dict]
            The body after the block and the decoded metadata. Text without
            a complete frontmatter block is returned unchanged with empty
            metadata.

        Raises
        ------
        ParsingError
            With ``parsing_stage="frontmatter"`` if the block cannot be
            decoded or does not decode to a mapping

        """
        lines = text.splitlines(keepends=True)
        if not lines:
            return text, {}

        delimiter = lines[0].rstrip("\r\n")
        fmt = FRONTMATTER_DELIMITERS.get(delimiter)
        if fmt is None:
            return text, {}

        end_index = -1
        for i in range(1, len(lines)):
            if lines[i].strip() == delimiter:
                end_index = i
                break

        # Without a closing delimiter the opening line is ordinary markdown (e.g. a thematic break)
        if end_index < 0:
            return text, {}

        raw = "".join(lines[1:end_index])
        body = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(raw) if fmt == "yaml" else tomllib.loads(raw)
        except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
            raise ParsingError(f"Invalid {fmt.upper()} frontmatter: {e}", "frontmatter", e) from e

        # An empty YAML block decodes to None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParsingError(
                f"{fmt.upper()} frontmatter must be a mapping, got {type(data).__name__}", "frontmatter"
            )

        logger.debug("Parsed %s frontmatter with %d key(s)", fmt, len(data))
        return body, data

    def parse_body(self, text: str, metadata: Optional[dict[str, Any]] = None) -> Document:
        """Parse markdown without frontmatter handling.

        Parameters
        ----------
        text : str
            Markdown body
        metadata : dict, optional
            Stored as ``Document.metadata``

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            With ``parsing_stage="markdown"`` if mistune fails

        """
        try:
            markdown = mistune.create_markdown(plugins=list(self.extensions), renderer=None)
            tokens, _state = markdown.parse(text)
        except Exception as e:
            raise ParsingError(f"Failed to parse markdown: {e}", "markdown", e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        doc = Document(children=children, metadata=dict(metadata or {}))
        if logger.isEnabledFor(logging.DEBUG):
            # Sentinels that landed in code blocks are plain text, not inline HTML
            sentinels = sum(
                1 for node in iter_nodes(doc) if isinstance(node, HTMLInline) and node.content == QUOTE_OPEN_TAG
            )
            logger.debug(
                "Built document with %d top-level node(s) and %d quote sentinel(s)", len(children), sentinels
            )
        return doc

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block-level mistune tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block-level mistune token.

        Tokens with no counterpart in the AST (``blank_line`` and the like)
        yield None.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        content = self._process_inline_tokens(token.get("children", []))
        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        mistune keeps the newline before the closing fence; it is dropped.
        The language is the first word of the info string.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node

        """
        content = token.get("raw", "")
        if content.endswith("\n"):
            content = content[:-1]

        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip() if isinstance(attrs, dict) else ""
        metadata: dict[str, Any] = {}
        language = None
        if info_string:
            metadata["info_string"] = info_string
            language = info_string.split(maxsplit=1)[0]

        return CodeBlock(content=content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start") if ordered else None
        tight = token.get("tight", attrs.get("tight", True))

        items = [
            self._process_list_item(child)
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") in ("list_item", "task_list_item")
        ]
        return List(ordered=ordered, items=items, start=start, tight=bool(tight))

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        content = self._process_tokens(token.get("children", []))

        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs", {})
        if isinstance(attrs, dict) and "checked" in attrs:
            task_status = "checked" if attrs["checked"] else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        mistune puts header cells directly under ``table_head`` while body
        cells sit in ``table_row`` tokens under ``table_body``.

        Parameters
        ----------
        token : dict
            Table token with 'children'

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows: list[TableRow] = []
        alignments = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                cells = self._process_table_cells(part.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs", {})
            alignment = attrs.get("align") if isinstance(attrs, dict) else None
            content = self._process_inline_tokens(cell_token.get("children", []))
            cells.append(TableCell(content=content, alignment=alignment))
        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []
        if not isinstance(tokens, list):
            return nodes
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        content = self._process_inline_tokens(token.get("children", []))
        title = attrs.get("title")
        return Link(
            url=decode_character_references(attrs.get("url", "")),
            content=content,
            title=decode_character_references(title) if title is not None else None,
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is in children, not attrs
        alt_text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        )
        alt_text = decode_character_references(alt_text)
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for token types with no counterpart

        """
        token_type = token.get("type", "")

        if token_type == "text":
            # Code spans and code blocks keep their references verbatim
            return Text(content=decode_character_references(token.get("raw", "")))
        elif token_type == "softbreak":
            return Text(content="\n")
        elif token_type == "linebreak":
            return LineBreak()
        elif token_type == "strong":
            return Strong(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "emphasis":
            return Emphasis(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "strikethrough":
            return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "codespan":
            return Code(content=token.get("raw", ""))
        elif token_type == "link":
            return self._handle_link_token(token)
        elif token_type == "image":
            return self._handle_image_token(token)
        elif token_type == "inline_html":
            return HTMLInline(content=token.get("raw", ""))

        return None


def markdown_to_ast(markdown_content: str) -> Document:
    r"""Convert a Markdown string, with optional frontmatter, to AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse

    Returns
    -------
    Document
        AST document node

    Raises
    ------
    ParsingError
        If the frontmatter is malformed or mistune fails

    Examples
    --------
    >>> from hearthmd.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownTreeBuilder().parse(markdown_content)
