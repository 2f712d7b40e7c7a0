#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy produced by the markdown tree
builder and consumed by the HTML renderer. Each node represents a
structural or inline element in the document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Code
    - Link, Image, LineBreak, Strikethrough
    - HTMLInline

The tree is owned by whoever built it; renderers only read it.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Iterator, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Node kinds the visitor has no dedicated method for are routed to
        ``visitor.generic_visit``; concrete node classes override this.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.generic_visit(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata, populated from frontmatter

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes in the paragraph
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language tag.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown), without the final newline
    language : str or None, default = None
        First word of the fence info string
    metadata : dict, default = empty dict
        Code block metadata; ``info_string`` holds the full info string

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Not to be confused with inline ``"smart quotes"``, which never become
    nodes; they travel through the tree as raw HTML sentinel tags.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int or None, default = None
        Starting number for ordered lists, when the source gave one
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: Optional[int] = None
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        For task lists (GFM extension)
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node with optional header and alignment (GFM extension).

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table rows (excluding header)
    header : TableRow or None, default = None
        Optional header row
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    metadata : dict, default = empty dict
        Table metadata

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row
    is_header : bool, default = False
        Whether this is a header row
    metadata : dict, default = empty dict
        Row metadata

    """

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    alignment : {'left', 'center', 'right'} or None, default = None
        Cell alignment
    metadata : dict, default = empty dict
        Cell metadata

    """

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Represents a block of raw HTML content. This node preserves HTML as-is
    without modification or sanitization.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML block metadata

    Warnings
    --------
    Security: the HTML renderer passes this content through verbatim. That
    passthrough is what carries the quote sentinel tags from the scanner to
    the post-processor, so it must not be escaped; it also means the
    pipeline is only suitable for trusted, author-controlled input.

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content, unescaped
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with emphasis
    metadata : dict, default = empty dict
        Emphasis metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with strong emphasis
    metadata : dict, default = empty dict
        Strong metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code node.

    Parameters
    ----------
    content : str
        Code content
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    The HTML renderer has no rule for images, so they reach
    ``generic_visit`` and render as nothing.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks
    metadata : dict, default = empty dict
        Line break metadata

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension).

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with strikethrough
    metadata : dict, default = empty dict
        Strikethrough metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class HTMLInline(Node):
    """Inline raw HTML node.

    Quote sentinel tags arrive in the tree as HTMLInline nodes.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


def get_node_children(node: Node) -> list[Node]:
    """Get the children of any node, whatever the field is called.

    Container nodes name their children differently (``children``,
    ``content``, ``items``, ``rows``, ``cells``); this gives traversal code
    one way to reach them. Tables yield the header row first.

    Parameters
    ----------
    node : Node
        Node to get children from

    Returns
    -------
    list of Node
        Child nodes, empty for leaves

    """
    if isinstance(node, Table):
        rows: list[Node] = []
        if node.header is not None:
            rows.append(node.header)
        rows.extend(node.rows)
        return rows
    if isinstance(node, List):
        return list(node.items)
    if isinstance(node, TableRow):
        return list(node.cells)
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)

    content = getattr(node, "content", None)
    if isinstance(content, list):
        return list(content)
    return []


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and every node below it, depth first, in document order.

    Examples
    --------
        >>> doc = Document(children=[Paragraph(content=[Text(content="a")])])
        >>> [type(n).__name__ for n in iter_nodes(doc)]
        ['Document', 'Paragraph', 'Text']

    """
    yield node
    for child in get_node_children(node):
        yield from iter_nodes(child)
