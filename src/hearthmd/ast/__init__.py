#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The markdown tree builder produces these nodes and the HTML renderer walks
them. Keeping the tree separate from both lets each stage of the pipeline
be tested on its own.

- nodes: AST node classes representing document structure
- visitors: Visitor pattern base class for tree traversal

Examples
--------
Build a tree by hand and render it:

    >>> from hearthmd.ast import Document, Heading, Paragraph, Text
    >>> from hearthmd.renderers.html import ast_to_html
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> ast_to_html(doc)
    '<h1>Title</h1><p>Hello world</p>'

"""

from __future__ import annotations

from hearthmd.ast.nodes import (
    Alignment,
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
    get_node_children,
    iter_nodes,
)
from hearthmd.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "get_node_children",
    "iter_nodes",
]
