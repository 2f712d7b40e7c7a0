#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to walk the document
tree. The set of node kinds is closed, so every kind has an abstract
``visit_*`` method and a concrete visitor must handle all of them; node
classes without a dedicated method (for example ``Image``) fall through to
``generic_visit``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node kind. The visitor
    pattern keeps algorithms (rendering, collection, validation) separate
    from the node structure itself.

    Examples
    --------
    Visitor that collects plain text:

        >>> class TextCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...
        ...     def visit_text(self, node):
        ...         self.parts.append(node.content)
        ...
        ...     def generic_visit(self, node):
        ...         for child in get_node_children(node):
        ...             child.accept(self)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node.

        Parameters
        ----------
        node : BlockQuote
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node.

        Parameters
        ----------
        node : ListItem
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node.

        Parameters
        ----------
        node : Table
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node.

        Parameters
        ----------
        node : TableRow
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node.

        Parameters
        ----------
        node : TableCell
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node.

        Parameters
        ----------
        node : ThematicBreak
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit a HTMLBlock node.

        Parameters
        ----------
        node : HTMLBlock
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit a Emphasis node.

        Parameters
        ----------
        node : Emphasis
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node.

        Parameters
        ----------
        node : Strong
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node.

        Parameters
        ----------
        node : Code
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node.

        Parameters
        ----------
        node : LineBreak
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node.

        Parameters
        ----------
        node : Strikethrough
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit a HTMLInline node.

        Parameters
        ----------
        node : HTMLInline
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for node kinds without a visit_* method.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
