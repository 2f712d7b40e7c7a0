#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from and the
mixin used to render nested inline content into a string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from hearthmd.ast import Document
from hearthmd.ast.nodes import Node
from hearthmd.exceptions import InvalidConfigError
from hearthmd.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : Any, optional
        Renderer-specific configuration

    Examples
    --------
    Creating a custom renderer:

        >>> from hearthmd.renderers.base import BaseRenderer
        >>>
        >>> class PlainRenderer(BaseRenderer):
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)
        ...
        ...     def render_to_string(self, node):
        ...         return "rendered output"

    """

    def __init__(self, options: Any = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            File path or file-like object

        Raises
        ------
        RenderingError
            If output cannot be written

        """
        pass

    @abstractmethod
    def render_to_string(self, node: Node) -> str:
        """Render an AST node, usually a Document, to a string."""
        pass

    @staticmethod
    def _validate_options_type(options: Any, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : Any
            The options object to validate
        expected_type : type
            The expected options class
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidConfigError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidConfigError(
                f"{renderer_name} renderer expects {expected_type.__name__}, got {type(options).__name__}",
                parameter_name="config",
                parameter_value=options,
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode (IO[bytes])
            - File-like object in text mode (IO[str])

        Raises
        ------
        RenderingError
            If output cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hello</p>", buffer)
            >>> print(buffer.getvalue())
            <p>Hello</p>

        """
        write_content(text, output)


class InlineContentMixin:
    """Mixin rendering a list of inline nodes to a string.

    The implementing class must have an ``_output`` list that its visitor
    methods append to.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render inline nodes to text by temporarily capturing ``_output``.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
