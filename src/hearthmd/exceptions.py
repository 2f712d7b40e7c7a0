#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the hearthmd library.

This module defines the exception classes raised by hearthmd. The render
pipeline itself is deliberately forgiving: malformed quote syntax and
unknown AST nodes degrade to literal output, so the only failure a caller
of ``render_document`` can see is a parse failure at the markdown
tree-building stage.

Exception Hierarchy
-------------------
- HearthMdError (base exception, aliased as RenderError)

  - ValidationError (parameter/option validation)
    - InvalidConfigError (bad MarkdownConfig values or config files)

  - ParsingError (markdown or frontmatter parsing failures, aliased as ParseError)

  - RenderingError (output write failures)

"""

from typing import Any


class HearthMdError(Exception):
    """Base exception class for all hearthmd-specific errors.

    Catching this will catch every error raised by the library.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(HearthMdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidConfigError(ValidationError):
    """Exception raised when a MarkdownConfig cannot be built.

    Raised for class values that are not strings, class values that would
    break out of the ``class`` attribute, unknown configuration keys, and
    configuration files that cannot be read or decoded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        The offending field or key
    parameter_value : any, optional
        The offending value
    config_path : str, optional
        Path of the configuration file, when loading from disk
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        config_path: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error."""
        super().__init__(
            message, parameter_name=parameter_name, parameter_value=parameter_value, original_error=original_error
        )
        self.config_path = config_path


class ParsingError(HearthMdError):
    """Exception raised when the markdown tree builder rejects its input.

    This is the only failure mode of the render pipeline. It is propagated
    to the caller unmodified and never retried.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred ("frontmatter" or "markdown")
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(HearthMdError):
    """Exception raised when rendered output cannot be written.

    Rendering to a string never fails; this covers ``HtmlRenderer.render``
    writing to a path or stream.

    Parameters
    ----------
    message : str
        Description of the failure
    output_path : str, optional
        Destination that could not be written
    original_error : Exception, optional
        The underlying I/O error

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.output_path = output_path


ParseError = ParsingError
RenderError = HearthMdError

__all__ = [
    "HearthMdError",
    "ValidationError",
    "InvalidConfigError",
    "ParsingError",
    "ParseError",
    "RenderingError",
    "RenderError",
]
