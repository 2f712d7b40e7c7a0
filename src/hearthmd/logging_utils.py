"""Logging setup for applications that render documents with hearthmd."""

from __future__ import annotations

import logging
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "hearthmd"

# Marks handlers installed here so a later call replaces them and nothing else
_HANDLER_MARKER = "_hearthmd_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    setattr(handler, _HANDLER_MARKER, True)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    *,
    stream: Optional[IO[str]] = None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Send hearthmd's log records to stderr, a stream or a file.

    Only the ``hearthmd`` logger is touched; the root logger and handlers
    added by the host application are left alone. Calling this again
    replaces the handlers installed by the previous call.

    At DEBUG the pipeline reports quote counts, frontmatter keys and stage
    timings; parse failures inside ``render_markdown_block`` are logged at
    ERROR.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG"). Unknown names
        fall back to INFO.
    stream : IO[str], optional
        Destination for console output. Defaults to ``sys.stderr``.
    log_file : str, optional
        Path of a log file to tee output into
    trace_mode : bool, default False
        When true, emit timestamps and logger names
    propagate : bool, default False
        Whether records also reach the root logger's handlers

    Returns
    -------
    logging.Logger
        The ``hearthmd`` logger

    Examples
    --------
        >>> import io
        >>> from hearthmd import render_document
        >>> buffer = io.StringIO()
        >>> logger = configure_logging("DEBUG", stream=buffer)
        >>> html = render_document('"hi"')
        >>> "Tagged 1 quote span(s)" in buffer.getvalue()
        True

    """
    resolved_level = _resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_own_handlers(package_logger)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    _add_handler(package_logger, logging.StreamHandler(stream), resolved_level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _add_handler(package_logger, file_handler, resolved_level, formatter)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger


def reset_logging() -> None:
    """Undo ``configure_logging``.

    Removes the handlers it installed and restores the ``hearthmd`` logger
    to an unset level that propagates to the root logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_own_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
