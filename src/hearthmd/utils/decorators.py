#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/utils/decorators.py
"""Timing helpers for the render pipeline."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Nothing is measured unless ``logger`` has DEBUG enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing (markdown)")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Rendering (html)"):
        ...     html = renderer.render_to_string(doc)
        ... # Logs: "Rendering (html) completed in 0.01s" at DEBUG level

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
