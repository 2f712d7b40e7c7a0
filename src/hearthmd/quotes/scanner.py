#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/quotes/scanner.py
"""Tag ``"smart quotes"`` in markdown source before it is parsed.

A quote is a ``"`` ... ``"`` span on a single line with non-blank content.
Each one found outside fenced and inline code is wrapped in the quote
sentinel, which the markdown parser passes through as inline HTML:

    He said "hello" to me.
    He said <hearth-quote>"hello"</hearth-quote> to me.

Code tracking follows backtick runs only. A run of three or more opens a
fenced block, closed by a later run at least as long; a single backtick
outside a block toggles inline code. Indented code blocks and ``~~~``
fences are not tracked.
"""

from __future__ import annotations

import logging
import re

from hearthmd.constants import BACKTICK, MIN_FENCE_WIDTH, QUOTE_CHAR
from hearthmd.options.markdown import MarkdownConfig
from hearthmd.quotes.sentinel import QUOTE_MARKS, QUOTE_SENTINEL

logger = logging.getLogger(__name__)

# Characters that change scanner state; everything between them is copied as-is
_STATE_CHARS = re.compile(r'[`"]')


def try_parse_quote(text: str, pos: int) -> tuple[str, int] | None:
    r"""Try to read a quote whose opening ``"`` sits just before ``pos``.

    Parameters
    ----------
    text : str
        Markdown source
    pos : int
        Index just after the opening quotation mark

    Returns
    -------
    tuple[str, int] or None
        The span including both quotation marks and the index just past the
        closing mark, or None if the quote is unclosed, crosses a line
        break, or has blank content

    Examples
    --------
        >>> try_parse_quote('a "b c" d', 3)
        ('"b c"', 7)
        >>> try_parse_quote('a "   " d', 3) is None
        True
        >>> try_parse_quote('say "a \\"b\\" c"', 5)
        ('"a \\"b\\" c"', 15)

    """
    result = QUOTE_MARKS.scan(text, pos)
    if result is None or not result.content.strip():
        return None
    return QUOTE_MARKS.wrap(result.content), result.end


def _backtick_run_end(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and text[end] == BACKTICK:
        end += 1
    return end


def tag_quotes(source: str, config: MarkdownConfig | None = None) -> str:
    """Wrap every quote outside code in the quote sentinel.

    Text is otherwise copied through unchanged. A ``"`` that does not start
    a valid quote is kept as a literal character and scanning resumes right
    after it, so a later ``"`` on the same line can still open a quote.

    Parameters
    ----------
    source : str
        Markdown source
    config : MarkdownConfig, optional
        Accepted so every stage shares a signature; tagging does not depend
        on styling

    Returns
    -------
    str
        Source with quote spans tagged

    """
    parts: list[str] = []
    in_code_block = False
    in_inline_code = False
    fence_width = 0
    tagged = 0
    pos = 0

    while True:
        match = _STATE_CHARS.search(source, pos)
        if match is None:
            parts.append(source[pos:])
            break

        start = match.start()
        parts.append(source[pos:start])

        if match.group() == BACKTICK:
            end = _backtick_run_end(source, start)
            width = end - start
            parts.append(source[start:end])
            if width >= MIN_FENCE_WIDTH:
                if not in_code_block:
                    in_code_block = True
                    fence_width = width
                elif width >= fence_width:
                    in_code_block = False
                    fence_width = 0
            elif width == 1 and not in_code_block:
                in_inline_code = not in_inline_code
            pos = end
            continue

        quote = None
        if not (in_code_block or in_inline_code):
            quote = try_parse_quote(source, start + 1)

        if quote is None:
            parts.append(QUOTE_CHAR)
            pos = start + 1
        else:
            span, pos = quote
            parts.append(QUOTE_SENTINEL.wrap(span))
            tagged += 1

    logger.debug("Tagged %d quote span(s) in %d characters of source", tagged, len(source))
    return "".join(parts)
