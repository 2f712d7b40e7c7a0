#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/quotes/sentinel.py
"""Matched open/close delimiter scanning.

Both quote stages need the same operation: starting just after an opening
delimiter, find the matching closer with bounded lookahead and hand back
what lies between. The scanner looks for ``"`` ... ``"`` in markdown
source; the post-processor looks for ``<hearth-quote>`` ... ``</hearth-quote>``
in rendered HTML. This module implements that once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from hearthmd.constants import (
    QUOTE_CHAR,
    QUOTE_CLOSE_TAG,
    QUOTE_ESCAPE_CHAR,
    QUOTE_OPEN_TAG,
    QUOTE_STOP_CHARS,
)


class ScanResult(NamedTuple):
    """Outcome of a successful scan.

    Attributes
    ----------
    content : str
        Text between the opener and the closer, verbatim
    end : int
        Index just past the closer

    """

    content: str
    end: int


def scan_to_close(
    text: str,
    pos: int,
    close: str,
    *,
    escape: Optional[str] = None,
    stop_chars: tuple[str, ...] = (),
) -> ScanResult | None:
    r"""Scan forward from ``pos`` to the first unescaped ``close``.

    Parameters
    ----------
    text : str
        Text to scan
    pos : int
        Index just after the opening delimiter
    close : str
        Closing delimiter
    escape : str, optional
        Single character that escapes the character after it. The escape
        character and the escaped character both stay in the content.
    stop_chars : tuple of str, default ()
        Characters that abort the scan, escaped or not

    Returns
    -------
    ScanResult or None
        The content and end index, or None when a stop character or the
        end of ``text`` comes first

    Examples
    --------
        >>> scan_to_close('say "hi" now', 5, '"')
        ScanResult(content='hi', end=8)
        >>> scan_to_close('a \\"b\\" c"', 0, '"', escape="\\")
        ScanResult(content='a \\"b\\" c', end=10)
        >>> scan_to_close('no\nclose"', 0, '"', stop_chars=("\n",)) is None
        True

    """
    escaped = False
    i = pos
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in stop_chars:
            return None
        if escaped:
            escaped = False
        elif escape is not None and ch == escape:
            escaped = True
        elif text.startswith(close, i):
            return ScanResult(text[pos:i], i + len(close))
        i += 1
    return None


@dataclass(frozen=True)
class SentinelPair:
    """An opening and closing delimiter that wrap a span of text.

    Parameters
    ----------
    open : str
        Opening delimiter text
    close : str
        Closing delimiter text
    escape : str, optional
        Escape character honoured while looking for ``close``
    stop_chars : tuple of str, default ()
        Characters a span may not contain

    """

    open: str
    close: str
    escape: Optional[str] = None
    stop_chars: tuple[str, ...] = ()

    def wrap(self, content: str) -> str:
        """Return ``content`` enclosed in this pair."""
        return f"{self.open}{content}{self.close}"

    def opens_at(self, text: str, pos: int) -> bool:
        return text.startswith(self.open, pos)

    def closes_at(self, text: str, pos: int) -> bool:
        return text.startswith(self.close, pos)

    def scan(self, text: str, pos: int) -> ScanResult | None:
        """Find the closer for an opener that ends just before ``pos``.

        See Also
        --------
        scan_to_close

        """
        return scan_to_close(text, pos, self.close, escape=self.escape, stop_chars=self.stop_chars)


# "..." in markdown source; a quote never spans a line break
QUOTE_MARKS = SentinelPair(QUOTE_CHAR, QUOTE_CHAR, escape=QUOTE_ESCAPE_CHAR, stop_chars=QUOTE_STOP_CHARS)

# <hearth-quote>...</hearth-quote> carried through the parser as raw HTML
QUOTE_SENTINEL = SentinelPair(QUOTE_OPEN_TAG, QUOTE_CLOSE_TAG)
