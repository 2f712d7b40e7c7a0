#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/quotes/postprocessor.py
"""Turn quote sentinels in rendered HTML into styled spans."""

from __future__ import annotations

import logging

from hearthmd.options.markdown import MarkdownConfig
from hearthmd.quotes.sentinel import QUOTE_SENTINEL

logger = logging.getLogger(__name__)


def unwrap_quotes(html: str, config: MarkdownConfig | None = None) -> str:
    """Replace each ``<hearth-quote>`` pair with a ``<span>``.

    The span takes ``config.quote_class``; with no quote class it is a bare
    ``<span>``. Markup between the tags (for example ``<em>`` rendered from
    emphasis inside the quote) is kept as-is. An opening tag with no closing
    tag after it is left in place together with the rest of the input.

    Parameters
    ----------
    html : str
        Output of ``HtmlRenderer``
    config : MarkdownConfig, optional
        Styling; defaults to ``MarkdownConfig()``

    Returns
    -------
    str
        HTML with every matched sentinel pair replaced

    Examples
    --------
        >>> unwrap_quotes('<p><hearth-quote>&quot;hi&quot;</hearth-quote></p>')
        '<p><span class="text-orange-500">&quot;hi&quot;</span></p>'

    """
    config = config or MarkdownConfig()
    span_open = f"<span{config.class_attr('quote')}>"

    parts: list[str] = []
    replaced = 0
    pos = 0

    while True:
        start = html.find(QUOTE_SENTINEL.open, pos)
        if start < 0:
            parts.append(html[pos:])
            break

        parts.append(html[pos:start])
        result = QUOTE_SENTINEL.scan(html, start + len(QUOTE_SENTINEL.open))
        if result is None:
            logger.debug("Unmatched quote sentinel at offset %d left as text", start)
            parts.append(html[start:])
            break

        parts.append(f"{span_open}{result.content}</span>")
        replaced += 1
        pos = result.end

    logger.debug("Replaced %d quote sentinel pair(s)", replaced)
    return "".join(parts)
