#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Smart-quote handling around the markdown parser.

``tag_quotes`` marks quote spans in markdown source with a sentinel tag that
survives parsing as raw HTML; ``unwrap_quotes`` swaps those sentinels for
styled ``<span>`` elements once the document has been rendered.
"""

from hearthmd.quotes.postprocessor import unwrap_quotes
from hearthmd.quotes.scanner import tag_quotes, try_parse_quote
from hearthmd.quotes.sentinel import QUOTE_MARKS, QUOTE_SENTINEL, ScanResult, SentinelPair, scan_to_close

__all__ = [
    "QUOTE_MARKS",
    "QUOTE_SENTINEL",
    "ScanResult",
    "SentinelPair",
    "scan_to_close",
    "tag_quotes",
    "try_parse_quote",
    "unwrap_quotes",
]
