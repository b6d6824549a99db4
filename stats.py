"""
Price statistics over a quote series.

aggregate_quotes reduces the whole lookback window to three numbers in one
pass; range_position places the current price inside the window's range.
"""

import math
from typing import Iterable

from models import Quote, QuoteHistory


def aggregate_quotes(quotes: Iterable[Quote]) -> QuoteHistory:
    """
    Compute high / low / current over `quotes` (oldest first).

    - high:    max of every quote's high
    - low:     min of every quote's low
    - current: close of the last quote seen

    An empty series returns QuoteHistory() with its sentinels
    (see QuoteHistory.is_empty) instead of raising.
    """
    high = -math.inf
    low = math.inf
    current = 0.0

    for quote in quotes:
        current = quote.close
        if quote.high > high:
            high = quote.high
        if quote.low < low:
            low = quote.low

    return QuoteHistory(high=high, low=low, current=current)


def range_position(history: QuoteHistory) -> float:
    """
    Where `current` sits in [low, high], as a percentage.
    Example: low=1, high=4, current=2 -> 33.33

    The caller must rule out a zero range first; here it divides anyway
    and Python raises ZeroDivisionError.
    """
    return (history.current - history.low) / history.price_range * 100.0
