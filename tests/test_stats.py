import math

import pytest

from models import Quote, QuoteHistory
from stats import aggregate_quotes, range_position


def _quote(high: float, low: float, close: float, timestamp: int = 0) -> Quote:
    return Quote(
        timestamp=timestamp,
        open=0.0,
        high=high,
        low=low,
        close=close,
        volume=0.0,
        adjusted_close=0.0,
    )


def test_aggregate_returns_correct_stats_for_quote_series():
    quotes = [
        _quote(high=10.0, low=2.0, close=0.0),
        _quote(high=5.0, low=1.0, close=4.0),
    ]

    history = aggregate_quotes(quotes)

    assert history.current == 4.0, "wrong current"
    assert history.high == 10.0, "wrong high"
    assert history.low == 1.0, "wrong low"


def test_aggregate_current_is_last_close_not_max_close():
    quotes = [
        _quote(high=12.0, low=9.0, close=11.5, timestamp=1),
        _quote(high=11.0, low=8.0, close=8.5, timestamp=2),
        _quote(high=10.0, low=7.5, close=9.25, timestamp=3),
    ]

    history = aggregate_quotes(quotes)

    assert history.current == 9.25
    assert history.high == max(q.high for q in quotes)
    assert history.low == min(q.low for q in quotes)


def test_aggregate_single_quote_uses_its_own_values():
    history = aggregate_quotes([_quote(high=3.0, low=2.0, close=2.5)])
    assert history == QuoteHistory(high=3.0, low=2.0, current=2.5)
    assert not history.is_empty


def test_aggregate_empty_series_returns_sentinels():
    history = aggregate_quotes([])

    assert history.is_empty
    assert history.high == -math.inf
    assert history.low == math.inf
    assert history.current == 0.0


def test_aggregate_accepts_any_iterable():
    quotes = (_quote(high=h, low=h - 1.0, close=h - 0.5) for h in (4.0, 6.0, 5.0))
    history = aggregate_quotes(quotes)
    assert (history.high, history.low, history.current) == (6.0, 3.0, 4.5)


def test_range_position_is_percentage_of_range():
    history = QuoteHistory(high=4.0, low=1.0, current=2.0)
    assert range_position(history) == pytest.approx(100.0 / 3.0)

    assert range_position(QuoteHistory(high=4.0, low=1.0, current=1.0)) == 0.0
    assert range_position(QuoteHistory(high=4.0, low=1.0, current=4.0)) == 100.0


def test_range_position_with_flat_range_divides_by_zero():
    with pytest.raises(ZeroDivisionError):
        range_position(QuoteHistory(high=2.0, low=2.0, current=2.0))
