import math
from dataclasses import dataclass
from typing import Literal

Recommendation = Literal["Buy", "Don't buy"]

RECOMMEND_BUY: Recommendation = "Buy"
RECOMMEND_DONT_BUY: Recommendation = "Don't buy"


@dataclass(frozen=True)
class Quote:
    """
    One daily bar as returned by the market data provider.

    timestamp is the bar's open time in epoch seconds (UTC).
    """
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    adjusted_close: float


@dataclass(frozen=True)
class QuoteHistory:
    """
    Price statistics for one symbol over the lookback window:
      - high:    highest high of any bar
      - low:     lowest low of any bar
      - current: close of the most recent bar

    An aggregation over zero bars leaves the sentinels in place
    (high=-inf, low=+inf, current=0.0); check is_empty before using it.
    """
    high: float = -math.inf
    low: float = math.inf
    current: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.high == -math.inf and self.low == math.inf

    @property
    def price_range(self) -> float:
        return self.high - self.low


@dataclass(frozen=True)
class Report:
    """
    Final answer for one symbol.

    str(report) gives the one-line rendering printed by the command line.
    """
    symbol: str
    history: QuoteHistory
    position: float                  # percent of the low..high range, 0 = at low
    recommendation: Recommendation

    def __str__(self) -> str:
        return (
            f"{self.symbol}: "
            f"Current {self.history.current:.2f} "
            f"Low {self.history.low:.2f} "
            f"High {self.history.high:.2f} "
            f"Position {self.position:.2f}% - {self.recommendation}"
        )
