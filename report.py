from typing import Callable, List, Optional

from errors import DataShapeError, InsufficientVariationError
from history import fetch_quotes
from models import Quote, Report
from signals import recommend
from stats import aggregate_quotes, range_position

QuoteSource = Callable[[str], List[Quote]]


def build_report(symbol: str, quote_source: Optional[QuoteSource] = None) -> Report:
    """
    Build the buy / don't-buy report for `symbol`.

    Steps:
      1. fetch the daily quotes for the lookback window (quote_source,
         defaulting to history.fetch_quotes)
      2. aggregate them to high / low / current
      3. place current in the low..high range as a percentage
      4. map that percentage to a recommendation

    Errors from the fetch propagate unchanged (ConnectorError, FetchError,
    DataShapeError). An empty window raises DataShapeError and a flat one
    (high == low) raises InsufficientVariationError.
    """
    if quote_source is None:
        quote_source = fetch_quotes

    quotes = quote_source(symbol)
    history = aggregate_quotes(quotes)

    if history.is_empty:
        raise DataShapeError(f"No quotes returned for {symbol}; there is no last quote.")

    if history.price_range == 0:
        raise InsufficientVariationError(
            f"{symbol} traded flat at {history.high:.2f} over the lookback window; "
            f"there is no price range to compare against."
        )

    position = range_position(history)
    recommendation = recommend(position)

    return Report(
        symbol=symbol,
        history=history,
        position=position,
        recommendation=recommendation,
    )
