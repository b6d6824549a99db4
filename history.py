import sys
from datetime import datetime
from typing import List, Optional

import pandas as pd
import requests
from alpaca.common.exceptions import APIError
from alpaca.data.enums import Adjustment
from alpaca.data.historical import StockHistoricalDataClient
from alpaca.data.requests import StockBarsRequest
from alpaca.data.timeframe import TimeFrame, TimeFrameUnit

import config
from errors import ConnectorError, DataShapeError, FetchError
from models import Quote

REQUIRED_COLUMNS = ("high", "low", "close")


def _build_data_client() -> StockHistoricalDataClient:
    """
    Create the Alpaca historical data client for one request.
    """
    if not config.ALPACA_API_KEY_ID or not config.ALPACA_API_SECRET_KEY:
        raise ConnectorError("Alpaca API keys are missing. Check your .env file.")

    try:
        return StockHistoricalDataClient(
            api_key=config.ALPACA_API_KEY_ID,
            secret_key=config.ALPACA_API_SECRET_KEY,
        )
    except Exception as exc:
        raise ConnectorError(f"Could not create Alpaca data client: {exc}") from exc


def _compute_time_window(now: Optional[datetime] = None):
    """
    Compute (start, end, timeframe) for the trailing lookback window:
    HISTORY_LOOKBACK_MONTHS calendar months of daily bars ending now.
    """
    end = pd.Timestamp(now) if now is not None else pd.Timestamp.now(tz="UTC")
    start = end - pd.DateOffset(months=config.HISTORY_LOOKBACK_MONTHS)
    timeframe = TimeFrame(config.HISTORY_BAR_DAYS, TimeFrameUnit.Day)
    return start.to_pydatetime(), end.to_pydatetime(), timeframe


def fetch_price_history(
    symbol: str,
    client: Optional[StockHistoricalDataClient] = None,
) -> pd.DataFrame:
    """
    Fetch DAILY OHLCV bars for `symbol` over the lookback window.

    Returns a pandas DataFrame indexed by timestamp (ascending) with columns
    like ['open', 'high', 'low', 'close', 'volume', ...]. The frame may be
    empty if the provider had no bars for the window.

    Raises:
      - ConnectorError if the client cannot be built
      - FetchError on API or HTTP errors
      - DataShapeError if the response is not a bar frame
    """
    if client is None:
        client = _build_data_client()

    start, end, timeframe = _compute_time_window()

    print(
        f"[history] Requesting DAILY bars for {symbol} "
        f"from {start.date().isoformat()} to {end.date().isoformat()} ({config.HISTORY_DATA_FEED} feed)...",
        file=sys.stderr,
    )

    request = StockBarsRequest(
        symbol_or_symbols=symbol,
        timeframe=timeframe,
        start=start,
        end=end,
        adjustment=Adjustment.RAW,
        feed=config.HISTORY_DATA_FEED,
    )

    try:
        bars_response = client.get_stock_bars(request)
    except APIError as api_error:
        raise FetchError(
            f"Alpaca APIError while fetching DAILY bars for {symbol}: {api_error}"
        ) from api_error
    except requests.exceptions.RequestException as http_error:
        raise FetchError(
            f"HTTP error while fetching DAILY bars for {symbol}: {http_error}"
        ) from http_error

    # ----------------------------
    # Convert response → DataFrame
    # ----------------------------
    bars_data_frame = getattr(bars_response, "df", None)
    if not isinstance(bars_data_frame, pd.DataFrame):
        raise DataShapeError(f"Unexpected bar response for {symbol}: {type(bars_response).__name__}")

    if bars_data_frame.empty:
        return bars_data_frame

    # Handle MultiIndex (symbol, timestamp)
    if (
        isinstance(bars_data_frame.index, pd.MultiIndex)
        and "symbol" in bars_data_frame.index.names
    ):
        try:
            bars_data_frame = bars_data_frame.xs(symbol, level="symbol")
        except KeyError as exc:
            raise DataShapeError(f"No data for {symbol!r} in bar response") from exc

    # Always sort chronologically
    return bars_data_frame.sort_index()


def _to_epoch_seconds(index_value) -> int:
    # naive timestamps are treated as UTC
    return int(pd.Timestamp(index_value).timestamp())


def bars_to_quotes(bars: pd.DataFrame) -> List[Quote]:
    """
    Turn a daily bar frame into Quote records, oldest first.

    Alpaca's raw feed has no separate adjusted close, so adjusted_close
    mirrors close.
    """
    if bars is None or bars.empty:
        return []

    missing = [column for column in REQUIRED_COLUMNS if column not in bars.columns]
    if missing:
        raise DataShapeError(f"Bar data is missing columns: {', '.join(missing)}")

    if bars[list(REQUIRED_COLUMNS)].isna().any().any():
        raise DataShapeError("Bar data contains NaN high/low/close values")

    quotes: List[Quote] = []
    for timestamp, row in bars.iterrows():
        close = float(row["close"])
        quotes.append(
            Quote(
                timestamp=_to_epoch_seconds(timestamp),
                open=float(row.get("open", close)),
                high=float(row["high"]),
                low=float(row["low"]),
                close=close,
                volume=float(row.get("volume", 0.0)),
                adjusted_close=close,
            )
        )
    return quotes


def last_quote(quotes: List[Quote]) -> Quote:
    """
    Return the most recent quote in a chronological series.
    """
    if not quotes:
        raise DataShapeError("No quotes returned; there is no last quote.")
    return quotes[-1]


def fetch_quotes(symbol: str) -> List[Quote]:
    """
    Fetch the lookback window for `symbol` as a chronological list of Quotes.

    Raises DataShapeError if the provider returned no bars at all.
    """
    bars = fetch_price_history(symbol)
    quotes = bars_to_quotes(bars)
    latest = last_quote(quotes)
    print(
        f"[history] Got {len(quotes)} daily bars for {symbol}; "
        f"last close {latest.close:.2f}.",
        file=sys.stderr,
    )
    return quotes
