import os
from dotenv import load_dotenv

load_dotenv()

ALPACA_API_KEY_ID = os.getenv("ALPACA_API_KEY_ID")
ALPACA_API_SECRET_KEY = os.getenv("ALPACA_API_SECRET_KEY")

# ---------------------------------------------------------------------------
# History window
# ---------------------------------------------------------------------------

# Trailing window the price range is computed over.
HISTORY_LOOKBACK_MONTHS = 3

# Bar size in days (daily bars)
HISTORY_BAR_DAYS = 1

# IEX instead of SIP: works on the free market data subscription
HISTORY_DATA_FEED = "iex"

# --- Logging configuration ---
# CSV audit trail of every report printed. Off unless asked for, so a plain
# `warren AAPL` leaves nothing behind on disk.
LOG_REPORTS = os.getenv("WARREN_LOG_REPORTS", "0").lower() in ("1", "true", "yes")
REPORT_LOG_FILE_PATH = os.getenv("WARREN_REPORT_LOG", "logs/reports.csv")
