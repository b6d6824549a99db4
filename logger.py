import csv
import os
from datetime import datetime
from typing import Optional

import config
from models import Report

REPORT_LOG_HEADER = [
    "timestamp",
    "symbol",
    "current",
    "low",
    "high",
    "position_pct",
    "recommendation",
]


def _ensure_dir_for(path: str):
    """
    Ensure the directory for the given file path exists.
    """
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


# ---------------------------------------------------------------------------
# Report log
# ---------------------------------------------------------------------------

def init_report_log():
    """
    Initialize the report log file with a header row if it doesn't exist.
    Safe to call multiple times; it won't overwrite an existing file.
    """
    if not config.LOG_REPORTS:
        return

    path = config.REPORT_LOG_FILE_PATH
    _ensure_dir_for(path)

    if not os.path.exists(path):
        with open(path, mode="w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(REPORT_LOG_HEADER)


def log_report(report: Report, now: Optional[datetime] = None):
    """
    Append one row for a finished report.
    """
    if not config.LOG_REPORTS:
        return

    if now is None:
        now = datetime.now()

    path = config.REPORT_LOG_FILE_PATH
    _ensure_dir_for(path)

    with open(path, mode="a", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([
            now.isoformat(timespec="seconds"),
            report.symbol,
            f"{report.history.current:.4f}",
            f"{report.history.low:.4f}",
            f"{report.history.high:.4f}",
            f"{report.position:.4f}",
            report.recommendation,
        ])
