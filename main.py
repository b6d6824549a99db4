from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from errors import ReportError
from logger import init_report_log, log_report
from report import build_report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="warren",
        description="Checks the recent price history for a given stock symbol "
                    "and reports whether it's a good buy.",
    )
    parser.add_argument(
        "stock",
        help="Stock or fund symbol, e.g. 'AAPL'",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        report = build_report(args.stock)
    except ReportError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    print(report)

    init_report_log()
    log_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
