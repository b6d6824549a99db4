"""
Error types raised while building a report.

Everything under ReportError is a user-facing failure: main.py prints it and
exits non-zero. PositionInvariantError sits outside that tree: it
means the range math is broken, not that the user or the upstream API did
something wrong.
"""


class ReportError(RuntimeError):
    """Base class for failures the command line reports to the user."""


class ConnectorError(ReportError):
    """The market data client could not be constructed."""


class FetchError(ReportError):
    """The market data request failed (network or API error response)."""


class DataShapeError(ReportError):
    """The response could not be turned into a usable quote series."""


class InsufficientVariationError(DataShapeError):
    """High equals low over the window, so there is no range to place the price in."""


class PositionInvariantError(AssertionError):
    """A computed range position fell outside [0, 100)."""
