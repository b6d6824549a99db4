import dataclasses

import pytest

from models import QuoteHistory, Report


def test_report_renders_correctly():
    report = Report(
        symbol="AAPL",
        history=QuoteHistory(high=4.0, low=1.0, current=2.0),
        position=25.0,
        recommendation="Buy",
    )
    assert str(report) == "AAPL: Current 2.00 Low 1.00 High 4.00 Position 25.00% - Buy"


def test_report_renders_two_decimals_and_dont_buy():
    report = Report(
        symbol="BRK.B",
        history=QuoteHistory(high=412.3456, low=398.001, current=410.004),
        position=86.6666,
        recommendation="Don't buy",
    )
    assert str(report) == (
        "BRK.B: Current 410.00 Low 398.00 High 412.35 Position 86.67% - Don't buy"
    )


def test_report_and_history_are_immutable():
    history = QuoteHistory(high=4.0, low=1.0, current=2.0)
    report = Report(symbol="AAPL", history=history, position=25.0, recommendation="Buy")

    with pytest.raises(dataclasses.FrozenInstanceError):
        history.high = 5.0  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.position = 10.0  # type: ignore[misc]


def test_default_history_is_empty():
    assert QuoteHistory().is_empty
    assert not QuoteHistory(high=1.0, low=1.0, current=1.0).is_empty
