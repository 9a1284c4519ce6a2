"""
Tests for trade summaries: filters, per-symbol averages and output text.

Usage:
    pytest testing/test_summary.py -v
"""

import pytest

from core.ledger import SummaryQuery
from core.summary import NO_TRADES_MESSAGE, aggregate, filter_rows, parse_date, parse_money, summarize

from conftest import COLUMNS


def _row(date="01-20-2026", side="Buy", symbol="AAPL", qty="10", price="5", total="", fees="0", account="B1"):
    values = [date, side, symbol, qty, price, total, fees, account]
    return dict(zip(COLUMNS.values(), values))


class TestParsing:
    @pytest.mark.parametrize(
        "raw, expected",
        [("$1,234.50", 1234.5), ("10", 10.0), ("", 0.0), (None, 0.0), ("n/a", 0.0)],
    )
    def test_parse_money(self, raw, expected):
        assert parse_money(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "2026-01-20",
            "01-20-2026",
            "01/20/2026",
            "1/20/26",
            "Jan 20, 2026",
            "Jan 20 2026",
            "20 January 2026",
            "January 20th, 2026",
        ],
    )
    def test_parse_date_layouts(self, raw):
        parsed = parse_date(raw)
        assert (parsed.year, parsed.month, parsed.day) == (2026, 1, 20)

    def test_parse_date_rejects_garbage(self):
        assert parse_date("someday") is None
        assert parse_date("") is None


class TestSummarize:
    def test_no_rows(self, schema):
        assert summarize([], SummaryQuery(), schema) == NO_TRADES_MESSAGE

    def test_no_matching_rows(self, schema):
        rows = [_row(symbol="MSFT")]
        assert summarize(rows, SummaryQuery(symbol="AAPL"), schema) == NO_TRADES_MESSAGE

    def test_average_is_total_over_quantity(self, schema):
        text = summarize([_row(qty="10", price="5")], SummaryQuery(), schema)
        assert text == "Total trades: 1.\nAAPL: buy 10 @ avg 5.00, sell 0 @ avg 0.00"

    def test_total_column_wins_over_price(self, schema):
        rows = [_row(qty="2", price="5", total="$12.00")]
        assert "buy 2 @ avg 6.00" in summarize(rows, SummaryQuery(), schema)

    def test_symbols_keep_first_seen_order(self, schema):
        rows = [_row(symbol="msft"), _row(symbol="AAPL"), _row(symbol="MSFT", side="Sell", qty="4", price="10")]
        lines = summarize(rows, SummaryQuery(), schema).splitlines()
        assert lines[0] == "Total trades: 3."
        assert lines[1].startswith("MSFT: buy 10 @ avg 5.00, sell 4 @ avg 10.00")
        assert lines[2].startswith("AAPL:")

    def test_other_transaction_types_are_counted(self, schema):
        rows = [_row(), _row(side="Dividend", qty="", price="", total="3.10")]
        text = summarize(rows, SummaryQuery(), schema)
        assert "other 1 (Dividend)" in text
        assert "buy 10 @ avg 5.00" in text


class TestFilters:
    def test_blank_rows_are_dropped(self, schema):
        rows = [_row(), dict.fromkeys(COLUMNS.values(), "")]
        assert len(filter_rows(rows, SummaryQuery(), schema)) == 1

    def test_symbol_filter_is_case_insensitive(self, schema):
        rows = [_row(symbol="aapl"), _row(symbol="MSFT")]
        kept = filter_rows(rows, SummaryQuery(symbol="AAPL"), schema)
        assert [r["Stock/ETF Symbol"] for r in kept] == ["aapl"]

    def test_date_range_is_inclusive(self, schema):
        rows = [_row(date="01-05-2026"), _row(date="01-10-2026"), _row(date="01-20-2026"), _row(date="02-01-2026")]
        query = SummaryQuery(start_date="2026-01-10", end_date="2026-01-20")
        kept = filter_rows(rows, query, schema)
        assert [r["Date"] for r in kept] == ["01-10-2026", "01-20-2026"]

    def test_month_name_dates_pass_date_filters(self, schema):
        rows = [_row(date="20 January 2026"), _row(date="Dec 31 2025")]
        text = summarize(rows, SummaryQuery(start_date="2026-01-01"), schema)
        assert text == "Total trades: 1.\nAAPL: buy 10 @ avg 5.00, sell 0 @ avg 0.00"

    def test_unparseable_dates_drop_out_of_date_filters(self, schema):
        rows = [_row(date="someday"), _row()]
        assert len(filter_rows(rows, SummaryQuery(start_date="2026-01-01"), schema)) == 1
        assert len(filter_rows(rows, SummaryQuery(), schema)) == 2

    def test_aggregate_groups_by_uppercase_symbol(self, schema):
        rows = [_row(symbol="aapl"), _row(symbol="AAPL", qty="5", price="8")]
        totals = aggregate(rows, schema)
        assert list(totals) == ["AAPL"]
        assert totals["AAPL"].buy_quantity == 15
        assert totals["AAPL"].buy_average == "6.00"
