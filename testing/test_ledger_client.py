"""
Tests for slot placement, grid capacity and the ledger client, run against
the in-memory sheet (plus error translation for real Google API errors).

Usage:
    pytest testing/test_ledger_client.py -v
"""

import json

import httplib2
import pytest
from googleapiclient.errors import HttpError

from core.errors import BackingStoreError, PermissionDenied, SheetNotFound
from core.ledger import ROW_BUFFER, LedgerClient, SummaryQuery, TradeRecord, ensure_capacity, find_target_row
from core.sheets import InMemorySheetStore
from core.sheets.google import translate_sheets_error
from core.summary import aggregate, filter_rows

from conftest import HEADERS, SHEET


def _trade(symbol="AAPL", side="buy", quantity=10, price=192.5, date="01-20-2026"):
    return TradeRecord(
        date=date,
        side=side,
        symbol=symbol,
        quantity=quantity,
        price_per_unit=price,
        fees=0,
        account="Brokerage 1",
    )


def _http_error(status: int, api_status: str = "", message: str = "") -> HttpError:
    resp = httplib2.Response({"status": status})
    resp.reason = "error"
    body = {"error": {"code": status, "status": api_status, "message": message}}
    return HttpError(resp, json.dumps(body).encode("utf-8"))


# ── Slot finder ──────────────────────────────────────────────────────────────


class TestFindTargetRow:
    def test_empty_sheet_starts_at_first_data_row(self):
        assert find_target_row([], 2) == 2

    def test_all_blank_rows_reuse_first(self):
        assert find_target_row([[], ["", "  "], [""]], 5) == 5

    def test_no_blank_rows_appends(self):
        rows = [["a"], ["b"], ["c"]]
        assert find_target_row(rows, 2) == 2 + len(rows)

    def test_reuses_cleared_row_in_the_middle(self):
        assert find_target_row([["a"], [" ", ""], ["c"]], 2) == 3


# ── Capacity manager ─────────────────────────────────────────────────────────


class TestEnsureCapacity:
    def test_noop_when_grid_is_large_enough(self, store):
        assert ensure_capacity(store, SHEET, 5, 8) is False
        assert store.resize_calls == []

    def test_grows_rows_with_buffer(self, store):
        assert ensure_capacity(store, SHEET, 6, 8) is True
        (_, rows, columns), = store.resize_calls
        assert rows == 6 + ROW_BUFFER
        assert columns == 8

    def test_column_shortfall_still_adds_row_buffer(self, store):
        ensure_capacity(store, SHEET, 3, 12)
        (_, rows, columns), = store.resize_calls
        assert rows == 3 + ROW_BUFFER
        assert columns == 12

    def test_never_shrinks(self):
        store = InMemorySheetStore()
        store.add_sheet(SHEET, row_count=1000, column_count=26)
        ensure_capacity(store, SHEET, 5, 30)
        (_, rows, columns), = store.resize_calls
        assert (rows, columns) == (1000, 30)

    def test_unknown_sheet(self, store):
        with pytest.raises(SheetNotFound) as excinfo:
            ensure_capacity(store, "Missing Tab", 2, 2)
        assert "sheet-123" in str(excinfo.value)


# ── Ledger client ────────────────────────────────────────────────────────────


class TestLedgerClient:
    def test_append_writes_first_data_row(self, ledger, store):
        assert ledger.append_trade(_trade()) == 2
        assert store.rows(SHEET)[1] == ["01-20-2026", "Buy", "AAPL", "10", "192.5", "1925", "0", "Brokerage 1"]

    def test_append_reuses_cleared_row(self, ledger, store):
        ledger.append_trade(_trade("AAPL"))
        ledger.append_trade(_trade("MSFT"))
        store.write_values(f"'{SHEET}'!A2", [[""] * 8])

        assert ledger.append_trade(_trade("NVDA")) == 2
        assert [r[2] for r in store.rows(SHEET)[1:]] == ["NVDA", "MSFT"]

    def test_append_resizes_full_sheet(self, ledger, store):
        for symbol in ["A", "B", "C", "D"]:
            ledger.append_trade(_trade(symbol))
        assert store.resize_calls == []

        assert ledger.append_trade(_trade("E")) == 6
        assert store.resize_calls[-1][1] == 6 + ROW_BUFFER
        assert store.rows(SHEET)[5][2] == "E"

    def test_headers_are_reread_every_call(self, ledger, store):
        ledger.append_trade(_trade("AAPL"))
        # Someone swaps two columns in the sheet between calls
        reordered = HEADERS[:]
        reordered[0], reordered[2] = reordered[2], reordered[0]
        store.write_values(f"'{SHEET}'!A1", [reordered])

        ledger.append_trade(_trade("MSFT"))
        assert store.rows(SHEET)[2][0] == "MSFT"
        assert store.rows(SHEET)[2][2] == "01-20-2026"

    def test_read_all_trades_keys_by_header(self, ledger):
        ledger.append_trade(_trade("AAPL"))
        ledger.append_trade(_trade("MSFT", side="sell", quantity=3, price=400))

        rows = ledger.read_all_trades()
        assert [r["Stock/ETF Symbol"] for r in rows] == ["AAPL", "MSFT"]
        assert rows[1]["Transaction Type"] == "Sell"
        assert set(rows[0]) == set(HEADERS)

    def test_round_trip_through_summary(self, ledger, schema):
        ledger.append_trade(_trade("AAPL", quantity=10))
        ledger.append_trade(_trade("MSFT", quantity=4))

        rows = ledger.read_all_trades()
        filtered = filter_rows(rows, SummaryQuery(symbol="aapl"), schema)
        totals = aggregate(filtered, schema)["AAPL"]
        assert totals.buy_quantity == 10
        assert totals.sell_quantity == 0

    def test_with_default_account(self, ledger):
        blank = _trade().model_copy(update={"account": "  "})
        assert ledger.with_default_account(blank).account == "Default Broker"
        assert ledger.with_default_account(_trade()).account == "Brokerage 1"

    def test_missing_tab_is_reported(self, schema):
        store = InMemorySheetStore(spreadsheet_id="sheet-123")
        store.add_sheet("Other", rows=[HEADERS])
        client = LedgerClient(store, schema)
        with pytest.raises(BackingStoreError) as excinfo:
            client.append_trade(_trade())
        assert "reading headers" in str(excinfo.value)
        assert "sheet-123" in str(excinfo.value)


# ── Google error translation ─────────────────────────────────────────────────


class TestTranslateSheetsError:
    def test_permission_denied(self):
        error = translate_sheets_error(_http_error(403), "sheet-1", "bot@example.com", "reading headers")
        assert isinstance(error, PermissionDenied)
        assert "bot@example.com" in str(error)
        assert "sheet-1" in str(error)

    def test_permission_denied_by_api_status(self):
        error = translate_sheets_error(_http_error(400, "PERMISSION_DENIED"), "sheet-1", "bot@example.com", "x")
        assert isinstance(error, PermissionDenied)

    def test_not_found(self):
        error = translate_sheets_error(_http_error(404, "NOT_FOUND"), "sheet-1", "bot@example.com", "reading rows")
        assert isinstance(error, SheetNotFound)
        assert "GOOGLE_SHEETS_SPREADSHEET_ID (sheet-1)" in str(error)

    def test_other_errors_keep_api_message(self):
        error = translate_sheets_error(
            _http_error(400, "INVALID_ARGUMENT", "Unable to parse range"),
            "sheet-1",
            "bot@example.com",
            "appending a trade row",
        )
        assert isinstance(error, BackingStoreError)
        assert "Unable to parse range" in str(error)
        assert "appending a trade row" in str(error)

    def test_non_http_errors(self):
        error = translate_sheets_error(TimeoutError("timed out"), "sheet-1", "", "reading headers")
        assert isinstance(error, BackingStoreError)
        assert "timed out" in str(error)
