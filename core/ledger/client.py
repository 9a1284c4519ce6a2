"""
Ledger client: append trades to, and read trades from, the trade log sheet.

Each operation re-reads the header row, so columns may be moved or renamed
in the sheet between calls without restarting the service.
"""

from typing import Dict, List

from config import DEFAULT_INVESTMENT_ACCOUNT
from core.sheets.base import SheetStore, a1_range

from .capacity import ensure_capacity
from .models import TradeRecord
from .rows import HeaderIndex, build_row, header_index_from_row, project_row
from .schema import LedgerSchema
from .slots import find_target_row

# Right-most column read when scanning data rows
LAST_COLUMN = "ZZ"


class LedgerClient:
    """Reads and writes TradeRecords through a SheetStore."""

    def __init__(self, store: SheetStore, schema: LedgerSchema, default_account: str = DEFAULT_INVESTMENT_ACCOUNT):
        self.store = store
        self.schema = schema
        self.default_account = default_account

    def _read_header_index(self) -> HeaderIndex:
        row = self.schema.header_row
        with self.store.guarded("reading headers"):
            values = self.store.read_values(a1_range(self.schema.sheet_label, f"{row}:{row}"))
        return header_index_from_row(values[0] if values else [])

    def _read_data_rows(self) -> List[List[str]]:
        cells = f"A{self.schema.first_data_row}:{LAST_COLUMN}"
        with self.store.guarded("reading trade rows"):
            return self.store.read_values(a1_range(self.schema.sheet_label, cells))

    def with_default_account(self, trade: TradeRecord) -> TradeRecord:
        """*trade* as it will be stored: a blank account becomes the default."""
        if trade.account.strip():
            return trade
        return trade.model_copy(update={"account": self.default_account})

    def append_trade(self, trade: TradeRecord) -> int:
        """Write *trade* into the first free row. Returns the sheet row used."""
        header_index = self._read_header_index()
        row = build_row(trade, header_index, self.schema, self.default_account)
        existing = self._read_data_rows()
        target_row = find_target_row(existing, self.schema.first_data_row)

        ensure_capacity(self.store, self.schema.sheet_label, target_row, len(row))

        with self.store.guarded("appending a trade row"):
            self.store.write_values(
                a1_range(self.schema.sheet_label, f"A{target_row}"),
                [row],
                value_input_option="USER_ENTERED",
            )
        print(f"[LEDGER] Logged {trade.transaction_type} {trade.quantity:g} {trade.symbol} at row {target_row}")
        return target_row

    def read_all_trades(self) -> List[Dict[str, str]]:
        """Every data row keyed by header text, in sheet order."""
        header_index = self._read_header_index()
        rows = self._read_data_rows()
        return [project_row(row, header_index) for row in rows]
