"""
Ledger schema: where the trade log lives and which header holds each field.

Loaded once at startup from a JSON file shaped like::

    {
      "sheetName": "Trade Log",
      "headerRow": 1,
      "dataStartRow": 2,            # optional, defaults to headerRow + 1
      "columns": {"date": "Date", "symbol": "Stock/ETF Symbol", ...}
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

# Logical trade fields, in the order they are written
TRADE_FIELDS = (
    "date",
    "transactionType",
    "symbol",
    "quantity",
    "amountPerUnit",
    "totalAmount",
    "tradingFees",
    "investmentAccount",
)


@dataclass(frozen=True)
class LedgerSchema:
    """Static description of the trade log sheet."""

    sheet_label: str
    header_row: int
    columns: Mapping[str, str] = field(default_factory=dict)
    data_start_row: Optional[int] = None

    def __post_init__(self):
        if self.header_row < 1:
            raise ValueError(f"headerRow must be a positive row number, got {self.header_row}")
        if self.data_start_row is not None and self.data_start_row < 1:
            raise ValueError(f"dataStartRow must be a positive row number, got {self.data_start_row}")
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @property
    def first_data_row(self) -> int:
        return self.data_start_row or self.header_row + 1

    def column(self, name: str) -> str:
        """Header text configured for *name*, or "" when unconfigured."""
        return (self.columns.get(name) or "").strip()

    @classmethod
    def from_dict(cls, raw: dict) -> "LedgerSchema":
        return cls(
            sheet_label=raw["sheetName"],
            header_row=int(raw["headerRow"]),
            columns=raw.get("columns", {}),
            data_start_row=int(raw["dataStartRow"]) if raw.get("dataStartRow") else None,
        )


def load_ledger_schema(path: Path) -> LedgerSchema:
    """Read the trade log configuration file."""
    with open(path, "r", encoding="utf-8") as f:
        return LedgerSchema.from_dict(json.load(f))
