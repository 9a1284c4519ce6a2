"""
Trade summaries: per-symbol buy/sell totals over rows read from the ledger.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence

from dateutil import parser as date_parser

from core.ledger.models import SummaryQuery
from core.ledger.rows import format_number
from core.ledger.schema import LedgerSchema

NO_TRADES_MESSAGE = "No trades found for that filter."

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def parse_money(value: Optional[str]) -> float:
    """Parse "$1,234.50"-style text; anything unparseable is 0."""
    cleaned = _NON_NUMERIC.sub("", str(value or ""))
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a calendar date in any layout dateutil understands, or return None.

    Ambiguous numeric dates are read month first (01-02-2026 is January 2).
    """
    text = (value or "").strip()
    if not text:
        return None
    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError):
        return None


@dataclass
class SummaryAggregate:
    """Running buy/sell totals for one symbol."""

    buy_quantity: float = 0.0
    buy_value: float = 0.0
    sell_quantity: float = 0.0
    sell_value: float = 0.0
    other_count: int = 0
    other_types: List[str] = field(default_factory=list)

    @staticmethod
    def _average(value: float, quantity: float) -> str:
        return f"{value / quantity:.2f}" if quantity > 0 else "0.00"

    @property
    def buy_average(self) -> str:
        return self._average(self.buy_value, self.buy_quantity)

    @property
    def sell_average(self) -> str:
        return self._average(self.sell_value, self.sell_quantity)

    def format_line(self, symbol: str) -> str:
        line = (
            f"{symbol}: buy {format_number(self.buy_quantity)} @ avg {self.buy_average}, "
            f"sell {format_number(self.sell_quantity)} @ avg {self.sell_average}"
        )
        if self.other_count:
            line += f", other {self.other_count} ({', '.join(self.other_types)})"
        return line


def filter_rows(
    rows: Sequence[Mapping[str, str]],
    query: SummaryQuery,
    schema: LedgerSchema,
) -> List[Mapping[str, str]]:
    """Apply the blank-row, symbol and date-range filters, in that order."""
    symbol_key = schema.column("symbol")
    date_key = schema.column("date")
    start = parse_date(query.start_date)
    end = parse_date(query.end_date)
    date_filtered = bool(date_key and (query.start_date or query.end_date))

    kept = []
    for row in rows:
        if not any(str(v or "").strip() for v in row.values()):
            continue
        if query.symbol and (row.get(symbol_key) or "").strip().upper() != query.symbol.strip().upper():
            continue
        if date_filtered:
            row_date = parse_date(row.get(date_key))
            if row_date is None:
                continue
            if start and row_date < start:
                continue
            if end and row_date > end:
                continue
        kept.append(row)
    return kept


def aggregate(rows: Sequence[Mapping[str, str]], schema: LedgerSchema) -> Dict[str, SummaryAggregate]:
    """Group *rows* by uppercased symbol, keeping first-seen order."""
    symbol_key = schema.column("symbol")
    side_key = schema.column("transactionType")
    qty_key = schema.column("quantity")
    price_key = schema.column("amountPerUnit")
    total_key = schema.column("totalAmount")

    summary: Dict[str, SummaryAggregate] = {}
    for row in rows:
        symbol = ((row.get(symbol_key) or "").strip() or "UNKNOWN").upper()
        raw_side = (row.get(side_key) or "").strip()
        qty = parse_money(row.get(qty_key))
        value = parse_money(row.get(total_key)) or qty * parse_money(row.get(price_key))

        entry = summary.setdefault(symbol, SummaryAggregate())
        if raw_side.lower().startswith("buy"):
            entry.buy_quantity += qty
            entry.buy_value += value
        elif raw_side.lower().startswith("sell"):
            entry.sell_quantity += qty
            entry.sell_value += value
        elif raw_side:
            entry.other_count += 1
            if raw_side not in entry.other_types:
                entry.other_types.append(raw_side)
    return summary


def summarize(
    rows: Sequence[Mapping[str, str]],
    query: SummaryQuery,
    schema: LedgerSchema,
) -> str:
    """Plain-text summary of the trades in *rows* matching *query*."""
    filtered = filter_rows(rows, query, schema)
    if not filtered:
        return NO_TRADES_MESSAGE

    lines = [entry.format_line(symbol) for symbol, entry in aggregate(filtered, schema).items()]
    return f"Total trades: {len(filtered)}.\n" + "\n".join(lines)
