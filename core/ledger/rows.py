"""
Row mapping between TradeRecords and positional sheet rows.

Columns are addressed by header text, never by fixed position, so the sheet
can be reordered between calls.
"""

import json
from typing import Any, Dict, List, Sequence

from config import DEFAULT_INVESTMENT_ACCOUNT
from core.errors import InvalidTransactionType, NoMatchingHeaders

from .models import TRANSACTION_TYPES, TradeRecord
from .schema import TRADE_FIELDS, LedgerSchema

HeaderIndex = Dict[str, int]


def header_index_from_row(header_row: Sequence[Any]) -> HeaderIndex:
    """Map trimmed, non-empty header text to its zero-based column."""
    index: HeaderIndex = {}
    for i, header in enumerate(header_row):
        if isinstance(header, str) and header.strip():
            index[header.strip()] = i
    return index


def format_number(value: float) -> str:
    """10.0 -> "10", 192.5 -> "192.5" (never scientific notation)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def trade_values(trade: TradeRecord, default_account: str = DEFAULT_INVESTMENT_ACCOUNT) -> Dict[str, Any]:
    """Logical field name -> value to store.

    Validated records are always buy or sell. The vocabulary check guards
    records built without validation (model_construct, model_copy).
    """
    side = trade.transaction_type
    if side not in TRANSACTION_TYPES:
        raise InvalidTransactionType(
            f"Invalid transaction type '{trade.side}'. "
            f"Use one of: {', '.join(TRANSACTION_TYPES)}."
        )
    return {
        "date": trade.date,
        "transactionType": side,
        "symbol": trade.symbol,
        "quantity": trade.quantity,
        "amountPerUnit": trade.price_per_unit,
        "totalAmount": trade.total_amount,
        "tradingFees": trade.fees,
        "investmentAccount": trade.account.strip() or default_account,
    }


def build_row(
    trade: TradeRecord,
    header_index: HeaderIndex,
    schema: LedgerSchema,
    default_account: str = DEFAULT_INVESTMENT_ACCOUNT,
) -> List[str]:
    """
    Build a positional row for *trade* aligned with the live header row.

    Fields whose header is unconfigured or missing from the sheet are left
    blank. Raises NoMatchingHeaders when no configured field resolves.
    """
    values = trade_values(trade, default_account)

    resolved: Dict[int, str] = {}
    for name in TRADE_FIELDS:
        header = schema.column(name)
        if header and header in header_index:
            resolved[header_index[header]] = _cell(values[name])

    if not resolved:
        configured = [schema.column(name) for name in TRADE_FIELDS if schema.column(name)]
        error = NoMatchingHeaders(configured, list(header_index))
        print(
            "[LEDGER] No matching headers found when building trade row: "
            + json.dumps(
                {
                    "sheetName": schema.sheet_label,
                    "headerRow": schema.header_row,
                    "configuredHeaders": error.configured,
                    "sheetHeaders": error.sheet_headers,
                    "missingHeaders": error.missing,
                },
                indent=2,
            )
        )
        raise error

    row = [""] * (max(resolved) + 1)
    for idx, text in resolved.items():
        row[idx] = text
    return row


def project_row(row: Sequence[Any], header_index: HeaderIndex) -> Dict[str, str]:
    """Key a raw sheet row by header text; missing cells become ""."""
    ordered = sorted(header_index.items(), key=lambda item: item[1])
    entry: Dict[str, str] = {}
    for header, idx in ordered:
        value = row[idx] if idx < len(row) else None
        entry[header] = "" if value is None else str(value)
    return entry
