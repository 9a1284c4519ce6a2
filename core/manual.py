"""
Manual trade parser used when the language model can't be reached.

Reads "Label: value" lines such as::

    - Transaction Type: buy
    - **Stock/ETF Symbol:** SPUS
    - Quantity of Units: 10

No network calls are made here.
"""

import re
from typing import Any, Dict, List

from core.ledger.models import TradeRecord
from core.ledger.rows import format_number
from core.summary import parse_money

_LABEL_VALUE = re.compile(r"^([^:]+):\s*(.+)$")
_BULLET = re.compile(r"^[-*•]+\s*")

# Field name -> label shown to the user when the field is missing
REQUIRED_FIELDS = {
    "transactionType": "Transaction Type",
    "symbol": "Stock/ETF Symbol",
    "quantity": "Quantity of Units",
    "amountPerUnit": "Amount per unit",
    "date": "Date",
    "totalAmount": "Total Amount (before fees)",
    "tradingFees": "Trading Fees",
    "investmentAccount": "Investment Account",
}

MANUAL_FORMAT_EXAMPLE = (
    "- Transaction Type: buy\n"
    "- Stock/ETF Symbol: SPUS\n"
    "- Quantity of Units: 10\n"
    "- Amount per unit: 55.00\n"
    "- Date: 01-20-2026\n"
    "- Total Amount (before fees): 550.00\n"
    "- Trading Fees: 0\n"
    "- Investment Account: Brokerage 1"
)


def normalize_line(line: str) -> str:
    """Drop bold markers and a leading bullet."""
    return _BULLET.sub("", line.replace("**", "").strip()).strip()


def parse_manual(message: str) -> Dict[str, Any]:
    """Extract whichever trade fields *message* labels. Unknown labels are ignored."""
    fields: Dict[str, Any] = {}
    lines = [normalize_line(line) for line in message.splitlines()]

    for line in filter(None, lines):
        match = _LABEL_VALUE.match(line)
        if not match:
            continue
        label = match.group(1).strip().lower()
        value = match.group(2).strip()

        if "transaction type" in label:
            fields["transactionType"] = "sell" if "sell" in value.lower() else "buy"
        elif "stock" in label or "symbol" in label:
            fields["symbol"] = value.upper()
        elif "quantity" in label:
            fields["quantity"] = parse_money(value)
        elif "amount per unit" in label or "price per unit" in label:
            fields["amountPerUnit"] = parse_money(value)
        elif "total amount" in label:
            fields["totalAmount"] = parse_money(value)
        elif "trading fees" in label or label == "fees":
            fields["tradingFees"] = parse_money(value)
        elif "investment account" in label or label == "account":
            fields["investmentAccount"] = value
        elif label == "date":
            fields["date"] = value

    return fields


def missing_fields(fields: Dict[str, Any]) -> List[str]:
    """User-facing labels of the required fields *fields* still lacks.

    Trading fees may legitimately be 0; every other field must be non-empty
    and non-zero.
    """
    missing = []
    for name, label in REQUIRED_FIELDS.items():
        value = fields.get(name)
        if name == "tradingFees":
            if value is None:
                missing.append(label)
        elif not value:
            missing.append(label)
    return missing


def to_trade(fields: Dict[str, Any]) -> TradeRecord:
    """Build a TradeRecord from a complete set of manually parsed fields."""
    return TradeRecord(
        date=fields["date"],
        side=fields["transactionType"],
        symbol=fields["symbol"],
        quantity=fields["quantity"],
        price_per_unit=fields["amountPerUnit"],
        total_amount=fields.get("totalAmount") or 0.0,
        fees=fields.get("tradingFees") or 0.0,
        account=fields["investmentAccount"],
    )


def manual_trade_prompt(missing: List[str]) -> str:
    """Instructions returned when the AI is down and the message is incomplete."""
    missing_text = f"Missing: {', '.join(missing)}. " if missing else "I couldn't parse all required fields. "
    return (
        "I can't reach the AI right now (API key issue). "
        + missing_text
        + "You can still log a trade by sending details in this format:\n"
        + MANUAL_FORMAT_EXAMPLE
    )


def manual_trade_confirmation(trade: TradeRecord) -> str:
    """Deterministic reply after a manually parsed trade is written."""
    return (
        "Logged trade manually:\n"
        f"- Transaction Type: {trade.side}\n"
        f"- Stock/ETF Symbol: {trade.symbol}\n"
        f"- Quantity of Units: {format_number(trade.quantity)}\n"
        f"- Amount per unit: {format_number(trade.price_per_unit)}\n"
        f"- Date: {trade.date}\n"
        f"- Total Amount (before fees): {format_number(trade.total_amount)}\n"
        f"- Trading Fees: {format_number(trade.fees)}\n"
        f"- Investment Account: {trade.account}"
    )
