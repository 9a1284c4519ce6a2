"""
Typed records that flow into and out of the trade ledger.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Canonical labels the Trade Log sheet uses in its "Transaction Type" column
TRANSACTION_TYPES = (
    "Buy",
    "Sell",
    "Dividend",
    "Split",
    "Return of capital",
    "Cost Base Adj.",
    "Reinvested capital gain distribution",
)


def normalize_side(value: str) -> str:
    """Map *value* onto a canonical transaction type, case-insensitively.

    Unknown inputs come back trimmed but otherwise untouched.
    """
    trimmed = (value or "").strip()
    for label in TRANSACTION_TYPES:
        if label.lower() == trimmed.lower():
            return label
    return trimmed


class TradeRecord(BaseModel):
    """One trade, exactly as it will be written to the ledger."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field(description="Trade date, kept verbatim (e.g. MM-DD-YYYY).")
    side: Literal["buy", "sell"] = Field(alias="transactionType")
    symbol: str
    quantity: float
    price_per_unit: float = Field(alias="amountPerUnit")
    total_amount: float = Field(default=0.0, alias="totalAmount")
    fees: float = Field(default=0.0, alias="tradingFees")
    account: str = Field(default="", alias="investmentAccount")

    @model_validator(mode="after")
    def _default_total(self) -> "TradeRecord":
        # Frozen model: write through __dict__ during validation only
        if not self.total_amount:
            self.__dict__["total_amount"] = self.quantity * self.price_per_unit
        return self

    @property
    def transaction_type(self) -> str:
        return normalize_side(self.side)


class SummaryQuery(BaseModel):
    """Optional filters for a trade summary. ``None`` means no filter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
