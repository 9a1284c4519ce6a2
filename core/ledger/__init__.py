"""
Trade ledger: schema, row mapping, slot placement and the sheet client.

All names are re-exported here:
  from core.ledger import LedgerClient, TradeRecord, load_ledger_schema
"""

from core.errors import (
    LedgerError,
    PermissionDenied,
    SheetNotFound,
    BackingStoreError,
    NoMatchingHeaders,
    InvalidTransactionType,
)
from .models import TRANSACTION_TYPES, TradeRecord, SummaryQuery, normalize_side
from .schema import TRADE_FIELDS, LedgerSchema, load_ledger_schema
from .rows import build_row, header_index_from_row, project_row
from .slots import find_target_row
from .capacity import ROW_BUFFER, ensure_capacity
from .client import LedgerClient

__all__ = [
    # Errors
    "LedgerError",
    "PermissionDenied",
    "SheetNotFound",
    "BackingStoreError",
    "NoMatchingHeaders",
    "InvalidTransactionType",
    # Models
    "TRANSACTION_TYPES",
    "TradeRecord",
    "SummaryQuery",
    "normalize_side",
    # Schema
    "TRADE_FIELDS",
    "LedgerSchema",
    "load_ledger_schema",
    # Row mapping / placement
    "build_row",
    "header_index_from_row",
    "project_row",
    "find_target_row",
    "ROW_BUFFER",
    "ensure_capacity",
    # Client
    "LedgerClient",
]
