"""Spreadsheet backends for the trade ledger."""

from .base import SheetProperties, SheetStore, a1_range
from .memory import InMemorySheetStore

__all__ = [
    # Base interface
    "SheetStore",
    "SheetProperties",
    "a1_range",
    # Implementations (GoogleSheetStore lives in .google, imported lazily)
    "InMemorySheetStore",
]
