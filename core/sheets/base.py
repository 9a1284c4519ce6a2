"""Abstract base class for the row-oriented store behind the trade ledger."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, List

from core.errors import BackingStoreError, LedgerError


@dataclass(frozen=True)
class SheetProperties:
    """Identity and grid size of one tab inside a spreadsheet."""

    sheet_id: int
    title: str
    row_count: int
    column_count: int


class SheetStore(ABC):
    """Minimal spreadsheet interface the ledger needs.

    Ranges use A1 notation (``"Trade Log!A2:ZZ"``). Implementations raise
    their native transport errors; callers wrap calls in :meth:`guarded`
    to get a LedgerError with a remediation hint instead.
    """

    spreadsheet_id: str = ""
    client_email: str = ""

    @abstractmethod
    def read_values(self, range_a1: str) -> List[List[Any]]:
        """Return the rows in *range_a1*; trailing empty rows/cells may be omitted."""
        pass

    @abstractmethod
    def write_values(self, range_a1: str, rows: List[List[str]], value_input_option: str = "USER_ENTERED") -> None:
        """Write *rows* starting at the top-left cell of *range_a1*."""
        pass

    @abstractmethod
    def list_sheets(self) -> List[SheetProperties]:
        """Return the properties of every tab in the spreadsheet."""
        pass

    @abstractmethod
    def resize_sheet(self, sheet_id: int, row_count: int, column_count: int) -> None:
        """Set the grid size of the tab identified by *sheet_id*."""
        pass

    def translate_error(self, error: Exception, action: str) -> LedgerError:
        """Turn a transport error into a LedgerError. Override per backend."""
        return BackingStoreError(
            f"Spreadsheet error while {action} for spreadsheet {self.spreadsheet_id}: {error}",
            self.spreadsheet_id,
        )

    @contextmanager
    def guarded(self, action: str) -> Iterator[None]:
        """Re-raise anything but LedgerErrors as a translated LedgerError."""
        try:
            yield
        except LedgerError:
            raise
        except Exception as exc:
            raise self.translate_error(exc, action) from exc


def a1_range(sheet_label: str, cells: str) -> str:
    """Qualify *cells* with a quoted sheet name: ``'Trade Log'!A2:ZZ``."""
    quoted = sheet_label.replace("'", "''")
    return f"'{quoted}'!{cells}"
