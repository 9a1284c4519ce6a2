"""In-memory spreadsheet with Google-Sheets-like A1 semantics and grid limits."""

import re
import threading
from typing import Any, Dict, List, Optional, Tuple

from .base import SheetProperties, SheetStore

_CELLS_RE = re.compile(r"^([A-Z]*)(\d*)(?::([A-Z]*)(\d*))?$")


def column_index(letters: str) -> int:
    """Zero-based index of a column label: A -> 0, Z -> 25, AA -> 26."""
    index = 0
    for ch in letters:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def _split_range(range_a1: str) -> Tuple[str, str]:
    sheet, _, cells = range_a1.rpartition("!")
    if sheet.startswith("'") and sheet.endswith("'"):
        sheet = sheet[1:-1].replace("''", "'")
    return sheet, cells


class GridLimitExceeded(Exception):
    """Write outside the tab's current grid (the real API rejects these too)."""


class InMemorySheetStore(SheetStore):
    """Thread-safe in-memory spreadsheet.

    Suitable for tests and local runs without Google credentials. Writes past
    the grid size fail, so callers must resize first just as with the real API.
    """

    def __init__(self, spreadsheet_id: str = "in-memory", client_email: str = ""):
        self.spreadsheet_id = spreadsheet_id
        self.client_email = client_email
        self._sheets: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()
        self.resize_calls: List[Tuple[int, int, int]] = []

    # ── Setup helpers ────────────────────────────────────────────────────
    def add_sheet(
        self,
        title: str,
        rows: Optional[List[List[Any]]] = None,
        row_count: int = 1000,
        column_count: int = 26,
    ) -> int:
        """Create a tab pre-filled with *rows*; returns its sheet id."""
        with self._lock:
            sheet_id = len(self._sheets) + 1
            self._sheets[title] = {
                "id": sheet_id,
                "cells": [list(r) for r in rows or []],
                "row_count": max(row_count, len(rows or [])),
                "column_count": column_count,
            }
            return sheet_id

    def rows(self, title: str) -> List[List[str]]:
        """Raw copy of every stored row of *title*."""
        with self._lock:
            return [list(r) for r in self._sheet(title)["cells"]]

    def _sheet(self, title: str) -> Dict[str, Any]:
        if title not in self._sheets:
            raise KeyError(f"Unable to parse range: {title}")
        return self._sheets[title]

    # ── SheetStore ───────────────────────────────────────────────────────
    def read_values(self, range_a1: str) -> List[List[Any]]:
        title, cells = _split_range(range_a1)
        match = _CELLS_RE.match(cells)
        if not match:
            raise ValueError(f"Unsupported range: {range_a1}")
        start_col, start_row, end_col, end_row = match.groups()

        with self._lock:
            data = self._sheet(title)["cells"]
            first = int(start_row) - 1 if start_row else 0
            last = int(end_row) if end_row else len(data)
            col_from = column_index(start_col) if start_col else 0
            col_to = column_index(end_col) + 1 if end_col else None

            values = []
            for row in data[first:last]:
                picked = [("" if c is None else c) for c in row[col_from:col_to]]
                while picked and picked[-1] == "":
                    picked.pop()
                values.append(picked)

        # The API omits trailing empty rows
        while values and not values[-1]:
            values.pop()
        return values

    def write_values(self, range_a1: str, rows: List[List[str]], value_input_option: str = "USER_ENTERED") -> None:
        title, cells = _split_range(range_a1)
        match = _CELLS_RE.match(cells)
        if not match or not match.group(2):
            raise ValueError(f"Unsupported range: {range_a1}")
        col_from = column_index(match.group(1) or "A")
        row_from = int(match.group(2)) - 1

        with self._lock:
            sheet = self._sheet(title)
            for offset, values in enumerate(rows):
                row_number = row_from + offset
                if row_number >= sheet["row_count"] or col_from + len(values) > sheet["column_count"]:
                    raise GridLimitExceeded(
                        f"Range ({title}!{cells}) exceeds grid limits. "
                        f"Max rows: {sheet['row_count']}, max columns: {sheet['column_count']}"
                    )
                data = sheet["cells"]
                while len(data) <= row_number:
                    data.append([])
                target = data[row_number]
                while len(target) < col_from + len(values):
                    target.append("")
                target[col_from:col_from + len(values)] = list(values)

    def list_sheets(self) -> List[SheetProperties]:
        with self._lock:
            return [
                SheetProperties(s["id"], title, s["row_count"], s["column_count"])
                for title, s in self._sheets.items()
            ]

    def resize_sheet(self, sheet_id: int, row_count: int, column_count: int) -> None:
        with self._lock:
            for sheet in self._sheets.values():
                if sheet["id"] == sheet_id:
                    sheet["row_count"] = row_count
                    sheet["column_count"] = column_count
                    self.resize_calls.append((sheet_id, row_count, column_count))
                    return
        raise KeyError(f"No grid with id: {sheet_id}")
