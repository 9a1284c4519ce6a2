"""Grow the ledger tab before writing past its current grid."""

from core.sheets.base import SheetStore

from core.errors import SheetNotFound

# Extra rows added on every resize so consecutive appends rarely resize again
ROW_BUFFER = 10


def ensure_capacity(store: SheetStore, sheet_label: str, min_rows: int, min_columns: int) -> bool:
    """
    Make sure *sheet_label* has at least *min_rows* x *min_columns* cells.

    Returns True when a resize was issued, False when the grid was already
    large enough (no write is made in that case).
    """
    with store.guarded("reading sheet metadata"):
        sheets = store.list_sheets()

    sheet = next((s for s in sheets if s.title == sheet_label), None)
    if sheet is None:
        raise SheetNotFound.tab(store.spreadsheet_id, sheet_label)

    if sheet.row_count >= min_rows and sheet.column_count >= min_columns:
        return False

    target_rows = max(sheet.row_count, min_rows + ROW_BUFFER)
    target_columns = max(sheet.column_count, min_columns)
    print(
        f"[LEDGER] Resizing '{sheet_label}' from {sheet.row_count}x{sheet.column_count} "
        f"to {target_rows}x{target_columns}"
    )
    with store.guarded("resizing the trade log sheet"):
        store.resize_sheet(sheet.sheet_id, target_rows, target_columns)
    return True
