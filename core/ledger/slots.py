"""Pick the sheet row a new trade is written to."""

from typing import Any, Sequence


def is_blank_row(row: Sequence[Any]) -> bool:
    return not any(str(cell if cell is not None else "").strip() for cell in row or ())


def find_target_row(existing_rows: Sequence[Sequence[Any]], first_data_row: int) -> int:
    """
    Return the 1-based sheet row for the next trade.

    Reuses the first fully blank row at or after *first_data_row* (a row a user
    cleared by hand), otherwise appends right after the last existing row.
    There is no lock: two writers can pick the same row.
    """
    for offset, row in enumerate(existing_rows):
        if is_blank_row(row):
            return first_data_row + offset
    return first_data_row + len(existing_rows)
