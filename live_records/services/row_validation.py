from __future__ import annotations

from ..excel.reader import SheetGrid
from ..models.config_models import RecordLayout
from .cells import safe_trim

__all__ = [
    "is_valid_row",
]


def is_valid_row(grid: SheetGrid, row: int, layout: RecordLayout) -> bool:
    """A row is a real event iff it has a tour name and a genuine date cell.

    Text that merely looks like a date ("2024/01/01") does not qualify.
    Failing rows are dropped by the caller; this is not an error condition.
    """
    tour_name = safe_trim(grid.cell(row, layout.tour_name_column), layout.error_placeholder)
    if not tour_name:
        return False
    return grid.is_date(row, layout.date_column)
