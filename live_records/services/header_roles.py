from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.column_roles import ColumnRoleMap
from ..models.config_models import RecordLayout
from .cells import safe_trim

__all__ = [
    "scan_header_roles",
]


def scan_header_roles(header_row: Sequence[Any], layout: RecordLayout | None = None) -> ColumnRoleMap:
    """Classify header columns, returning the medley slot columns.

    A column is a medley slot iff its normalized header text contains both the
    medley keyword and the slot ordinal keyword (e.g. "メドレー1曲目").
    Every column is inspected exactly once; there is no upper bound on the
    number of slots. No match -> empty map.
    """
    layout = layout or RecordLayout()
    slots: list[int] = []
    for index, header in enumerate(header_row):
        text = safe_trim(header, layout.error_placeholder)
        if layout.medley_keyword in text and layout.medley_slot_keyword in text:
            slots.append(index)
    return ColumnRoleMap(medley_slots=tuple(slots))
