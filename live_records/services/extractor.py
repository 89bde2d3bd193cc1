from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import tzinfo

import pandas as pd

from ..excel.reader import SheetGrid
from ..models.column_roles import ColumnRoleMap
from ..models.concert_record import ConcertRecord
from ..models.config_models import RecordLayout
from ..models.extraction_result import ExtractionFailure, ExtractionOutcome, ExtractionSuccess
from .cells import safe_trim
from .header_roles import scan_header_roles
from .normalizers import canonicalize_venue, normalize_date
from .row_validation import is_valid_row
from .setlist import count_songs, reconstruct_setlist

"""Record assembly for the records sheet.

Flow per extraction call:
1. grid が 2 行未満 (ヘッダのみ) なら即座に空の結果
2. ヘッダ行を 1 回だけ走査して ColumnRoleMap を作る (以降は読み取り専用)
3. 各データ行: 検証 -> 日付/会場正規化 -> セットリスト再構成 -> ConcertRecord
Records keep source row order; invalid rows are omitted without a tombstone.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_RECORDS_SHEET",
    "assemble_record",
    "assemble_records",
    "extract_live_records",
]

DEFAULT_RECORDS_SHEET = "記録"


def assemble_record(
    grid: SheetGrid,
    row: int,
    roles: ColumnRoleMap,
    layout: RecordLayout,
    timezone: str | tzinfo | None = None,
) -> ConcertRecord | None:
    """Build the ConcertRecord for one data row, or None if the row is invalid."""
    if not is_valid_row(grid, row, layout):
        return None

    placeholder = layout.error_placeholder
    date_string, year, day_of_week = normalize_date(grid.cell(row, layout.date_column), layout, timezone)
    region, venue = canonicalize_venue(
        safe_trim(grid.cell(row, layout.region_column), placeholder),
        safe_trim(grid.cell(row, layout.venue_column), placeholder),
        layout,
    )
    setlist = reconstruct_setlist(grid, row, roles, layout)
    return ConcertRecord(
        tour_name=safe_trim(grid.cell(row, layout.tour_name_column), placeholder),
        date=date_string,
        year=year,
        day_of_week=day_of_week,
        region=region,
        venue=venue,
        song_count=count_songs(setlist, layout),
        setlist=setlist,
    )


def assemble_records(
    grid: SheetGrid,
    layout: RecordLayout | None = None,
    timezone: str | tzinfo | None = None,
) -> ExtractionSuccess:
    """Extract every valid row of the grid in source row order."""
    if grid.row_count < 2:
        return ExtractionSuccess(records=(), scanned_rows=0)

    layout = layout or RecordLayout()
    roles = scan_header_roles(grid.row(0), layout)
    logger.debug("sheet=%s medley_slots=%s", grid.name, list(roles.medley_slots))

    records: list[ConcertRecord] = []
    for row in range(1, grid.row_count):
        record = assemble_record(grid, row, roles, layout, timezone)
        if record is None:
            continue
        records.append(record)

    scanned = grid.row_count - 1
    logger.debug("sheet=%s scanned_rows=%d records=%d", grid.name, scanned, len(records))
    return ExtractionSuccess(records=tuple(records), scanned_rows=scanned)


def extract_live_records(
    sheets: Mapping[str, pd.DataFrame],
    sheet_name: str = DEFAULT_RECORDS_SHEET,
    layout: RecordLayout | None = None,
    timezone: str | tzinfo | None = None,
) -> ExtractionOutcome:
    """Extract ConcertRecords from the records sheet of a loaded workbook.

    A missing records sheet is the only hard failure; it is returned as an
    ExtractionFailure carrying a diagnostic rather than raised.
    """
    df = sheets.get(sheet_name)
    if df is None:
        available = ", ".join(sorted(sheets)) or "(none)"
        return ExtractionFailure(
            sheet_name=sheet_name,
            diagnostic=f"records sheet '{sheet_name}' not found (available: {available})",
        )
    return assemble_records(SheetGrid(df, name=sheet_name), layout, timezone)
