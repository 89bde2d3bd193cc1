from __future__ import annotations

from collections.abc import Sequence

from ..excel.reader import SheetGrid
from ..models.column_roles import ColumnRoleMap
from ..models.concert_record import MedleyEnd, MedleyStart, SetlistEntry, Song
from ..models.config_models import RecordLayout
from .cells import safe_trim

"""Setlist reconstruction.

メドレー枠の列は全行で固定位置にあるため、一次走査ではスキップし、
演奏順の位置にある「メドレー」セル (トリガー) に出会った時だけ枠順に挿入する。

    1曲目列        -> 常に Song (役割マップに関係なく)
    N列以降        -> 左から順に走査、メドレー枠列はスキップ
    トリガーセル   -> MedleyStart, 枠列の非空セルを列順に Song, MedleyEnd
    空セル         -> 何も出力しない
"""

__all__ = [
    "reconstruct_setlist",
    "count_songs",
]


def _medley_block(grid: SheetGrid, row: int, roles: ColumnRoleMap, layout: RecordLayout) -> list[SetlistEntry]:
    block: list[SetlistEntry] = [MedleyStart()]
    for column in roles.medley_slots:
        name = safe_trim(grid.cell(row, column), layout.error_placeholder)
        if name:
            block.append(Song(name))
    block.append(MedleyEnd())
    return block


def reconstruct_setlist(
    grid: SheetGrid, row: int, roles: ColumnRoleMap, layout: RecordLayout | None = None
) -> tuple[SetlistEntry, ...]:
    """Walk one data row and return its setlist in performance order.

    Every trigger cell emits the full medley block, so brackets are always
    matched and never nested. A row with no songs yields an empty tuple.
    """
    layout = layout or RecordLayout()
    entries: list[SetlistEntry] = []

    opening = safe_trim(grid.cell(row, layout.opening_song_column), layout.error_placeholder)
    if opening:
        entries.append(Song(opening))

    for column in range(layout.setlist_start_column, grid.column_count):
        if roles.is_medley_slot(column):
            continue
        text = safe_trim(grid.cell(row, column), layout.error_placeholder)
        if not text:
            continue
        if layout.medley_keyword in text:
            entries.extend(_medley_block(grid, row, roles, layout))
        else:
            entries.append(Song(text))
    return tuple(entries)


def count_songs(setlist: Sequence[SetlistEntry], layout: RecordLayout | None = None) -> int:
    """Number of Song entries whose name does not contain the medley keyword.

    The keyword check only guards against the trigger word leaking into a song
    slot (e.g. the opening column holding "メドレー").
    """
    layout = layout or RecordLayout()
    return sum(
        1 for entry in setlist
        if isinstance(entry, Song) and layout.medley_keyword not in entry.name
    )
