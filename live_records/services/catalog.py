from __future__ import annotations

import logging
from collections.abc import Mapping

import pandas as pd

from ..excel.reader import SheetGrid
from ..models.catalog import AlbumEntry, AlbumSong
from .cells import ERROR_PLACEHOLDER, coerce_count, safe_trim

"""Album sheet listings.

「アルバム」シートの列配置:
    D列=アルバム名, F列=曲名        (収録曲リスト)
    I列=除外フラグ, J列=アルバム名, K列=演奏曲数  (演奏回数集計)
A missing album sheet is not fatal: both loaders log a warning and return [].
"""

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_ALBUM_SHEET",
    "load_album_catalog",
    "load_album_song_list",
]

DEFAULT_ALBUM_SHEET = "アルバム"

# 0-based column indices
SONG_LIST_ALBUM_COLUMN = 3  # D
SONG_LIST_SONG_COLUMN = 5  # F
EXCLUDE_FLAG_COLUMN = 8  # I
ALBUM_NAME_COLUMN = 9  # J
PLAY_COUNT_COLUMN = 10  # K

EXCLUDE_FLAG = "1"


def _album_grid(sheets: Mapping[str, pd.DataFrame], sheet_name: str) -> SheetGrid | None:
    df = sheets.get(sheet_name)
    if df is None:
        logger.warning("album sheet '%s' not found", sheet_name)
        return None
    return SheetGrid(df, name=sheet_name)


def load_album_catalog(
    sheets: Mapping[str, pd.DataFrame],
    sheet_name: str = DEFAULT_ALBUM_SHEET,
    placeholder: str = ERROR_PLACEHOLDER,
) -> list[AlbumEntry]:
    """Albums with their play counts, excluding flagged rows.

    Rows whose flag cell reads "1" are dropped; a play count that is not a
    number becomes 0, and only rows with a name and a positive count are kept.
    """
    grid = _album_grid(sheets, sheet_name)
    if grid is None or grid.row_count < 2:
        return []

    entries: list[AlbumEntry] = []
    for row in range(1, grid.row_count):
        if safe_trim(grid.cell(row, EXCLUDE_FLAG_COLUMN), placeholder) == EXCLUDE_FLAG:
            continue
        entry = AlbumEntry(
            album_name=safe_trim(grid.cell(row, ALBUM_NAME_COLUMN), placeholder),
            play_count=coerce_count(grid.cell(row, PLAY_COUNT_COLUMN)),
        )
        if entry.album_name and entry.play_count > 0:
            entries.append(entry)
    return entries


def load_album_song_list(
    sheets: Mapping[str, pd.DataFrame],
    sheet_name: str = DEFAULT_ALBUM_SHEET,
    placeholder: str = ERROR_PLACEHOLDER,
) -> list[AlbumSong]:
    """Which song belongs to which album, e.g. [AlbumSong('夏服', 'カブトムシ'), ...]."""
    grid = _album_grid(sheets, sheet_name)
    if grid is None or grid.row_count < 2:
        return []

    songs: list[AlbumSong] = []
    for row in range(1, grid.row_count):
        album = safe_trim(grid.cell(row, SONG_LIST_ALBUM_COLUMN), placeholder)
        song = safe_trim(grid.cell(row, SONG_LIST_SONG_COLUMN), placeholder)
        if album and song:
            songs.append(AlbumSong(album=album, song=song))
    return songs
