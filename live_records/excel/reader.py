from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

"""Workbook reader and the SheetGrid boundary.

ワークブックは header=None で生読みし、行0をヘッダ行、行1以降をデータ行として扱う。
SheetGrid は抽出コアが読む唯一の入力:
- row_count / column_count
- cell(row, column) (範囲外・空セルは None)
- is_date(row, column): 本物の日付セルか (日付っぽい文字列は False)
"""

__all__ = [
    "WorkbookReadError",
    "SheetGrid",
    "is_date_value",
    "is_missing",
    "read_excel_file",
]


class WorkbookReadError(Exception):
    """Raised when a workbook cannot be opened or parsed."""


def is_missing(value: Any) -> bool:
    """True for None, NaN and NaT."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # array-like cell values are never "missing"
        return False


def is_date_value(value: Any) -> bool:
    """True only for genuine date-typed values that map to a calendar instant."""
    if is_missing(value):
        return False
    if isinstance(value, np.datetime64):
        return not np.isnat(value)
    return isinstance(value, (datetime, date))


class SheetGrid:
    """Read-only rectangular view over one raw sheet DataFrame."""

    def __init__(self, df: pd.DataFrame, name: str = "") -> None:
        self._df = df
        self.name = name

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], name: str = "") -> SheetGrid:
        """Build a grid from plain row lists (ragged rows are padded with NaN)."""
        return cls(pd.DataFrame([list(r) for r in rows]), name=name)

    @property
    def row_count(self) -> int:
        return int(self._df.shape[0])

    @property
    def column_count(self) -> int:
        return int(self._df.shape[1])

    def cell(self, row: int, column: int) -> Any:
        if not (0 <= row < self.row_count and 0 <= column < self.column_count):
            return None
        value = self._df.iat[row, column]
        return None if is_missing(value) else value

    def row(self, index: int) -> list[Any]:
        return [self.cell(index, c) for c in range(self.column_count)]

    def is_date(self, row: int, column: int) -> bool:
        return is_date_value(self.cell(row, column))

    def __repr__(self) -> str:  # pragma: no cover (debug aid)
        return f"SheetGrid(name={self.name!r}, rows={self.row_count}, cols={self.column_count})"


def read_excel_file(
    path: Path, target_sheets: Iterable[str] | None = None, keep_na_strings: list[str] | None = None
) -> dict[str, pd.DataFrame]:
    """Read an Excel workbook returning raw DataFrames keyed by sheet name.

    Parameters
    ----------
    path: workbook path
    target_sheets: 対象シート制限 (None なら全シート)
    keep_na_strings: Pandasの既定NaN変換から除外する文字列リスト (例: ['NA'] という曲名を残す)

    Raises
    ------
    WorkbookReadError: the file is missing, empty or not a workbook
    """
    # pandas._libs.parsers.STR_NA_VALUES には既定のNA文字列集合が格納されている
    import pandas._libs.parsers as parsers

    if keep_na_strings:
        default_na = parsers.STR_NA_VALUES.copy()
        na_values: list[str] | None = list(default_na - set(keep_na_strings))
        keep_default_na = False
    else:
        na_values = None
        keep_default_na = True

    targets = set(target_sheets) if target_sheets is not None else None
    dfs: dict[str, pd.DataFrame] = {}
    try:
        with pd.ExcelFile(path) as xls:
            for name in xls.sheet_names:
                if targets is not None and str(name) not in targets:
                    continue
                # ヘッダなしで生読み (行0 = ヘッダ行)
                df = xls.parse(name, header=None, keep_default_na=keep_default_na, na_values=na_values)
                dfs[str(name)] = df
    except Exception as e:
        raise WorkbookReadError(f"cannot read workbook {path}: {e}") from e
    return dfs
