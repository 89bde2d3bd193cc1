from __future__ import annotations
from datetime import date, datetime
from pathlib import Path

import pandas as pd
import pytest

from live_records.excel.reader import SheetGrid, WorkbookReadError, is_date_value, read_excel_file


def test_read_excel_file_returns_raw_sheets(temp_workdir: Path, make_workbook):
    excel = make_workbook(
        temp_workdir, "live.xlsx",
        {
            "記録": [
                ["ツアー名", "日付", "1曲目"],
                ["夏ツアー", datetime(2024, 5, 3), "A"],
            ]
        },
    )
    dfs = read_excel_file(excel)
    assert set(dfs) == {"記録"}
    grid = SheetGrid(dfs["記録"], name="記録")
    # header=None で生読みするのでヘッダも行0として残る
    assert grid.row_count == 2
    assert grid.column_count == 3
    assert grid.row(0) == ["ツアー名", "日付", "1曲目"]
    assert grid.is_date(1, 1)
    assert not grid.is_date(0, 1)


def test_read_excel_file_target_sheets_filter(temp_workdir: Path, make_workbook):
    excel = make_workbook(
        temp_workdir, "multi.xlsx",
        {
            "記録": [["T"], [1]],
            "アルバム": [["T"], [2]],
            "メモ": [["T"], [3]],
        },
    )
    dfs = read_excel_file(excel, target_sheets={"記録", "アルバム", "存在しない"})
    assert set(dfs) == {"記録", "アルバム"}


def test_read_excel_file_invalid_workbook_raises(temp_workdir: Path):
    bad = temp_workdir / "broken.xlsx"
    bad.write_bytes(b"not a workbook")
    with pytest.raises(WorkbookReadError):
        read_excel_file(bad)


def test_read_excel_file_missing_file_raises(temp_workdir: Path):
    with pytest.raises(WorkbookReadError):
        read_excel_file(temp_workdir / "missing.xlsx")


def test_sheet_grid_out_of_range_and_missing_cells():
    grid = SheetGrid.from_rows([["a", "b", "c"], ["x"]])
    assert grid.column_count == 3
    assert grid.cell(1, 0) == "x"
    assert grid.cell(1, 2) is None  # padded
    assert grid.cell(5, 0) is None
    assert grid.cell(0, 10) is None
    assert grid.cell(-1, 0) is None
    assert not grid.is_date(5, 5)


def test_sheet_grid_from_empty_rows():
    grid = SheetGrid.from_rows([])
    assert grid.row_count == 0
    assert grid.column_count == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2024, 5, 3), True),
        (date(2024, 5, 3), True),
        (pd.Timestamp("2024-05-03"), True),
        (pd.NaT, False),
        (None, False),
        ("2024/05/03", False),
        (45415, False),
        (float("nan"), False),
    ],
)
def test_is_date_value(value, expected):
    assert is_date_value(value) is expected
