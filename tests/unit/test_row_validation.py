from __future__ import annotations

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from live_records.excel.reader import SheetGrid
from live_records.models.config_models import RecordLayout
from live_records.services.row_validation import is_valid_row


def _grid(header, *rows) -> SheetGrid:
    return SheetGrid.from_rows([header, *rows])


def test_valid_row(records_header, make_row):
    grid = _grid(records_header, make_row())
    assert is_valid_row(grid, 1, RecordLayout())


@pytest.mark.parametrize("tour", [None, "", "   ", "#VALUE!", float("nan")])
def test_missing_tour_name_is_invalid(records_header, make_row, tour):
    grid = _grid(records_header, make_row(tour=tour))
    assert not is_valid_row(grid, 1, RecordLayout())


@pytest.mark.parametrize("raw_date", [None, "2024/05/03", "2024-05-03", 45415, pd.NaT, "未定"])
def test_non_date_cell_is_invalid(records_header, make_row, raw_date):
    grid = _grid(records_header, make_row(date=raw_date))
    assert not is_valid_row(grid, 1, RecordLayout())


@pytest.mark.parametrize(
    "raw_date",
    [datetime(2024, 5, 3, 18, 0), date(2024, 5, 3), pd.Timestamp("2024-05-03"), np.datetime64("2024-05-03")],
)
def test_date_typed_values_are_valid(records_header, make_row, raw_date):
    grid = _grid(records_header, make_row(date=raw_date))
    assert is_valid_row(grid, 1, RecordLayout())


def test_short_row_is_invalid():
    # 日付列まで届かない行
    grid = SheetGrid.from_rows([["a", "b", "c", "d", "ツアー名"], [None, None, None, None, "ツアー"]])
    assert not is_valid_row(grid, 1, RecordLayout())
