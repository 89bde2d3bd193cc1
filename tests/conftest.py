# Shared pytest fixtures
from __future__ import annotations
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import pandas as pd
import pytest

# 「記録」シートのヘッダ (0-based: E=4 ツアー名, H=7 日付, K=10 地域, L=11 会場, M=12 1曲目)
RECORDS_HEADER = [
    "No", "公演ID", "種別", "年", "ツアー名", "公演名", "回数", "日付", "開演", "備考",
    "地域", "会場", "1曲目", "2曲目", "3曲目", "4曲目", "5曲目",
    "メドレー1曲目", "メドレー2曲目", "メドレー3曲目",
]
SETLIST_COLUMNS = list(range(12, 17))  # 1曲目..5曲目
MEDLEY_COLUMNS = [17, 18, 19]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./output
timezone: Asia/Tokyo
records_sheet: 記録
album_sheet: アルバム
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "extract.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def records_header() -> list[str]:
    return list(RECORDS_HEADER)


@pytest.fixture()
def make_row() -> Callable[..., list[Any]]:
    """Factory for one 記録 data row laid out like RECORDS_HEADER."""
    def _make(
        tour: Any = "ツアー2024",
        date: Any = datetime(2024, 5, 3),
        region: Any = "関東",
        venue: Any = "日本武道館",
        songs: list[Any] | None = None,
        medley: list[Any] | None = None,
    ) -> list[Any]:
        row: list[Any] = [None] * len(RECORDS_HEADER)
        row[4] = tour
        row[7] = date
        row[10] = region
        row[11] = venue
        for col, song in zip(SETLIST_COLUMNS, songs or [], strict=False):
            row[col] = song
        for col, song in zip(MEDLEY_COLUMNS, medley or [], strict=False):
            row[col] = song
        return row
    return _make


@pytest.fixture()
def make_workbook() -> Callable[[Path, str, dict[str, list[list[object]]]], Path]:
    """Write a real .xlsx (openpyxl) with the given sheets, no header/index."""
    def _make(directory: Path, name: str, sheets: dict[str, list[list[object]]]) -> Path:
        p = directory / name
        with pd.ExcelWriter(p, engine="openpyxl") as writer:
            for sheet, rows in sheets.items():
                pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
        return p
    return _make
