from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Processing result models for a multi-workbook extraction run."""


@dataclass(frozen=True)
class FileStat:
    """Per-workbook processing statistics."""
    file_name: str  # ファイル名
    status: str  # success/failed
    record_count: int  # 抽出レコード数
    skipped_rows: int  # 無効として除外した行数
    elapsed_seconds: float  # ファイル処理時間


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results for the SUMMARY line and exit code decision."""
    success_files: int
    failed_files: int
    total_records: int
    skipped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
