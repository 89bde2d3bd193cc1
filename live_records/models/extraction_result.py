from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .concert_record import ConcertRecord

"""Extraction outcome models.

抽出結果は 2 種類:
- ExtractionSuccess: 有効行のみのレコード列 (無効行は黙って除外、部分結果も成功扱い)
- ExtractionFailure: 記録シート自体が無い等の致命的失敗。診断メッセージを保持
"""

__all__ = [
    "ExtractionSuccess",
    "ExtractionFailure",
    "ExtractionOutcome",
]


@dataclass(frozen=True)
class ExtractionSuccess:
    """Records in source row order, plus how many data rows were scanned."""
    records: tuple[ConcertRecord, ...]
    scanned_rows: int = 0

    ok: ClassVar[bool] = True

    @property
    def skipped_rows(self) -> int:
        return self.scanned_rows - len(self.records)


@dataclass(frozen=True)
class ExtractionFailure:
    """Hard failure: the extraction call was aborted."""
    sheet_name: str
    diagnostic: str  # human readable

    ok: ClassVar[bool] = False


ExtractionOutcome = ExtractionSuccess | ExtractionFailure
