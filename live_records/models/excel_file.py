from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

"""ExcelFile domain model and FileStatus enum.

ExcelFile is the processing context for one workbook, tracked from discovery
to success/failed.
"""


class FileStatus(Enum):
    """Status enum for ExcelFile processing lifecycle.

    State transitions: pending → processing → (success | failed)
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ExcelFile:
    """Processing context for a single workbook."""
    path: Path                           # Full path to workbook
    name: str                            # File name
    start_time: datetime | None = None   # Processing start (UTC)
    end_time: datetime | None = None     # Processing end (UTC)
    status: FileStatus = FileStatus.PENDING
    record_count: int = 0                # Extracted ConcertRecords
    skipped_rows: int = 0                # Data rows dropped by validation
    output_path: Path | None = None      # Written JSON document
    error: str | None = None             # Failure reason summary
