from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..excel.reader import WorkbookReadError, read_excel_file
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.catalog import AlbumEntry, AlbumSong
from ..models.config_models import ExtractConfig
from ..models.excel_file import ExcelFile, FileStatus
from ..models.extraction_result import ExtractionSuccess
from ..models.processing_result import FileStat, ProcessingResult
from .catalog import load_album_catalog, load_album_song_list
from .extractor import extract_live_records
from .progress import ProgressTracker

"""Run orchestration: scan workbooks, extract each, write one JSON per workbook.

- ワークブック単位で独立処理。1 ファイルの失敗は他ファイルに影響しない
- 失敗は ErrorRecord としてバッファし、実行終了時に 1 回だけ flush
- 出力: <output_directory>/<stem>.json = {"records": [...], "albums": [...], "albumSongs": [...]}
"""

logger = logging.getLogger(__name__)

__all__ = [
    "ProcessingError",
    "build_document",
    "scan_excel_files",
    "process_all",
]

FILE_LEVEL_SHEET = "<FILE_LEVEL>"


class ProcessingError(Exception):
    """Fatal error that prevents the run from starting."""


def scan_excel_files(directory: Path) -> list[Path]:
    """Scan directory for .xlsx files (non-recursive), sorted by name.

    Excel lock files (~$name.xlsx) are ignored.

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix == ".xlsx" and not p.name.startswith("~$")
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def build_document(
    outcome: ExtractionSuccess, albums: list[AlbumEntry], album_songs: list[AlbumSong]
) -> dict[str, Any]:
    return {
        "records": [r.to_dict() for r in outcome.records],
        "albums": [a.to_dict() for a in albums],
        "albumSongs": [s.to_dict() for s in album_songs],
    }


def _failed(file_path: Path, start_time: datetime, error: str) -> ExcelFile:
    return ExcelFile(
        path=file_path,
        name=file_path.name,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=FileStatus.FAILED,
        error=error,
    )


def _process_single_file(
    file_path: Path,
    config: ExtractConfig,
    error_log: ErrorLogBuffer,
    output_dir: Path,
) -> ExcelFile:
    """Extract one workbook and write its JSON document.

    Returns an ExcelFile with status SUCCESS or FAILED; never raises for
    per-file problems.
    """
    start_time = datetime.now(UTC)

    try:
        sheets = read_excel_file(
            file_path,
            target_sheets={config.records_sheet, config.album_sheet},
            keep_na_strings=list(config.keep_na_strings) or None,
        )
    except WorkbookReadError as e:
        logger.error("file=%s %s", file_path.name, e)
        error_log.append(ErrorRecord.create(file_path.name, FILE_LEVEL_SHEET, "WORKBOOK_READ_ERROR", str(e)))
        return _failed(file_path, start_time, str(e))

    outcome = extract_live_records(sheets, config.records_sheet, config.layout, config.timezone)
    if not outcome.ok:
        logger.error("file=%s %s", file_path.name, outcome.diagnostic)
        error_log.append(
            ErrorRecord.create(file_path.name, outcome.sheet_name, "RECORDS_SHEET_MISSING", outcome.diagnostic)
        )
        return _failed(file_path, start_time, outcome.diagnostic)

    albums = load_album_catalog(sheets, config.album_sheet, config.layout.error_placeholder)
    album_songs = load_album_song_list(sheets, config.album_sheet, config.layout.error_placeholder)
    logger.debug(
        "file=%s records=%d skipped_rows=%d albums=%d album_songs=%d",
        file_path.name,
        len(outcome.records),
        outcome.skipped_rows,
        len(albums),
        len(album_songs),
    )

    output_path = output_dir / f"{file_path.stem}.json"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(build_document(outcome, albums, album_songs), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        logger.error("file=%s cannot write %s: %s", file_path.name, output_path, e)
        error_log.append(ErrorRecord.create(file_path.name, FILE_LEVEL_SHEET, "OUTPUT_WRITE_ERROR", str(e)))
        return _failed(file_path, start_time, str(e))

    return ExcelFile(
        path=file_path,
        name=file_path.name,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=FileStatus.SUCCESS,
        record_count=len(outcome.records),
        skipped_rows=outcome.skipped_rows,
        output_path=output_path,
    )


def process_all(config: ExtractConfig, error_log: ErrorLogBuffer | None = None) -> ProcessingResult:
    """Process every workbook in the configured source directory.

    Raises:
        ProcessingError: source directory missing or unreadable
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()

    file_paths = scan_excel_files(Path(config.source_directory))
    output_dir = Path(config.output_directory)

    file_stats: list[FileStat] = []
    success_count = 0
    failed_count = 0
    total_records = 0
    total_skipped = 0

    try:
        with ProgressTracker(len(file_paths)) as progress:
            for file_path in file_paths:
                progress.start_file(file_path)
                file_start = datetime.now(UTC)
                try:
                    result = _process_single_file(file_path, config, error_log, output_dir)
                except Exception as e:
                    # Unexpected errors: record and continue with the next workbook
                    logger.error("file=%s unexpected error: %s", file_path.name, e)
                    error_log.append(
                        ErrorRecord.create(file_path.name, FILE_LEVEL_SHEET, "UNEXPECTED_ERROR", str(e))
                    )
                    result = _failed(file_path, file_start, str(e))

                if result.status == FileStatus.SUCCESS:
                    success_count += 1
                    total_records += result.record_count
                    total_skipped += result.skipped_rows
                    logger.info(
                        "file=%s records=%d output=%s", result.name, result.record_count, result.output_path
                    )
                else:
                    failed_count += 1

                progress.finish_file(success=success_count, failed=failed_count, records=total_records)

                elapsed = 0.0
                if result.start_time is not None and result.end_time is not None:
                    elapsed = (result.end_time - result.start_time).total_seconds()
                file_stats.append(
                    FileStat(
                        file_name=result.name,
                        status=result.status.value,
                        record_count=result.record_count,
                        skipped_rows=result.skipped_rows,
                        elapsed_seconds=elapsed,
                    )
                )
    finally:
        # Buffered error records are written even if the loop is interrupted
        try:
            log_path = error_log.flush()
        except OSError as e:
            # Don't fail the entire run if the error log cannot be written
            logger.warning("error log flush failed: %s", e)
        else:
            if log_path is not None:
                logger.info("error log written: %s", log_path)

    end_time = datetime.now(UTC)
    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_records=total_records,
        skipped_rows=total_skipped,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )
