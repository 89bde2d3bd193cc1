from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from live_records.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from live_records.excel.reader import SheetGrid, WorkbookReadError, read_excel_file
from live_records.logging.init import log_summary, set_debug, setup_logging
from live_records.services.orchestrator import ProcessingError, process_all, scan_excel_files
from live_records.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (overriding) so LIVE_RECORDS_CONFIG can point at another config
- Load and validate the config
- Extract every .xlsx in source_directory, one JSON document per workbook
- Print the SUMMARY line and map the outcome to an exit code
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

CONFIG_ENV_VAR = "LIVE_RECORDS_CONFIG"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; a broken file only produces a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except (OSError, ValueError) as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Extract live records from Excel workbooks")
    p.add_argument("--config", type=Path, default=None, help="Config file (default: config/extract.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg) -> int:
    directory = Path(cfg.source_directory)
    try:
        excel_files = scan_excel_files(directory)
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not excel_files:
        print("inspect: no .xlsx files")
        return EXIT_SUCCESS_ALL
    for f in excel_files:
        print(f"FILE: {f.name}")
        try:
            raw = read_excel_file(f, target_sheets=None)
        except WorkbookReadError as e:
            print(f"  read_error: {e}")
            continue
        for sname, df in raw.items():
            grid = SheetGrid(df, name=sname)
            print(f"  SHEET: {sname} rows={grid.row_count} cols={grid.column_count}")
            if grid.row_count == 0:
                continue
            print("    header=", grid.row(0))
            # datetime は isoformat で表示
            for r in range(1, min(grid.row_count, 4)):
                cells = [v.isoformat() if hasattr(v, "isoformat") else v for v in grid.row(r)]
                print("    row=", cells)
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # 空リスト [] が与えられた場合に sys.argv[1:] を読まないよう None のときのみ参照
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    _load_env_file(Path(".env"), override=True)
    config_path = args.config or Path(os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    if args.inspect_data:
        return _inspect_data(cfg)

    logger.info(f"Processing workbooks from: {directory}")
    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
