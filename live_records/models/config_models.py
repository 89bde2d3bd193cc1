from __future__ import annotations

from dataclasses import dataclass, field, fields

"""Config dataclasses for the live record extractor.

RecordLayout の既定値は「記録」シートの列配置に合わせている:
    E列=ツアー名, H列=日付, K列=地域, L列=会場, M列=1曲目, N列以降=セットリスト
Column indices are 0-based.
"""

__all__ = [
    "RecordLayout",
    "ExtractConfig",
    "DEFAULT_WEEKDAY_LABELS",
]

# 0=Sunday .. 6=Saturday
DEFAULT_WEEKDAY_LABELS: tuple[str, ...] = ("日", "月", "火", "水", "木", "金", "土")


@dataclass(frozen=True)
class RecordLayout:
    """Fixed column positions and marker strings of the records sheet."""
    tour_name_column: int = 4
    date_column: int = 7
    region_column: int = 10
    venue_column: int = 11
    opening_song_column: int = 12  # setlist run starts at the next column
    medley_keyword: str = "メドレー"
    medley_slot_keyword: str = "曲目"
    online_marker: str = "（オンライン）"
    online_token: str = "オンライン"
    error_placeholder: str = "#VALUE!"
    weekday_labels: tuple[str, ...] = DEFAULT_WEEKDAY_LABELS

    @property
    def setlist_start_column(self) -> int:
        return self.opening_song_column + 1

    @classmethod
    def from_mapping(cls, data: dict[str, object] | None) -> RecordLayout:
        """Build a layout from a (schema validated) config mapping.

        Unknown keys are ignored; weekday_labels is converted to a tuple.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        if "weekday_labels" in kwargs:
            kwargs["weekday_labels"] = tuple(kwargs["weekday_labels"])  # type: ignore[arg-type]
        return cls(**kwargs)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ExtractConfig:
    """Root configuration object for an extraction run."""
    source_directory: str  # Directory scanned for .xlsx workbooks
    output_directory: str = "./output"  # One JSON document per workbook
    timezone: str = "UTC"  # tz-aware date cells are converted to this zone
    records_sheet: str = "記録"
    album_sheet: str = "アルバム"
    keep_na_strings: tuple[str, ...] = ()  # 曲名 "NA" 等を NaN 変換から守る
    layout: RecordLayout = field(default_factory=RecordLayout)
