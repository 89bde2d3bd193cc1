from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

import numpy as np
import pandas as pd

from ..models.config_models import RecordLayout

"""Date/weekday normalization and venue/region canonicalization.

Both are pure functions of their inputs.
"""

__all__ = [
    "normalize_date",
    "canonicalize_venue",
]


def _as_calendar_date(value: Any, tz: tzinfo | None) -> date:
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value).to_pydatetime()
    if isinstance(value, datetime):
        # naive 値は壁時計の日付として扱う。tz-aware のみ設定タイムゾーンへ変換
        if value.tzinfo is not None and tz is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"not a date value: {value!r}")


def normalize_date(
    value: Any, layout: RecordLayout | None = None, timezone: str | tzinfo | None = None
) -> tuple[str, int, str]:
    """Return (YYYY/MM/DD, year, weekday label) for a validated date cell.

    Month and day are always zero padded. The weekday label is looked up by
    index 0=Sunday .. 6=Saturday in layout.weekday_labels.
    """
    layout = layout or RecordLayout()
    tz = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
    d = _as_calendar_date(value, tz)
    # date.weekday(): Monday=0 .. Sunday=6
    weekday_index = (d.weekday() + 1) % 7
    return (
        f"{d.year}/{d.month:02d}/{d.day:02d}",
        d.year,
        layout.weekday_labels[weekday_index],
    )


def canonicalize_venue(region: str, venue: str, layout: RecordLayout | None = None) -> tuple[str, str]:
    """Collapse online-event variants into the canonical online token.

    If the venue carries the online marker or the region already is the
    token, both fields become the token together. Idempotent.
    """
    layout = layout or RecordLayout()
    if layout.online_marker in venue or region == layout.online_token:
        return layout.online_token, layout.online_token
    return region, venue
