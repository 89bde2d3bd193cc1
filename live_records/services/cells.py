from __future__ import annotations

import re
from datetime import date
from typing import Any

import numpy as np

from ..excel.reader import is_missing

"""Cell normalization helpers shared by the extraction core and the catalog loaders."""

__all__ = [
    "ERROR_PLACEHOLDER",
    "safe_trim",
    "coerce_count",
]

# スプレッドシートの数式エラー時に表示されるトークン
ERROR_PLACEHOLDER = "#VALUE!"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def _to_text(value: Any) -> str:
    # pandas は空セルを含む整数列を float に広げるので 1.0 -> "1" に戻す
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    if isinstance(value, np.integer):
        return str(int(value))
    return str(value)


def safe_trim(value: Any, placeholder: str = ERROR_PLACEHOLDER) -> str:
    """Return the cell as a trimmed string with the error placeholder removed.

    None/NaN/NaT yield "". The second strip handles whitespace exposed by the
    placeholder removal. Never raises.
    """
    if is_missing(value):
        return ""
    text = _to_text(value).strip()
    if placeholder:
        text = text.replace(placeholder, "")
    return text.strip()


def coerce_count(value: Any) -> int:
    """Integer prefix of a cell value, 0 when there is none.

    "12曲" -> 12, 3.7 -> 3, "abc" -> 0, None -> 0
    Only ASCII digits count ("１２曲" -> 0) and date cells are not numbers.
    """
    if is_missing(value) or isinstance(value, (bool, date, np.datetime64)):
        return 0
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            return 0
        return int(value)
    m = _LEADING_INT.match(str(value))
    if not m:
        return 0
    return int(m.group(1))
