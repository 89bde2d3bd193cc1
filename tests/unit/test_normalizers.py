from __future__ import annotations

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import numpy as np
import pandas as pd
import pytest

from live_records.models.config_models import RecordLayout
from live_records.services.normalizers import canonicalize_venue, normalize_date


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2024, 5, 3, 18, 30), ("2024/05/03", 2024, "金")),
        (datetime(2023, 12, 24), ("2023/12/24", 2023, "日")),
        (date(2024, 6, 1), ("2024/06/01", 2024, "土")),
        (pd.Timestamp("2019-01-07"), ("2019/01/07", 2019, "月")),
        (np.datetime64("2020-02-29"), ("2020/02/29", 2020, "土")),
    ],
)
def test_normalize_date(value, expected):
    assert normalize_date(value) == expected


def test_normalize_date_zero_pads_month_and_day():
    date_string, _, _ = normalize_date(datetime(2001, 1, 9))
    assert date_string == "2001/01/09"


def test_normalize_date_custom_weekday_labels():
    layout = RecordLayout(weekday_labels=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"))
    assert normalize_date(datetime(2024, 5, 3), layout)[2] == "Fri"


def test_normalize_date_converts_aware_values_to_timezone():
    # 2024-05-02 20:00 UTC は東京では 2024-05-03 05:00
    aware = datetime(2024, 5, 2, 20, 0, tzinfo=UTC)
    assert normalize_date(aware, timezone="Asia/Tokyo") == ("2024/05/03", 2024, "金")
    assert normalize_date(aware, timezone=ZoneInfo("UTC")) == ("2024/05/02", 2024, "木")


def test_normalize_date_naive_values_ignore_timezone():
    naive = datetime(2024, 5, 2, 23, 0)
    assert normalize_date(naive, timezone="Asia/Tokyo")[0] == "2024/05/02"


def test_normalize_date_rejects_non_dates():
    with pytest.raises(TypeError):
        normalize_date("2024/05/03")


def test_online_marker_in_venue_canonicalizes_both():
    assert canonicalize_venue("Kanto", "Tokyo Hall（オンライン）") == ("オンライン", "オンライン")


def test_online_region_canonicalizes_both():
    assert canonicalize_venue("オンライン", "配信スタジオ") == ("オンライン", "オンライン")


def test_offline_values_pass_through():
    assert canonicalize_venue("関東", "日本武道館") == ("関東", "日本武道館")
    # 半角括弧は対象外
    assert canonicalize_venue("関東", "Hall(オンライン)") == ("関東", "Hall(オンライン)")


@pytest.mark.parametrize(
    "region, venue",
    [
        ("Kanto", "Tokyo Hall（オンライン）"),
        ("オンライン", "x"),
        ("関東", "日本武道館"),
        ("", ""),
        ("オンライン", "オンライン"),
    ],
)
def test_canonicalize_venue_is_idempotent(region, venue):
    once = canonicalize_venue(region, venue)
    assert canonicalize_venue(*once) == once


def test_canonicalize_venue_custom_tokens():
    layout = RecordLayout(online_marker="(online)", online_token="ONLINE")
    assert canonicalize_venue("Kanto", "Hall (online)", layout) == ("ONLINE", "ONLINE")
