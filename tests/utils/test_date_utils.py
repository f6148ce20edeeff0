# tests/utils/test_date_utils.py

from datetime import datetime, timedelta, timezone

import pytest

from kubefree.utils.date_utils import age, ensure_utc, human_duration


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=-5), "<invalid>"),
        (timedelta(seconds=-1), "0s"),
        (timedelta(seconds=0), "0s"),
        (timedelta(seconds=45), "45s"),
        (timedelta(seconds=119), "119s"),
        (timedelta(minutes=2), "2m"),
        (timedelta(minutes=3, seconds=20), "3m20s"),
        (timedelta(minutes=10, seconds=59), "10m"),
        (timedelta(minutes=179), "179m"),
        (timedelta(hours=3), "3h"),
        (timedelta(hours=5, minutes=12), "5h12m"),
        (timedelta(hours=8, minutes=30), "8h"),
        (timedelta(hours=47), "47h"),
        (timedelta(days=3), "3d"),
        (timedelta(days=3, hours=4), "3d4h"),
        (timedelta(days=8, hours=4), "8d"),
        (timedelta(days=400), "400d"),
        (timedelta(days=730), "2y"),
        (timedelta(days=760), "2y30d"),
        (timedelta(days=365 * 9), "9y"),
    ],
)
def test_human_duration(delta, expected):
    assert human_duration(delta) == expected


def test_ensure_utc_assumes_utc_for_naive():
    dt = ensure_utc(datetime(2024, 1, 1, 12, 0))
    assert dt.tzinfo == timezone.utc
    assert dt.hour == 12


def test_ensure_utc_converts_offsets():
    dt = ensure_utc(datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2))))
    assert dt.hour == 10


def test_age():
    now = datetime(2024, 1, 2, tzinfo=timezone.utc)
    assert age(None, now) == "<unknown>"
    assert age(datetime(2024, 1, 1), now) == "24h"
