"""Tests for iso_timestamp and the static stats snapshot — pure, no IO."""

from datetime import datetime, timedelta, timezone

from app.core.civic_stats import stats_snapshot
from app.core.timestamps import iso_timestamp


def test_renders_utc_with_milliseconds_and_z_suffix():
    moment = datetime(2026, 10, 17, 8, 30, 5, 123456, tzinfo=timezone.utc)
    assert iso_timestamp(moment) == "2026-10-17T08:30:05.123Z"


def test_converts_other_offsets_to_utc():
    est = timezone(timedelta(hours=-5))
    moment = datetime(2026, 1, 1, 7, 0, tzinfo=est)
    assert iso_timestamp(moment) == "2026-01-01T12:00:00.000Z"


def test_naive_datetimes_are_treated_as_utc():
    assert iso_timestamp(datetime(2026, 1, 1)) == "2026-01-01T00:00:00.000Z"


def test_defaults_to_now():
    stamp = iso_timestamp()
    assert stamp.endswith("Z")
    parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    assert abs(datetime.now(timezone.utc) - parsed) < timedelta(seconds=5)


def test_stats_snapshot_values():
    assert stats_snapshot() == {
        "totalBills": 50,
        "councilMembers": 47,
        "neighborhoodsActive": 24,
        "totalVotes": 2340,
        "neighborsEngaged": 1638,
    }


def test_stats_snapshot_returns_a_copy():
    first = stats_snapshot()
    first["totalBills"] = 0
    assert stats_snapshot()["totalBills"] == 50
