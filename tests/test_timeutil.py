from datetime import date, datetime, timezone

import pytest

from daycare.core.batching import chunked
from daycare.core.timeutil import is_last_day_of_month, month_key, retention_cutoff, tenant_now


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2026, 1, 31), True),
        (date(2026, 1, 30), False),
        (date(2026, 2, 28), True),
        (date(2028, 2, 28), False),
        (date(2028, 2, 29), True),
        (date(2026, 4, 30), True),
        (date(2026, 12, 31), True),
    ],
)
def test_is_last_day_of_month(day: date, expected: bool) -> None:
    assert is_last_day_of_month(day) is expected


def test_month_key_zero_pads() -> None:
    assert month_key(date(2026, 3, 9)) == "2026-03"


def test_retention_cutoff_uses_utc_date() -> None:
    now = datetime(2026, 10, 17, 0, 5, tzinfo=timezone.utc)
    assert retention_cutoff(now, 14) == "2026-10-03"


def test_retention_cutoff_crosses_month() -> None:
    assert retention_cutoff(datetime(2026, 3, 5, 12, 0), 14) == "2026-02-19"


def test_tenant_now_converts_to_local_zone() -> None:
    # 05:59 UTC on Nov 1 is still Oct 31 in Denver (UTC-6, daylight time)
    local = tenant_now(datetime(2026, 11, 1, 5, 59, tzinfo=timezone.utc))
    assert local.date() == date(2026, 10, 31)


def test_chunked_splits_at_size() -> None:
    chunks = list(chunked(list(range(1201)), 500))
    assert [len(c) for c in chunks] == [500, 500, 201]
    assert list(chunked([], 500)) == []


def test_chunked_rejects_zero_size() -> None:
    with pytest.raises(ValueError):
        list(chunked([1], 0))
