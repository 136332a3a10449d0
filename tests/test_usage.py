"""Tests for the usage snapshot (core/usage.py).

Focus: the reshaping of the nested payload, ISO date parsing and the
``"unlimited"`` sentinel, which must never be coerced to a number.
"""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

import pytest

from vidnavigator.core.usage import (
    UNLIMITED,
    ServiceUsage,
    StorageUsage,
    UsageData,
    UsagePeriod,
    is_unlimited,
)


def _service(**overrides: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "used": 12,
        "limit": 100,
        "remaining": 88,
        "percentage": 12.0,
        "unit": "requests",
    }
    raw.update(overrides)
    return raw


def _raw_usage() -> dict[str, Any]:
    return {
        "current_period": {
            "start_date": "2025-06-01T00:00:00Z",
            "end_date": "2025-07-01T00:00:00Z",
        },
        "subscription": {"plan_id": "pro", "plan_name": "Pro"},
        "usage": {
            "video_transcripts": _service(),
            "video_searches": _service(limit=UNLIMITED, remaining=UNLIMITED, percentage=0),
            "video_analyses": _service(used=3),
            "video_scene_analyses": _service(used=0, remaining=100, percentage=0.0),
            "video_uploads": _service(unit="hours"),
        },
        "storage": {
            "used_bytes": 1_073_741_824,
            "used_formatted": "1 GB",
            "limit_bytes": UNLIMITED,
            "limit_formatted": "Unlimited",
            "remaining_bytes": UNLIMITED,
            "remaining_formatted": "Unlimited",
            "percentage": 0,
        },
    }


class TestIsUnlimited:
    def test_sentinel(self) -> None:
        assert is_unlimited("unlimited")

    @pytest.mark.parametrize("value", [0, 100, 2.5])
    def test_numbers(self, value: float) -> None:
        assert not is_unlimited(value)


class TestUsagePeriod:
    def test_parses_z_suffix_as_utc(self) -> None:
        period = UsagePeriod.from_json({
            "start_date": "2025-06-01T00:00:00Z",
            "end_date": "2025-07-01T00:00:00Z",
        })
        assert period.start_date == datetime(2025, 6, 1, tzinfo=timezone.utc)
        assert period.end_date == datetime(2025, 7, 1, tzinfo=timezone.utc)

    def test_parses_offset(self) -> None:
        period = UsagePeriod.from_json({
            "start_date": "2025-06-01T02:00:00+02:00",
            "end_date": "2025-07-01T00:00:00+00:00",
        })
        assert period.start_date == datetime(2025, 6, 1, tzinfo=timezone.utc)

    def test_serialises_utc_with_z(self) -> None:
        period = UsagePeriod(
            start_date=datetime(2025, 6, 1, tzinfo=timezone.utc),
            end_date=datetime(2025, 7, 1, tzinfo=timezone.utc),
        )
        assert period.to_json() == {
            "start_date": "2025-06-01T00:00:00Z",
            "end_date": "2025-07-01T00:00:00Z",
        }

    def test_round_trip_keeps_millisecond_text(self) -> None:
        raw = {
            "start_date": "2025-06-01T00:00:00.000Z",
            "end_date": "2025-07-01T12:30:00.500Z",
        }
        period = UsagePeriod.from_json(raw)
        assert period.end_date == datetime(
            2025, 7, 1, 12, 30, 0, 500000, tzinfo=timezone.utc,
        )
        assert period.to_json() == raw

    def test_round_trip_keeps_offset_text(self) -> None:
        raw = {
            "start_date": "2025-06-01T02:00:00+02:00",
            "end_date": "2025-07-01T00:00:00+00:00",
        }
        assert UsagePeriod.from_json(raw).to_json() == raw

    def test_source_text_ignored_for_equality(self) -> None:
        parsed = UsagePeriod.from_json({
            "start_date": "2025-06-01T00:00:00.000Z",
            "end_date": "2025-07-01T00:00:00Z",
        })
        built = UsagePeriod(
            start_date=datetime(2025, 6, 1, tzinfo=timezone.utc),
            end_date=datetime(2025, 7, 1, tzinfo=timezone.utc),
        )
        assert parsed == built

    def test_replaced_date_not_masked_by_source_text(self) -> None:
        period = UsagePeriod.from_json({
            "start_date": "2025-06-01T00:00:00.000Z",
            "end_date": "2025-07-01T00:00:00.000Z",
        })
        moved = replace(period, end_date=datetime(2025, 8, 1, tzinfo=timezone.utc))
        assert moved.to_json() == {
            "start_date": "2025-06-01T00:00:00.000Z",
            "end_date": "2025-08-01T00:00:00Z",
        }

    def test_invalid_date_raises(self) -> None:
        with pytest.raises(ValueError):
            UsagePeriod.from_json({"start_date": "yesterday", "end_date": "today"})


class TestServiceUsage:
    def test_numeric_limits(self) -> None:
        s = ServiceUsage.from_json(_service())
        assert s.limit == 100
        assert s.has_limit

    def test_unlimited_preserved(self) -> None:
        s = ServiceUsage.from_json(_service(limit=UNLIMITED, remaining=UNLIMITED))
        assert s.limit == "unlimited"
        assert s.remaining == "unlimited"
        assert s.limit != 0
        assert s.limit != math.inf
        assert not s.has_limit


class TestStorageUsage:
    def test_unlimited_bytes_preserved(self) -> None:
        s = StorageUsage.from_json(_raw_usage()["storage"])
        assert s.used_bytes == 1_073_741_824
        assert is_unlimited(s.limit_bytes)
        assert is_unlimited(s.remaining_bytes)


class TestUsageData:
    def test_reshapes_payload(self) -> None:
        u = UsageData.from_json(_raw_usage())
        assert u.subscription.plan_id == "pro"
        assert u.subscription.plan_name == "Pro"
        assert u.usage.video_transcripts.used == 12
        assert u.usage.video_analyses.used == 3
        assert u.usage.video_uploads.unit == "hours"
        assert u.current_period.start_date.year == 2025

    def test_unlimited_survives_nesting(self) -> None:
        u = UsageData.from_json(_raw_usage())
        assert u.usage.video_searches.limit == UNLIMITED
        assert u.storage.limit_bytes == UNLIMITED

    def test_round_trip(self) -> None:
        raw = _raw_usage()
        assert UsageData.from_json(raw).to_json() == raw

    def test_round_trip_millisecond_period(self) -> None:
        raw = _raw_usage()
        raw["current_period"] = {
            "start_date": "2025-06-01T00:00:00.000Z",
            "end_date": "2025-07-01T00:00:00.000Z",
        }
        assert UsageData.from_json(raw).to_json() == raw

    def test_missing_service_raises(self) -> None:
        raw = _raw_usage()
        del raw["usage"]["video_uploads"]
        with pytest.raises(KeyError):
            UsageData.from_json(raw)

    def test_frozen(self) -> None:
        u = UsageData.from_json(_raw_usage())
        with pytest.raises(AttributeError):
            u.storage = None  # type: ignore[misc,assignment]
