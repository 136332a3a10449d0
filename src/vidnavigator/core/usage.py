"""Account usage snapshot returned by ``GET /usage``.

Quota fields may carry the literal sentinel ``"unlimited"`` instead of
a number.  The sentinel is preserved verbatim — never coerced to ``0``
or ``math.inf`` — so callers must test with :func:`is_unlimited` before
doing arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Final, Literal, Union

UNLIMITED: Final = "unlimited"

Quota = Union[int, float, Literal["unlimited"]]
"""A numeric limit, or :data:`UNLIMITED`."""


def is_unlimited(value: Quota) -> bool:
    """Return ``True`` when *value* is the :data:`UNLIMITED` sentinel."""
    return value == UNLIMITED


def _parse_datetime(value: str) -> datetime:
    # ``fromisoformat`` only learned the ``Z`` suffix in Python 3.11.
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _format_datetime(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _render_datetime(value: datetime, source: str | None) -> str:
    # The server's own text wins while it still names the same instant.
    if source is not None and _parse_datetime(source) == value:
        return source
    return _format_datetime(value)


@dataclass(frozen=True, slots=True)
class UsagePeriod:
    """Bounds of the current billing period.

    The ISO text the dates were parsed from is kept alongside them, so
    ``to_json`` reproduces it exactly (``.000Z`` millisecond forms
    included).  Periods built from bare datetimes serialise with
    ``isoformat`` and a ``Z`` suffix for UTC.
    """

    start_date: datetime
    end_date: datetime
    _start_text: str | None = field(default=None, compare=False, repr=False)
    _end_text: str | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> UsagePeriod:
        return cls(
            start_date=_parse_datetime(raw["start_date"]),
            end_date=_parse_datetime(raw["end_date"]),
            _start_text=raw["start_date"],
            _end_text=raw["end_date"],
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "start_date": _render_datetime(self.start_date, self._start_text),
            "end_date": _render_datetime(self.end_date, self._end_text),
        }


@dataclass(frozen=True, slots=True)
class Subscription:
    plan_id: str
    plan_name: str

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> Subscription:
        return cls(plan_id=raw["plan_id"], plan_name=raw["plan_name"])

    def to_json(self) -> dict[str, Any]:
        return {"plan_id": self.plan_id, "plan_name": self.plan_name}


@dataclass(frozen=True, slots=True)
class ServiceUsage:
    """Counter for one metered service (transcripts, searches, ...)."""

    used: int | float
    limit: Quota
    remaining: Quota
    percentage: float
    unit: str

    @property
    def has_limit(self) -> bool:
        return not is_unlimited(self.limit)

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> ServiceUsage:
        return cls(
            used=raw["used"],
            limit=raw["limit"],
            remaining=raw["remaining"],
            percentage=raw["percentage"],
            unit=raw["unit"],
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "used": self.used,
            "limit": self.limit,
            "remaining": self.remaining,
            "percentage": self.percentage,
            "unit": self.unit,
        }


@dataclass(frozen=True, slots=True)
class ServiceUsageBreakdown:
    """Per-service counters, one attribute per metered API feature."""

    video_transcripts: ServiceUsage
    video_searches: ServiceUsage
    video_analyses: ServiceUsage
    video_scene_analyses: ServiceUsage
    video_uploads: ServiceUsage

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> ServiceUsageBreakdown:
        return cls(
            video_transcripts=ServiceUsage.from_json(raw["video_transcripts"]),
            video_searches=ServiceUsage.from_json(raw["video_searches"]),
            video_analyses=ServiceUsage.from_json(raw["video_analyses"]),
            video_scene_analyses=ServiceUsage.from_json(raw["video_scene_analyses"]),
            video_uploads=ServiceUsage.from_json(raw["video_uploads"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "video_transcripts": self.video_transcripts.to_json(),
            "video_searches": self.video_searches.to_json(),
            "video_analyses": self.video_analyses.to_json(),
            "video_scene_analyses": self.video_scene_analyses.to_json(),
            "video_uploads": self.video_uploads.to_json(),
        }


@dataclass(frozen=True, slots=True)
class StorageUsage:
    used_bytes: int
    used_formatted: str
    limit_bytes: Quota
    limit_formatted: str
    remaining_bytes: Quota
    remaining_formatted: str
    percentage: float

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> StorageUsage:
        return cls(
            used_bytes=raw["used_bytes"],
            used_formatted=raw["used_formatted"],
            limit_bytes=raw["limit_bytes"],
            limit_formatted=raw["limit_formatted"],
            remaining_bytes=raw["remaining_bytes"],
            remaining_formatted=raw["remaining_formatted"],
            percentage=raw["percentage"],
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "used_bytes": self.used_bytes,
            "used_formatted": self.used_formatted,
            "limit_bytes": self.limit_bytes,
            "limit_formatted": self.limit_formatted,
            "remaining_bytes": self.remaining_bytes,
            "remaining_formatted": self.remaining_formatted,
            "percentage": self.percentage,
        }


@dataclass(frozen=True, slots=True)
class UsageData:
    """Snapshot of the account's plan, billing period and consumption."""

    current_period: UsagePeriod
    subscription: Subscription
    usage: ServiceUsageBreakdown
    storage: StorageUsage

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> UsageData:
        return cls(
            current_period=UsagePeriod.from_json(raw["current_period"]),
            subscription=Subscription.from_json(raw["subscription"]),
            usage=ServiceUsageBreakdown.from_json(raw["usage"]),
            storage=StorageUsage.from_json(raw["storage"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "current_period": self.current_period.to_json(),
            "subscription": self.subscription.to_json(),
            "usage": self.usage.to_json(),
            "storage": self.storage.to_json(),
        }
