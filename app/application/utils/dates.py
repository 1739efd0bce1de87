from __future__ import annotations

from datetime import datetime, time, timezone


def to_iso(dt: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix, e.g. 2024-01-26T09:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def start_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), time.min, tzinfo=dt.tzinfo or timezone.utc)


def end_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), time.max, tzinfo=dt.tzinfo or timezone.utc)


def default_report_range(now: datetime | None = None) -> tuple[datetime, datetime]:
    """From the first day of the current month to the end of today."""
    now = now or utc_now()
    return start_of_day(now.replace(day=1)), end_of_day(now)
