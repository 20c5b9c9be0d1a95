"""
Period Resolver - Domain Service

Turns a requested granularity into a concrete half-open window and derives
the preceding window used for period-over-period comparison.

Note that ``day`` is anchored at midnight (UTC) of the current day rather than
being a rolling 24 hour window, while ``week``/``month``/``year`` are rolling
windows ending at ``now``. The comparison window math depends on this.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

from src.domain.entities.analytics import Granularity, PeriodInterval, ResolvedPeriod
from src.domain.entities.errors import InvalidDateRangeError

_END_OF_DAY = time(23, 59, 59, 999000)

_SHIFTS = {
    Granularity.WEEK: relativedelta(days=7),
    Granularity.MONTH: relativedelta(months=1),
    Granularity.YEAR: relativedelta(years=1),
}


def ensure_utc(instant: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def parse_instant(value: str, field_name: str = "date") -> datetime:
    """Parse an ISO-8601 string into a UTC datetime."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateRangeError(
            f"Invalid {field_name}: {value!r} is not an ISO-8601 date",
            details={"field": field_name, "value": value},
        ) from exc
    return ensure_utc(parsed)


def start_of_day(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_period(
    granularity: Granularity,
    now: datetime,
    custom_start: Optional[datetime] = None,
    custom_end: Optional[datetime] = None,
) -> ResolvedPeriod:
    """
    Resolve the current and previous windows for a granularity.

    Args:
        granularity: Requested period size
        now: Reference instant (normalised to UTC)
        custom_start: Start of a custom window, defaults to one month before now
        custom_end: End of a custom window, defaults to now

    Returns:
        The resolved current and previous windows

    Raises:
        InvalidDateRangeError: When the custom end is not after the custom start
    """
    now = ensure_utc(now)

    if granularity is Granularity.DAY:
        midnight = start_of_day(now)
        end = now if now > midnight else midnight + timedelta(microseconds=1)
        current = PeriodInterval(midnight, end)
        previous_day = midnight - timedelta(days=1)
        previous_end = datetime.combine(
            previous_day.date(), _END_OF_DAY, tzinfo=timezone.utc
        )
        previous = PeriodInterval(previous_day, previous_end)
        return ResolvedPeriod(granularity, current, previous)

    if granularity is Granularity.CUSTOM:
        start = (
            ensure_utc(custom_start)
            if custom_start
            else now - relativedelta(months=1)
        )
        end = ensure_utc(custom_end) if custom_end else now
        current = PeriodInterval(start, end)
        previous = PeriodInterval(start - current.span, start)
        return ResolvedPeriod(granularity, current, previous)

    shift = _SHIFTS[granularity]
    current = PeriodInterval(now - shift, now)
    previous = PeriodInterval(current.start - shift, current.end - shift)
    return ResolvedPeriod(granularity, current, previous)
