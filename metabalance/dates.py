# -*- coding: utf-8 -*-
"""Calendar helpers shared by the tracking features.

All days are UTC calendar days. A timestamp belongs to the day given by the
first ten characters of its ISO-8601 form.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Optional, Tuple, Union

DayLike = Union[str, date, datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    return iso(utc_now())


def iso(value: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SS.mmmZ``. Fixed width: stored timestamps are compared as strings."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_day(value: DayLike) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def day_key(value: DayLike) -> str:
    return parse_day(value).isoformat()


def today() -> date:
    return utc_now().date()


def today_key() -> str:
    return today().isoformat()


def date_prefix(iso8601: Optional[str]) -> str:
    return (iso8601 or "")[:10]


def start_of_day(value: DayLike) -> datetime:
    return datetime.combine(parse_day(value), time.min, tzinfo=timezone.utc)


def end_of_day(value: DayLike) -> datetime:
    return datetime.combine(parse_day(value), time(23, 59, 59, 999000), tzinfo=timezone.utc)


def day_range(value: DayLike) -> Tuple[datetime, datetime]:
    return start_of_day(value), end_of_day(value)


def week_range(value: DayLike) -> Tuple[datetime, datetime]:
    """Sunday..Saturday week containing ``value``."""
    day = parse_day(value)
    # date.weekday(): Monday=0 .. Sunday=6
    sunday = day - timedelta(days=(day.weekday() + 1) % 7)
    return start_of_day(sunday), end_of_day(sunday + timedelta(days=6))


def month_range(value: DayLike) -> Tuple[datetime, datetime]:
    day = parse_day(value)
    first = day.replace(day=1)
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    return start_of_day(first), end_of_day(next_first - timedelta(days=1))


def past_days_range(days: int, now: Optional[DayLike] = None) -> Tuple[datetime, datetime]:
    anchor = parse_day(now) if now is not None else today()
    return start_of_day(anchor - timedelta(days=days)), end_of_day(anchor)


def is_same_day(a: DayLike, b: DayLike) -> bool:
    return parse_day(a) == parse_day(b)


def iter_days(start: DayLike, end: DayLike) -> Iterator[date]:
    current = parse_day(start)
    last = parse_day(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def days_ago_key(days: int, now: Optional[DayLike] = None) -> str:
    anchor = parse_day(now) if now is not None else today()
    return (anchor - timedelta(days=days)).isoformat()


def add_months(value: DayLike, months: int) -> date:
    day = parse_day(value)
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def normalize_timestamp(value: str) -> str:
    """Re-emit an ISO-8601 timestamp in UTC ``...Z`` form."""
    return iso(parse_timestamp(value))