"""Calendar arithmetic - weekends, holidays and working-day counts over inclusive date ranges."""
from collections.abc import Iterable, Iterator
from datetime import date, datetime, timedelta

SATURDAY = 5
SUNDAY = 6

DateLike = date | datetime | str


def to_date(value: DateLike) -> date:
    """Calendar day of a date, datetime or ISO YYYY-MM-DD string. Time of day is dropped."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def holiday_set(holidays: Iterable[DateLike] | None) -> frozenset[date]:
    """Normalize a holiday collection to calendar dates."""
    if not holidays:
        return frozenset()
    return frozenset(to_date(h) for h in holidays)


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Every calendar day from start to end, both inclusive."""
    day = to_date(start)
    last = to_date(end)
    while day <= last:
        yield day
        day += timedelta(days=1)


def count_calendar_days(start: DateLike, end: DateLike) -> int:
    delta = (to_date(end) - to_date(start)).days
    return delta + 1 if delta >= 0 else 0


def is_weekend(day: DateLike) -> bool:
    return to_date(day).weekday() in (SATURDAY, SUNDAY)


def is_holiday(day: DateLike, holidays: Iterable[DateLike] | None) -> bool:
    return to_date(day) in holiday_set(holidays)


def count_working_days(
    start: DateLike,
    end: DateLike,
    holidays: Iterable[DateLike] | None = None,
) -> int:
    """Days in [start, end] that are neither weekend nor holiday. 0 if end < start."""
    off_days = holiday_set(holidays)
    return sum(
        1
        for day in iter_days(start, end)
        if day.weekday() not in (SATURDAY, SUNDAY) and day not in off_days
    )
