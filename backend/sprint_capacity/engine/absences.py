"""Clip absences to a period and count the working days they remove."""
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import Any

from sprint_capacity.engine.calendar import DateLike, count_working_days, holiday_set, to_date


def clip_to_period(
    start: DateLike,
    end: DateLike,
    period_start: DateLike,
    period_end: DateLike,
) -> tuple[date, date] | None:
    """Intersection of two inclusive intervals, or None if they do not meet."""
    start, end = to_date(start), to_date(end)
    period_start, period_end = to_date(period_start), to_date(period_end)
    if end < period_start or start > period_end:
        return None
    return max(start, period_start), min(end, period_end)


def absence_working_days_in_range(
    absence: Any,
    period_start: DateLike,
    period_end: DateLike,
    holidays: Iterable[DateLike] | None = None,
) -> int:
    """Working days of the absence that fall inside the period."""
    overlap = clip_to_period(absence.start_date, absence.end_date, period_start, period_end)
    if overlap is None:
        return 0
    return count_working_days(overlap[0], overlap[1], holidays)


def merge_intervals(intervals: Iterable[tuple[date, date]]) -> list[tuple[date, date]]:
    """Union of inclusive date intervals. Adjacent intervals are joined."""
    merged: list[tuple[date, date]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + timedelta(days=1):
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def union_absence_working_days(
    absences: Sequence[Any],
    period_start: DateLike,
    period_end: DateLike,
    holidays: Iterable[DateLike] | None = None,
) -> int:
    """Working days inside the period covered by at least one absence; each day counted once."""
    off_days = holiday_set(holidays)
    clipped = [
        overlap
        for a in absences
        if (overlap := clip_to_period(a.start_date, a.end_date, period_start, period_end)) is not None
    ]
    return sum(count_working_days(start, end, off_days) for start, end in merge_intervals(clipped))
