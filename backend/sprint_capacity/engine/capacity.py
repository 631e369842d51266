"""Sprint capacity engine - per-member breakdown and team totals.

Every input is passed explicitly: member, sprint and absence records (ORM rows or
pydantic schemas, anything with the expected attributes) and the holiday set.
Arithmetic is float and unrounded; the display layer rounds for output.
"""
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from loguru import logger

from sprint_capacity.engine.absences import absence_working_days_in_range, union_absence_working_days
from sprint_capacity.engine.calendar import DateLike, count_calendar_days, count_working_days, holiday_set
from sprint_capacity.schemas.capacity import CapacityCalculation, SprintCapacity, SprintSnapshot


class AbsenceOverlapMode(str, Enum):
    # Each absence record counts on its own; overlapping records count a day twice
    SUM = "sum"
    # A member's absences are merged first; every day counts at most once
    UNION = "union"


def _anonymous_absence_days(sprint: Any, member_id: int | None) -> float:
    """Ad-hoc absence allowance for a member. Keys may be str after a JSON round-trip."""
    extra = getattr(sprint, "anonymous_absences", None) or {}
    if member_id is None or not extra:
        return 0.0
    value = extra.get(member_id, extra.get(str(member_id)))
    return float(value) if value else 0.0


def snapshot_sprint(sprint: Any) -> SprintSnapshot:
    return SprintSnapshot(
        id=getattr(sprint, "id", None),
        name=sprint.name,
        start_date=sprint.start_date,
        end_date=sprint.end_date,
        unit=sprint.unit,
    )


def calculate_member_capacity(
    member: Any,
    sprint: Any,
    absences: Iterable[Any],
    holidays: Iterable[DateLike] | None = None,
    overlap_mode: AbsenceOverlapMode | str = AbsenceOverlapMode.SUM,
) -> CapacityCalculation:
    """Capacity breakdown for one member over one sprint.

    available = max(0, working days - absence days)
    raw = available × capacity_per_day
    adjusted = raw × focus_factor
    """
    off_days = holiday_set(holidays)
    start, end = sprint.start_date, sprint.end_date

    total_days = count_calendar_days(start, end)
    working_days = count_working_days(start, end, off_days)

    member_absences = [a for a in absences if a.member_id == member.id]
    if AbsenceOverlapMode(overlap_mode) is AbsenceOverlapMode.UNION:
        absence_days: float = union_absence_working_days(member_absences, start, end, off_days)
    else:
        absence_days = sum(
            absence_working_days_in_range(a, start, end, off_days) for a in member_absences
        )
    absence_days += _anonymous_absence_days(sprint, member.id)

    available_days = max(0.0, working_days - absence_days)
    raw_capacity = available_days * member.capacity_per_day
    adjusted_capacity = raw_capacity * member.focus_factor

    return CapacityCalculation(
        member_id=member.id,
        member_name=member.name,
        total_days=total_days,
        working_days=working_days,
        absence_days=absence_days,
        available_days=available_days,
        raw_capacity=raw_capacity,
        adjusted_capacity=adjusted_capacity,
        focus_factor=member.focus_factor,
    )


def calculate_sprint_capacity(
    sprint: Any,
    members: Sequence[Any],
    absences: Sequence[Any],
    holidays: Iterable[DateLike] | None = None,
    overlap_mode: AbsenceOverlapMode | str = AbsenceOverlapMode.SUM,
) -> SprintCapacity:
    """Run the member calculation for every member, in input order, and sum the results."""
    off_days = holiday_set(holidays)
    team_capacity = [
        calculate_member_capacity(m, sprint, absences, off_days, overlap_mode) for m in members
    ]
    total_capacity = sum((c.adjusted_capacity for c in team_capacity), 0.0)
    total_available_days = sum((c.available_days for c in team_capacity), 0.0)
    logger.debug(
        "Sprint {} capacity: {} members, {:.2f} available days, {:.2f} capacity",
        getattr(sprint, "id", None),
        len(team_capacity),
        total_available_days,
        total_capacity,
    )
    return SprintCapacity(
        sprint=snapshot_sprint(sprint),
        team_capacity=team_capacity,
        total_capacity=total_capacity,
        total_available_days=total_available_days,
    )
