"""Capacity calculation engine."""
from sprint_capacity.engine.absences import absence_working_days_in_range, union_absence_working_days
from sprint_capacity.engine.calendar import count_working_days, is_holiday, is_weekend
from sprint_capacity.engine.capacity import (
    AbsenceOverlapMode,
    calculate_member_capacity,
    calculate_sprint_capacity,
)

__all__ = [
    "AbsenceOverlapMode",
    "absence_working_days_in_range",
    "calculate_member_capacity",
    "calculate_sprint_capacity",
    "count_working_days",
    "is_holiday",
    "is_weekend",
    "union_absence_working_days",
]
