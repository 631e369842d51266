"""Display helpers for capacity results - labels, utilization bands, role breakdown, recommendations."""
from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sprint_capacity.config import Settings, get_settings
from sprint_capacity.roles import role_display_name
from sprint_capacity.schemas.capacity import (
    CapacitySummary,
    Recommendation,
    RoleCapacity,
    SprintCapacity,
    Utilization,
)

UNIT_SUFFIXES = {
    "hours": "h",
    "days": "Tage",
    "story-points": "SP",
}


def _round_one(value: float) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def format_capacity(value: float, unit: str) -> str:
    """Capacity rounded to one decimal with the unit suffix, e.g. '64 h', '12.5 SP'."""
    rounded = _round_one(value)
    text = format(rounded.normalize(), "f") if rounded else "0"
    suffix = UNIT_SUFFIXES.get(unit)
    return f"{text} {suffix}" if suffix else text


def format_date(day: date) -> str:
    return day.strftime("%d.%m.%Y")


def format_date_range(start: date, end: date) -> str:
    return f"{format_date(start)} - {format_date(end)}"


def capacity_utilization(
    used_capacity: float,
    total_capacity: float,
    settings: Settings | None = None,
) -> Utilization:
    """Share of capacity committed and its band: low, optimal, high or overcommitted."""
    settings = settings or get_settings()
    percentage = (used_capacity / total_capacity) * 100 if total_capacity > 0 else 0.0
    if percentage <= settings.utilization_low_max:
        status = "low"
    elif percentage <= settings.utilization_optimal_max:
        status = "optimal"
    elif percentage <= settings.utilization_high_max:
        status = "high"
    else:
        status = "overcommitted"
    return Utilization(percentage=percentage, status=status)


def _capacity_by_role(result: SprintCapacity, members: Sequence[Any]) -> list[RoleCapacity]:
    by_id = {m.id: m for m in members}
    groups: dict[str, dict[str, float]] = {}
    for calc in result.team_capacity:
        member = by_id.get(calc.member_id)
        if member is None:
            continue
        role = role_display_name(member.role)
        group = groups.setdefault(role, {"count": 0, "capacity": 0.0, "days": 0.0})
        group["count"] += 1
        group["capacity"] += calc.adjusted_capacity
        group["days"] += calc.available_days
    roles = [
        RoleCapacity(
            role=role,
            member_count=int(g["count"]),
            total_capacity=g["capacity"],
            total_available_days=g["days"],
            average_capacity=g["capacity"] / g["count"],
        )
        for role, g in groups.items()
    ]
    return sorted(roles, key=lambda r: -r.total_capacity)


def _recommendations(
    availability_rate: float,
    total_working_days: int,
    total_absence_days: float,
    capacity_label: str,
    settings: Settings,
) -> list[Recommendation]:
    items: list[Recommendation] = []
    if total_working_days > 0 and availability_rate < settings.availability_warning_pct:
        items.append(Recommendation(
            kind="low_availability",
            level="warning",
            message=(
                f"The team is only {round(availability_rate)}% available. "
                "Check planned absences and holidays."
            ),
        ))
    if total_absence_days > total_working_days * settings.absence_warning_ratio:
        items.append(Recommendation(
            kind="many_absences",
            level="warning",
            message=f"{total_absence_days:g} absence days could put the sprint goals at risk.",
        ))
    if total_working_days > 0 and availability_rate >= settings.availability_optimal_pct:
        items.append(Recommendation(
            kind="optimal_availability",
            level="success",
            message=f"The team is {round(availability_rate)}% available.",
        ))
    items.append(Recommendation(
        kind="planning",
        level="info",
        message=f"Use the calculated capacity of {capacity_label} as the guide for sprint planning.",
    ))
    return items


def summarize_sprint_capacity(
    result: SprintCapacity,
    members: Sequence[Any],
    committed: float | None = None,
    settings: Settings | None = None,
) -> CapacitySummary:
    """Team statistics derived from a sprint capacity result."""
    settings = settings or get_settings()
    member_count = len(members)
    total_working_days = sum(c.working_days for c in result.team_capacity)
    total_absence_days = sum((c.absence_days for c in result.team_capacity), 0.0)
    availability_rate = (
        result.total_available_days / total_working_days * 100 if total_working_days > 0 else 0.0
    )
    capacity_label = format_capacity(result.total_capacity, result.sprint.unit)
    return CapacitySummary(
        sprint=result.sprint,
        member_count=member_count,
        total_capacity=result.total_capacity,
        total_capacity_label=capacity_label,
        total_working_days=total_working_days,
        total_absence_days=total_absence_days,
        total_available_days=result.total_available_days,
        average_capacity_per_member=result.total_capacity / member_count if member_count > 0 else 0.0,
        availability_rate=availability_rate,
        by_role=_capacity_by_role(result, members),
        recommendations=_recommendations(
            availability_rate, total_working_days, total_absence_days, capacity_label, settings
        ),
        utilization=(
            capacity_utilization(committed, result.total_capacity, settings)
            if committed is not None
            else None
        ),
    )
