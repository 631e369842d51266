"""Capacity calculation result schemas."""
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from sprint_capacity.schemas.absence import AbsenceCreate
from sprint_capacity.schemas.sprint import SprintInput
from sprint_capacity.schemas.team import TeamMemberInput


class CapacityCalculation(BaseModel):
    """One member's capacity for one sprint, with every intermediate value."""

    member_id: int | None
    member_name: str
    total_days: int
    working_days: int
    absence_days: float
    available_days: float
    raw_capacity: float
    adjusted_capacity: float
    focus_factor: float


class SprintSnapshot(BaseModel):
    id: int | None
    name: str
    start_date: date
    end_date: date
    unit: str


class SprintCapacity(BaseModel):
    sprint: SprintSnapshot
    team_capacity: list[CapacityCalculation]
    total_capacity: float
    total_available_days: float


class Utilization(BaseModel):
    percentage: float
    status: Literal["low", "optimal", "high", "overcommitted"]


class RoleCapacity(BaseModel):
    role: str
    member_count: int
    total_capacity: float
    total_available_days: float
    average_capacity: float


class Recommendation(BaseModel):
    kind: Literal["low_availability", "many_absences", "optimal_availability", "planning"]
    level: Literal["warning", "info", "success"]
    message: str


class CapacitySummary(BaseModel):
    sprint: SprintSnapshot
    member_count: int
    total_capacity: float
    total_capacity_label: str
    total_working_days: int
    total_absence_days: float
    total_available_days: float
    average_capacity_per_member: float
    availability_rate: float
    by_role: list[RoleCapacity]
    recommendations: list[Recommendation]
    utilization: Utilization | None = None


class CapacityRequest(BaseModel):
    """Stateless calculation input: every record travels in the body."""

    sprint: SprintInput
    members: list[TeamMemberInput] = Field(default_factory=list)
    absences: list[AbsenceCreate] = Field(default_factory=list)
    holidays: list[date] | None = None  # None uses the configured holiday list
    overlap_mode: Literal["sum", "union"] | None = None
