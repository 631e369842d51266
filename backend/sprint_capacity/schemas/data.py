"""Settings, export/import and backup schemas."""
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from sprint_capacity.schemas.absence import AbsenceResponse, AbsenceType
from sprint_capacity.schemas.sprint import AnonymousAbsences, SprintResponse, SprintUnit
from sprint_capacity.schemas.team import TeamMemberResponse

EXPORT_FORMAT_VERSION = "1.0"
HOLIDAYS_KEY = "holidays"


class SettingItem(BaseModel):
    key: str = Field(..., min_length=1, max_length=100)
    value: Any

    class Config:
        from_attributes = True


class SettingUpdate(BaseModel):
    value: Any


class TeamMemberRecord(TeamMemberResponse):
    """Stored member as exported; validated like a new member on import."""

    capacity_per_day: float = Field(..., gt=0)
    focus_factor: float = Field(..., gt=0, le=1)


class SprintRecord(SprintResponse):
    unit: SprintUnit
    anonymous_absences: AnonymousAbsences = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_dates(self) -> "SprintRecord":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AbsenceRecord(AbsenceResponse):
    type: AbsenceType

    @model_validator(mode="after")
    def check_dates(self) -> "AbsenceRecord":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


def normalize_holidays(value: Any) -> list[str]:
    """Sorted unique ISO dates. Anything but a list of ISO date strings or dates is rejected."""
    if not isinstance(value, list):
        raise ValueError("holidays must be a list of ISO dates")
    days = set()
    for item in value:
        if isinstance(item, date):
            days.add(item if not isinstance(item, datetime) else item.date())
        elif isinstance(item, str):
            days.add(date.fromisoformat(item.strip()[:10]))
        else:
            raise ValueError(f"invalid holiday {item!r}")
    return [d.isoformat() for d in sorted(days)]


class DataSnapshot(BaseModel):
    users: list[TeamMemberRecord] = Field(default_factory=list)
    sprints: list[SprintRecord] = Field(default_factory=list)
    absences: list[AbsenceRecord] = Field(default_factory=list)
    settings: list[SettingItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self) -> "DataSnapshot":
        member_ids = {m.id for m in self.users}
        unknown = sorted({a.member_id for a in self.absences} - member_ids)
        if unknown:
            raise ValueError(f"absences reference unknown members {unknown}")
        for item in self.settings:
            if item.key == HOLIDAYS_KEY:
                item.value = normalize_holidays(item.value)
        return self


class DataExport(BaseModel):
    version: str = EXPORT_FORMAT_VERSION
    export_date: datetime
    data: DataSnapshot


class BackupCreate(BaseModel):
    description: str | None = None


class BackupResponse(BaseModel):
    timestamp: int
    description: str | None
    member_count: int
    sprint_count: int
    absence_count: int
