"""Absence schemas."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

AbsenceType = Literal["vacation", "sick", "training", "other"]


class AbsenceCreate(BaseModel):
    member_id: int
    start_date: date
    end_date: date
    type: AbsenceType = "vacation"
    description: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "AbsenceCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AbsenceUpdate(BaseModel):
    member_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    type: AbsenceType | None = None
    description: str | None = None

    @model_validator(mode="after")
    def reject_null_required(self) -> "AbsenceUpdate":
        for name in ("member_id", "start_date", "end_date", "type"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class AbsenceResponse(BaseModel):
    id: int
    member_id: int
    start_date: date
    end_date: date
    type: str
    description: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
