"""Sprint schemas."""
from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

SprintUnit = Literal["hours", "story-points", "days"]

# Extra absence days per member id, not backed by an absence record
AnonymousAbsences = dict[int, Annotated[float, Field(ge=0)]]


class SprintCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    unit: SprintUnit = "hours"
    anonymous_absences: AnonymousAbsences = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_dates(self) -> "SprintCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class SprintUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    unit: SprintUnit | None = None
    anonymous_absences: AnonymousAbsences | None = None

    @model_validator(mode="after")
    def reject_null_required(self) -> "SprintUpdate":
        for name in ("name", "start_date", "end_date", "unit", "anonymous_absences"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class SprintInput(SprintCreate):
    """Sprint passed inline to a stateless calculation."""

    id: int | None = None


class SprintResponse(BaseModel):
    id: int
    name: str
    start_date: date
    end_date: date
    unit: str
    total_capacity: float | None
    working_days: int | None
    anonymous_absences: dict[int, float] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
