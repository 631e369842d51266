"""Team member schemas."""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, model_validator


class TeamMemberCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=100)
    capacity_per_day: float = Field(..., gt=0)  # hours, story points or days per working day
    focus_factor: float = Field(default=1.0, gt=0, le=1)
    email: EmailStr | None = None
    notes: str | None = None


class TeamMemberUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    role: str | None = Field(None, min_length=1, max_length=100)
    capacity_per_day: float | None = Field(None, gt=0)
    focus_factor: float | None = Field(None, gt=0, le=1)
    email: EmailStr | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def reject_null_required(self) -> "TeamMemberUpdate":
        for name in ("name", "role", "capacity_per_day", "focus_factor"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TeamMemberInput(TeamMemberCreate):
    """Member record passed inline to a stateless calculation."""

    id: int


class TeamMemberResponse(BaseModel):
    id: int
    name: str
    role: str
    capacity_per_day: float
    focus_factor: float
    email: str | None
    notes: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
