"""Pydantic schemas."""
from sprint_capacity.schemas.absence import AbsenceCreate, AbsenceResponse, AbsenceUpdate
from sprint_capacity.schemas.capacity import (
    CapacityCalculation,
    CapacityRequest,
    CapacitySummary,
    Recommendation,
    RoleCapacity,
    SprintCapacity,
    SprintSnapshot,
    Utilization,
)
from sprint_capacity.schemas.data import (
    AbsenceRecord,
    BackupCreate,
    BackupResponse,
    DataExport,
    DataSnapshot,
    SettingItem,
    SettingUpdate,
    SprintRecord,
    TeamMemberRecord,
)
from sprint_capacity.schemas.sprint import SprintCreate, SprintInput, SprintResponse, SprintUpdate
from sprint_capacity.schemas.team import (
    TeamMemberCreate,
    TeamMemberInput,
    TeamMemberResponse,
    TeamMemberUpdate,
)

__all__ = [
    "AbsenceCreate",
    "AbsenceResponse",
    "AbsenceUpdate",
    "CapacityCalculation",
    "CapacityRequest",
    "CapacitySummary",
    "Recommendation",
    "RoleCapacity",
    "SprintCapacity",
    "SprintSnapshot",
    "Utilization",
    "AbsenceRecord",
    "BackupCreate",
    "BackupResponse",
    "DataExport",
    "DataSnapshot",
    "SettingItem",
    "SettingUpdate",
    "SprintRecord",
    "TeamMemberRecord",
    "SprintCreate",
    "SprintInput",
    "SprintResponse",
    "SprintUpdate",
    "TeamMemberCreate",
    "TeamMemberInput",
    "TeamMemberResponse",
    "TeamMemberUpdate",
]
