"""SQLAlchemy models."""
from sprint_capacity.models.absence import Absence
from sprint_capacity.models.setting import Backup, Setting
from sprint_capacity.models.sprint import Sprint
from sprint_capacity.models.team import TeamMember

__all__ = [
    "Absence",
    "Backup",
    "Setting",
    "Sprint",
    "TeamMember",
]
