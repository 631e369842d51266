"""Key-value settings and data backups."""
from typing import Any

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sprint_capacity.database import Base
from sprint_capacity.models.sprint import JSONType


class Setting(Base):
    """Application setting, e.g. the holiday list."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSONType, nullable=True)


class Backup(Base):
    """Full snapshot of members, sprints, absences and settings."""

    __tablename__ = "backups"

    timestamp: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)  # epoch ms
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    data: Mapped[dict] = mapped_column(JSONType, nullable=False)
