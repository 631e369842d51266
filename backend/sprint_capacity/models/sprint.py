"""Sprint model."""
from datetime import date

from sqlalchemy import JSON, Date, DateTime, Float, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from sprint_capacity.database import Base

JSONType = JSON().with_variant(JSONB(), "postgresql")


class Sprint(Base):
    """Scheduling window. Capacity fields cache the last calculation."""

    __tablename__ = "sprints"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    unit: Mapped[str] = mapped_column(String(20), nullable=False, default="hours")  # hours | story-points | days
    total_capacity: Mapped[float | None] = mapped_column(Float, nullable=True)
    working_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    anonymous_absences: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)  # {member_id: days}
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
