"""Capacity calculation API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.config import get_settings
from sprint_capacity.database import get_db
from sprint_capacity.engine.calendar import count_working_days, holiday_set
from sprint_capacity.engine.capacity import calculate_sprint_capacity
from sprint_capacity.engine.reporting import summarize_sprint_capacity
from sprint_capacity.models.absence import Absence
from sprint_capacity.models.sprint import Sprint
from sprint_capacity.models.team import TeamMember
from sprint_capacity.routers.sprints import get_sprint_or_404
from sprint_capacity.schemas.capacity import CapacityRequest, CapacitySummary, SprintCapacity
from sprint_capacity.services.settings_service import get_holidays

router = APIRouter(tags=["capacity"])


async def _load_sprint_data(db: AsyncSession, sprint_id: int):
    """Sprint, the whole team, and absences overlapping the sprint."""
    sprint = await get_sprint_or_404(db, sprint_id)
    members = (await db.execute(select(TeamMember).order_by(TeamMember.id))).scalars().all()
    absences = (
        await db.execute(
            select(Absence).where(
                Absence.start_date <= sprint.end_date,
                Absence.end_date >= sprint.start_date,
            )
        )
    ).scalars().all()
    return sprint, list(members), list(absences)


async def _calculate(db: AsyncSession, sprint_id: int) -> tuple[Sprint, list[TeamMember], frozenset[date], SprintCapacity]:
    sprint, members, absences = await _load_sprint_data(db, sprint_id)
    holidays = holiday_set(await get_holidays(db))
    result = calculate_sprint_capacity(
        sprint,
        members,
        absences,
        holidays,
        get_settings().absence_overlap_mode,
    )
    return sprint, members, holidays, result


@router.get("/sprints/{sprint_id}/capacity", response_model=SprintCapacity)
async def get_sprint_capacity(sprint_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    """
    Calculate the sprint's capacity and cache the totals on the sprint:
    1. Working days = sprint days minus weekends and stored holidays
    2. Per member: working days minus absences and anonymous absences
    3. Capacity = available days × capacity per day × focus factor
    """
    sprint, _, holidays, result = await _calculate(db, sprint_id)
    sprint.total_capacity = result.total_capacity
    sprint.working_days = count_working_days(sprint.start_date, sprint.end_date, holidays)
    await db.flush()
    logger.info("Cached capacity {:.2f} on sprint {}", result.total_capacity, sprint_id)
    return result


@router.get("/sprints/{sprint_id}/capacity/summary", response_model=CapacitySummary)
async def get_sprint_capacity_summary(
    sprint_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    committed: float | None = Query(None, ge=0, description="Capacity already committed, for utilization"),
):
    _, members, _, result = await _calculate(db, sprint_id)
    return summarize_sprint_capacity(result, members, committed)


@router.post("/capacity/calculate", response_model=SprintCapacity)
async def calculate_capacity(
    data: CapacityRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Stateless calculation over records sent in the body. Nothing is stored."""
    holidays = data.holidays if data.holidays is not None else await get_holidays(db)
    return calculate_sprint_capacity(
        data.sprint,
        data.members,
        data.absences,
        holidays,
        data.overlap_mode or get_settings().absence_overlap_mode,
    )
