"""Absence API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.database import get_db
from sprint_capacity.models.absence import Absence
from sprint_capacity.models.team import TeamMember
from sprint_capacity.schemas.absence import AbsenceCreate, AbsenceResponse, AbsenceUpdate

router = APIRouter(prefix="/absences", tags=["absences"])


async def _get_absence(db: AsyncSession, absence_id: int) -> Absence:
    absence = await db.get(Absence, absence_id)
    if not absence:
        raise HTTPException(status_code=404, detail="Absence not found")
    return absence


async def _require_member(db: AsyncSession, member_id: int) -> None:
    if not await db.get(TeamMember, member_id):
        raise HTTPException(status_code=400, detail="Unknown team member")


@router.get("", response_model=list[AbsenceResponse])
async def list_absences(
    db: Annotated[AsyncSession, Depends(get_db)],
    member_id: int | None = Query(None),
    start: date | None = Query(None, description="Only absences ending on or after this day"),
    end: date | None = Query(None, description="Only absences starting on or before this day"),
):
    q = select(Absence).order_by(Absence.start_date)
    if member_id is not None:
        q = q.where(Absence.member_id == member_id)
    if start is not None:
        q = q.where(Absence.end_date >= start)
    if end is not None:
        q = q.where(Absence.start_date <= end)
    result = await db.execute(q)
    return [AbsenceResponse.model_validate(a) for a in result.scalars().all()]


@router.get("/{absence_id}", response_model=AbsenceResponse)
async def get_absence(absence_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    return AbsenceResponse.model_validate(await _get_absence(db, absence_id))


@router.post("", response_model=AbsenceResponse, status_code=201)
async def create_absence(data: AbsenceCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    await _require_member(db, data.member_id)
    absence = Absence(**data.model_dump())
    db.add(absence)
    await db.flush()
    await db.refresh(absence)
    logger.info("Added {} absence {} for member {}", absence.type, absence.id, absence.member_id)
    return AbsenceResponse.model_validate(absence)


@router.patch("/{absence_id}", response_model=AbsenceResponse)
async def update_absence(
    absence_id: int,
    data: AbsenceUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    absence = await _get_absence(db, absence_id)
    updates = data.model_dump(exclude_unset=True)
    if "member_id" in updates:
        await _require_member(db, updates["member_id"])
    if updates.get("end_date", absence.end_date) < updates.get("start_date", absence.start_date):
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")
    for k, v in updates.items():
        setattr(absence, k, v)
    await db.flush()
    await db.refresh(absence)
    return AbsenceResponse.model_validate(absence)


@router.delete("/{absence_id}")
async def delete_absence(absence_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    absence = await _get_absence(db, absence_id)
    await db.delete(absence)
    return {"ok": True}
