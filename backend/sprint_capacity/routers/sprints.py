"""Sprint API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.database import get_db
from sprint_capacity.models.sprint import Sprint
from sprint_capacity.schemas.sprint import SprintCreate, SprintResponse, SprintUpdate

router = APIRouter(prefix="/sprints", tags=["sprints"])


async def get_sprint_or_404(db: AsyncSession, sprint_id: int) -> Sprint:
    sprint = await db.get(Sprint, sprint_id)
    if not sprint:
        raise HTTPException(status_code=404, detail="Sprint not found")
    return sprint


@router.get("", response_model=list[SprintResponse])
async def list_sprints(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Sprint).order_by(Sprint.start_date.desc()))
    return [SprintResponse.model_validate(s) for s in result.scalars().all()]


@router.get("/{sprint_id}", response_model=SprintResponse)
async def get_sprint(sprint_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    return SprintResponse.model_validate(await get_sprint_or_404(db, sprint_id))


@router.post("", response_model=SprintResponse, status_code=201)
async def create_sprint(data: SprintCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    sprint = Sprint(**data.model_dump())
    db.add(sprint)
    await db.flush()
    await db.refresh(sprint)
    logger.info("Created sprint {} ({} - {})", sprint.id, sprint.start_date, sprint.end_date)
    return SprintResponse.model_validate(sprint)


@router.patch("/{sprint_id}", response_model=SprintResponse)
async def update_sprint(
    sprint_id: int,
    data: SprintUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    sprint = await get_sprint_or_404(db, sprint_id)
    updates = data.model_dump(exclude_unset=True)
    start = updates.get("start_date", sprint.start_date)
    end = updates.get("end_date", sprint.end_date)
    if end < start:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")
    for k, v in updates.items():
        setattr(sprint, k, v)
    await db.flush()
    await db.refresh(sprint)
    return SprintResponse.model_validate(sprint)


@router.delete("/{sprint_id}")
async def delete_sprint(sprint_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    sprint = await get_sprint_or_404(db, sprint_id)
    await db.delete(sprint)
    logger.info("Deleted sprint {}", sprint_id)
    return {"ok": True}
