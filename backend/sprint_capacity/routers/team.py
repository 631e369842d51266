"""Team member API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.database import get_db
from sprint_capacity.models.absence import Absence
from sprint_capacity.models.team import TeamMember
from sprint_capacity.roles import STANDARD_ROLES
from sprint_capacity.schemas.team import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate

router = APIRouter(prefix="/team", tags=["team"])


async def _get_member(db: AsyncSession, member_id: int) -> TeamMember:
    member = await db.get(TeamMember, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.get("/roles", response_model=list[str])
async def list_roles():
    return list(STANDARD_ROLES)


@router.get("", response_model=list[TeamMemberResponse])
async def list_team(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(TeamMember).order_by(TeamMember.name))
    return [TeamMemberResponse.model_validate(m) for m in result.scalars().all()]


@router.get("/{member_id}", response_model=TeamMemberResponse)
async def get_team_member(member_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    return TeamMemberResponse.model_validate(await _get_member(db, member_id))


@router.post("", response_model=TeamMemberResponse, status_code=201)
async def add_team_member(data: TeamMemberCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    member = TeamMember(**data.model_dump())
    db.add(member)
    await db.flush()
    await db.refresh(member)
    logger.info("Added team member {} ({})", member.id, member.name)
    return TeamMemberResponse.model_validate(member)


@router.patch("/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    member_id: int,
    data: TeamMemberUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    member = await _get_member(db, member_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(member, k, v)
    await db.flush()
    await db.refresh(member)
    return TeamMemberResponse.model_validate(member)


@router.delete("/{member_id}")
async def delete_team_member(member_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    """Delete a member together with all of their absences."""
    member = await _get_member(db, member_id)
    result = await db.execute(delete(Absence).where(Absence.member_id == member_id))
    await db.delete(member)
    logger.info("Deleted team member {} and {} absences", member_id, result.rowcount)
    return {"ok": True}
