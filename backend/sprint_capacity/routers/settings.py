"""Settings API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.database import get_db
from sprint_capacity.engine.calendar import holiday_set
from sprint_capacity.models.setting import Setting
from sprint_capacity.schemas.data import SettingItem, SettingUpdate
from sprint_capacity.services.settings_service import HOLIDAYS_KEY, get_holidays, set_setting

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=list[SettingItem])
async def list_settings(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Setting).order_by(Setting.key))
    return [SettingItem.model_validate(s) for s in result.scalars().all()]


@router.get("/holidays", response_model=list[date])
async def list_holidays(db: Annotated[AsyncSession, Depends(get_db)]):
    return sorted(holiday_set(await get_holidays(db)))


@router.put("/holidays", response_model=list[date])
async def replace_holidays(holidays: list[date], db: Annotated[AsyncSession, Depends(get_db)]):
    days = sorted(set(holidays))
    await set_setting(db, HOLIDAYS_KEY, [d.isoformat() for d in days])
    return days


@router.get("/{key}", response_model=SettingItem)
async def get_setting(key: str, db: Annotated[AsyncSession, Depends(get_db)]):
    row = await db.get(Setting, key)
    if not row:
        raise HTTPException(status_code=404, detail="Setting not found")
    return SettingItem.model_validate(row)


@router.put("/{key}", response_model=SettingItem)
async def put_setting(key: str, data: SettingUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    if key == HOLIDAYS_KEY:
        raise HTTPException(status_code=400, detail="Use PUT /settings/holidays")
    row = await set_setting(db, key, data.value)
    return SettingItem.model_validate(row)
