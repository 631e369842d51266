"""Settings persistence and defaults."""
from typing import Any

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.config import get_settings
from sprint_capacity.models.setting import Setting
from sprint_capacity.schemas.data import HOLIDAYS_KEY


def default_settings() -> dict[str, Any]:
    settings = get_settings()
    return {
        "default_sprint_length": settings.default_sprint_length_days,
        "working_days_per_week": settings.working_days_per_week,
        "default_unit": settings.default_unit,
        HOLIDAYS_KEY: list(settings.holidays),
    }


async def seed_default_settings(db: AsyncSession) -> None:
    """Insert any default setting that is not stored yet."""
    result = await db.execute(select(Setting.key))
    existing = set(result.scalars().all())
    for key, value in default_settings().items():
        if key not in existing:
            db.add(Setting(key=key, value=value))
            logger.info("Seeded default setting {}", key)
    await db.flush()


async def get_setting(db: AsyncSession, key: str, default: Any = None) -> Any:
    row = await db.get(Setting, key)
    return row.value if row is not None else default


async def set_setting(db: AsyncSession, key: str, value: Any) -> Setting:
    row = await db.get(Setting, key)
    if row is None:
        row = Setting(key=key, value=value)
        db.add(row)
    else:
        row.value = value
    await db.flush()
    return row


async def get_holidays(db: AsyncSession) -> list[str]:
    """Stored holiday list, falling back to the configured one."""
    return await get_setting(db, HOLIDAYS_KEY, list(get_settings().holidays)) or []
