"""Export, import and backup of all planning data."""
import time
from datetime import datetime, timezone

from loguru import logger
from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.models.absence import Absence
from sprint_capacity.models.setting import Backup, Setting
from sprint_capacity.models.sprint import Sprint
from sprint_capacity.models.team import TeamMember
from sprint_capacity.schemas.data import (
    AbsenceRecord,
    BackupResponse,
    DataExport,
    DataSnapshot,
    SettingItem,
    SprintRecord,
    TeamMemberRecord,
)

_SERIAL_TABLES = ("team_members", "sprints", "absences")


async def snapshot(db: AsyncSession) -> DataSnapshot:
    """Every member, sprint, absence and setting currently stored."""
    members = (await db.execute(select(TeamMember).order_by(TeamMember.id))).scalars().all()
    sprints = (await db.execute(select(Sprint).order_by(Sprint.id))).scalars().all()
    absences = (await db.execute(select(Absence).order_by(Absence.id))).scalars().all()
    settings = (await db.execute(select(Setting).order_by(Setting.key))).scalars().all()
    return DataSnapshot(
        users=[TeamMemberRecord.model_validate(m) for m in members],
        sprints=[SprintRecord.model_validate(s) for s in sprints],
        absences=[AbsenceRecord.model_validate(a) for a in absences],
        settings=[SettingItem.model_validate(s) for s in settings],
    )


async def export_data(db: AsyncSession) -> DataExport:
    return DataExport(export_date=datetime.now(timezone.utc), data=await snapshot(db))


async def _sync_sequences(db: AsyncSession) -> None:
    """Move postgres id sequences past ids inserted explicitly."""
    if db.bind.dialect.name != "postgresql":
        return
    for table in _SERIAL_TABLES:
        await db.execute(text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
            f"COALESCE((SELECT MAX(id) FROM {table}), 0) + 1, false)"
        ))


async def replace_all(db: AsyncSession, data: DataSnapshot) -> None:
    """Clear members, sprints, absences and settings, then load the snapshot with its ids."""
    await db.execute(delete(Absence))
    await db.execute(delete(Sprint))
    await db.execute(delete(TeamMember))
    await db.execute(delete(Setting))
    await db.flush()
    for m in data.users:
        db.add(TeamMember(**m.model_dump(exclude_none=True)))
    for s in data.sprints:
        db.add(Sprint(**s.model_dump(exclude_none=True)))
    await db.flush()
    for a in data.absences:
        db.add(Absence(**a.model_dump(exclude_none=True)))
    for item in data.settings:
        db.add(Setting(key=item.key, value=item.value))
    await db.flush()
    await _sync_sequences(db)
    logger.info(
        "Loaded {} members, {} sprints, {} absences, {} settings",
        len(data.users),
        len(data.sprints),
        len(data.absences),
        len(data.settings),
    )


def _backup_to_response(backup: Backup) -> BackupResponse:
    data = backup.data or {}
    return BackupResponse(
        timestamp=backup.timestamp,
        description=backup.description,
        member_count=len(data.get("users", [])),
        sprint_count=len(data.get("sprints", [])),
        absence_count=len(data.get("absences", [])),
    )


async def create_backup(db: AsyncSession, description: str | None = None) -> BackupResponse:
    timestamp = int(time.time() * 1000)
    while await db.get(Backup, timestamp) is not None:
        timestamp += 1
    backup = Backup(
        timestamp=timestamp,
        description=description,
        data=(await snapshot(db)).model_dump(mode="json"),
    )
    db.add(backup)
    await db.flush()
    logger.info("Created backup {}", timestamp)
    return _backup_to_response(backup)


async def list_backups(db: AsyncSession) -> list[BackupResponse]:
    """Newest first."""
    result = await db.execute(select(Backup).order_by(Backup.timestamp.desc()))
    return [_backup_to_response(b) for b in result.scalars().all()]


async def restore_backup(db: AsyncSession, timestamp: int) -> bool:
    """Replace current data with a stored backup. False if no such backup."""
    backup = await db.get(Backup, timestamp)
    if backup is None:
        return False
    await replace_all(db, DataSnapshot.model_validate(backup.data))
    logger.info("Restored backup {}", timestamp)
    return True
