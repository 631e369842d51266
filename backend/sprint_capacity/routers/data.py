"""Data management API routes - export, import, backups."""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from sprint_capacity.database import get_db
from sprint_capacity.schemas.data import BackupCreate, BackupResponse, DataExport
from sprint_capacity.services import data_service

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/export", response_model=DataExport)
async def export_data(db: Annotated[AsyncSession, Depends(get_db)]):
    return await data_service.export_data(db)


@router.post("/import")
async def import_data(
    payload: Annotated[dict[str, Any], Body()],
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Replace all stored data with an export file's content."""
    try:
        export = DataExport.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid import format: {e.error_count()} errors")
    await data_service.replace_all(db, export.data)
    return {"ok": True}


@router.get("/backups", response_model=list[BackupResponse])
async def list_backups(db: Annotated[AsyncSession, Depends(get_db)]):
    return await data_service.list_backups(db)


@router.post("/backups", response_model=BackupResponse, status_code=201)
async def create_backup(data: BackupCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    return await data_service.create_backup(db, data.description)


@router.post("/backups/{timestamp}/restore")
async def restore_backup(timestamp: int, db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        restored = await data_service.restore_backup(db, timestamp)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid backup content: {e.error_count()} errors")
    if not restored:
        raise HTTPException(status_code=404, detail="Backup not found")
    return {"ok": True}
