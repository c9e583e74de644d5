from typing import Any, Dict
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from app.core.auth import get_current_user
from app.db.session import get_store
from app.db.store import DataStore
from app.models.user import UserInDB
from app.schemas.backup import RestoreSummary
from app.services.backup_service import BackupService

router = APIRouter()

@router.get("/backup")
async def download_backup(
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Download a snapshot of everything the current user owns."""
    snapshot = await BackupService.create_snapshot(store, current_user.id)
    return JSONResponse(
        snapshot,
        headers={"Content-Disposition": f'attachment; filename="{BackupService.file_name()}"'}
    )

@router.post("/restore", response_model=RestoreSummary)
async def restore_backup(
    snapshot: Dict[str, Any] = Body(...),
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Replace the current user's data with a snapshot."""
    return await BackupService.restore_snapshot(store, current_user.id, snapshot)
