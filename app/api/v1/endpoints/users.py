from typing import Dict
from fastapi import APIRouter, Depends
from app.core.auth import get_current_user
from app.db.session import get_store
from app.db.store import DataStore
from app.models.user import BiometricUpdate, DriveEmailUpdate, UserInDB, UserResponse
from app.repositories.user_repo import UserRepository

router = APIRouter()

@router.get("/me", response_model=UserResponse)
async def get_my_profile(current_user: UserInDB = Depends(get_current_user)):
    """Get current user profile"""
    return UserResponse.model_validate(current_user)

@router.put("/me/drive-email", response_model=UserResponse)
async def link_drive_account(
    drive_in: DriveEmailUpdate,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Link a drive account used for backups (409 if linked to someone else)"""
    user = await UserRepository(store).set_drive_email(current_user.id, drive_in.email)
    return UserResponse.model_validate(user)

@router.delete("/me/drive-email", response_model=UserResponse)
async def unlink_drive_account(
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Unlink the drive account"""
    user = await UserRepository(store).set_drive_email(current_user.id, None)
    return UserResponse.model_validate(user)

@router.put("/me/biometric", response_model=UserResponse)
async def update_biometric(
    biometric_in: BiometricUpdate,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Enable or disable biometric unlock"""
    user = await UserRepository(store).set_biometric(current_user.id, biometric_in.enabled)
    return UserResponse.model_validate(user)

@router.delete("/me/data", response_model=Dict[str, int])
async def clear_my_data(
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Delete every record the current user owns. The account is kept."""
    return await UserRepository(store).clear_user_data(current_user.id)
