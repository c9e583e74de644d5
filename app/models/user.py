from pydantic import BaseModel, EmailStr, Field, ConfigDict
from datetime import datetime
from typing import Optional

from app.models.base import StoredRecord, _utcnow

class UserBase(BaseModel):
    """Base user schema."""
    username: str = Field(..., min_length=3, max_length=50)

class UserCreate(UserBase):
    """User registration schema."""
    password: str = Field(..., min_length=6, max_length=100)

class UserLogin(BaseModel):
    """Schema for user login"""
    username: str
    password: str

class UserResponse(UserBase):
    """User response schema."""
    id: int
    drive_email: Optional[EmailStr] = None
    biometric_enabled: bool = False
    created_at: datetime

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True
    )

class TokenResponse(BaseModel):
    """Schema for authentication token response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse

class DriveEmailUpdate(BaseModel):
    """Link a drive account for backups."""
    email: EmailStr

class BiometricUpdate(BaseModel):
    enabled: bool

class UserInDB(StoredRecord):
    """User store schema."""
    username: str
    password_hash: str
    drive_email: Optional[str] = None
    biometric_enabled: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
