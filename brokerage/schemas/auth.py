"""
Pydantic schemas for admin session login and the current admin profile.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
import uuid
from brokerage.models.admin_user import AdminRole


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr = Field(
        ...,
        description="Admin email address",
        examples=["admin@example.com"]
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Admin password"
    )

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Normalize email to lowercase."""
        return str(v).lower().strip()


class AdminResponse(BaseModel):
    """Admin profile; never includes the password hash."""

    id: uuid.UUID
    email: str
    name: str
    role: AdminRole
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LogoutResponse(BaseModel):
    success: bool = True
