"""
Pydantic schemas for team member profiles.
Public responses hide contact fields whose visibility toggle is off.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from typing import Optional, List, Literal
from datetime import datetime
import uuid


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v.strip() if isinstance(v, str) else v


class TeamMemberBase(BaseModel):
    """Fields shared by create and admin responses."""

    name: str = Field(..., min_length=2, max_length=255, examples=["Shahzad Ahmad"])
    role: str = Field(..., min_length=2, max_length=255, examples=["Director of Sales"])
    department: Optional[str] = Field(None, max_length=100)
    specialization: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=5000)
    short_bio: Optional[str] = Field(None, max_length=1000)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    whatsapp: Optional[str] = Field(None, max_length=50)
    photo: Optional[str] = Field(None, max_length=500)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    facebook_url: Optional[str] = Field(None, max_length=500)
    instagram_url: Optional[str] = Field(None, max_length=500)
    years_experience: Optional[int] = Field(None, ge=0, le=100)
    properties_sold: Optional[int] = Field(None, ge=0)
    happy_clients: Optional[int] = Field(None, ge=0)
    is_active: bool = True
    show_email: bool = True
    show_phone: bool = True
    show_whatsapp: bool = True

    @field_validator(
        'department', 'specialization', 'bio', 'short_bio', 'phone', 'whatsapp',
        'photo', 'linkedin_url', 'facebook_url', 'instagram_url',
        mode='before'
    )
    @classmethod
    def blank_to_none(cls, v):
        return _blank_to_none(v)

    @field_validator('name', 'role')
    @classmethod
    def strip_required(cls, v):
        return v.strip()


class TeamMemberCreate(TeamMemberBase):
    """New team member; sort_order defaults to the end of the list."""

    sort_order: Optional[int] = Field(None, ge=0)


class TeamMemberUpdate(BaseModel):
    """Partial team member update."""

    name: Optional[str] = Field(None, min_length=2, max_length=255)
    role: Optional[str] = Field(None, min_length=2, max_length=255)
    department: Optional[str] = Field(None, max_length=100)
    specialization: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=5000)
    short_bio: Optional[str] = Field(None, max_length=1000)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    whatsapp: Optional[str] = Field(None, max_length=50)
    photo: Optional[str] = Field(None, max_length=500)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    facebook_url: Optional[str] = Field(None, max_length=500)
    instagram_url: Optional[str] = Field(None, max_length=500)
    years_experience: Optional[int] = Field(None, ge=0, le=100)
    properties_sold: Optional[int] = Field(None, ge=0)
    happy_clients: Optional[int] = Field(None, ge=0)
    sort_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    show_email: Optional[bool] = None
    show_phone: Optional[bool] = None
    show_whatsapp: Optional[bool] = None

    @field_validator(
        'department', 'specialization', 'bio', 'short_bio', 'phone', 'whatsapp',
        'photo', 'linkedin_url', 'facebook_url', 'instagram_url',
        mode='before'
    )
    @classmethod
    def blank_to_none(cls, v):
        return _blank_to_none(v)

    @model_validator(mode='after')
    def validate_not_empty(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class TeamMemberResponse(TeamMemberBase):
    """Full profile for the back office."""

    id: uuid.UUID
    email: str
    sort_order: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PublicTeamMemberResponse(BaseModel):
    """Profile for the public site with hidden contact fields nulled."""

    id: uuid.UUID
    name: str
    role: str
    department: Optional[str] = None
    specialization: Optional[str] = None
    bio: Optional[str] = None
    short_bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    photo: Optional[str] = None
    linkedin_url: Optional[str] = None
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    years_experience: Optional[int] = None
    properties_sold: Optional[int] = None
    happy_clients: Optional[int] = None
    sort_order: int

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_member(cls, member) -> "PublicTeamMemberResponse":
        response = cls.model_validate(member)
        hidden = {}
        if not member.show_email:
            hidden["email"] = None
        if not member.show_phone:
            hidden["phone"] = None
        if not member.show_whatsapp:
            hidden["whatsapp"] = None
        return response.model_copy(update=hidden)


class TeamMoveRequest(BaseModel):
    direction: Literal["up", "down"]


class TeamOrderRequest(BaseModel):
    member_ids: List[uuid.UUID] = Field(..., min_length=1)
