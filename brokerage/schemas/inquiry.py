"""
Pydantic schemas for contact-form inquiries.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
import uuid
from brokerage.models.inquiry import InquiryStatus


class InquiryCreate(BaseModel):
    """Public contact form submission."""

    name: str = Field(..., min_length=2, max_length=255, examples=["Ayesha Khan"])

    email: EmailStr = Field(..., examples=["ayesha@example.com"])

    phone: Optional[str] = Field(None, max_length=50, examples=["+92 300 1234567"])

    service: Optional[str] = Field(None, max_length=100, examples=["sales"])

    message: str = Field(
        ...,
        min_length=10,
        max_length=5000,
        examples=["I would like to arrange a viewing this weekend."]
    )

    property_id: Optional[uuid.UUID] = Field(None, description="Listing the inquiry is about")

    # Status and notes belong to the office
    model_config = ConfigDict(extra="ignore")

    @field_validator('name', 'message')
    @classmethod
    def strip_required(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be empty")
        return v

    @field_validator('email')
    @classmethod
    def lowercase_email(cls, v):
        return str(v).lower()

    @field_validator('phone', 'service')
    @classmethod
    def blank_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()

    @model_validator(mode='after')
    def validate_lengths_after_strip(self):
        if len(self.name) < 2:
            raise ValueError("Name must be at least 2 characters")
        if len(self.message) < 10:
            raise ValueError("Message must be at least 10 characters")
        return self


class InquiryUpdate(BaseModel):
    """Office follow-up on an inquiry."""

    status: Optional[InquiryStatus] = None
    notes: Optional[str] = Field(None, max_length=5000)

    @model_validator(mode='after')
    def validate_not_empty(self):
        if not self.model_fields_set:
            raise ValueError("At least one of status or notes must be provided")
        return self


class InquiryResponse(BaseModel):
    """Inquiry as returned by the API."""

    id: uuid.UUID
    name: str
    email: str
    phone: Optional[str] = None
    service: Optional[str] = None
    message: str
    status: InquiryStatus
    notes: Optional[str] = None
    property_id: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InquiryListResponse(BaseModel):
    inquiries: List[InquiryResponse]
    total: int
