"""
Pydantic schemas for listing media: gallery items, updates and ordering.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
import uuid
from brokerage.models.media import MediaType


def _clean_tags(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    tags = []
    for tag in value:
        tag = tag.strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


class MediaCreate(BaseModel):
    """Add a gallery item by URL (hosted image, floor plan or video link)."""

    media_type: MediaType = Field(MediaType.IMAGE, description="image, video or floorplan")

    url: str = Field(..., min_length=1, max_length=500, description="Asset or video page URL")

    thumbnail_url: Optional[str] = Field(None, max_length=500)

    caption: Optional[str] = Field(None, max_length=500)

    tags: List[str] = Field(default_factory=list)

    room_type: Optional[str] = Field(None, max_length=100)

    is_featured: bool = False

    platform: Optional[str] = Field(None, description="youtube or vimeo; derived from the URL when omitted")

    video_id: Optional[str] = Field(None, max_length=100)

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if not v.strip():
            raise ValueError("URL cannot be empty")
        return v.strip()

    @field_validator('platform')
    @classmethod
    def validate_platform(cls, v):
        if v is None:
            return v
        v = v.strip().lower()
        if v not in ("youtube", "vimeo"):
            raise ValueError("Platform must be 'youtube' or 'vimeo'")
        return v

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return _clean_tags(v)

    @model_validator(mode='after')
    def validate_featured_type(self):
        if self.is_featured and self.media_type != MediaType.IMAGE:
            raise ValueError("Only images can be featured")
        return self


class MediaUpdate(BaseModel):
    """Editable gallery item fields."""

    caption: Optional[str] = Field(None, max_length=500)
    tags: Optional[List[str]] = None
    room_type: Optional[str] = Field(None, max_length=100)
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = Field(None, ge=0)

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return _clean_tags(v)

    @model_validator(mode='after')
    def validate_not_empty(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class MediaOrderRequest(BaseModel):
    """Full gallery order; position in the list becomes sort_order."""

    media_ids: List[uuid.UUID] = Field(..., min_length=1)


class MediaResponse(BaseModel):
    """Gallery item as returned by the API."""

    id: uuid.UUID
    property_id: uuid.UUID
    media_type: MediaType
    url: str
    thumbnail_url: Optional[str] = None
    caption: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    room_type: Optional[str] = None
    is_featured: bool
    sort_order: int
    platform: Optional[str] = None
    video_id: Optional[str] = None
    embed_url: Optional[str] = None
    file_size: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
