"""
Pydantic schemas for property requests and responses.
Handles listing CRUD payloads, catalog filters and the paginated envelope.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
import uuid
from brokerage.config import settings
from brokerage.models.property import PropertyType, PropertyStatus

SORT_FIELDS = ("created_at", "price", "area", "title")


def _clean_text(value: Optional[str], label: str) -> Optional[str]:
    if value is None:
        return value
    if not value.strip():
        raise ValueError(f"{label} cannot be empty")
    return value.strip()


def _clean_amenities(value: Optional[List[str]]) -> Optional[List[str]]:
    """Trim labels, drop blanks and duplicates while keeping order."""
    if value is None:
        return value
    seen = []
    for item in value:
        label = item.strip()
        if label and label not in seen:
            seen.append(label)
    return seen


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    title: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Listing title",
        examples=["Luxury 5 Bed Villa in F-7"]
    )

    description: str = Field(
        ...,
        min_length=1,
        max_length=10000,
        description="Detailed listing description"
    )

    price: int = Field(
        ...,
        gt=0,
        le=99_999_999_999,
        description="Asking price, or monthly rent for rentals",
        examples=[85000000]
    )

    property_type: PropertyType = Field(..., description="Building or land type")

    status: PropertyStatus = Field(..., description="For Sale or For Rent")

    location: str = Field(
        ...,
        min_length=2,
        max_length=255,
        description="Neighbourhood or address line",
        examples=["F-7/2"]
    )

    city: str = Field(..., min_length=2, max_length=100, examples=["Islamabad"])

    area: int = Field(
        ...,
        gt=0,
        le=10_000_000,
        description="Covered area in square feet"
    )

    bedrooms: Optional[int] = Field(None, ge=0, le=50)

    bathrooms: Optional[int] = Field(None, ge=0, le=50)

    image: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Cover image URL"
    )

    featured: bool = Field(False, description="Promote on the home page")

    amenities: List[str] = Field(default_factory=list, description="Amenity labels")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        return _clean_text(v, "Title")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        return _clean_text(v, "Description")

    @field_validator('location', 'city')
    @classmethod
    def validate_location(cls, v):
        return _clean_text(v, "Location")

    @field_validator('amenities')
    @classmethod
    def validate_amenities(cls, v):
        return _clean_amenities(v)


class PropertyCreate(PropertyBase):
    """Schema for creating a new listing."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Luxury 5 Bed Villa in F-7",
                "description": "Corner villa with basement, servant quarter and landscaped lawn.",
                "price": 85000000,
                "property_type": "Villa",
                "status": "For Sale",
                "location": "F-7/2",
                "city": "Islamabad",
                "area": 4500,
                "bedrooms": 5,
                "bathrooms": 6,
                "image": "/uploads/properties/cover.jpg",
                "featured": True,
                "amenities": ["Swimming Pool", "Garden", "Parking"]
            }
        }
    )


class PropertyUpdate(BaseModel):
    """Schema for partially updating an existing listing."""

    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = Field(None, min_length=1, max_length=10000)
    price: Optional[int] = Field(None, gt=0, le=99_999_999_999)
    property_type: Optional[PropertyType] = None
    status: Optional[PropertyStatus] = None
    location: Optional[str] = Field(None, min_length=2, max_length=255)
    city: Optional[str] = Field(None, min_length=2, max_length=100)
    area: Optional[int] = Field(None, gt=0, le=10_000_000)
    bedrooms: Optional[int] = Field(None, ge=0, le=50)
    bathrooms: Optional[int] = Field(None, ge=0, le=50)
    image: Optional[str] = Field(None, min_length=1, max_length=500)
    featured: Optional[bool] = None
    amenities: Optional[List[str]] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        return _clean_text(v, "Title")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        return _clean_text(v, "Description")

    @field_validator('location', 'city')
    @classmethod
    def validate_location(cls, v):
        return _clean_text(v, "Location")

    @field_validator('amenities')
    @classmethod
    def validate_amenities(cls, v):
        return _clean_amenities(v)

    @model_validator(mode='after')
    def validate_not_empty(self):
        """At least one field must be sent."""
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "price": 82000000,
                "featured": False
            }
        }
    )


class PropertyResponse(PropertyBase):
    """Schema for listing responses."""

    id: uuid.UUID = Field(..., description="Listing unique identifier")

    created_at: datetime

    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PropertyListResponse(BaseModel):
    """Schema for paginated property list response."""

    properties: List[PropertyResponse] = Field(..., description="List of listings")

    total: int = Field(..., description="Total number of listings matching the criteria")

    page: int = Field(..., description="Current page number")

    page_size: int = Field(..., description="Number of listings per page")

    total_pages: int = Field(..., description="Total number of pages")

    has_next: bool = Field(..., description="Whether there are more pages")

    has_previous: bool = Field(..., description="Whether there are previous pages")


class PropertySearchFilters(BaseModel):
    """
    Catalog filters built from query parameters.
    Zero or empty values mean "no filter".
    """

    status: Optional[PropertyStatus] = None
    property_type: Optional[PropertyType] = None
    city: Optional[str] = Field(None, max_length=100)
    min_price: Optional[int] = Field(None, ge=0)
    max_price: Optional[int] = Field(None, ge=0)
    bedrooms: Optional[int] = Field(None, ge=0, le=50, description="Minimum number of bedrooms")
    featured: Optional[bool] = None
    query: Optional[str] = Field(None, max_length=255, description="Search over title, location and city")

    page: int = Field(1, ge=1, description="Page number (starts from 1)")
    page_size: int = Field(settings.default_page_size, ge=1, le=settings.max_page_size, description="Listings per page")

    sort_by: str = Field("created_at", description="Sort field (created_at, price, area, title)")
    sort_order: str = Field("desc", description="Sort order (asc or desc)")

    @field_validator('city', 'query')
    @classmethod
    def blank_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator('min_price', 'max_price', 'bedrooms')
    @classmethod
    def zero_to_none(cls, v):
        return v or None

    @field_validator('featured')
    @classmethod
    def false_to_none(cls, v):
        # featured=false lists everything
        return True if v else None

    @field_validator('sort_by')
    @classmethod
    def validate_sort_by(cls, v):
        if v not in SORT_FIELDS:
            raise ValueError(f"Sort field must be one of: {', '.join(SORT_FIELDS)}")
        return v

    @field_validator('sort_order')
    @classmethod
    def validate_sort_order(cls, v):
        if v.lower() not in ['asc', 'desc']:
            raise ValueError("Sort order must be 'asc' or 'desc'")
        return v.lower()

    @model_validator(mode='after')
    def validate_ranges(self):
        if self.min_price is not None and self.max_price is not None:
            if self.min_price > self.max_price:
                raise ValueError("Minimum price cannot be greater than maximum price")
        return self

