"""
Request schemas for the marketing collateral generator.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Literal
import enum
import re
import uuid

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class MaterialType(str, enum.Enum):
    SOCIAL = "social"
    CARD = "card"
    BROCHURE = "brochure"
    FLYER = "flyer"


class ExportFormat(str, enum.Enum):
    PNG = "png"
    JPG = "jpg"
    PDF = "pdf"
    ZIP = "zip"


class SocialTemplate(str, enum.Enum):
    PROPERTY = "property"
    SERVICE = "service"
    TESTIMONIAL = "testimonial"
    TIPS = "tips"
    ANNOUNCEMENT = "announcement"


def split_features(text: Optional[str]) -> List[str]:
    """Newline-separated feature text to a list with blanks dropped."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


class SocialPostRequest(BaseModel):
    """Square social media post."""

    template: SocialTemplate = SocialTemplate.PROPERTY
    title: str = Field("LUXURY VILLA FOR SALE", max_length=200)
    subtitle: str = Field("Your Dream Home Awaits!", max_length=200)
    location: str = Field("DHA Phase 2, Islamabad", max_length=200)
    price: str = Field("PKR 8.5 Crore", max_length=100)
    features: str = Field(
        "5 Bedrooms | 6 Bathrooms\n1 Kanal (500 Sq. Yards)\nModern Kitchen | Private Garden",
        max_length=2000,
        description="One feature per line"
    )
    cta_text: str = Field("Contact Us Today!", max_length=100)
    bg_color: str = Field("#1e40af", description="Background colour as #rrggbb")
    contact_member_id: Optional[uuid.UUID] = None

    @field_validator('bg_color')
    @classmethod
    def validate_bg_color(cls, v):
        if not HEX_COLOR.match(v):
            raise ValueError("bg_color must be a #rrggbb colour")
        return v.lower()

    @property
    def feature_list(self) -> List[str]:
        return split_features(self.features)


class BusinessCardRequest(BaseModel):
    member_id: uuid.UUID


class BrochureRequest(BaseModel):
    type: Literal["company", "property"] = "company"
    property_id: Optional[uuid.UUID] = None

    @model_validator(mode='after')
    def validate_property_id(self):
        if self.type == "property" and self.property_id is None:
            raise ValueError("property_id is required for a property brochure")
        return self


class FlyerRequest(BaseModel):
    title: str = Field("EXCLUSIVE PROPERTY LAUNCH", max_length=200)
    subtitle: str = Field("LUXURY APARTMENTS IN BAHRIA TOWN", max_length=200)
    price: str = Field("Starting from PKR 1.8 Crore", max_length=100)
    features: str = Field(
        "2 & 3 Bedroom Options\nModern Architecture\nCovered Parking\n24/7 Security",
        max_length=2000
    )
    contact_member_id: Optional[uuid.UUID] = None

    @property
    def feature_list(self) -> List[str]:
        return split_features(self.features)


REQUEST_MODELS = {
    MaterialType.SOCIAL: SocialPostRequest,
    MaterialType.CARD: BusinessCardRequest,
    MaterialType.BROCHURE: BrochureRequest,
    MaterialType.FLYER: FlyerRequest,
}
