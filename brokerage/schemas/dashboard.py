"""
Schemas for the admin dashboard metrics.
"""

from pydantic import BaseModel, Field
from typing import List
from brokerage.schemas.inquiry import InquiryResponse


class DashboardMetrics(BaseModel):
    """Headline counts for the back-office home page."""

    total_properties: int
    for_sale: int
    for_rent: int
    featured_properties: int
    total_inquiries: int
    new_inquiries: int
    in_progress_inquiries: int
    responded_inquiries: int = Field(..., description="Responded and closed inquiries")
    team_members: int
    recent_inquiries: List[InquiryResponse] = Field(default_factory=list)
