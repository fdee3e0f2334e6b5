"""
Pydantic schemas for request/response validation.
"""

from .auth import LoginRequest, AdminResponse, LogoutResponse

from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse,
    PropertyListResponse,
    PropertySearchFilters,
)

from .media import MediaCreate, MediaUpdate, MediaOrderRequest, MediaResponse

from .inquiry import InquiryCreate, InquiryUpdate, InquiryResponse, InquiryListResponse

from .team import (
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamMemberResponse,
    PublicTeamMemberResponse,
    TeamMoveRequest,
    TeamOrderRequest
)

from .dashboard import DashboardMetrics
from .upload import UploadResponse

__all__ = [
    # Authentication
    "LoginRequest",
    "AdminResponse",
    "LogoutResponse",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",
    "PropertyListResponse",
    "PropertySearchFilters",

    # Media
    "MediaCreate",
    "MediaUpdate",
    "MediaOrderRequest",
    "MediaResponse",

    # Inquiry
    "InquiryCreate",
    "InquiryUpdate",
    "InquiryResponse",
    "InquiryListResponse",

    # Team
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "TeamMemberResponse",
    "PublicTeamMemberResponse",
    "TeamMoveRequest",
    "TeamOrderRequest",

    "DashboardMetrics",
    "UploadResponse",
]
