"""
Database models for the Brokerage Site API.
Includes listings with their media, inquiries, admin accounts and team members.
"""

from brokerage.models.admin_user import AdminUser, AdminRole
from brokerage.models.property import Property, PropertyType, PropertyStatus
from brokerage.models.media import PropertyMedia, MediaType
from brokerage.models.inquiry import Inquiry, InquiryStatus
from brokerage.models.team_member import TeamMember

# Export all models for easy importing
__all__ = [
    "AdminUser",
    "AdminRole",
    "Property",
    "PropertyType",
    "PropertyStatus",
    "PropertyMedia",
    "MediaType",
    "Inquiry",
    "InquiryStatus",
    "TeamMember",
]
