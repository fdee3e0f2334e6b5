"""
Repository layer for database operations.
"""

from .base import BaseRepository
from .property import PropertyRepository
from .media import MediaRepository
from .inquiry import InquiryRepository
from .admin_user import AdminUserRepository
from .team_member import TeamMemberRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "MediaRepository",
    "InquiryRepository",
    "AdminUserRepository",
    "TeamMemberRepository",
]
