"""
Service layer for business logic implementation.
Contains services for the catalog, media, inquiries, team, admin auth,
dashboard, uploads, marketing and error handling.
"""

from .auth import AuthService
from .dashboard import DashboardService
from .error_handler import ErrorHandlerService
from .inquiry import InquiryService
from .marketing import MarketingService
from .media import MediaService
from .property import PropertyService
from .team import TeamService
from .upload import UploadService

__all__ = [
    "AuthService",
    "DashboardService",
    "ErrorHandlerService",
    "InquiryService",
    "MarketingService",
    "MediaService",
    "PropertyService",
    "TeamService",
    "UploadService",
]
