"""
FastAPI dependency injection utilities for services and admin sessions.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from brokerage.database import get_db
from brokerage.models.admin_user import AdminUser
from brokerage.services.auth import AuthService
from brokerage.services.dashboard import DashboardService
from brokerage.services.inquiry import InquiryService
from brokerage.services.marketing import MarketingService
from brokerage.services.media import MediaService
from brokerage.services.property import PropertyService
from brokerage.services.team import TeamService
from brokerage.services.upload import UploadService


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """
    Get authentication service instance.

    Args:
        db: Database session

    Returns:
        AuthService instance
    """
    return AuthService(db)


async def get_property_service(db: AsyncSession = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


async def get_media_service(db: AsyncSession = Depends(get_db)) -> MediaService:
    return MediaService(db)


async def get_inquiry_service(db: AsyncSession = Depends(get_db)) -> InquiryService:
    return InquiryService(db)


async def get_team_service(db: AsyncSession = Depends(get_db)) -> TeamService:
    return TeamService(db)


async def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    return DashboardService(db)


async def get_marketing_service(db: AsyncSession = Depends(get_db)) -> MarketingService:
    return MarketingService(db)


async def get_upload_service() -> UploadService:
    return UploadService()


async def get_current_admin(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service)
) -> AdminUser:
    """
    Get the admin behind the session cookie.

    Args:
        request: Incoming request carrying the session
        auth_service: Authentication service

    Returns:
        Active AdminUser

    Raises:
        UnauthorizedError: If there is no valid admin session
    """
    return await auth_service.get_current_admin(request.session)
