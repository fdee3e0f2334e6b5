"""
Admin user repository for back-office accounts.
Handles account creation with password hashing and credential checks.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from brokerage.repositories.base import BaseRepository
from brokerage.models.admin_user import AdminUser, AdminRole
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class AdminUserRepository(BaseRepository[AdminUser]):
    """Repository for admin accounts."""

    def __init__(self, db: AsyncSession):
        super().__init__(AdminUser, db)

    async def create_admin(self, admin_data: Dict[str, Any]) -> AdminUser:
        """
        Create a new admin with email validation and password hashing.

        Args:
            admin_data: Must include email, password and name; role is optional

        Returns:
            Created admin instance

        Raises:
            ValueError: If validation fails or the email is taken
        """
        try:
            email = AdminUser.validate_email_format(admin_data["email"])

            if await self.get_by_email(email):
                raise ValueError(f"Admin with email {email} already exists")

            data = dict(admin_data)
            hashed_password = AdminUser.hash_password(data.pop("password"))

            create_data = {
                **data,
                "email": email,
                "hashed_password": hashed_password,
                "role": data.get("role", AdminRole.ADMIN),
                "is_active": data.get("is_active", True),
            }

            created = await self.create(create_data)
            logger.info(f"Created admin: {created.email} (ID: {created.id})")
            return created
        except ValueError as e:
            logger.error(f"Admin validation failed: {e}")
            raise

    async def get_by_email(self, email: str) -> Optional[AdminUser]:
        """
        Get admin by email address.

        Args:
            email: Email address to search for

        Returns:
            AdminUser instance if found, None otherwise
        """
        try:
            query = select(AdminUser).where(AdminUser.email == email.lower().strip())
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Failed to get admin by email {email}: {e}")
            raise

    async def authenticate(self, email: str, password: str) -> Optional[AdminUser]:
        """
        Check email and password.

        Args:
            email: Admin email address
            password: Plain text password

        Returns:
            AdminUser if the password matches, None otherwise
        """
        admin = await self.get_by_email(email)
        if admin is None:
            logger.debug(f"Authentication failed: no admin {email}")
            return None
        if not admin.verify_password(password):
            logger.debug(f"Authentication failed: wrong password for {email}")
            return None
        return admin

    async def record_login(self, admin: AdminUser) -> AdminUser:
        try:
            admin.mark_logged_in()
            await self.db.commit()
            await self.db.refresh(admin)
            return admin
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to record login for {admin.email}: {e}")
            raise
