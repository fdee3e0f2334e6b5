"""
Authentication service for the admin back office.
Handles credential checks and the signed session cookie.
"""

from typing import Any, MutableMapping, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from brokerage.repositories.admin_user import AdminUserRepository
from brokerage.models.admin_user import AdminUser, AdminRole
from brokerage.utils.exceptions import (
    APIException,
    DuplicateResourceError,
    InactiveUserError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationError,
)
import uuid
import logging

logger = logging.getLogger(__name__)

SESSION_ADMIN_KEY = "admin_id"


class AuthService:
    """
    Session-based admin authentication.
    The session holds only the admin id; the account is re-loaded on every request.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.admin_repo = AdminUserRepository(db_session)

    async def authenticate_admin(self, email: str, password: str) -> AdminUser:
        """
        Authenticate an admin with email and password.

        Args:
            email: Admin email address
            password: Plain text password

        Returns:
            Authenticated AdminUser

        Raises:
            InvalidCredentialsError: If credentials are invalid
            InactiveUserError: If the account is inactive
        """
        try:
            admin = await self.admin_repo.authenticate(email, password)

            if not admin:
                logger.warning(f"Failed login attempt for email: {email}")
                raise InvalidCredentialsError()

            if not admin.is_active:
                logger.warning(f"Login attempt for inactive admin: {email}")
                raise InactiveUserError()

            return admin
        except APIException:
            raise
        except Exception as e:
            logger.error(f"Authentication error for {email}: {e}")
            raise InvalidCredentialsError()

    async def login(self, session: MutableMapping[str, Any], email: str, password: str) -> AdminUser:
        """
        Verify credentials and start an admin session.

        Args:
            session: Request session (signed cookie)
            email: Admin email address
            password: Plain text password

        Returns:
            The logged-in admin with last_login updated
        """
        admin = await self.authenticate_admin(email, password)
        admin = await self.admin_repo.record_login(admin)

        session.clear()
        session[SESSION_ADMIN_KEY] = str(admin.id)

        logger.info(f"Admin logged in: {admin.email}")
        return admin

    def logout(self, session: MutableMapping[str, Any]) -> None:
        admin_id = session.get(SESSION_ADMIN_KEY)
        session.clear()
        if admin_id:
            logger.info(f"Admin logged out: {admin_id}")

    async def get_current_admin(self, session: MutableMapping[str, Any]) -> AdminUser:
        """
        Resolve the admin behind the session cookie.

        Args:
            session: Request session

        Returns:
            Active AdminUser

        Raises:
            UnauthorizedError: If there is no session, or the account is gone or inactive
        """
        raw_id = session.get(SESSION_ADMIN_KEY)
        if not raw_id:
            raise UnauthorizedError()

        try:
            admin_id = uuid.UUID(str(raw_id))
        except ValueError:
            session.clear()
            raise UnauthorizedError("Invalid session")

        admin = await self.admin_repo.get_by_id(admin_id)
        if admin is None or not admin.is_active:
            logger.warning(f"Session rejected for missing or inactive admin {admin_id}")
            session.clear()
            raise UnauthorizedError("Session is no longer valid")

        return admin

    async def create_admin(
        self,
        email: str,
        password: str,
        name: str,
        role: AdminRole = AdminRole.ADMIN
    ) -> AdminUser:
        """
        Create a back-office account.

        Raises:
            DuplicateResourceError: If the email is already registered
            ValidationError: If the email or password is invalid
        """
        existing: Optional[AdminUser] = await self.admin_repo.get_by_email(email)
        if existing:
            raise DuplicateResourceError("Admin", email.lower())

        try:
            admin = await self.admin_repo.create_admin(
                {"email": email, "password": password, "name": name, "role": role}
            )
        except ValueError as e:
            raise ValidationError(str(e))

        logger.info(f"Admin created: {admin.email} ({admin.role.value})")
        return admin
