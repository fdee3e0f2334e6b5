"""
Admin session endpoints: login, logout and the current admin.
"""

from fastapi import APIRouter, Depends, Request, status

from brokerage.models.admin_user import AdminUser
from brokerage.schemas.auth import AdminResponse, LoginRequest, LogoutResponse
from brokerage.schemas.error import get_error_responses
from brokerage.services.auth import AuthService
from brokerage.utils.dependencies import get_auth_service, get_current_admin

router = APIRouter(prefix="/admin", tags=["Admin: Session"])


@router.post(
    "/login",
    response_model=AdminResponse,
    status_code=status.HTTP_200_OK,
    summary="Admin login",
    description="Verify credentials and start a session held in a signed cookie",
    responses=get_error_responses(401, 403, 422)
)
async def login(
    login_data: LoginRequest,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service)
) -> AdminResponse:
    """
    Authenticate an admin and store their id in the session.

    Args:
        login_data: Login credentials (email and password)
        request: Request carrying the session
        auth_service: Authentication service

    Returns:
        The admin profile

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveUserError: If the account is inactive
    """
    admin = await auth_service.login(request.session, login_data.email, login_data.password)
    return AdminResponse.model_validate(admin)


@router.post("/logout", response_model=LogoutResponse, summary="End the admin session")
async def logout(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service)
) -> LogoutResponse:
    auth_service.logout(request.session)
    return LogoutResponse()


@router.get(
    "/me",
    response_model=AdminResponse,
    summary="Current admin",
    responses=get_error_responses(401)
)
async def get_me(current_admin: AdminUser = Depends(get_current_admin)) -> AdminResponse:
    return AdminResponse.model_validate(current_admin)
