from fastapi import APIRouter, Depends, status

from portfolio_api.core.dependencies import get_admin_auth_service, get_current_admin
from portfolio_api.core.exceptions import ResponseBody, TokenResponseBody
from portfolio_api.core.jwt_handler import create_access_token
from portfolio_api.core.serialization import serialize_document
from portfolio_api.schemas.admin_schema import AdminResponse
from portfolio_api.schemas.auth_schema import LoginRequest, PasswordChangeRequest, ProfileUpdateRequest
from portfolio_api.services.admin_auth_service import AdminAuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _admin_data(admin: dict) -> dict:
    return serialize_document(AdminResponse.from_document(admin).model_dump())


@router.post(
    "/login",
    response_model=TokenResponseBody,
    status_code=status.HTTP_200_OK,
    summary="Admin Login",
    description="Authenticate admin with email and password and receive a bearer token",
)
def login(
    login_data: LoginRequest,
    auth_service: AdminAuthService = Depends(get_admin_auth_service)
):
    """
    Authenticate admin by email.

    Args:
        login_data: LoginRequest containing email and password
        auth_service: Injected admin authentication service

    Returns:
        TokenResponseBody: Token plus the admin's public fields

    Raises:
        InvalidCredentialsException: Unknown email, deactivated account or wrong password
    """
    admin = auth_service.verify(email=login_data.email, password=login_data.password)
    token = create_access_token(admin_id=str(admin["_id"]))

    return TokenResponseBody(
        message="Login successful",
        token=token,
        data=_admin_data(admin),
    )


@router.get(
    "/me",
    response_model=ResponseBody,
    summary="Current Admin",
    description="Return the admin the bearer token belongs to",
)
def me(admin: dict = Depends(get_current_admin)):
    return ResponseBody(data=_admin_data(admin))


@router.put(
    "/profile",
    response_model=ResponseBody,
    summary="Update Profile",
    description="Change the signed-in admin's name and email",
)
def update_profile(
    profile_data: ProfileUpdateRequest,
    admin: dict = Depends(get_current_admin),
    auth_service: AdminAuthService = Depends(get_admin_auth_service)
):
    updated = auth_service.update_profile(
        str(admin["_id"]), name=profile_data.name, email=profile_data.email
    )
    return ResponseBody(message="Profile updated successfully", data=_admin_data(updated))


@router.put(
    "/password",
    response_model=ResponseBody,
    summary="Change Password",
    description="Replace the signed-in admin's password after checking the current one",
)
def change_password(
    password_data: PasswordChangeRequest,
    admin: dict = Depends(get_current_admin),
    auth_service: AdminAuthService = Depends(get_admin_auth_service)
):
    auth_service.change_password(
        str(admin["_id"]),
        current_password=password_data.current_password,
        new_password=password_data.new_password,
    )
    return ResponseBody(message="Password updated successfully")
