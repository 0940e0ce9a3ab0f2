from fastapi import APIRouter, Depends, status

from portfolio_api.core.dependencies import get_admin_auth_service, get_current_admin, require_roles
from portfolio_api.core.exceptions import BadRequestException, ResponseBody
from portfolio_api.core.serialization import serialize_document
from portfolio_api.models.admin_model import ROLE_SUPER_ADMIN
from portfolio_api.schemas.admin_schema import AdminCreateRequest, AdminResponse, AdminUpdateRequest
from portfolio_api.services.admin_auth_service import AdminAuthService

router = APIRouter(prefix="/admin/admins", tags=["admin-management"], dependencies=[Depends(get_current_admin)])

super_admin_only = [Depends(require_roles(ROLE_SUPER_ADMIN))]


def _admin_data(admin: dict) -> dict:
    return serialize_document(AdminResponse.from_document(admin).model_dump())


@router.get(
    "",
    response_model=ResponseBody,
    summary="List Admins",
    description="All administrators, newest first",
)
def list_admins(auth_service: AdminAuthService = Depends(get_admin_auth_service)):
    return ResponseBody(data=[_admin_data(admin) for admin in auth_service.list_admins()])


@router.get(
    "/{admin_id}",
    response_model=ResponseBody,
    summary="Get Admin",
)
def get_admin(
    admin_id: str,
    auth_service: AdminAuthService = Depends(get_admin_auth_service),
):
    return ResponseBody(data=_admin_data(auth_service.get_admin(admin_id)))


@router.post(
    "",
    response_model=ResponseBody,
    status_code=status.HTTP_201_CREATED,
    summary="Create Admin (Super Admin Only)",
    description="Register a new admin with name, email, password and role",
    dependencies=super_admin_only,
)
def create_admin(
    admin_data: AdminCreateRequest,
    auth_service: AdminAuthService = Depends(get_admin_auth_service),
):
    """
    Register a new admin.

    Raises:
        DuplicateEmailException: If email already exists
    """
    admin = auth_service.create_admin(
        name=admin_data.name,
        email=admin_data.email,
        password=admin_data.password,
        role=admin_data.role,
    )
    return ResponseBody(message="Admin created successfully", data=_admin_data(admin))


@router.put(
    "/{admin_id}",
    response_model=ResponseBody,
    summary="Update Admin (Super Admin Only)",
    dependencies=super_admin_only,
)
def update_admin(
    admin_id: str,
    admin_data: AdminUpdateRequest,
    auth_service: AdminAuthService = Depends(get_admin_auth_service),
):
    admin = auth_service.update_admin(admin_id, admin_data.model_dump(exclude_unset=True))
    return ResponseBody(message="Admin updated successfully", data=_admin_data(admin))


@router.delete(
    "/{admin_id}",
    response_model=ResponseBody,
    summary="Delete Admin (Super Admin Only)",
    dependencies=super_admin_only,
)
def delete_admin(
    admin_id: str,
    current_admin: dict = Depends(get_current_admin),
    auth_service: AdminAuthService = Depends(get_admin_auth_service),
):
    if str(current_admin["_id"]) == admin_id:
        raise BadRequestException("You cannot delete your own account")
    auth_service.delete_admin(admin_id)
    return ResponseBody(message="Admin deleted successfully")
