"""Dependency injection for clean architecture"""

from fastapi import Depends, Request

from portfolio_api.core.config import settings
from portfolio_api.core.db import get_db_from_request
from portfolio_api.core.exceptions import ForbiddenException, TokenMissingException, UnauthorizedException
from portfolio_api.repositories.admin_repository import AdminRepository
from portfolio_api.repositories.contact_repository import ContactRepository
from portfolio_api.repositories.mongo_admin_repository import MongoAdminRepository
from portfolio_api.repositories.mongo_contact_repository import MongoContactRepository
from portfolio_api.repositories.mongo_portfolio_repository import MongoPortfolioRepository
from portfolio_api.repositories.portfolio_repository import PortfolioRepository
from portfolio_api.services.admin_auth_service import AdminAuthService
from portfolio_api.services.backup_service import BackupService
from portfolio_api.services.contact_service import ContactService
from portfolio_api.services.dashboard_service import DashboardService
from portfolio_api.services.portfolio_service import PortfolioService
from portfolio_api.services.upload_service import UploadService


def get_admin_repository(request: Request) -> AdminRepository:
    """
    Get admin repository instance.

    Args:
        request: FastAPI request object

    Returns:
        AdminRepository instance
    """
    db = get_db_from_request(request)
    return MongoAdminRepository(db)


def get_portfolio_repository(request: Request) -> PortfolioRepository:
    db = get_db_from_request(request)
    return MongoPortfolioRepository(db)


def get_contact_repository(request: Request) -> ContactRepository:
    db = get_db_from_request(request)
    return MongoContactRepository(db)


def get_admin_auth_service(
    admin_repo: AdminRepository = Depends(get_admin_repository)
) -> AdminAuthService:
    """
    Get admin authentication service instance.

    Args:
        admin_repo: Admin repository (injected)

    Returns:
        AdminAuthService instance
    """
    return AdminAuthService(admin_repository=admin_repo)


def get_portfolio_service(
    portfolio_repo: PortfolioRepository = Depends(get_portfolio_repository)
) -> PortfolioService:
    return PortfolioService(portfolio_repository=portfolio_repo)


def get_contact_service(
    contact_repo: ContactRepository = Depends(get_contact_repository)
) -> ContactService:
    return ContactService(contact_repository=contact_repo)


def get_dashboard_service(
    contact_service: ContactService = Depends(get_contact_service),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
) -> DashboardService:
    return DashboardService(contact_service=contact_service, portfolio_service=portfolio_service)


def get_backup_service(
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
    contact_service: ContactService = Depends(get_contact_service),
) -> BackupService:
    return BackupService(portfolio_service=portfolio_service, contact_service=contact_service)


def get_upload_service() -> UploadService:
    """Upload service on the configured directory, overridden in tests"""
    return UploadService(upload_dir=settings.UPLOAD_DIR, max_size=settings.MAX_UPLOAD_SIZE)


def get_current_admin(
    request: Request,
    admin_repo: AdminRepository = Depends(get_admin_repository),
) -> dict:
    """
    Resolve the administrator behind the validated token.

    TokenAuthMiddleware has already checked the token and stored its payload.

    Raises:
        UnauthorizedException: The admin was deleted or deactivated
    """
    payload = getattr(request.state, "token_payload", None)
    if not payload:
        raise TokenMissingException()

    admin = admin_repo.find_by_id(payload["sub"])
    if not admin:
        raise UnauthorizedException("Admin not found")
    if not admin.get("is_active", True):
        raise UnauthorizedException("Account is deactivated")

    request.state.admin = admin
    return admin


def require_roles(*roles: str):
    """Route dependency rejecting admins whose role is not in `roles`"""

    def check_role(admin: dict = Depends(get_current_admin)) -> dict:
        if admin.get("role") not in roles:
            raise ForbiddenException(f"Role '{admin.get('role')}' is not authorized to access this route")
        return admin

    return check_role
