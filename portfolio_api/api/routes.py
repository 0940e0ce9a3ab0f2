"""
Central place to register all API routes
Import and include routers here
"""

from fastapi import APIRouter
from portfolio_api.api.v1.auth_controller import router as auth_router
from portfolio_api.api.v1.portfolio_controller import router as portfolio_router
from portfolio_api.api.v1.contact_controller import router as contact_router
from portfolio_api.api.v1.admin_controller import router as admin_router
from portfolio_api.api.v1.admins_controller import router as admins_router

# Create a combined router
router = APIRouter()

# Include public-facing routers
router.include_router(auth_router)
router.include_router(portfolio_router)
router.include_router(contact_router)

# Include admin routers
router.include_router(admin_router)
router.include_router(admins_router)

__all__ = ["router"]
