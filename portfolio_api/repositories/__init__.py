"""Repository interfaces and implementations for clean architecture"""

from portfolio_api.repositories.admin_repository import AdminRepository
from portfolio_api.repositories.contact_repository import ContactRepository
from portfolio_api.repositories.portfolio_repository import PortfolioRepository

__all__ = ["AdminRepository", "ContactRepository", "PortfolioRepository"]
