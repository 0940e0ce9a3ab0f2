from portfolio_api.services.contact_service import ContactService
from portfolio_api.services.portfolio_service import PortfolioService

RECENT_CONTACTS_LIMIT = 5
RECENT_ACTIVITY_DAYS = 7

_RECENT_CONTACT_FIELDS = ("_id", "name", "email", "message", "status", "created_at")


class DashboardService:
    """Summary figures for the admin console"""

    def __init__(self, contact_service: ContactService, portfolio_service: PortfolioService):
        self.contact_service = contact_service
        self.portfolio_service = portfolio_service

    def get_summary(self) -> dict:
        portfolio = self.portfolio_service.get()
        recent = [
            {key: message.get(key) for key in _RECENT_CONTACT_FIELDS}
            for message in self.contact_service.recent(RECENT_CONTACTS_LIMIT)
        ]
        return {
            "contact_stats": self.contact_service.count_by_status(),
            "recent_contacts": recent,
            "portfolio": {
                "projects_count": len(portfolio.get("projects", {}).get("items") or []),
                "skills_count": len(portfolio.get("about", {}).get("skills") or []),
                "last_updated": portfolio.get("updated_at"),
            },
            "recent_activity": self.contact_service.count_since(RECENT_ACTIVITY_DAYS),
        }
