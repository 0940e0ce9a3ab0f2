import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from bson import ObjectId
from pydantic import ValidationError

from portfolio_api.core.exceptions import BadRequestException, validation_messages
from portfolio_api.core.serialization import serialize_document
from portfolio_api.models.contact_model import ContactMessage
from portfolio_api.repositories.object_ids import to_object_id
from portfolio_api.services.contact_service import ContactService
from portfolio_api.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)


class BackupService:
    """Export and import of the portfolio and the contact inbox as JSON"""

    def __init__(self, portfolio_service: PortfolioService, contact_service: ContactService):
        self.portfolio_service = portfolio_service
        self.contact_service = contact_service

    def export_data(self) -> dict:
        """
        Snapshot of the portfolio and every contact message

        Returns:
            dict: JSON-ready export (ids and dates rendered as strings)
        """
        contacts = self.contact_service.list_messages()
        return serialize_document({
            "portfolio": self.portfolio_service.get(),
            "contacts": contacts,
            "exported_at": datetime.now(timezone.utc),
            "total_contacts": len(contacts),
        })

    @staticmethod
    def _contact_documents(contacts: List[Any]) -> List[dict]:
        documents = []
        seen_ids = set()
        for index, raw in enumerate(contacts):
            try:
                contact = ContactMessage.model_validate(raw)
            except ValidationError as e:
                messages = [f"contacts[{index}].{m}" for m in validation_messages(e.errors())]
                raise BadRequestException("Invalid contact in import", messages)
            document = contact.model_dump(exclude={"id"})
            document["_id"] = to_object_id(contact.id) or ObjectId()
            if document["_id"] in seen_ids:
                raise BadRequestException("Duplicate contact id in import", [f"contacts[{index}].id: duplicate"])
            seen_ids.add(document["_id"])
            documents.append(document)
        return documents

    def import_data(self, portfolio: Optional[dict] = None, contacts: Optional[List[Any]] = None) -> dict:
        """
        Replace the portfolio sections and/or the whole inbox

        Everything is validated before anything is written.

        Returns:
            dict: What was imported
        """
        if portfolio is None and contacts is None:
            raise BadRequestException("Nothing to import")

        contact_documents = self._contact_documents(contacts) if contacts is not None else None

        if portfolio is not None:
            self.portfolio_service.update_portfolio(portfolio)

        imported_contacts = 0
        if contact_documents is not None:
            imported_contacts = self.contact_service.replace_all(contact_documents)

        logger.info("Import done: portfolio=%s contacts=%d", portfolio is not None, imported_contacts)
        return {
            "portfolio_imported": portfolio is not None,
            "contacts_imported": imported_contacts,
        }
