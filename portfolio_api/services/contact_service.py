import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from portfolio_api.core.exceptions import NotFoundException
from portfolio_api.models.contact_model import CONTACT_STATUSES, ContactMessage
from portfolio_api.repositories.contact_repository import ContactRepository
from portfolio_api.services.email_service import notify_new_contact

logger = logging.getLogger(__name__)


class ContactService:
    """Message inbox for contact form submissions"""

    def __init__(self, contact_repository: ContactRepository,
                 notifier: Optional[Callable[[dict], bool]] = notify_new_contact):
        """
        Initialize contact service.

        Args:
            contact_repository: Repository for contact message data access
            notifier: Called with each new message, None disables notifications
        """
        self.contact_repository = contact_repository
        self.notifier = notifier

    def submit(self, name: str, email: str, message: str,
               ip_address: Optional[str] = None, user_agent: Optional[str] = None) -> dict:
        """
        Store a contact form submission with status "unread"

        Returns:
            dict: The stored message
        """
        now = datetime.now(timezone.utc)
        contact = ContactMessage(
            name=name.strip(),
            email=email,
            message=message,
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=now,
            updated_at=now,
        )
        created = self.contact_repository.create(contact.model_dump(exclude={"id"}))
        logger.info("Contact message received from %s", created["email"])

        if self.notifier is not None:
            self.notifier(created)
        return created

    def list_messages(self, status: Optional[str] = None) -> List[dict]:
        return self.contact_repository.find_all(status=status)

    def get_message(self, message_id: str) -> dict:
        message = self.contact_repository.find_by_id(message_id)
        if not message:
            raise NotFoundException("Message not found")
        return message

    def set_status(self, message_id: str, status: str) -> dict:
        """
        Overwrite the status of a message, any status may follow any other

        Raises:
            NotFoundException: If the message does not exist
        """
        message = self.contact_repository.update_status(message_id, status)
        if not message:
            raise NotFoundException("Message not found")
        return message

    def delete_message(self, message_id: str) -> None:
        if not self.contact_repository.delete(message_id):
            raise NotFoundException("Message not found")

    def count_by_status(self) -> Dict[str, int]:
        """Totals per status plus overall `total`, zero-filled"""
        counts = self.contact_repository.count_by_status()
        stats = {"total": 0}
        for status in CONTACT_STATUSES:
            stats[status] = counts.get(status, 0)
        stats["total"] = sum(counts.values())
        return stats

    def count_since(self, days: int) -> int:
        """Messages received within the last `days` days"""
        since = datetime.now(timezone.utc) - timedelta(days=days)
        return self.contact_repository.count_since(since)

    def recent(self, limit: int = 5) -> List[dict]:
        return self.contact_repository.find_all(limit=limit)

    def replace_all(self, messages: List[dict]) -> int:
        """Drop every stored message and insert `messages`, used by import"""
        self.contact_repository.delete_all()
        return self.contact_repository.insert_many(messages)
