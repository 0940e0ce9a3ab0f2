"""Contact message repository interface following clean architecture"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Dict, Any, List


class ContactRepository(ABC):
    """Abstract repository interface for contact message data access"""

    @abstractmethod
    def create(self, message_data: Dict[str, Any]) -> Dict[str, Any]:
        """Store a new message, returns it with _id"""
        pass

    @abstractmethod
    def find_by_id(self, message_id: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def find_all(self, status: Optional[str] = None, limit: int = 0) -> List[Dict[str, Any]]:
        """
        Messages newest first.

        Args:
            status: Only messages with this status when given
            limit: Maximum number of messages, 0 for all
        """
        pass

    @abstractmethod
    def update_status(self, message_id: str, status: str) -> Optional[Dict[str, Any]]:
        """Overwrite the status, returns the updated message or None"""
        pass

    @abstractmethod
    def delete(self, message_id: str) -> bool:
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every message, returns the number removed"""
        pass

    @abstractmethod
    def insert_many(self, messages: List[Dict[str, Any]]) -> int:
        pass

    @abstractmethod
    def count_by_status(self) -> Dict[str, int]:
        """Status -> number of messages, statuses without messages are omitted"""
        pass

    @abstractmethod
    def count_since(self, since: datetime) -> int:
        """Number of messages created at or after `since`"""
        pass
