"""Portfolio repository interface following clean architecture"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class PortfolioRepository(ABC):
    """Abstract repository over a store holding at most one portfolio document.

    Collections are addressed by their dotted path inside the document
    (e.g. "projects.items") and elements by their `_id`.
    """

    @abstractmethod
    def get_or_create(self, defaults: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return the portfolio, inserting `defaults` atomically if it is absent.

        Concurrent first calls must never produce two documents.
        """
        pass

    @abstractmethod
    def set_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Atomically $set dotted-path fields on the portfolio.

        Returns:
            The updated document
        """
        pass

    @abstractmethod
    def push_item(self, path: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Append an element to the collection at `path`.

        Returns:
            The stored element
        """
        pass

    @abstractmethod
    def update_item(self, path: str, item_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Merge `fields` into the element with `item_id`.

        Returns:
            The updated element, None if no element has that ID
        """
        pass

    @abstractmethod
    def pull_item(self, path: str, item_id: str) -> bool:
        """
        Remove the element with `item_id`.

        Returns:
            True if an element was removed
        """
        pass
