"""MongoDB implementation of PortfolioRepository"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from portfolio_api.models.portfolio_model import PORTFOLIO_ID
from portfolio_api.repositories.object_ids import to_object_id
from portfolio_api.repositories.portfolio_repository import PortfolioRepository


def _get_path(document: Dict[str, Any], path: str):
    value = document
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class MongoPortfolioRepository(PortfolioRepository):
    """MongoDB implementation of PortfolioRepository.

    The document lives under a fixed `_id`, so the primary key index is what
    keeps the collection at one document.
    """

    def __init__(self, db: Database):
        """
        Initialize MongoDB portfolio repository.

        Args:
            db: MongoDB database instance
        """
        self.db = db
        self.collection = db["portfolio"]

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def get_or_create(self, defaults: Dict[str, Any]) -> Dict[str, Any]:
        now = self._now()
        try:
            return self.collection.find_one_and_update(
                {"_id": PORTFOLIO_ID},
                {"$setOnInsert": {**defaults, "created_at": now, "updated_at": now}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            # Lost the insert race: the other request's document is the portfolio
            return self.collection.find_one({"_id": PORTFOLIO_ID})

    def set_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self.collection.find_one_and_update(
            {"_id": PORTFOLIO_ID},
            {"$set": {**fields, "updated_at": self._now()}},
            return_document=ReturnDocument.AFTER,
        )

    def push_item(self, path: str, item: Dict[str, Any]) -> Dict[str, Any]:
        stored = dict(item)
        stored.setdefault("_id", ObjectId())
        self.collection.update_one(
            {"_id": PORTFOLIO_ID},
            {"$push": {path: stored}, "$set": {"updated_at": self._now()}},
        )
        return stored

    def update_item(self, path: str, item_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        oid = to_object_id(item_id)
        if oid is None:
            return None
        # Positional fields first, the element is located through the filter
        update = {f"{path}.$.{key}": value for key, value in fields.items()}
        update["updated_at"] = self._now()
        document = self.collection.find_one_and_update(
            {"_id": PORTFOLIO_ID, f"{path}._id": oid},
            {"$set": update},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            return None
        for element in _get_path(document, path) or []:
            if element.get("_id") == oid:
                return element
        return None

    def pull_item(self, path: str, item_id: str) -> bool:
        oid = to_object_id(item_id)
        if oid is None:
            return False
        result = self.collection.update_one(
            {"_id": PORTFOLIO_ID, f"{path}._id": oid},
            {"$pull": {path: {"_id": oid}}, "$set": {"updated_at": self._now()}},
        )
        return result.matched_count > 0
