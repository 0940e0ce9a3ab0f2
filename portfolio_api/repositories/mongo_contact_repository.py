"""MongoDB implementation of ContactRepository"""

import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from portfolio_api.repositories.contact_repository import ContactRepository
from portfolio_api.repositories.object_ids import to_object_id

logger = logging.getLogger(__name__)


class MongoContactRepository(ContactRepository):
    """MongoDB implementation of ContactRepository"""

    def __init__(self, db: Database):
        """
        Initialize MongoDB contact repository.

        Args:
            db: MongoDB database instance
        """
        self.db = db
        self.collection = db["contacts"]
        self._create_indexes()

    def _create_indexes(self):
        """Create indexes for the inbox listing and dashboard queries"""
        try:
            self.collection.create_index([("created_at", DESCENDING)])
            self.collection.create_index("status")
        except PyMongoError as e:
            logger.warning("Index creation warning: %s", e)

    def create(self, message_data: Dict[str, Any]) -> Dict[str, Any]:
        document = dict(message_data)
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def find_by_id(self, message_id: str) -> Optional[Dict[str, Any]]:
        oid = to_object_id(message_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def find_all(self, status: Optional[str] = None, limit: int = 0) -> List[Dict[str, Any]]:
        query = {"status": status} if status else {}
        cursor = self.collection.find(query).sort("created_at", DESCENDING)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def update_status(self, message_id: str, status: str) -> Optional[Dict[str, Any]]:
        oid = to_object_id(message_id)
        if oid is None:
            return None
        return self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {"status": status, "updated_at": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, message_id: str) -> bool:
        oid = to_object_id(message_id)
        if oid is None:
            return False
        result = self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    def delete_all(self) -> int:
        return self.collection.delete_many({}).deleted_count

    def insert_many(self, messages: List[Dict[str, Any]]) -> int:
        if not messages:
            return 0
        result = self.collection.insert_many(messages)
        return len(result.inserted_ids)

    def count_by_status(self) -> Dict[str, int]:
        pipeline = [{"$group": {"_id": "$status", "count": {"$sum": 1}}}]
        return {row["_id"]: row["count"] for row in self.collection.aggregate(pipeline)}

    def count_since(self, since: datetime) -> int:
        return self.collection.count_documents({"created_at": {"$gte": since}})
