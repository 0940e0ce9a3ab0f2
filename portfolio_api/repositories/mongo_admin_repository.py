"""MongoDB implementation of AdminRepository"""

import logging
from typing import Optional, Dict, Any, List

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from portfolio_api.core.exceptions import DuplicateEmailException
from portfolio_api.repositories.object_ids import to_object_id
from portfolio_api.repositories.admin_repository import AdminRepository

logger = logging.getLogger(__name__)

_HIDE_PASSWORD = {"password_hash": 0}


class MongoAdminRepository(AdminRepository):
    """MongoDB implementation of AdminRepository"""

    def __init__(self, db: Database):
        """
        Initialize MongoDB admin repository.

        Args:
            db: MongoDB database instance
        """
        self.db = db
        self.collection = db["admins"]
        self._create_indexes()

    def _create_indexes(self):
        """Email uniqueness is enforced by the store, not only by the service"""
        try:
            self.collection.create_index("email", unique=True)
        except PyMongoError as e:
            logger.warning("Index creation warning: %s", e)

    @staticmethod
    def _projection(include_password: bool) -> Optional[Dict[str, int]]:
        return None if include_password else _HIDE_PASSWORD

    def create(self, admin_data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a new admin in MongoDB"""
        document = dict(admin_data)
        document["email"] = document["email"].lower()
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateEmailException("Admin with this email already exists") from e
        document["_id"] = result.inserted_id
        document.pop("password_hash", None)
        return document

    def count(self) -> int:
        return self.collection.count_documents({})

    def find_by_email(self, email: str, include_password: bool = False) -> Optional[Dict[str, Any]]:
        """Find admin by email address"""
        return self.collection.find_one({"email": email.lower()}, self._projection(include_password))

    def find_by_id(self, admin_id: str, include_password: bool = False) -> Optional[Dict[str, Any]]:
        """Find admin by ID"""
        oid = to_object_id(admin_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid}, self._projection(include_password))

    def find_all(self) -> List[Dict[str, Any]]:
        return list(self.collection.find({}, _HIDE_PASSWORD).sort("created_at", DESCENDING))

    def update(self, admin_id: str, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Update admin data"""
        oid = to_object_id(admin_id)
        if oid is None:
            return None
        fields = dict(update_data)
        if "email" in fields:
            fields["email"] = fields["email"].lower()
        try:
            return self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                projection=_HIDE_PASSWORD,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateEmailException() from e

    def delete(self, admin_id: str) -> bool:
        """Delete an admin"""
        oid = to_object_id(admin_id)
        if oid is None:
            return False
        result = self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0
