from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value) -> Optional[ObjectId]:
    """Parse an ID coming from a URL or payload, None when it is not an ObjectId"""
    if value is None:
        return None
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
