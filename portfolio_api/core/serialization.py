"""
Convert MongoDB documents into JSON-ready structures
"""
from datetime import datetime
from typing import Any

from bson import ObjectId


def serialize_document(value: Any) -> Any:
    """
    Recursively render a stored document for API output.

    `_id` keys become `id`, ObjectIds become strings and datetimes become
    ISO 8601 strings. `password_hash` is always dropped.
    """
    if isinstance(value, dict):
        out = {}
        for key, item in value.items():
            if key == "password_hash":
                continue
            out["id" if key == "_id" else key] = serialize_document(item)
        return out
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value
