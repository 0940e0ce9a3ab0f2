from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

STATUS_UNREAD = "unread"
STATUS_READ = "read"
STATUS_REPLIED = "replied"
CONTACT_STATUSES = (STATUS_UNREAD, STATUS_READ, STATUS_REPLIED)

ContactStatus = Literal["unread", "read", "replied"]

NAME_MAX_LENGTH = 50
MESSAGE_MAX_LENGTH = 1000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContactMessage(BaseModel):
    """Contact form submission stored in MongoDB"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: EmailStr
    message: str = Field(..., max_length=MESSAGE_MAX_LENGTH)
    status: ContactStatus = Field(default=STATUS_UNREAD)
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
