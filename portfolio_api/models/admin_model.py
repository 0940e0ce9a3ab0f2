from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super-admin"

AdminRole = Literal["admin", "super-admin"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Admin(BaseModel):
    """Admin model for MongoDB"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    name: str = Field(..., description="Admin's display name")
    email: EmailStr = Field(..., description="Admin's email address")
    password_hash: str = Field(..., description="bcrypt hash of the password")
    role: AdminRole = Field(default=ROLE_ADMIN)
    is_active: bool = Field(default=True)
    last_login: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
