from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from portfolio_api.models.admin_model import AdminRole, ROLE_ADMIN


class AdminCreateRequest(BaseModel):
    """Schema for creating an admin (super-admin only)"""
    name: str = Field(..., description="Admin's display name", min_length=2, max_length=50)
    email: EmailStr = Field(..., description="Admin's email address")
    password: str = Field(..., description="Admin's password", min_length=6)
    role: AdminRole = Field(default=ROLE_ADMIN, description="admin or super-admin")


class AdminUpdateRequest(BaseModel):
    """Schema for a partial admin update, every field optional"""
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    role: Optional[AdminRole] = None
    is_active: Optional[bool] = None


class AdminResponse(BaseModel):
    """Admin as returned by the API, never carries the password hash"""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Admin ID")
    name: str = Field(..., description="Admin's display name")
    email: str = Field(..., description="Admin's email address")
    role: AdminRole
    is_active: bool = True
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, admin: dict) -> "AdminResponse":
        return cls(
            id=str(admin["_id"]),
            name=admin["name"],
            email=admin["email"],
            role=admin.get("role", ROLE_ADMIN),
            is_active=admin.get("is_active", True),
            last_login=admin.get("last_login"),
            created_at=admin.get("created_at"),
        )
