from typing import Any, Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from portfolio_api.models.contact_model import ContactStatus, MESSAGE_MAX_LENGTH, NAME_MAX_LENGTH


class ContactSubmitRequest(BaseModel):
    """Schema for the public contact form"""
    name: str = Field(..., description="Sender's name", min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr = Field(..., description="Sender's email address")
    message: str = Field(..., description="Message body", min_length=1, max_length=MESSAGE_MAX_LENGTH)

    @field_validator('name', 'message')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError('Field cannot be empty')
        return v


class StatusUpdateRequest(BaseModel):
    status: ContactStatus = Field(..., description="unread, read or replied")


class ImportRequest(BaseModel):
    """Body of POST /admin/import, usually a previous export"""
    portfolio: Optional[Dict[str, Any]] = Field(default=None, description="Portfolio sections to replace")
    contacts: Optional[List[Dict[str, Any]]] = Field(default=None, description="Messages replacing the inbox")
