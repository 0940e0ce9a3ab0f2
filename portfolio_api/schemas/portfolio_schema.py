"""Partial-update payloads for embedded portfolio collections"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_api.models.portfolio_model import split_comma_list


class ItemUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ProjectUpdateRequest(ItemUpdateRequest):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    technologies: Optional[List[str]] = None
    frontend_url: Optional[str] = None
    backend_url: Optional[str] = None
    live_url: Optional[str] = None
    image: Optional[str] = None
    featured: Optional[bool] = None
    order: Optional[int] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def split_technologies(cls, v):
        return split_comma_list(v)


class SkillUpdateRequest(ItemUpdateRequest):
    icon: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)


class ContactInfoUpdateRequest(ItemUpdateRequest):
    icon: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    value: Optional[str] = Field(default=None, min_length=1)
    href: Optional[str] = None
