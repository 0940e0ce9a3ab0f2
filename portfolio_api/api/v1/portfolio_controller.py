from typing import Any, Dict, Type

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

from portfolio_api.core.dependencies import get_current_admin, get_portfolio_service
from portfolio_api.core.exceptions import ResponseBody
from portfolio_api.core.serialization import serialize_document
from portfolio_api.models.portfolio_model import ContactInfo, Project, Skill
from portfolio_api.schemas.portfolio_schema import (
    ContactInfoUpdateRequest,
    ProjectUpdateRequest,
    SkillUpdateRequest,
)
from portfolio_api.services.portfolio_service import ITEM_LABELS, PortfolioService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get(
    "",
    response_model=ResponseBody,
    summary="Get Portfolio",
    description="Public portfolio content, created with defaults on first access",
)
def get_portfolio(service: PortfolioService = Depends(get_portfolio_service)):
    return ResponseBody(data=serialize_document(service.get()))


@router.put(
    "",
    response_model=ResponseBody,
    summary="Update Portfolio",
    description="Replace any subset of the hero, about, projects, contact and footer sections",
    dependencies=[Depends(get_current_admin)],
)
def update_portfolio(
    payload: Dict[str, Any] = Body(...),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Whole-document update, every supplied section is validated before anything is written"""
    document = service.update_portfolio(payload)
    return ResponseBody(message="Portfolio updated successfully", data=serialize_document(document))


def _register_collection(collection: str, create_model: Type[BaseModel], update_model: Type[BaseModel]):
    """Add, update and delete routes for one embedded collection"""
    label = ITEM_LABELS[collection]

    @router.post(
        f"/{collection}",
        response_model=ResponseBody,
        status_code=status.HTTP_201_CREATED,
        summary=f"Add {label}",
        name=f"add_{collection}",
        dependencies=[Depends(get_current_admin)],
    )
    def add_item(
        item: create_model,
        service: PortfolioService = Depends(get_portfolio_service),
    ):
        created = service.add_item(collection, item.model_dump())
        return ResponseBody(message=f"{label} added successfully", data=serialize_document(created))

    @router.put(
        f"/{collection}/{{item_id}}",
        response_model=ResponseBody,
        summary=f"Update {label}",
        name=f"update_{collection}",
        dependencies=[Depends(get_current_admin)],
    )
    def update_item(
        item_id: str,
        fields: update_model,
        service: PortfolioService = Depends(get_portfolio_service),
    ):
        updated = service.update_item(collection, item_id, fields.model_dump(exclude_unset=True))
        return ResponseBody(message=f"{label} updated successfully", data=serialize_document(updated))

    @router.delete(
        f"/{collection}/{{item_id}}",
        response_model=ResponseBody,
        summary=f"Delete {label}",
        name=f"delete_{collection}",
        dependencies=[Depends(get_current_admin)],
    )
    def delete_item(
        item_id: str,
        service: PortfolioService = Depends(get_portfolio_service),
    ):
        service.delete_item(collection, item_id)
        return ResponseBody(message=f"{label} deleted successfully")


# Collection routes go first so "/projects/{id}" never reaches "/{section}"
_register_collection("projects", Project, ProjectUpdateRequest)
_register_collection("skills", Skill, SkillUpdateRequest)
_register_collection("contact-info", ContactInfo, ContactInfoUpdateRequest)


@router.put(
    "/{section}",
    response_model=ResponseBody,
    summary="Update Section",
    description="Replace one section: hero, about, projects, contact or footer",
    dependencies=[Depends(get_current_admin)],
)
def update_section(
    section: str,
    payload: Dict[str, Any] = Body(...),
    service: PortfolioService = Depends(get_portfolio_service),
):
    updated = service.replace_section(section, payload)
    return ResponseBody(message=f"{section.capitalize()} section updated successfully",
                        data=serialize_document(updated))
