import logging
from typing import Any, Dict, List, Type

from bson import ObjectId
from pydantic import BaseModel, ValidationError

from portfolio_api.core.exceptions import BadRequestException, NotFoundException, validation_messages
from portfolio_api.models.portfolio_model import (
    COLLECTIONS,
    SECTION_COLLECTION_FIELDS,
    SECTION_MODELS,
    build_default_portfolio,
)
from portfolio_api.repositories.object_ids import to_object_id
from portfolio_api.repositories.portfolio_repository import PortfolioRepository

logger = logging.getLogger(__name__)

ITEM_LABELS = {
    "projects": "Project",
    "skills": "Skill",
    "contact-info": "Contact info",
}


def _prepare_item(item: Dict[str, Any], position: int) -> Dict[str, Any]:
    """Turn a validated element into its stored form, keeping a valid client ID"""
    data = dict(item)
    oid = to_object_id(data.pop("id", None))
    data["_id"] = oid or ObjectId()
    if "order" in data and data["order"] is None:
        data["order"] = position
    return data


class PortfolioService:
    """Content store for the single portfolio document"""

    def __init__(self, portfolio_repository: PortfolioRepository):
        """
        Initialize portfolio service.

        Args:
            portfolio_repository: Repository for the portfolio document
        """
        self.portfolio_repository = portfolio_repository

    def get(self) -> dict:
        """
        Return the portfolio, creating it with built-in defaults on first access

        Returns:
            dict: The stored portfolio document
        """
        defaults = build_default_portfolio()
        for section, field in COLLECTIONS.values():
            defaults[section][field] = [
                _prepare_item(item, position) for position, item in enumerate(defaults[section][field])
            ]
        return self.portfolio_repository.get_or_create(defaults)

    @staticmethod
    def _validate(model: Type[BaseModel], payload: Any, label: str) -> BaseModel:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise BadRequestException(f"Invalid {label}", validation_messages(e.errors()))

    @staticmethod
    def _check_unique_ids(path: str, items: List[Dict[str, Any]]) -> None:
        seen = set()
        for position, item in enumerate(items):
            if item["_id"] in seen:
                raise BadRequestException(f"Duplicate id in {path}", [f"{path}[{position}].id: duplicate"])
            seen.add(item["_id"])

    def _section_fields(self, section: str, payload: Any) -> Dict[str, Any]:
        """Validate a section payload and build the dotted-path fields to $set"""
        model = SECTION_MODELS.get(section)
        if model is None:
            raise BadRequestException(f"Unknown section '{section}'")

        data = self._validate(model, payload, f"{section} section").model_dump()
        collection_field = SECTION_COLLECTION_FIELDS.get(section)

        fields = {}
        for key, value in data.items():
            if key == collection_field:
                if value is None:
                    # Not part of the payload: the stored collection is kept
                    continue
                value = [_prepare_item(item, position) for position, item in enumerate(value)]
                self._check_unique_ids(f"{section}.{key}", value)
            fields[f"{section}.{key}"] = value
        return fields

    def replace_section(self, section: str, payload: Any) -> dict:
        """
        Replace one section wholesale

        Embedded collections are only replaced when the payload carries them.

        Args:
            section: hero, about, projects, contact or footer
            payload: New section content

        Returns:
            dict: The stored section

        Raises:
            BadRequestException: Unknown section or invalid payload, nothing is written
        """
        fields = self._section_fields(section, payload)
        self.get()
        document = self.portfolio_repository.set_fields(fields)
        return document[section]

    def update_portfolio(self, payload: Dict[str, Any]) -> dict:
        """
        Replace every section present in `payload` in one atomic update

        Keys that are not section names (e.g. `id`, timestamps echoed back by
        a client) are ignored.
        """
        if not isinstance(payload, dict):
            raise BadRequestException("Portfolio payload must be an object")

        fields = {}
        for section in SECTION_MODELS:
            if section in payload:
                fields.update(self._section_fields(section, payload[section]))
        if not fields:
            raise BadRequestException("No sections to update")

        self.get()
        return self.portfolio_repository.set_fields(fields)

    @staticmethod
    def _collection_path(collection: str) -> str:
        if collection not in COLLECTIONS:
            raise BadRequestException(f"Unknown collection '{collection}'")
        section, field = COLLECTIONS[collection]
        return f"{section}.{field}"

    def add_item(self, collection: str, item: Dict[str, Any]) -> dict:
        """
        Append an element to projects, skills or contact-info

        A project without `order` gets the current collection length.

        Returns:
            dict: The stored element with its new `_id`
        """
        path = self._collection_path(collection)
        document = self.get()
        section, field = COLLECTIONS[collection]
        current = document.get(section, {}).get(field) or []

        data = dict(item)
        data.pop("id", None)
        if collection == "projects" and data.get("order") is None:
            data["order"] = len(current)
        return self.portfolio_repository.push_item(path, data)

    def update_item(self, collection: str, item_id: str, fields: Dict[str, Any]) -> dict:
        """
        Merge `fields` into one element

        Raises:
            BadRequestException: If no field was supplied
            NotFoundException: If no element has `item_id`
        """
        path = self._collection_path(collection)
        changes = {k: v for k, v in fields.items() if k != "id" and v is not None}
        if not changes:
            raise BadRequestException("No fields to update")

        self.get()
        updated = self.portfolio_repository.update_item(path, item_id, changes)
        if updated is None:
            raise NotFoundException(f"{ITEM_LABELS[collection]} not found")
        return updated

    def delete_item(self, collection: str, item_id: str) -> None:
        """
        Remove one element by ID

        Raises:
            NotFoundException: If no element has `item_id`
        """
        path = self._collection_path(collection)
        self.get()
        if not self.portfolio_repository.pull_item(path, item_id):
            raise NotFoundException(f"{ITEM_LABELS[collection]} not found")
        logger.info("Deleted %s %s", collection, item_id)

