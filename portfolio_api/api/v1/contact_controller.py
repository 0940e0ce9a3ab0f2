from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from portfolio_api.core.dependencies import get_contact_service, get_current_admin
from portfolio_api.core.exceptions import ResponseBody
from portfolio_api.core.serialization import serialize_document
from portfolio_api.models.contact_model import ContactStatus
from portfolio_api.schemas.contact_schema import ContactSubmitRequest, StatusUpdateRequest
from portfolio_api.services.contact_service import ContactService

router = APIRouter(prefix="/contact", tags=["contact"])


def client_ip(request: Request) -> Optional[str]:
    """Peer address, already rewritten from X-Forwarded-For for trusted proxies"""
    return request.client.host if request.client else None


@router.post(
    "",
    response_model=ResponseBody,
    status_code=status.HTTP_201_CREATED,
    summary="Send Contact Message",
    description="Public contact form, stores the message as unread",
)
def submit_message(
    request: Request,
    contact_data: ContactSubmitRequest,
    service: ContactService = Depends(get_contact_service),
):
    message = service.submit(
        name=contact_data.name,
        email=contact_data.email,
        message=contact_data.message,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )
    return ResponseBody(
        message="Message sent successfully! I'll get back to you soon.",
        data=serialize_document(message),
    )


@router.get(
    "",
    response_model=ResponseBody,
    summary="List Contact Messages",
    description="All messages newest first, optionally filtered by status",
    dependencies=[Depends(get_current_admin)],
)
def list_messages(
    status_filter: Optional[ContactStatus] = Query(None, alias="status", description="unread, read or replied"),
    service: ContactService = Depends(get_contact_service),
):
    messages = service.list_messages(status=status_filter)
    return ResponseBody(data=serialize_document(messages))


@router.get(
    "/{message_id}",
    response_model=ResponseBody,
    summary="Get Contact Message",
    dependencies=[Depends(get_current_admin)],
)
def get_message(
    message_id: str,
    service: ContactService = Depends(get_contact_service),
):
    return ResponseBody(data=serialize_document(service.get_message(message_id)))


@router.put(
    "/{message_id}/status",
    response_model=ResponseBody,
    summary="Update Message Status",
    description="Set a message to unread, read or replied",
    dependencies=[Depends(get_current_admin)],
)
def update_status(
    message_id: str,
    status_data: StatusUpdateRequest,
    service: ContactService = Depends(get_contact_service),
):
    message = service.set_status(message_id, status_data.status)
    return ResponseBody(message="Status updated successfully", data=serialize_document(message))


@router.delete(
    "/{message_id}",
    response_model=ResponseBody,
    summary="Delete Contact Message",
    dependencies=[Depends(get_current_admin)],
)
def delete_message(
    message_id: str,
    service: ContactService = Depends(get_contact_service),
):
    service.delete_message(message_id)
    return ResponseBody(message="Message deleted successfully")
