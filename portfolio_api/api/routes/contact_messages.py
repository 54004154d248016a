"""Contact Routes — public form submission and the admin inbox.

Invariants:
    - POST /api/contact never echoes the stored row back to the sender
    - mark-read flips is_read only; unknown ids answer 404
    - DELETE is idempotent: unknown ids still answer "Message deleted"

Design Decisions:
    - Two routers: the public form lives at /api/contact, the inbox at
      /api/contact-messages (paths kept compatible with the existing frontend)
"""

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import get_contact_message_repository
from portfolio_api.repositories.contact_message import ContactMessageRepository
from portfolio_api.schemas.common import MessageResponse
from portfolio_api.schemas.contact_message import (
    ContactMessageCreate, ContactMessageResponse,
)

contact_router = APIRouter(prefix="/api/contact", tags=["contact"])
router = APIRouter(prefix="/api/contact-messages", tags=["contact"])


@contact_router.post("", response_model=MessageResponse)
async def send_message(
    body: ContactMessageCreate,
    repo: ContactMessageRepository = Depends(get_contact_message_repository),
):
    await repo.create(body.model_dump())
    return MessageResponse(msg="Message sent successfully")


@router.get("", response_model=list[ContactMessageResponse])
async def list_messages(
    repo: ContactMessageRepository = Depends(get_contact_message_repository),
):
    """All messages, newest first."""
    return await repo.list_all()


@router.get("/{message_id}", response_model=ContactMessageResponse)
async def get_message(
    message_id: str,
    repo: ContactMessageRepository = Depends(get_contact_message_repository),
):
    return await repo.get_by_id(message_id)


@router.put("/{message_id}/mark-read", response_model=MessageResponse)
async def mark_message_read(
    message_id: str,
    repo: ContactMessageRepository = Depends(get_contact_message_repository),
):
    await repo.mark_read(message_id)
    return MessageResponse(msg="Message marked as read")


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: str,
    repo: ContactMessageRepository = Depends(get_contact_message_repository),
):
    await repo.delete(message_id)
    return MessageResponse(msg="Message deleted")
