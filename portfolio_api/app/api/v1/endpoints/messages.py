"""
Contact message endpoints for API v1.

Anyone may post a message through the contact form.  Reading,
marking and deleting messages is reserved for the admin.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.api.deps import get_storage
from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.schemas.common import MessageResponse
from portfolio_api.app.schemas.message import MessageCreate, MessageRead
from portfolio_api.app.services.storage import Storage

router = APIRouter()


@router.get("", response_model=List[MessageRead])
async def list_messages(
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> List[MessageRead]:
    """List all messages, newest first (admin only)."""
    return await storage.messages.list_messages()


@router.get("/{message_id}", response_model=MessageRead)
async def get_message(
    message_id: int,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> MessageRead:
    msg = await storage.messages.get_message(message_id)
    if msg is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return msg


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def create_message(
    message_in: MessageCreate,
    storage: Storage = Depends(get_storage),
) -> MessageRead:
    """Submit the public contact form.  No session required."""
    return await storage.messages.create_message(message_in)


@router.put("/{message_id}/read", response_model=MessageResponse)
async def mark_message_as_read(
    message_id: int,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    updated = await storage.messages.mark_message_as_read(message_id)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageResponse(message="Message marked as read")


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: int,
    storage: Storage = Depends(get_storage),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    deleted = await storage.messages.delete_message(message_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageResponse(message="Message deleted")
