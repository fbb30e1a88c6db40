"""Secure messaging endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from neudebri.core.dependencies import Identity, get_identity, get_storage_service
from neudebri.schemas import Message, MessageCreate, MessageWithParties
from neudebri.services import StorageService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=List[MessageWithParties])
async def get_messages(
    identity: Identity = Depends(get_identity),
    storage: StorageService = Depends(get_storage_service),
):
    """Inbox and sent items for ``userId``, newest first."""
    return storage.get_messages(identity.user_id)


@router.post("", response_model=Message, status_code=201)
async def send_message(
    payload: MessageCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_message(payload)


@router.patch("/{message_id}/read", response_model=Message)
async def mark_message_as_read(
    message_id: str, storage: StorageService = Depends(get_storage_service)
):
    message = storage.mark_message_as_read(message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return message
