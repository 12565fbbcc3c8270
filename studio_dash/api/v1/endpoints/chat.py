"""
Chat Endpoints Module

Team chat rooms. Messages are append-only and carry a snapshot of the
sender's full name.
"""
import logging
from typing import List, Sequence
from fastapi import APIRouter, Depends, HTTPException

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import ChatRoom, MessageCreate, User
from studio_dash.services import filters, mutations

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_room_or_404(rooms: Sequence[ChatRoom], room_id: str) -> ChatRoom:
    room = filters.find_by_id(rooms, room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Chat room not found")
    return room


@router.get("/rooms", response_model=List[ChatRoom])
def list_rooms(
    q: str = "",
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    return filters.filter_rooms(store.state.chat_rooms, q)


@router.get("/rooms/{room_id}", response_model=ChatRoom)
def read_room(
    room_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    return _get_room_or_404(store.state.chat_rooms, room_id)


@router.post("/rooms/{room_id}/messages", response_model=ChatRoom)
def post_message(
    room_id: str,
    message_in: MessageCreate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Post a message as the current user.

    Blank messages are accepted and ignored, the room is returned unchanged.

    Raises:
        HTTPException 404: If the room doesn't exist
    """
    def send(rooms):
        _get_room_or_404(rooms, room_id)
        return mutations.send_message(
            rooms, room_id, current_user.id, current_user.full_name, message_in.message
        )

    state = store.apply("chat_rooms", send)
    logger.info("Message posted", extra={"record_id": room_id, "user_id": current_user.id})
    return _get_room_or_404(state.chat_rooms, room_id)
