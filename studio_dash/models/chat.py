"""
Chat Model Module

Team chat rooms and their append-only message history.
"""
from typing import List, Optional
from sqlmodel import SQLModel, Field


class ChatMessage(SQLModel):
    """
    A message posted to a room.

    username is a snapshot of the sender's full name at send time and is not
    refreshed if the user is renamed.
    """
    id: str
    user_id: str
    username: str
    message: str
    timestamp: str
    is_edited: Optional[bool] = None
    reply_to: Optional[str] = None


class ChatRoom(SQLModel):
    id: str
    name: str
    project_id: Optional[str] = None  # Set for project-specific rooms
    messages: List[ChatMessage] = Field(default_factory=list)
    participants: List[str] = Field(default_factory=list)  # user ids
    created_date: str


class MessageCreate(SQLModel):
    message: str
