"""
Note Model Module

This module defines team notes. Notes may point at a project through a weak
project_id and can be pinned so they always sort first.
"""
from enum import Enum
from typing import Optional
from pydantic import field_validator
from sqlmodel import SQLModel, Field


class NoteCategory(str, Enum):
    GENERAL = "general"
    MEETING = "meeting"
    IDEA = "idea"
    PROJECT = "project"
    PERSONAL = "personal"
    TODO = "todo"


class NotePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class NoteBase(SQLModel):
    """
    Base properties for a Note.
    """
    # Basic note content
    title: str = Field(min_length=1)
    content: str = ""

    category: NoteCategory = NoteCategory.GENERAL
    priority: NotePriority = NotePriority.MEDIUM

    # Weak reference, resolved by the caller when displayed
    project_id: Optional[str] = None

    # Pinned notes sort above all unpinned notes
    is_pinned: bool = False


class Note(NoteBase):
    """
    Note record.
    """
    id: str

    # Acting user id at creation time
    created_by: str

    # Audit timestamps (ISO 8601)
    created_at: str
    updated_at: str


class NoteCreate(NoteBase):
    """Properties to receive on note creation."""
    pass


class NoteUpdate(SQLModel):
    """
    Partial note update.

    updated_at is only changed when it is set here explicitly.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    category: Optional[NoteCategory] = None
    priority: Optional[NotePriority] = None
    project_id: Optional[str] = None
    is_pinned: Optional[bool] = None
    updated_at: Optional[str] = None

    @field_validator(
        "title", "content", "category", "priority", "is_pinned", "updated_at", mode="before"
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v
