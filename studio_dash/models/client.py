"""
Client Model Module

This module defines the Client model representing the people and companies the
studio works for.
"""
from typing import List, Optional
from pydantic import field_validator
from sqlmodel import SQLModel, Field


class ClientBase(SQLModel):
    """
    Base properties for a Client.

    Attributes:
        name: Client display name (required)
        email: Contact email address
        phone: Contact phone number
        address: Postal address
        company: Company or organization name
        notes: Free-form notes about the client
        project_ids: Weak references to projects, never validated
    """
    name: str = Field(min_length=1)
    email: str
    phone: str
    address: str
    company: Optional[str] = None
    notes: Optional[str] = None
    project_ids: List[str] = Field(default_factory=list)


class Client(ClientBase):
    """
    Client record.

    total_spent is maintained independently and is not derived from the
    client's payments.
    """
    id: str
    created_date: str
    total_spent: float = 0


class ClientCreate(ClientBase):
    """Properties to receive on client creation."""
    pass


class ClientUpdate(SQLModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    project_ids: Optional[List[str]] = None
    total_spent: Optional[float] = None

    @field_validator("name", "email", "phone", "address", "project_ids", "total_spent", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v
