"""
User Model Module

This module defines the User model and UserRole enumeration for the studio
team members who sign in to the dashboard.
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field


class UserRole(str, Enum):
    """
    Team roles.

    Roles are informational only, the dashboard does not restrict actions by
    role.
    """
    ADMIN = "admin"
    PROJECT_MANAGER = "project-manager"
    DESIGNER = "designer"
    FINANCE = "finance"


class UserBase(SQLModel):
    username: str = Field(min_length=1)
    full_name: str
    email: str
    role: UserRole = UserRole.DESIGNER
    avatar: Optional[str] = None

    # Presence
    is_online: bool = False
    last_seen: Optional[str] = None  # ISO timestamp of the last sign-out


class User(UserBase):
    """
    User record as held in the state store.

    Only a password hash is kept; plaintext passwords are never stored.
    """
    id: str
    password_hash: Optional[str] = None


class UserRead(UserBase):
    """Properties returned to clients. The password hash is excluded."""
    id: str
