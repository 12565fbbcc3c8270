"""
Persistence errors raised by the snapshot store.
"""
from typing import Optional


class StoreError(Exception):
    """Base class for state store failures."""


class SnapshotError(StoreError):
    """Raised when a stored collection payload no longer validates."""

    def __init__(self, collection: str, message: Optional[str] = None):
        self.collection = collection
        self.message = message or f"Stored snapshot for '{collection}' is invalid"
        super().__init__(self.message)
