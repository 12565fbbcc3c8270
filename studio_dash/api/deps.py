"""
API Dependencies Module

This module provides FastAPI dependency functions for the state store and for
authentication. Like the rest of the API it accepts the session token either as
a bearer token (for API clients) or as an HTTP-only cookie (for browsers).
"""
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from studio_dash.core.config import settings
from studio_dash.core.security import decode_access_token
from studio_dash.db.seed import demo_state
from studio_dash.db.session import engine
from studio_dash.db.store import StateStore
from studio_dash.models.user import User

# auto_error=False allows us to check cookies as a fallback
reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login",
    auto_error=False  # Don't raise error immediately if Authorization header is missing
)

# Global store instance
_store = None


def get_store() -> StateStore:
    """
    Dependency returning the process-wide state store.

    The store is created on first use so that tests can override this
    dependency before any database is touched.
    """
    global _store
    if _store is None:
        _store = StateStore(engine, seed=demo_state if settings.SEED_DEMO_DATA else None)
    return _store


def _extract_token(request: Request, token: Optional[str]) -> Optional[str]:
    # Try Authorization header first, then fall back to cookie
    if token:
        return token
    cookie = request.cookies.get("access_token")
    # Cookie format is "Bearer <token>"
    if cookie and cookie.startswith("Bearer "):
        return cookie[len("Bearer "):]
    return cookie


def get_optional_user(
    request: Request,
    store: StateStore = Depends(get_store),
    token: Optional[str] = Depends(reusable_oauth2),
) -> Optional[User]:
    """Resolve the session user, or None when there is no valid session."""
    token = _extract_token(request, token)
    if not token:
        return None
    username = decode_access_token(token)
    if username is None:
        return None
    return next((u for u in store.state.users if u.username == username), None)


def get_current_user(
    request: Request,
    store: StateStore = Depends(get_store),
    token: Optional[str] = Depends(reusable_oauth2),
) -> User:
    """
    Dependency that retrieves and validates the current authenticated user.

    Raises:
        HTTPException 401: If no token is provided, it is invalid or expired,
            or it names a user that no longer exists
    """
    user = get_optional_user(request, store, token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
