"""
Authentication Endpoints Module

Demo sign-in for the studio team. Credentials are matched against the team
directory held in the state store; the session is a signed token returned in
the body and also set as an HTTP-only cookie for browser clients.
"""
import logging
from datetime import timedelta
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.security import OAuth2PasswordRequestForm

from studio_dash.api import deps
from studio_dash.core.config import settings
from studio_dash.core.security import verify_password, create_access_token
from studio_dash.db.store import StateStore
from studio_dash.models.user import User, UserRead
from studio_dash.schemas.auth import LoginResult
from studio_dash.services import mutations
from studio_dash.services.filters import find_by_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResult)
def login(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    store: StateStore = Depends(deps.get_store),
):
    """
    Authenticate a team member and issue an access token.

    The user is marked online on success.

    Raises:
        HTTPException 401: If the username is unknown or the password is wrong
    """
    user = next((u for u in store.state.users if u.username == form_data.username), None)

    if not user or not verify_password(form_data.password, user.password_hash):
        logger.info("Rejected login for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    state = store.apply("users", lambda users: mutations.set_user_presence(users, user.id, True))
    user = find_by_id(state.users, user.id)

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(subject=user.username, expires_delta=access_token_expires)

    # httponly=True prevents JavaScript access to the cookie
    response.set_cookie(
        key="access_token",
        value=f"Bearer {access_token}",
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="lax"
    )
    logger.info("User signed in", extra={"user_id": user.id})
    return {"access_token": access_token, "token_type": "bearer", "user": user}


@router.get("/logout")
def logout(
    response: Response,
    store: StateStore = Depends(deps.get_store),
    current_user: Optional[User] = Depends(deps.get_optional_user),
):
    """
    Clear the session cookie and mark the user offline.

    Succeeds even without a session so browsers can always sign out.
    """
    if current_user is not None:
        store.apply(
            "users", lambda users: mutations.set_user_presence(users, current_user.id, False)
        )
        logger.info("User signed out", extra={"user_id": current_user.id})
    response.delete_cookie("access_token")
    return {"status": "success"}


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(deps.get_current_user)):
    return current_user
