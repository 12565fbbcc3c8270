from typing import List
from fastapi import APIRouter, Depends, HTTPException

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import User, UserRead
from studio_dash.services import filters

router = APIRouter()


@router.get("", response_model=List[UserRead])
def list_users(
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Team directory. Password hashes are never returned.
    """
    return store.state.users


@router.get("/online", response_model=List[UserRead])
def list_online_users(
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    return filters.online_users(store.state.users)


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    user = filters.find_by_id(store.state.users, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
