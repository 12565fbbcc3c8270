from typing import Any
from fastapi import APIRouter, Depends

from studio_dash.api import deps
from studio_dash.models import User
from studio_dash.services import display

router = APIRouter()


@router.get("/badges", response_model=dict[str, Any])
def read_badges(current_user: User = Depends(deps.get_current_user)) -> Any:
    """
    Label and colour tables for every status, category and priority.
    """
    return display.badge_tables()
