from fastapi import APIRouter
from typing import Any

from studio_dash.core.config import settings
from studio_dash.services.ids import utcnow_iso

router = APIRouter()

@router.get("", response_model=dict[str, Any])
def health_check() -> Any:
    """
    Liveness probe. Does not touch the state store.
    """
    return {"status": "ok", "version": settings.VERSION, "timestamp": utcnow_iso()}
