from typing import List, Optional
from fastapi import APIRouter, Depends

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import ProjectDocument, User
from studio_dash.services import filters

router = APIRouter()


@router.get("", response_model=List[ProjectDocument])
def list_documents(
    project_id: Optional[str] = None,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Document metadata, optionally for a single project.
    """
    return filters.documents_for_project(store.state.documents, project_id)
