from typing import Optional
from fastapi import APIRouter, Depends

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import SubmissionStatus, User
from studio_dash.schemas.dashboard import SubmissionTimeline
from studio_dash.services import aggregation, filters

router = APIRouter()


@router.get("", response_model=SubmissionTimeline)
def read_timeline(
    status: Optional[SubmissionStatus] = None,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Every submission across all projects, most recently submitted first.

    Stats always cover the full timeline; `status` only narrows the entries.
    """
    entries = filters.flatten_submissions(store.state.projects)
    stats = aggregation.compute_submission_stats(entries)
    if status is not None:
        entries = [e for e in entries if e.status == status]
    return SubmissionTimeline(stats=stats, entries=entries)
