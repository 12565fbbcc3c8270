"""
Project Endpoints Module

This module provides endpoints for design projects and their embedded
regulatory submissions, plus the per-project financial, document and ledger
views.
"""
import logging
from typing import List, Sequence
from fastapi import APIRouter, Depends, HTTPException

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import (
    FinanceRecord,
    Project,
    ProjectCreate,
    ProjectDocument,
    ProjectUpdate,
    SubmissionCreate,
    SubmissionUpdate,
    User,
)
from studio_dash.schemas.dashboard import ProjectFinancialsRead
from studio_dash.services import aggregation, filters, mutations

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_project_or_404(projects: Sequence[Project], project_id: str) -> Project:
    project = filters.find_by_id(projects, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("", response_model=List[Project])
def list_projects(
    q: str = "",
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    List projects, optionally narrowed by a search query.

    Args:
        q: Case-insensitive text matched against title, client name and location

    Returns:
        List[Project]: Matching projects in their stored order
    """
    return filters.filter_projects(store.state.projects, q)


@router.post("", response_model=Project, status_code=201)
def create_project(
    project_in: ProjectCreate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Create a new project for an existing client.

    The client's name is copied onto the project and an empty payment ledger
    is opened for it.

    Raises:
        HTTPException 400: If the client does not exist
    """
    created = {}

    def add(state):
        projects = mutations.add_project(state.projects, project_in, state.clients)
        if projects is state.projects:
            raise HTTPException(status_code=400, detail="Please select an existing client")
        created["id"] = projects[-1].id
        # Project and ledger are written in the same transaction
        return {
            "projects": projects,
            "finance_records": mutations.open_finance_record(state.finance_records, projects[-1]),
        }

    state = store.apply_many(add)
    project = filters.find_by_id(state.projects, created["id"])

    logger.info("Project created", extra={"project_id": project.id, "user_id": current_user.id})
    return project


@router.get("/{project_id}", response_model=Project)
def read_project(
    project_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    return _get_project_or_404(store.state.projects, project_id)


@router.patch("/{project_id}", response_model=Project)
def update_project(
    project_id: str,
    project_update: ProjectUpdate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    def update(projects):
        _get_project_or_404(projects, project_id)
        return mutations.update_project(projects, project_id, project_update)

    state = store.apply("projects", update)
    logger.info("Project updated", extra={"project_id": project_id, "user_id": current_user.id})
    return _get_project_or_404(state.projects, project_id)


@router.get("/{project_id}/financials", response_model=ProjectFinancialsRead)
def read_project_financials(
    project_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Consultant fee breakdown and card counters for one project.
    """
    project = _get_project_or_404(store.state.projects, project_id)
    return ProjectFinancialsRead(
        project_id=project.id,
        financials=aggregation.compute_project_financials(project),
        card=aggregation.summarize_project_card(project),
    )


@router.get("/{project_id}/documents", response_model=List[ProjectDocument])
def list_project_documents(
    project_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    _get_project_or_404(store.state.projects, project_id)
    return filters.documents_for_project(store.state.documents, project_id)


@router.get("/{project_id}/finance", response_model=List[FinanceRecord])
def list_project_finance(
    project_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    _get_project_or_404(store.state.projects, project_id)
    return filters.finance_records_for_project(store.state.finance_records, project_id)


@router.post("/{project_id}/submissions", response_model=Project, status_code=201)
def create_submission(
    project_id: str,
    submission_in: SubmissionCreate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Append a regulatory submission to a project.

    Returns:
        Project: The project including the new submission
    """
    def add(projects):
        _get_project_or_404(projects, project_id)
        return mutations.add_submission(projects, project_id, submission_in)

    state = store.apply("projects", add)
    logger.info("Submission added", extra={"project_id": project_id, "user_id": current_user.id})
    return _get_project_or_404(state.projects, project_id)


@router.patch("/{project_id}/submissions/{submission_id}", response_model=Project)
def update_submission(
    project_id: str,
    submission_id: str,
    submission_update: SubmissionUpdate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Update a submission. Any status may follow any other.

    Raises:
        HTTPException 404: If the project or submission doesn't exist
    """
    def update(projects):
        project = _get_project_or_404(projects, project_id)
        if filters.find_by_id(project.submissions, submission_id) is None:
            raise HTTPException(status_code=404, detail="Submission not found")
        return mutations.update_submission(projects, project_id, submission_id, submission_update)

    state = store.apply("projects", update)
    logger.info("Submission updated", extra={"project_id": project_id, "user_id": current_user.id})
    return _get_project_or_404(state.projects, project_id)
