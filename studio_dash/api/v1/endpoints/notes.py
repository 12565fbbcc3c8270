"""
Note Endpoints Module

This module provides CRUD endpoints for team notes. Listings are always
returned pinned-first, most recently updated next.
"""
import logging
from typing import List, Sequence
from fastapi import APIRouter, Depends, HTTPException

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import Note, NoteCreate, NoteUpdate, User
from studio_dash.services import filters, mutations
from studio_dash.services.ids import utcnow_iso

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_note_or_404(notes: Sequence[Note], note_id: str) -> Note:
    note = filters.find_by_id(notes, note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note


@router.get("", response_model=List[Note])
def list_notes(
    q: str = "",
    category: str = filters.ALL,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    List notes.

    Args:
        q: Text matched against title and content
        category: Exact category, or "all" for every category

    Returns:
        List[Note]: Pinned notes first, then newest update first
    """
    return filters.sort_notes(filters.filter_notes(store.state.notes, q, category))


@router.post("", response_model=Note, status_code=201)
def create_note(
    note_in: NoteCreate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Create a note owned by the current user.
    """
    created = {}

    def add(notes):
        updated = mutations.add_note(notes, note_in, current_user.id)
        created["id"] = updated[-1].id
        return updated

    state = store.apply("notes", add)
    note = filters.find_by_id(state.notes, created["id"])
    logger.info("Note created", extra={"record_id": note.id, "user_id": current_user.id})
    return note


@router.patch("/{note_id}", response_model=Note)
def update_note(
    note_id: str,
    note_update: NoteUpdate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Update an existing note.

    Edits made through the API bump updated_at unless the request sets it.

    Raises:
        HTTPException 404: If the note doesn't exist
    """
    if "updated_at" not in note_update.model_fields_set:
        note_update = note_update.model_copy(update={"updated_at": utcnow_iso()})

    def update(notes):
        _get_note_or_404(notes, note_id)
        return mutations.update_note(notes, note_id, note_update)

    state = store.apply("notes", update)
    logger.info("Note updated", extra={"record_id": note_id, "user_id": current_user.id})
    return _get_note_or_404(state.notes, note_id)


@router.delete("/{note_id}")
def delete_note(
    note_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    def delete(notes):
        _get_note_or_404(notes, note_id)
        return mutations.delete_note(notes, note_id)

    store.apply("notes", delete)
    logger.info("Note deleted", extra={"record_id": note_id, "user_id": current_user.id})
    return {"status": "success", "detail": "Note deleted"}
