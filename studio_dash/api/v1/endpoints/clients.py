"""
Client Endpoints Module

This module provides CRUD endpoints for the studio's clients. Clients are a
shared resource visible to the whole team.
"""
import logging
from typing import List, Sequence
from fastapi import APIRouter, Depends, HTTPException

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import Client, ClientCreate, ClientUpdate, User
from studio_dash.services import filters, mutations

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_client_or_404(clients: Sequence[Client], client_id: str) -> Client:
    client = filters.find_by_id(clients, client_id)
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.get("", response_model=List[Client])
def list_clients(
    q: str = "",
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    List clients, optionally filtered by name, email or company.
    """
    return filters.filter_clients(store.state.clients, q)


@router.post("", response_model=Client, status_code=201)
def create_client(
    client_in: ClientCreate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Create a new client.

    The id and creation date are assigned by the server and total_spent
    always starts at zero.
    """
    created = {}

    def add(clients):
        updated = mutations.add_client(clients, client_in)
        created["id"] = updated[-1].id
        return updated

    state = store.apply("clients", add)
    client = filters.find_by_id(state.clients, created["id"])
    logger.info("Client created", extra={"record_id": client.id, "user_id": current_user.id})
    return client


@router.get("/{client_id}", response_model=Client)
def read_client(
    client_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    return _get_client_or_404(store.state.clients, client_id)


@router.patch("/{client_id}", response_model=Client)
def update_client(
    client_id: str,
    client_update: ClientUpdate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Update an existing client with the fields provided.

    Raises:
        HTTPException 404: If the client doesn't exist
    """
    def update(clients):
        _get_client_or_404(clients, client_id)
        return mutations.update_client(clients, client_id, client_update)

    state = store.apply("clients", update)
    logger.info("Client updated", extra={"record_id": client_id, "user_id": current_user.id})
    return _get_client_or_404(state.clients, client_id)


@router.delete("/{client_id}")
def delete_client(
    client_id: str,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Delete a client.

    Projects keep their client reference; it is not cascaded.
    """
    def delete(clients):
        _get_client_or_404(clients, client_id)
        return mutations.delete_client(clients, client_id)

    store.apply("clients", delete)
    logger.info("Client deleted", extra={"record_id": client_id, "user_id": current_user.id})
    return {"status": "success", "detail": "Client deleted"}
