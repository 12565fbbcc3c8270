"""
State Store Module

The StateStore is the single owner of the dashboard's mutable state. Every
collection lives in memory as part of an immutable DashboardState value and is
persisted as one JSON snapshot row per collection. A write derives the new
collections from the current state under the store lock, stores every changed
collection in one transaction and only then swaps in the new state.
"""
import json
import logging
import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlmodel import SQLModel, Field, Session, select

from studio_dash.core.exceptions import SnapshotError
from studio_dash.models import (
    ChatRoom,
    Client,
    FinanceRecord,
    Note,
    Project,
    ProjectDocument,
    User,
)

logger = logging.getLogger(__name__)


class DashboardState(SQLModel):
    """
    All dashboard collections at one point in time.
    """
    projects: List[Project] = Field(default_factory=list)
    clients: List[Client] = Field(default_factory=list)
    finance_records: List[FinanceRecord] = Field(default_factory=list)
    chat_rooms: List[ChatRoom] = Field(default_factory=list)
    notes: List[Note] = Field(default_factory=list)
    documents: List[ProjectDocument] = Field(default_factory=list)
    users: List[User] = Field(default_factory=list)


# Collection name -> record type, in load order
COLLECTION_TYPES = {
    "projects": Project,
    "clients": Client,
    "finance_records": FinanceRecord,
    "chat_rooms": ChatRoom,
    "notes": Note,
    "documents": ProjectDocument,
    "users": User,
}

_ADAPTERS = {name: TypeAdapter(List[model]) for name, model in COLLECTION_TYPES.items()}


class CollectionSnapshot(SQLModel, table=True):
    """
    Persisted JSON value of one whole collection.

    Attributes:
        name: Collection name, one of COLLECTION_TYPES
        payload: JSON array of the collection's records
        updated_at: ISO timestamp of the last write
    """
    __tablename__ = "collection_snapshots"

    name: str = Field(primary_key=True)
    payload: str = Field(nullable=False)
    updated_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())


def dump_collection(collection: Sequence[SQLModel]) -> str:
    return json.dumps([item.model_dump(mode="json") for item in collection])


def load_collection(name: str, payload: str) -> list:
    try:
        return _ADAPTERS[name].validate_json(payload)
    except ValidationError as exc:
        raise SnapshotError(name) from exc


class StateStore:
    """
    Owner of the current DashboardState.

    Args:
        engine: SQLAlchemy engine holding the snapshot table
        seed: Optional factory for the initial state, used for every
            collection that has never been stored
    """

    def __init__(self, engine, seed: Optional[Callable[[], DashboardState]] = None):
        self.engine = engine
        self._seed = seed
        self._lock = threading.Lock()
        self._state: Optional[DashboardState] = None

    @property
    def state(self) -> DashboardState:
        if self._state is None:
            with self._lock:
                if self._state is None:
                    self._state = self._load()
        return self._state

    def _load(self) -> DashboardState:
        SQLModel.metadata.create_all(self.engine, tables=[CollectionSnapshot.__table__])

        with Session(self.engine) as session:
            rows = {row.name: row for row in session.exec(select(CollectionSnapshot)).all()}
            missing = [name for name in COLLECTION_TYPES if name not in rows]
            seed_state = self._seed() if (missing and self._seed) else None

            collections: Dict[str, list] = {}
            for name in COLLECTION_TYPES:
                if name in rows:
                    collections[name] = load_collection(name, rows[name].payload)
                elif seed_state is not None:
                    collections[name] = list(getattr(seed_state, name))
                else:
                    collections[name] = []

            # Persist seeded collections so later restarts read them back
            if seed_state is not None:
                for name in missing:
                    session.add(CollectionSnapshot(
                        name=name, payload=dump_collection(collections[name])
                    ))
                session.commit()
                logger.info("Seeded collections: %s", ", ".join(missing))

        return DashboardState(**collections)

    def apply(self, name: str, handler: Callable[[list], Sequence[SQLModel]]) -> DashboardState:
        """
        Run `handler` on the current value of one collection and persist the
        result.

        The handler runs under the store lock, so concurrent requests each see
        the collection left by the previous one.
        """
        if name not in COLLECTION_TYPES:
            raise KeyError(f"Unknown collection '{name}'")
        return self.apply_many(lambda state: {name: handler(getattr(state, name))})

    def apply_many(
        self, handler: Callable[[DashboardState], Dict[str, Sequence[SQLModel]]]
    ) -> DashboardState:
        """
        Run `handler` on the current state and persist every collection it
        returns in a single transaction.

        Collections handed back unchanged (the very object already held, as a
        handler no-op returns) are not written. When nothing changed no
        transaction is opened at all. Exceptions raised by the handler
        propagate and leave the state untouched.
        """
        self.state  # load on first use
        with self._lock:
            current = self._state
            results = handler(current)
            for name in results:
                if name not in COLLECTION_TYPES:
                    raise KeyError(f"Unknown collection '{name}'")
            changed = {
                name: collection for name, collection in results.items()
                if collection is not getattr(current, name)
            }
            if not changed:
                return current

            with Session(self.engine) as session:
                for name, collection in changed.items():
                    row = session.get(CollectionSnapshot, name)
                    if row is None:
                        row = CollectionSnapshot(name=name, payload="[]")
                    row.payload = dump_collection(collection)
                    row.updated_at = datetime.utcnow().isoformat()
                    session.add(row)
                session.commit()

            self._state = current.model_copy(
                update={name: list(collection) for name, collection in changed.items()}
            )
            for name in changed:
                logger.info("Committed collection", extra={"collection": name})
            return self._state

    def reset(self, state: DashboardState) -> DashboardState:
        """Overwrite every stored collection with `state`."""
        with self._lock:
            SQLModel.metadata.create_all(self.engine, tables=[CollectionSnapshot.__table__])
            with Session(self.engine) as session:
                for name in COLLECTION_TYPES:
                    row = session.get(CollectionSnapshot, name)
                    if row is None:
                        row = CollectionSnapshot(name=name, payload="[]")
                    row.payload = dump_collection(getattr(state, name))
                    row.updated_at = datetime.utcnow().isoformat()
                    session.add(row)
                session.commit()
            self._state = state
            logger.info("Store reset")
            return state
