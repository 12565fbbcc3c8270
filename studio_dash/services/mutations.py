"""
Mutation Handlers

Create/update/delete operations over the dashboard collections. Each handler
takes the current collection and returns a new list; untouched records are
passed through as the same objects. A missing target id is a silent no-op that
returns the input collection itself.
"""
import logging
from typing import List, Optional, Sequence

from studio_dash.models.chat import ChatMessage, ChatRoom
from studio_dash.models.client import Client, ClientCreate, ClientUpdate
from studio_dash.models.finance import FinanceRecord, Payment, PaymentCreate, PaymentUpdate
from studio_dash.models.note import Note, NoteCreate, NoteUpdate
from studio_dash.models.project import (
    Project,
    ProjectCreate,
    ProjectUpdate,
    Submission,
    SubmissionCreate,
    SubmissionUpdate,
)
from studio_dash.models.user import User
from studio_dash.services.aggregation import recompute_finance_record
from studio_dash.services.filters import find_by_id
from studio_dash.services.ids import new_id, utcnow_iso

logger = logging.getLogger(__name__)


def _merge(item, updates):
    """
    Shallow overwrite of the fields explicitly set on an update struct.

    The merged record is validated as a whole, so a change that would leave a
    required field empty raises ValidationError instead of being stored.
    """
    changes = updates.model_dump(exclude_unset=True)
    return type(item).model_validate({**item.model_dump(), **changes})


def _replace(items: Sequence, item_id: str, replacement) -> List:
    return [replacement if item.id == item_id else item for item in items]


# --- Finance ---


def _payment_ids(records: Sequence[FinanceRecord]) -> set:
    return {payment.id for record in records for payment in record.payments}


def add_payment(
    records: Sequence[FinanceRecord], project_id: str, payment_data: PaymentCreate
) -> Sequence[FinanceRecord]:
    """
    Append a new payment to the ledger of `project_id` and re-derive its totals.
    """
    if not any(r.project_id == project_id for r in records):
        logger.debug("No finance record for project %s, payment dropped", project_id)
        return records

    payment = Payment(
        **payment_data.model_dump(),
        id=new_id("p", _payment_ids(records)),
        project_id=project_id,
    )
    return [
        recompute_finance_record(r, [*r.payments, payment]) if r.project_id == project_id else r
        for r in records
    ]


def update_payment(
    records: Sequence[FinanceRecord],
    project_id: str,
    payment_id: str,
    updates: PaymentUpdate,
) -> Sequence[FinanceRecord]:
    """
    Merge `updates` into one payment and re-derive the ledger totals.

    Returns `records` unchanged when the project or payment is unknown.
    """
    record = next((r for r in records if r.project_id == project_id), None)
    if record is None or find_by_id(record.payments, payment_id) is None:
        logger.debug("Payment %s not found on project %s", payment_id, project_id)
        return records

    payments = [_merge(p, updates) if p.id == payment_id else p for p in record.payments]
    return [
        recompute_finance_record(r, payments) if r is record else r
        for r in records
    ]


def open_finance_record(
    records: Sequence[FinanceRecord], project: Project
) -> Sequence[FinanceRecord]:
    """Start an empty ledger for a project that does not have one yet."""
    if any(r.project_id == project.id for r in records):
        return records
    record = FinanceRecord(
        id=new_id("f", {r.id for r in records}),
        project_id=project.id,
        client_id=project.client_id,
    )
    return [*records, record]


# --- Clients ---


def add_client(clients: Sequence[Client], client_data: ClientCreate) -> List[Client]:
    """
    Append a new client. The id, creation time and a zero total_spent are
    always assigned here.
    """
    client = Client(
        **client_data.model_dump(),
        id=new_id("c", {c.id for c in clients}),
        created_date=utcnow_iso(),
        total_spent=0,
    )
    return [*clients, client]


def update_client(
    clients: Sequence[Client], client_id: str, updates: ClientUpdate
) -> Sequence[Client]:
    client = find_by_id(clients, client_id)
    if client is None:
        logger.debug("Client %s not found", client_id)
        return clients
    return _replace(clients, client_id, _merge(client, updates))


def delete_client(clients: Sequence[Client], client_id: str) -> Sequence[Client]:
    if find_by_id(clients, client_id) is None:
        return clients
    return [c for c in clients if c.id != client_id]


# --- Notes ---


def add_note(notes: Sequence[Note], note_data: NoteCreate, user_id: str) -> List[Note]:
    now = utcnow_iso()
    note = Note(
        **note_data.model_dump(),
        id=new_id("n", {n.id for n in notes}),
        created_by=user_id,
        created_at=now,
        updated_at=now,
    )
    return [*notes, note]


def update_note(notes: Sequence[Note], note_id: str, updates: NoteUpdate) -> Sequence[Note]:
    """
    Merge a partial update into a note.

    updated_at is left alone unless the update sets it.
    """
    note = find_by_id(notes, note_id)
    if note is None:
        logger.debug("Note %s not found", note_id)
        return notes
    return _replace(notes, note_id, _merge(note, updates))


def delete_note(notes: Sequence[Note], note_id: str) -> Sequence[Note]:
    if find_by_id(notes, note_id) is None:
        return notes
    return [n for n in notes if n.id != note_id]


# --- Chat ---


def send_message(
    rooms: Sequence[ChatRoom],
    room_id: str,
    user_id: str,
    username: str,
    text: str,
) -> Sequence[ChatRoom]:
    """
    Append a message to a room.

    Text that is blank after trimming is dropped without error.
    """
    text = text.strip()
    if not text:
        return rooms
    room = find_by_id(rooms, room_id)
    if room is None:
        logger.debug("Chat room %s not found", room_id)
        return rooms

    message = ChatMessage(
        id=new_id("m", {m.id for r in rooms for m in r.messages}),
        user_id=user_id,
        username=username,
        message=text,
        timestamp=utcnow_iso(),
    )
    updated = room.model_copy(update={"messages": [*room.messages, message]})
    return _replace(rooms, room_id, updated)


# --- Projects and submissions ---


def add_project(
    projects: Sequence[Project], project_data: ProjectCreate, clients: Sequence[Client]
) -> Sequence[Project]:
    """
    Append a project for an existing client, copying the client's name.

    An unknown client id leaves the collection unchanged.
    """
    client = find_by_id(clients, project_data.client_id)
    if client is None:
        logger.debug("Client %s not found, project not created", project_data.client_id)
        return projects
    project = Project(
        **project_data.model_dump(),
        id=new_id("pr", {p.id for p in projects}),
        client_name=client.name,
        submissions=[],
    )
    return [*projects, project]


def update_project(
    projects: Sequence[Project], project_id: str, updates: ProjectUpdate
) -> Sequence[Project]:
    project = find_by_id(projects, project_id)
    if project is None:
        return projects
    return _replace(projects, project_id, _merge(project, updates))


def _submission_ids(projects: Sequence[Project]) -> set:
    return {s.id for p in projects for s in p.submissions}


def add_submission(
    projects: Sequence[Project], project_id: str, submission_data: SubmissionCreate
) -> Sequence[Project]:
    project = find_by_id(projects, project_id)
    if project is None:
        return projects
    submission = Submission(
        **submission_data.model_dump(),
        id=new_id("s", _submission_ids(projects)),
    )
    updated = project.model_copy(update={"submissions": [*project.submissions, submission]})
    return _replace(projects, project_id, updated)


def update_submission(
    projects: Sequence[Project],
    project_id: str,
    submission_id: str,
    updates: SubmissionUpdate,
) -> Sequence[Project]:
    """Merge into one submission. Status may move to any other status."""
    project = find_by_id(projects, project_id)
    if project is None:
        return projects
    submission = find_by_id(project.submissions, submission_id)
    if submission is None:
        return projects
    updated = project.model_copy(update={
        "submissions": _replace(project.submissions, submission_id, _merge(submission, updates)),
    })
    return _replace(projects, project_id, updated)


# --- Users ---


def set_user_presence(
    users: Sequence[User], user_id: str, online: bool, now: Optional[str] = None
) -> Sequence[User]:
    user = find_by_id(users, user_id)
    if user is None:
        return users
    changes = {"is_online": online}
    if not online:
        changes["last_seen"] = now or utcnow_iso()
    return _replace(users, user_id, user.model_copy(update=changes))
