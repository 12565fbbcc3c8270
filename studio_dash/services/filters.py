"""
Filter/Sort Layer

Search and ordering rules for the dashboard lists. Every function returns a new
list and keeps the original order unless it is a sort.
"""
from typing import List, Optional, Sequence, TypeVar, Union

from studio_dash.models.chat import ChatRoom
from studio_dash.models.client import Client
from studio_dash.models.document import ProjectDocument
from studio_dash.models.finance import FinanceRecord, Payment, PaymentStatus
from studio_dash.models.note import Note, NoteCategory
from studio_dash.models.project import Project, Submission
from studio_dash.models.summary import TimelineEntry
from studio_dash.models.user import User
from studio_dash.services.ids import to_timestamp

ALL = "all"

T = TypeVar("T")
S = TypeVar("S", bound=Submission)


def _matches(query: str, *fields: Optional[str]) -> bool:
    needle = query.lower()
    return any(field is not None and needle in field.lower() for field in fields)


def filter_projects(projects: Sequence[Project], query: str = "") -> List[Project]:
    """Case-insensitive substring match on title, client name or location."""
    if not query:
        return list(projects)
    return [p for p in projects if _matches(query, p.title, p.client_name, p.location)]


def filter_clients(clients: Sequence[Client], query: str = "") -> List[Client]:
    if not query:
        return list(clients)
    return [c for c in clients if _matches(query, c.name, c.email, c.company)]


def filter_notes(
    notes: Sequence[Note],
    query: str = "",
    category: Union[NoteCategory, str] = ALL,
) -> List[Note]:
    """
    Category pre-filter followed by a substring match on title or content.

    The category "all" disables the pre-filter.
    """
    if category != ALL:
        notes = [n for n in notes if n.category == category]
    if not query:
        return list(notes)
    return [n for n in notes if _matches(query, n.title, n.content)]


def sort_notes(notes: Sequence[Note]) -> List[Note]:
    """Pinned notes first, then most recently updated. Ties keep their order."""
    return sorted(notes, key=lambda n: (not n.is_pinned, -to_timestamp(n.updated_at)))


def sort_submissions_by_date(submissions: Sequence[S]) -> List[S]:
    """
    Most recently submitted first.

    Submissions without a submitted date count as dated at the epoch and so
    sort last.
    """
    return sorted(submissions, key=lambda s: to_timestamp(s.submitted_date), reverse=True)


def flatten_submissions(projects: Sequence[Project]) -> List[TimelineEntry]:
    """All submissions with their project context, newest submission first."""
    entries = [
        TimelineEntry(
            **submission.model_dump(),
            project_id=project.id,
            project_title=project.title,
            project_color=project.color,
        )
        for project in projects
        for submission in project.submissions
    ]
    return sort_submissions_by_date(entries)


def filter_payments(
    payments: Sequence[Payment], status: Union[PaymentStatus, str] = ALL
) -> List[Payment]:
    if status == ALL:
        return list(payments)
    return [p for p in payments if p.status == status]


def filter_rooms(rooms: Sequence[ChatRoom], query: str = "") -> List[ChatRoom]:
    if not query:
        return list(rooms)
    return [r for r in rooms if _matches(query, r.name)]


def online_users(users: Sequence[User]) -> List[User]:
    return [u for u in users if u.is_online]


def find_by_id(items: Sequence[T], item_id: str) -> Optional[T]:
    return next((item for item in items if item.id == item_id), None)


def documents_for_project(
    documents: Sequence[ProjectDocument], project_id: Optional[str] = None
) -> List[ProjectDocument]:
    if project_id is None:
        return list(documents)
    return [d for d in documents if d.project_id == project_id]


def finance_records_for_project(
    records: Sequence[FinanceRecord], project_id: str
) -> List[FinanceRecord]:
    return [r for r in records if r.project_id == project_id]
