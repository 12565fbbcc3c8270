from .project import (
    Project, ProjectCreate, ProjectUpdate, ProjectStatus, ACTIVE_PROJECT_STATUSES,
    Submission, SubmissionCreate, SubmissionUpdate, SubmissionStatus, SubmissionType,
)
from .client import Client, ClientCreate, ClientUpdate
from .finance import (
    FinanceRecord, Payment, PaymentCreate, PaymentUpdate, PaymentStatus, PaymentType,
)
from .note import Note, NoteCreate, NoteUpdate, NoteCategory, NotePriority
from .chat import ChatRoom, ChatMessage, MessageCreate
from .document import ProjectDocument, DocumentType
from .user import User, UserRead, UserRole
from .summary import (
    FinancialSummary, ProjectFinancials, ProjectFeeBreakdown, PortfolioFees,
    PortfolioOverview, ProjectCardStats, LedgerTotals, SubmissionStats, TimelineEntry,
)

__all__ = [
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectStatus", "ACTIVE_PROJECT_STATUSES",
    "Submission", "SubmissionCreate", "SubmissionUpdate", "SubmissionStatus", "SubmissionType",
    "Client", "ClientCreate", "ClientUpdate",
    "FinanceRecord", "Payment", "PaymentCreate", "PaymentUpdate", "PaymentStatus", "PaymentType",
    "Note", "NoteCreate", "NoteUpdate", "NoteCategory", "NotePriority",
    "ChatRoom", "ChatMessage", "MessageCreate",
    "ProjectDocument", "DocumentType",
    "User", "UserRead", "UserRole",
    "FinancialSummary", "ProjectFinancials", "ProjectFeeBreakdown", "PortfolioFees",
    "PortfolioOverview", "ProjectCardStats", "LedgerTotals", "SubmissionStats", "TimelineEntry",
]
