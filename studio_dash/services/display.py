"""
Display Rules

Status-derived labels and colours used by every dashboard view.
"""
from typing import Dict

from studio_dash.models.finance import PaymentStatus
from studio_dash.models.note import NoteCategory, NotePriority
from studio_dash.models.project import ProjectStatus, SubmissionStatus, SubmissionType

NEUTRAL = {"label": "Unknown", "color": "#64748b"}

PROJECT_STATUS_BADGES = {
    ProjectStatus.CONCEPT: {"label": "Concept", "color": "#6366f1"},
    ProjectStatus.DESIGN_DEVELOPMENT: {"label": "Design Dev", "color": "#3b82f6"},
    ProjectStatus.SUBMISSION_PREP: {"label": "Prep Submit", "color": "#f59e0b"},
    ProjectStatus.SUBMITTED: {"label": "Submitted", "color": "#f97316"},
    ProjectStatus.APPROVED: {"label": "Approved", "color": "#059669"},
    ProjectStatus.ON_HOLD: {"label": "On Hold", "color": "#64748b"},
    ProjectStatus.COMPLETED: {"label": "Completed", "color": "#10b981"},
}

SUBMISSION_STATUS_BADGES = {
    SubmissionStatus.PENDING: {"label": "Pending", "color": "#f59e0b"},
    SubmissionStatus.APPROVED: {"label": "Approved", "color": "#059669"},
    SubmissionStatus.REJECTED: {"label": "Rejected", "color": "#dc2626"},
    SubmissionStatus.RESUBMISSION_REQUIRED: {"label": "Resubmission", "color": "#f97316"},
}

PAYMENT_STATUS_BADGES = {
    PaymentStatus.PAID: {"label": "Paid", "color": "#10b981"},
    PaymentStatus.PARTIAL: {"label": "Partial", "color": "#f59e0b"},
    PaymentStatus.PENDING: {"label": "Pending", "color": "#3b82f6"},
    PaymentStatus.OVERDUE: {"label": "Overdue", "color": "#ef4444"},
}

NOTE_CATEGORY_BADGES = {
    NoteCategory.GENERAL: {"label": "General", "color": "#64748b"},
    NoteCategory.MEETING: {"label": "Meeting", "color": "#3b82f6"},
    NoteCategory.IDEA: {"label": "Idea", "color": "#f59e0b"},
    NoteCategory.PROJECT: {"label": "Project", "color": "#10b981"},
    NoteCategory.PERSONAL: {"label": "Personal", "color": "#8b5cf6"},
    NoteCategory.TODO: {"label": "To Do", "color": "#ec4899"},
}

NOTE_PRIORITY_BADGES = {
    NotePriority.HIGH: {"label": "High", "color": "#ef4444"},
    NotePriority.MEDIUM: {"label": "Medium", "color": "#f59e0b"},
    NotePriority.LOW: {"label": "Low", "color": "#10b981"},
}

SUBMISSION_TYPE_LABELS = {
    SubmissionType.PLANNING_PERMISSION: "Planning Permission",
    SubmissionType.BUILDING_PERMIT: "Building Permit",
    SubmissionType.STRUCTURAL_APPROVAL: "Structural Approval",
    SubmissionType.FIRE_SAFETY: "Fire Safety",
    SubmissionType.ENVIRONMENTAL_IMPACT: "Environmental Impact",
    SubmissionType.OTHER: "Other",
}

BADGES = {
    "project-status": PROJECT_STATUS_BADGES,
    "submission-status": SUBMISSION_STATUS_BADGES,
    "payment-status": PAYMENT_STATUS_BADGES,
    "note-category": NOTE_CATEGORY_BADGES,
    "note-priority": NOTE_PRIORITY_BADGES,
}


def status_badge(kind: str, value: str) -> Dict[str, str]:
    """
    Label and colour for a status value.

    Unknown kinds or values get the neutral grey badge.
    """
    table = BADGES.get(kind, {})
    value = getattr(value, "value", value)
    for member, badge in table.items():
        if member.value == value:
            return dict(badge)
    return dict(NEUTRAL)


def badge_tables() -> Dict[str, Dict[str, Dict[str, str]]]:
    tables = {
        kind: {member.value: dict(badge) for member, badge in table.items()}
        for kind, table in BADGES.items()
    }
    tables["submission-type"] = {
        member.value: {"label": label, "color": NEUTRAL["color"]}
        for member, label in SUBMISSION_TYPE_LABELS.items()
    }
    return tables
