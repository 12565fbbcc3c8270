"""
Project Model Module

This module defines the Project model together with its embedded regulatory
Submissions. Submissions are owned by their project and are never stored on
their own.
"""
from enum import Enum
from typing import List, Optional
from pydantic import field_validator
from sqlmodel import SQLModel, Field


class ProjectStatus(str, Enum):
    """
    Lifecycle stage of a design project.

    The first four stages count as "active" on the dashboard.
    """
    CONCEPT = "concept"
    DESIGN_DEVELOPMENT = "design-development"
    SUBMISSION_PREP = "submission-prep"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"


ACTIVE_PROJECT_STATUSES = frozenset({
    ProjectStatus.CONCEPT,
    ProjectStatus.DESIGN_DEVELOPMENT,
    ProjectStatus.SUBMISSION_PREP,
    ProjectStatus.SUBMITTED,
})


class SubmissionType(str, Enum):
    PLANNING_PERMISSION = "planning-permission"
    BUILDING_PERMIT = "building-permit"
    STRUCTURAL_APPROVAL = "structural-approval"
    FIRE_SAFETY = "fire-safety"
    ENVIRONMENTAL_IMPACT = "environmental-impact"
    OTHER = "other"


class SubmissionStatus(str, Enum):
    """Approval state of a submission. Any status may follow any other."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    RESUBMISSION_REQUIRED = "resubmission-required"


class SubmissionBase(SQLModel):
    """
    Base properties for a regulatory Submission.
    """
    type: SubmissionType
    authority: str

    # Calendar dates in ISO format (YYYY-MM-DD)
    submitted_date: Optional[str] = None
    expected_approval_date: Optional[str] = None
    approval_date: Optional[str] = None

    status: SubmissionStatus = SubmissionStatus.PENDING

    # Fee charged for preparing this submission
    consultant_fee: float = Field(default=0, ge=0)
    notes: Optional[str] = None


class Submission(SubmissionBase):
    id: str


class SubmissionCreate(SubmissionBase):
    """Properties to receive on submission creation."""
    pass


class SubmissionUpdate(SQLModel):
    """Every field optional; only fields explicitly set are merged."""
    type: Optional[SubmissionType] = None
    authority: Optional[str] = None
    submitted_date: Optional[str] = None
    expected_approval_date: Optional[str] = None
    approval_date: Optional[str] = None
    status: Optional[SubmissionStatus] = None
    consultant_fee: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("type", "authority", "status", "consultant_fee", mode="before")
    @classmethod
    def reject_null(cls, v):
        # Omit a field to leave it unchanged; null would blank a required value
        if v is None:
            raise ValueError("may not be null")
        return v


class ProjectBase(SQLModel):
    """
    Base properties for a Project.

    Attributes:
        title: Project title shown on cards and search
        client_id: Weak reference to the Client, not validated
        location: Site location, searchable
        status: Current ProjectStatus
        start_date: Project start date in ISO format (YYYY-MM-DD)
        target_completion_date: Planned completion date
        actual_completion_date: Real completion date, once known
        total_budget: Client budget for the whole project
        color: Hex colour tag used by the dashboard
    """
    title: str = Field(min_length=1)
    client_id: str
    location: str = Field(min_length=1)
    description: str = Field(min_length=1)
    status: ProjectStatus = ProjectStatus.CONCEPT
    start_date: str
    target_completion_date: Optional[str] = None
    actual_completion_date: Optional[str] = None
    total_budget: Optional[float] = None
    color: str = "#623443"


class Project(ProjectBase):
    id: str

    # Denormalized client name, resolved when the project is created
    client_name: str

    # Submissions are embedded and keep their insertion order
    submissions: List[Submission] = Field(default_factory=list)


class ProjectCreate(ProjectBase):
    """Properties to receive on project creation. Client name is looked up."""
    pass


class ProjectUpdate(SQLModel):
    title: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    status: Optional[ProjectStatus] = None
    start_date: Optional[str] = None
    target_completion_date: Optional[str] = None
    actual_completion_date: Optional[str] = None
    total_budget: Optional[float] = None
    color: Optional[str] = None

    @field_validator("title", "location", "description", "status", "start_date", "color", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v
