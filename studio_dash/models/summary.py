"""
Derived read models produced by the aggregation engine.
"""
from typing import List, Optional
from sqlmodel import SQLModel

from studio_dash.models.project import ProjectStatus, Submission


class FinancialSummary(SQLModel):
    """Portfolio-wide counters shown on the dashboard header."""
    total_projects: int = 0
    active_projects: int = 0
    total_consultant_fees: float = 0
    pending_submissions: int = 0
    approved_submissions: int = 0


class ProjectFinancials(SQLModel):
    """
    Consultant fee breakdown for one project.

    paid_fees counts fees of approved submissions, it is not based on Payment
    records.
    """
    total_fees: float = 0
    paid_fees: float = 0
    pending_fees: float = 0


class ProjectFeeBreakdown(ProjectFinancials):
    project_id: str
    title: str
    color: str
    status: ProjectStatus


class PortfolioFees(SQLModel):
    total_budget: float = 0
    total_consultant_fees: float = 0
    paid_fees: float = 0
    pending_fees: float = 0


class PortfolioOverview(SQLModel):
    fees: PortfolioFees
    projects: List[ProjectFeeBreakdown]


class ProjectCardStats(SQLModel):
    total_fees: float = 0
    pending_submissions: int = 0
    approved_submissions: int = 0


class LedgerTotals(SQLModel):
    total_invoiced: float = 0
    total_received: float = 0
    total_outstanding: float = 0


class SubmissionStats(SQLModel):
    total: int = 0
    pending: int = 0
    approved: int = 0
    total_fees: float = 0


class TimelineEntry(Submission):
    """A submission flattened with the context of its owning project."""
    project_id: str
    project_title: str
    project_color: Optional[str] = None
