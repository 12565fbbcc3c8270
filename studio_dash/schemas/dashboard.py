"""
Response schemas for the composite dashboard views.
"""
from typing import List
from pydantic import BaseModel

from studio_dash.models import (
    FinanceRecord,
    LedgerTotals,
    ProjectCardStats,
    ProjectFinancials,
    SubmissionStats,
    TimelineEntry,
)


class ProjectFinancialsRead(BaseModel):
    project_id: str
    financials: ProjectFinancials
    card: ProjectCardStats


class SubmissionTimeline(BaseModel):
    stats: SubmissionStats
    entries: List[TimelineEntry]


class FinanceOverview(BaseModel):
    """Ledgers with payments narrowed to the requested status."""
    totals: LedgerTotals
    records: List[FinanceRecord]
