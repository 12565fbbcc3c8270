"""
Aggregation Engine

Pure functions deriving financial figures from projects, their submissions and
the payment ledgers. Nothing here mutates its input.
"""
from typing import Iterable, List, Sequence

from studio_dash.models.finance import FinanceRecord, Payment
from studio_dash.models.project import (
    ACTIVE_PROJECT_STATUSES,
    Project,
    Submission,
    SubmissionStatus,
)
from studio_dash.models.summary import (
    FinancialSummary,
    LedgerTotals,
    PortfolioFees,
    PortfolioOverview,
    ProjectCardStats,
    ProjectFeeBreakdown,
    ProjectFinancials,
    SubmissionStats,
)


def _all_submissions(projects: Iterable[Project]) -> List[Submission]:
    return [submission for project in projects for submission in project.submissions]


def compute_financial_summary(projects: Sequence[Project]) -> FinancialSummary:
    """
    Portfolio-wide counters for the dashboard header.

    An empty project list yields an all-zero summary.
    """
    submissions = _all_submissions(projects)
    return FinancialSummary(
        total_projects=len(projects),
        active_projects=sum(1 for p in projects if p.status in ACTIVE_PROJECT_STATUSES),
        total_consultant_fees=sum(s.consultant_fee for s in submissions),
        pending_submissions=sum(1 for s in submissions if s.status == SubmissionStatus.PENDING),
        approved_submissions=sum(1 for s in submissions if s.status == SubmissionStatus.APPROVED),
    )


def compute_project_financials(project: Project) -> ProjectFinancials:
    """
    Fee breakdown for one project.

    A fee counts as paid once its submission is approved; Payment records are
    not consulted.
    """
    total_fees = sum(s.consultant_fee for s in project.submissions)
    paid_fees = sum(
        s.consultant_fee for s in project.submissions
        if s.status == SubmissionStatus.APPROVED
    )
    return ProjectFinancials(
        total_fees=total_fees,
        paid_fees=paid_fees,
        pending_fees=total_fees - paid_fees,
    )


def recompute_finance_record(record: FinanceRecord, payments: Sequence[Payment]) -> FinanceRecord:
    """
    Return a copy of `record` holding `payments` with re-derived totals.
    """
    total_amount = sum(p.amount for p in payments)
    paid_amount = sum(p.paid_amount for p in payments)
    return record.model_copy(update={
        "payments": list(payments),
        "total_amount": total_amount,
        "paid_amount": paid_amount,
        "balance": total_amount - paid_amount,
    })


def compute_portfolio_fees(projects: Sequence[Project]) -> PortfolioFees:
    per_project = [compute_project_financials(p) for p in projects]
    total_fees = sum(f.total_fees for f in per_project)
    paid_fees = sum(f.paid_fees for f in per_project)
    return PortfolioFees(
        total_budget=sum(p.total_budget or 0 for p in projects),
        total_consultant_fees=total_fees,
        paid_fees=paid_fees,
        pending_fees=total_fees - paid_fees,
    )


def rank_projects_by_fees(projects: Sequence[Project]) -> List[ProjectFeeBreakdown]:
    """Per-project fee breakdowns, largest total fees first."""
    breakdowns = [
        ProjectFeeBreakdown(
            project_id=project.id,
            title=project.title,
            color=project.color,
            status=project.status,
            **compute_project_financials(project).model_dump(),
        )
        for project in projects
    ]
    return sorted(breakdowns, key=lambda b: b.total_fees, reverse=True)


def compute_portfolio_overview(projects: Sequence[Project]) -> PortfolioOverview:
    return PortfolioOverview(
        fees=compute_portfolio_fees(projects),
        projects=rank_projects_by_fees(projects),
    )


def summarize_project_card(project: Project) -> ProjectCardStats:
    return ProjectCardStats(
        total_fees=sum(s.consultant_fee for s in project.submissions),
        pending_submissions=sum(
            1 for s in project.submissions if s.status == SubmissionStatus.PENDING
        ),
        approved_submissions=sum(
            1 for s in project.submissions if s.status == SubmissionStatus.APPROVED
        ),
    )


def compute_ledger_totals(records: Sequence[FinanceRecord]) -> LedgerTotals:
    return LedgerTotals(
        total_invoiced=sum(r.total_amount for r in records),
        total_received=sum(r.paid_amount for r in records),
        total_outstanding=sum(r.balance for r in records),
    )


def compute_submission_stats(submissions: Sequence[Submission]) -> SubmissionStats:
    return SubmissionStats(
        total=len(submissions),
        pending=sum(1 for s in submissions if s.status == SubmissionStatus.PENDING),
        approved=sum(1 for s in submissions if s.status == SubmissionStatus.APPROVED),
        total_fees=sum(s.consultant_fee for s in submissions),
    )
