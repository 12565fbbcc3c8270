from fastapi import APIRouter, Depends

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import FinancialSummary, PortfolioOverview, User
from studio_dash.services import aggregation

router = APIRouter()


@router.get("/summary", response_model=FinancialSummary)
def read_summary(
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Portfolio counters: projects, active projects, consultant fees and
    submission status totals.
    """
    return aggregation.compute_financial_summary(store.state.projects)


@router.get("/overview", response_model=PortfolioOverview)
def read_overview(
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Budget and fee totals plus per-project fee breakdowns, largest first.
    """
    return aggregation.compute_portfolio_overview(store.state.projects)
