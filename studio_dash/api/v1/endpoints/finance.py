"""
Finance Endpoints Module

Payment ledgers per project. Ledger totals are always re-derived from the
payments after a payment is added or changed.
"""
import logging
from typing import Optional, Sequence
from fastapi import APIRouter, Depends, HTTPException

from studio_dash.api import deps
from studio_dash.db.store import StateStore
from studio_dash.models import FinanceRecord, PaymentCreate, PaymentStatus, PaymentUpdate, User
from studio_dash.schemas.dashboard import FinanceOverview
from studio_dash.services import aggregation, filters, mutations

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_record_or_404(records: Sequence[FinanceRecord], project_id: str) -> FinanceRecord:
    record = next((r for r in records if r.project_id == project_id), None)
    if record is None:
        raise HTTPException(status_code=404, detail="Finance record not found")
    return record


@router.get("", response_model=FinanceOverview)
def list_finance_records(
    status: Optional[PaymentStatus] = None,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Ledger totals plus every ledger with at least one payment in `status`.

    Without a status every ledger that has payments is listed. Totals always
    cover all ledgers.
    """
    records = store.state.finance_records
    wanted = status if status is not None else filters.ALL
    visible = []
    for record in records:
        payments = filters.filter_payments(record.payments, wanted)
        if payments:
            visible.append(record.model_copy(update={"payments": payments}))
    return FinanceOverview(totals=aggregation.compute_ledger_totals(records), records=visible)


@router.post("/{project_id}/payments", response_model=FinanceRecord, status_code=201)
def create_payment(
    project_id: str,
    payment_in: PaymentCreate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Record a payment against a project's ledger.

    Returns:
        FinanceRecord: The ledger with the new payment and updated totals
    """
    def add(records):
        _get_record_or_404(records, project_id)
        return mutations.add_payment(records, project_id, payment_in)

    state = store.apply("finance_records", add)
    logger.info("Payment added", extra={"project_id": project_id, "user_id": current_user.id})
    return _get_record_or_404(state.finance_records, project_id)


@router.patch("/{project_id}/payments/{payment_id}", response_model=FinanceRecord)
def update_payment(
    project_id: str,
    payment_id: str,
    payment_update: PaymentUpdate,
    store: StateStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Update a payment. The status is stored as given, it is not checked
    against the amounts.

    Raises:
        HTTPException 404: If the ledger or payment doesn't exist
    """
    def update(records):
        record = _get_record_or_404(records, project_id)
        if filters.find_by_id(record.payments, payment_id) is None:
            raise HTTPException(status_code=404, detail="Payment not found")
        return mutations.update_payment(records, project_id, payment_id, payment_update)

    state = store.apply("finance_records", update)
    logger.info("Payment updated", extra={"project_id": project_id, "record_id": payment_id})
    return _get_record_or_404(state.finance_records, project_id)
