"""
Finance Model Module

This module defines the per-project payment ledger (FinanceRecord) and the
Payments it aggregates.
"""
from enum import Enum
from typing import List, Optional
from pydantic import field_validator
from sqlmodel import SQLModel, Field


class PaymentStatus(str, Enum):
    """
    Payment state as set by the caller.

    The status is not checked against amount and paid_amount, a payment may be
    marked paid while only partially settled.
    """
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    OVERDUE = "overdue"


class PaymentType(str, Enum):
    DEPOSIT = "deposit"
    MILESTONE = "milestone"
    FINAL = "final"
    CONSULTANT_FEE = "consultant-fee"
    MATERIAL = "material"
    OTHER = "other"


class PaymentBase(SQLModel):
    type: PaymentType = PaymentType.DEPOSIT
    description: str
    amount: float = 0
    paid_amount: float = 0
    status: PaymentStatus = PaymentStatus.PENDING

    # Calendar dates in ISO format (YYYY-MM-DD)
    due_date: Optional[str] = None
    paid_date: Optional[str] = None

    invoice_number: Optional[str] = None
    notes: Optional[str] = None


class Payment(PaymentBase):
    id: str
    project_id: str


class PaymentCreate(PaymentBase):
    """Properties to receive on payment creation. Id and project are assigned."""
    pass


class PaymentUpdate(SQLModel):
    """Every field optional; only fields explicitly set are merged."""
    type: Optional[PaymentType] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    paid_amount: Optional[float] = None
    status: Optional[PaymentStatus] = None
    due_date: Optional[str] = None
    paid_date: Optional[str] = None
    invoice_number: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("type", "description", "amount", "paid_amount", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class FinanceRecord(SQLModel):
    """
    Payment ledger for one project.

    Totals are derived from the payments:
        total_amount = sum of amount
        paid_amount = sum of paid_amount
        balance = total_amount - paid_amount
    """
    id: str
    project_id: str
    client_id: str
    payments: List[Payment] = Field(default_factory=list)
    total_amount: float = 0
    paid_amount: float = 0
    balance: float = 0
