"""Canonical credit account schema.

Every raw bureau account record (revolving, installment or mortgage) is
normalized into a CanonicalAccount before any metric is derived from it.
Instances are rebuilt on each call and never mutated.
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountType(str, Enum):
    CREDIT_CARD = "credit_card"
    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    PERSONAL_LOAN = "personal_loan"
    STUDENT_LOAN = "student_loan"


class AccountStatus(str, Enum):
    CURRENT = "current"
    LATE = "late"
    DELINQUENT = "delinquent"
    CLOSED = "closed"


class PaymentStatus(str, Enum):
    CURRENT = "current"
    LATE = "late"
    MISSED = "missed"
    UNKNOWN = "unknown"


class PaymentRecord(BaseModel):
    """One reported month of an account's payment history."""
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    status: PaymentStatus


class CanonicalAccount(BaseModel):
    """Normalized representation of a raw bureau account."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = "Unknown Creditor"
    account_type: AccountType = AccountType.PERSONAL_LOAN
    account_number: str = "N/A"
    balance: float = 0.0
    credit_limit: Optional[float] = None
    credit_utilization: Optional[float] = Field(
        default=None, description="Balance as a percent of the limit, when a limit exists"
    )
    status: AccountStatus = AccountStatus.CURRENT
    open_date: Optional[date] = None
    last_payment_date: Optional[date] = None
    minimum_payment: float = 0.0
    monthly_payment: Optional[float] = None
    payment_history: List[PaymentRecord] = Field(default_factory=list)
    on_time_percentage: Optional[float] = Field(
        default=None, description="Bureau-supplied on-time payment percent, if any"
    )
    is_negative: bool = False
