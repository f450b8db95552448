"""Derived credit metric definitions.

DerivedMetrics holds the portfolio-level numbers computed for one bureau
selection. AccountTypeStats holds the bureau-reported aggregates for one
account type. These are primitive data points, recomputed on every call.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DerivedMetrics:
    utilization_rate: float = 0.0       # fraction, not clamped (> 1 when over limit)
    on_time_percentage: int = 0         # 0..100
    total_accounts: int = 0
    open_accounts: int = 0
    total_balance: float = 0.0
    total_credit_limit: float = 0.0
    available_credit: float = 0.0       # negative when balance exceeds limit
    average_account_age: int = 0        # months


@dataclass(frozen=True)
class AccountTypeStats:
    open: int = 0
    with_balance: int = 0
    total_balance: float = 0.0
    available: float = 0.0
    credit_limit: float = 0.0
    debt_to_credit: int = 0             # percent, rounded
    payment: float = 0.0
