"""Metrics derivation from canonical accounts and bureau summary aggregates.

Each metric resolves through an ordered list of candidates; the first
candidate that yields a value wins:

    1. bureau-reported aggregate (summary.totalOpenAccounts, then
       summary.revolvingAccounts)
    2. value recomputed locally from the canonical accounts
    3. zero default

All logic is deterministic: given the same accounts, summary and as_of
date the result is identical. Every output is finite.
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Sequence

from config.settings import DAYS_PER_MONTH
from features.credit_metrics import DerivedMetrics
from schemas.credit_account import AccountStatus, CanonicalAccount
from pipeline.payment_history_parser import on_time_percentage_from_entries
from utils.payload import finite_or_zero, first_present, get_number, round_half_up

logger = logging.getLogger(__name__)

# Summary sections consulted for portfolio aggregates, in precedence order
AGGREGATE_SECTIONS = ("totalOpenAccounts", "revolvingAccounts")

# Summary sections summed for the bureau-reported account count
COUNT_SECTIONS = ("revolvingAccounts", "installmentAccounts", "mortgageAccounts")

Candidate = Callable[[], Optional[float]]


# =============================================================================
# CANDIDATE CHAINS
# =============================================================================

def _summary_candidates(summary: Optional[dict], field: str) -> List[Candidate]:
    return [
        (lambda section=section: get_number(summary, section, field))
        for section in AGGREGATE_SECTIONS
    ]


def balance_candidates(accounts: Sequence[CanonicalAccount], summary: Optional[dict]) -> List[Candidate]:
    return _summary_candidates(summary, "balance") + [
        lambda: sum(a.balance for a in accounts),
    ]


def credit_limit_candidates(accounts: Sequence[CanonicalAccount], summary: Optional[dict]) -> List[Candidate]:
    return _summary_candidates(summary, "creditLimit") + [
        lambda: sum(a.credit_limit or 0.0 for a in accounts),
    ]


def _local_utilization(accounts: Sequence[CanonicalAccount]) -> float:
    total_limit = sum(a.credit_limit or 0.0 for a in accounts)
    if total_limit == 0:
        return 0.0
    return sum(a.balance for a in accounts) / total_limit


def utilization_candidates(accounts: Sequence[CanonicalAccount], summary: Optional[dict]) -> List[Candidate]:
    bureau = [
        (lambda section=section: _percent_to_fraction(get_number(summary, section, "debtToCreditRatio")))
        for section in AGGREGATE_SECTIONS
    ]
    return bureau + [lambda: _local_utilization(accounts)]


def _percent_to_fraction(value: Optional[float]) -> Optional[float]:
    return None if value is None else value / 100


def _summary_account_count(summary: Optional[dict]) -> Optional[float]:
    counts = [get_number(summary, section, "totalAccounts") for section in COUNT_SECTIONS]
    reported = [c for c in counts if c is not None]
    return sum(reported) if reported else None


def total_account_candidates(accounts: Sequence[CanonicalAccount], summary: Optional[dict]) -> List[Candidate]:
    return [
        lambda: len(accounts) or None,
        lambda: _summary_account_count(summary),
    ]


def open_account_candidates(accounts: Sequence[CanonicalAccount], summary: Optional[dict]) -> List[Candidate]:
    return [
        lambda: get_number(summary, "totalOpenAccounts", "totalAccounts"),
        lambda: sum(1 for a in accounts if a.status != AccountStatus.CLOSED),
    ]


def _bureau_on_time_average(accounts: Sequence[CanonicalAccount]) -> Optional[float]:
    # Accounts without a bureau figure are excluded from both sides of the mean
    reported = [a.on_time_percentage for a in accounts if a.on_time_percentage is not None]
    if not reported:
        return None
    return sum(reported) / len(reported)


def on_time_candidates(accounts: Sequence[CanonicalAccount]) -> List[Candidate]:
    return [
        lambda: _bureau_on_time_average(accounts),
        lambda: on_time_percentage_from_entries(
            [record for a in accounts for record in a.payment_history]
        ),
    ]


def _local_average_age(accounts: Sequence[CanonicalAccount], as_of: date) -> Optional[float]:
    ages = [
        (as_of - a.open_date).days / DAYS_PER_MONTH
        for a in accounts
        if a.open_date is not None
    ]
    if not ages:
        return None
    return sum(ages) / len(ages)


def average_age_candidates(
    accounts: Sequence[CanonicalAccount], summary: Optional[dict], as_of: date
) -> List[Candidate]:
    return [
        lambda: get_number(summary, "averageAccountAgeMonths"),
        lambda: _local_average_age(accounts, as_of),
    ]


def resolve(candidates: Sequence[Candidate]) -> float:
    """First present candidate, made finite; 0 when none yields a value."""
    value = first_present(candidates)
    if value is None:
        return 0.0
    return finite_or_zero(float(value))


# =============================================================================
# DERIVATION
# =============================================================================

def derive_metrics(
    accounts: Sequence[CanonicalAccount],
    bureau_summary: Optional[dict] = None,
    as_of: Optional[date] = None,
) -> DerivedMetrics:
    """Derive portfolio metrics for one bureau selection.

    Args:
        accounts: Canonical accounts from the selected provider views.
        bureau_summary: The selected bureau's raw ``summary`` dict, or None
            to recompute every metric from the accounts.
        as_of: Reference date for account age. Defaults to today.

    Returns:
        DerivedMetrics. available_credit is always the resolved limit minus
        the resolved balance, and may be negative.
    """
    as_of = as_of or date.today()
    summary = bureau_summary if isinstance(bureau_summary, dict) else None

    total_balance = resolve(balance_candidates(accounts, summary))
    total_credit_limit = resolve(credit_limit_candidates(accounts, summary))

    metrics = DerivedMetrics(
        utilization_rate=resolve(utilization_candidates(accounts, summary)),
        on_time_percentage=round_half_up(resolve(on_time_candidates(accounts))),
        total_accounts=int(resolve(total_account_candidates(accounts, summary))),
        open_accounts=int(resolve(open_account_candidates(accounts, summary))),
        total_balance=total_balance,
        total_credit_limit=total_credit_limit,
        available_credit=finite_or_zero(total_credit_limit - total_balance),
        average_account_age=round_half_up(resolve(average_age_candidates(accounts, summary, as_of))),
    )

    logger.debug(
        f"Derived metrics: {metrics.total_accounts} accounts, "
        f"utilization {metrics.utilization_rate:.4f}, on-time {metrics.on_time_percentage}%"
    )
    return metrics
