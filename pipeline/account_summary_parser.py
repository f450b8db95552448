"""Account summary parsing.

Reads the bureau-computed per-type aggregates at
providerViews[].summary.{revolving,mortgage,installment,other}Accounts.
"""

from typing import Any, Dict, Optional

from features.credit_metrics import AccountTypeStats
from utils.payload import get_dict, get_number, round_half_up

SUMMARY_SECTIONS = {
    "revolving": "revolvingAccounts",
    "mortgage": "mortgageAccounts",
    "installment": "installmentAccounts",
    "other": "otherAccounts",
}


def parse_type_summary(section: Optional[dict]) -> AccountTypeStats:
    """Stats for one account-type section. Missing fields read as 0."""
    if section is None:
        return AccountTypeStats()

    return AccountTypeStats(
        open=int(get_number(section, "totalAccounts") or 0),
        with_balance=int(get_number(section, "totalAccountsWithBalance") or 0),
        total_balance=get_number(section, "balance") or 0.0,
        available=get_number(section, "available") or 0.0,
        credit_limit=get_number(section, "creditLimit") or 0.0,
        debt_to_credit=round_half_up(get_number(section, "debtToCreditRatio") or 0.0),
        payment=get_number(section, "monthlyPaymentAmount") or 0.0,
    )


def parse_account_summary(summary: Any) -> Optional[Dict[str, AccountTypeStats]]:
    """Per-type stats keyed by revolving / mortgage / installment / other.

    Returns None when there is no summary at all.
    """
    if not isinstance(summary, dict):
        return None
    return {
        name: parse_type_summary(get_dict(summary, key))
        for name, key in SUMMARY_SECTIONS.items()
    }
