"""Derogatory mark aggregation.

Counts negative items across accounts, public records and collections and
estimates their score impact. The bureau's own negative-account count is
authoritative when reported (even when 0).
"""

from typing import Optional, Sequence

from features.derogatory_features import DerogatoryMarksSummary, DerogatorySeverity
from schemas.credit_account import AccountStatus, CanonicalAccount, PaymentStatus
from schemas.credit_records import CollectionItem, PublicRecord
from utils.payload import get_number

# Approximate score points lost per item
LATE_PAYMENT_IMPACT = 15
COLLECTION_IMPACT = 80
CHARGE_OFF_IMPACT = 100
PUBLIC_RECORD_IMPACT = 120
MAX_SCORE_IMPACT = 200

_NEGATIVE_COUNT_SECTIONS = ("revolvingAccounts", "installmentAccounts", "mortgageAccounts")


def count_late_payments(account: CanonicalAccount) -> int:
    return sum(
        1 for record in account.payment_history
        if record.status in (PaymentStatus.LATE, PaymentStatus.MISSED)
    )


def _summary_negative_accounts(summary: Optional[dict]) -> Optional[int]:
    if not isinstance(summary, dict):
        return None
    total = get_number(summary, "totalNegativeAccounts")
    if total is not None:
        return int(total)
    return int(sum(
        get_number(summary, section, "totalNegativeAccounts") or 0
        for section in _NEGATIVE_COUNT_SECTIONS
    ))


def _severity(total: int, charge_offs: int, collections: int, public_records: int) -> DerogatorySeverity:
    if total == 0:
        return DerogatorySeverity.NONE
    if total <= 2 and not charge_offs and not collections and not public_records:
        return DerogatorySeverity.LOW
    if total <= 5 and charge_offs + collections + public_records <= 1:
        return DerogatorySeverity.MODERATE
    return DerogatorySeverity.SEVERE


def calculate_derogatory_marks(
    accounts: Sequence[CanonicalAccount],
    public_records: Sequence[PublicRecord] = (),
    collections: Sequence[CollectionItem] = (),
    summary: Optional[dict] = None,
) -> DerogatoryMarksSummary:
    """Summarize derogatory marks for one bureau selection.

    The total is negative accounts + collections + public records. Late
    payments and charge-offs are already reflected in negative accounts,
    so they only feed the score impact estimate.
    """
    late_payments = 0
    charge_offs = 0
    counted_negative = 0

    for account in accounts:
        if account.is_negative:
            counted_negative += 1
        if account.status == AccountStatus.DELINQUENT:
            charge_offs += 1
        account_late = count_late_payments(account)
        # Late status without history detail still counts once
        if account_late == 0 and account.status == AccountStatus.LATE:
            account_late = 1
        late_payments += account_late

    reported_negative = _summary_negative_accounts(summary)
    negative_accounts = reported_negative if reported_negative is not None else counted_negative

    collection_count = len(collections)
    public_record_count = len(public_records)
    total = negative_accounts + collection_count + public_record_count

    impact = (
        late_payments * LATE_PAYMENT_IMPACT
        + collection_count * COLLECTION_IMPACT
        + charge_offs * CHARGE_OFF_IMPACT
        + public_record_count * PUBLIC_RECORD_IMPACT
    )

    return DerogatoryMarksSummary(
        total_count=total,
        late_payments=late_payments,
        collections=collection_count,
        public_records=public_record_count,
        charge_offs=charge_offs,
        negative_accounts=negative_accounts,
        estimated_score_impact=min(impact, MAX_SCORE_IMPACT),
        severity=_severity(total, charge_offs, collection_count, public_record_count),
    )
