"""Account mapper - raw bureau account record to CanonicalAccount.

All logic is deterministic. The mapper never fails on a malformed record;
every missing field falls back to the CanonicalAccount default.
"""

import re
from typing import Any, Dict, Optional

from schemas.credit_account import AccountStatus, AccountType, CanonicalAccount
from pipeline.payment_history_parser import parse_payment_history
from utils.payload import extract_amount, first_present, get_path, get_str, parse_date, safe_float

# Normalized (lowercase, no separators) raw type -> canonical AccountType
ACCOUNT_TYPE_ALIASES: Dict[str, AccountType] = {
    "creditcard": AccountType.CREDIT_CARD,
    "cc": AccountType.CREDIT_CARD,
    "revolving": AccountType.CREDIT_CARD,
    "chargeaccount": AccountType.CREDIT_CARD,
    "checkcreditorlineofcredit": AccountType.CREDIT_CARD,
    "mortgage": AccountType.MORTGAGE,
    "homeloan": AccountType.MORTGAGE,
    "realestatejuniorliens": AccountType.MORTGAGE,
    "autoloan": AccountType.AUTO_LOAN,
    "auto": AccountType.AUTO_LOAN,
    "carloan": AccountType.AUTO_LOAN,
    "personalloan": AccountType.PERSONAL_LOAN,
    "personal": AccountType.PERSONAL_LOAN,
    "installment": AccountType.PERSONAL_LOAN,
    "studentloan": AccountType.STUDENT_LOAN,
    "student": AccountType.STUDENT_LOAN,
}

# Normalized raw payment status -> canonical AccountStatus
ACCOUNT_STATUS_ALIASES: Dict[str, AccountStatus] = {
    "current": AccountStatus.CURRENT,
    "ok": AccountStatus.CURRENT,
    "good": AccountStatus.CURRENT,
    "paysasagreed": AccountStatus.CURRENT,
    # Closed accounts commonly report "unavailable"
    "unavailable": AccountStatus.CURRENT,
    "late": AccountStatus.LATE,
    "late30": AccountStatus.LATE,
    "late60": AccountStatus.LATE,
    "late90": AccountStatus.LATE,
    "late30days": AccountStatus.LATE,
    "late60days": AccountStatus.LATE,
    "late90days": AccountStatus.LATE,
    "30dayslate": AccountStatus.LATE,
    "60dayslate": AccountStatus.LATE,
    "90dayslate": AccountStatus.LATE,
    "delinquent": AccountStatus.DELINQUENT,
    "chargeoff": AccountStatus.DELINQUENT,
    "chargedoff": AccountStatus.DELINQUENT,
    "closed": AccountStatus.CLOSED,
}

_SEPARATORS = re.compile(r"[_\s-]")


def _normalize_key(value: Any) -> str:
    if isinstance(value, dict):
        value = value.get("code") or value.get("description")
    if not isinstance(value, str):
        return ""
    return _SEPARATORS.sub("", value.lower())


def normalize_account_type(raw_type: Any) -> AccountType:
    """Normalize a raw account type to AccountType. Unknown types are personal loans."""
    return ACCOUNT_TYPE_ALIASES.get(_normalize_key(raw_type), AccountType.PERSONAL_LOAN)


def normalize_account_status(raw_status: Any) -> AccountStatus:
    """Normalize a raw payment status to AccountStatus. Unknown statuses are current."""
    return ACCOUNT_STATUS_ALIASES.get(_normalize_key(raw_status), AccountStatus.CURRENT)


def _account_id(raw: Dict[str, Any], index: int) -> str:
    for key in ("id", "accountId"):
        value = raw.get(key)
        if isinstance(value, (str, int)) and not isinstance(value, bool) and str(value):
            return str(value)
    return f"account_{index}"


def map_account(raw: Any, index: int = 0) -> CanonicalAccount:
    """Map one raw bureau account to a CanonicalAccount.

    Args:
        raw: Raw account dict from a provider view.
        index: Position in the flattened sequence, used for a stable
            fallback id when the record carries none.

    Returns:
        A new CanonicalAccount.
    """
    if not isinstance(raw, dict):
        return CanonicalAccount(id=f"account_{index}")

    balance = first_present([
        lambda: extract_amount(raw.get("balanceAmount")),
        lambda: extract_amount(raw.get("balance")),
    ]) or 0.0
    limit = first_present([
        lambda: extract_amount(raw.get("creditLimitAmount")),
        lambda: extract_amount(raw.get("creditLimit")),
    ])
    credit_limit: Optional[float] = limit if limit is not None and limit > 0 else None

    status = normalize_account_status(
        raw.get("accountStatus") or raw.get("paymentStatus") or raw.get("status")
    )
    if raw.get("accountOpen") is False:
        status = AccountStatus.CLOSED

    monthly_payment = extract_amount(raw.get("monthlyPayment"))
    minimum_payment = first_present([
        lambda: extract_amount(raw.get("minimumPayment")),
        lambda: monthly_payment,
    ])

    return CanonicalAccount(
        id=_account_id(raw, index),
        name=(
            get_str(raw, "accountName")
            or get_str(raw, "creditorName")
            or get_str(raw, "name")
            or "Unknown Creditor"
        ),
        account_type=normalize_account_type(
            raw.get("accountType") or raw.get("type") or get_path(raw, "loanType", "code")
        ),
        account_number=get_str(raw, "accountNumber") or "N/A",
        balance=balance,
        credit_limit=credit_limit,
        credit_utilization=balance / credit_limit * 100 if credit_limit else None,
        status=status,
        open_date=parse_date(raw.get("dateOpened")),
        last_payment_date=parse_date(raw.get("lastActivityDate")),
        minimum_payment=minimum_payment or 0.0,
        monthly_payment=monthly_payment,
        payment_history=parse_payment_history(raw.get("paymentHistory")),
        on_time_percentage=safe_float(raw.get("onTimePaymentPercentage")),
        is_negative=raw.get("isNegative") is True,
    )
