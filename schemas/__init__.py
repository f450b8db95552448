"""Schemas for the credit report pipeline."""

from .bureau import Bureau, InvalidBureauError, parse_bureau
from .credit_account import AccountStatus, AccountType, CanonicalAccount, PaymentRecord, PaymentStatus
from .score_category import ScoreCategory

__all__ = [
    "Bureau",
    "InvalidBureauError",
    "parse_bureau",
    "AccountStatus",
    "AccountType",
    "CanonicalAccount",
    "PaymentRecord",
    "PaymentStatus",
    "ScoreCategory",
]
