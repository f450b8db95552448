"""Derogatory mark summary definition."""

from dataclasses import dataclass
from enum import Enum


class DerogatorySeverity(str, Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    SEVERE = "severe"


@dataclass(frozen=True)
class DerogatoryMarksSummary:
    total_count: int
    late_payments: int
    collections: int
    public_records: int
    charge_offs: int
    negative_accounts: int
    estimated_score_impact: int
    severity: DerogatorySeverity = DerogatorySeverity.NONE
