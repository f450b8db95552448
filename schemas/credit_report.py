"""Credit report view - the bureau-selected state of one report.

This module defines the composite object produced for a (report, bureau)
pair. Raw sections are mapped to their schema objects; identity stays in
the bureau's own field layout.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from schemas.bureau import Bureau
from schemas.credit_account import CanonicalAccount
from schemas.credit_records import CollectionItem, CreditInquiry, PublicRecord
from schemas.score_category import ScoreCategory
from features.credit_metrics import AccountTypeStats, DerivedMetrics
from features.derogatory_features import DerogatoryMarksSummary


@dataclass
class CreditReportView:
    bureau: Bureau
    as_of: date
    accounts: List[CanonicalAccount] = field(default_factory=list)
    inquiries: List[CreditInquiry] = field(default_factory=list)
    public_records: List[PublicRecord] = field(default_factory=list)
    collections: List[CollectionItem] = field(default_factory=list)
    identity: Optional[Any] = None
    metrics: DerivedMetrics = field(default_factory=DerivedMetrics)
    score: Optional[int] = None
    score_category: Optional[ScoreCategory] = None
    derogatory_marks: Optional[DerogatoryMarksSummary] = None
    summary_stats: Optional[Dict[str, AccountTypeStats]] = None
    warnings: List[str] = field(default_factory=list)
