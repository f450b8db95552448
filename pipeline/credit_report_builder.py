"""Credit report builder - deterministic assembly of a bureau-selected view.

Orchestrates flattening, mapping, identity reconciliation and metric
derivation to produce a CreditReportView. Nothing is cached; every call
recomputes from the raw payload.
"""

import logging
from datetime import date
from typing import Any, List, Optional

from schemas.bureau import BureauSelector, parse_bureau
from schemas.credit_report import CreditReportView
from pipeline.bureau_filter import get_provider_code
from pipeline.report_flattener import (
    flatten_accounts,
    flatten_collections,
    flatten_inquiries,
    flatten_public_records,
    get_provider_views,
)
from pipeline.account_mapper import map_account
from pipeline.record_mappers import map_collection, map_inquiry, map_public_record
from pipeline.identity_reconciler import reconcile_identity
from pipeline.metrics_deriver import derive_metrics
from pipeline.score_categorizer import categorize_score
from pipeline.account_summary_parser import parse_account_summary
from pipeline.derogatory_marks import calculate_derogatory_marks
from utils.payload import get_dict

logger = logging.getLogger(__name__)


def select_bureau_summary(raw_report: Any, selector: BureauSelector = None) -> Optional[dict]:
    """The selected bureau's summary dict.

    Bureau aggregates are never combined across bureaus, so "all" has no
    summary and its metrics are recomputed from the merged accounts.
    """
    if get_provider_code(selector) is None:
        return None
    views = get_provider_views(raw_report, selector)
    if not views:
        return None
    return get_dict(views[0], "summary")


def _validate_view(view: CreditReportView) -> List[str]:
    """Run consistency checks on the assembled view. Returns list of warnings."""
    warnings = []
    metrics = view.metrics

    if metrics.available_credit < 0:
        warnings.append(f"Balance exceeds credit limit by {-metrics.available_credit:,.2f}")

    if metrics.utilization_rate > 1:
        warnings.append(f"Utilization above 100%: {metrics.utilization_rate:.2%}")

    for account in view.accounts:
        if account.balance < 0:
            warnings.append(f"Negative balance on account {account.id}")

    return warnings


def build_credit_report(
    raw_report: Any,
    selector: BureauSelector = None,
    score: Optional[int] = None,
    as_of: Optional[date] = None,
) -> CreditReportView:
    """Build the bureau-selected view of a raw multi-bureau report.

    Steps:
        1. Resolve the selector and the bureau's summary
        2. Flatten and map accounts, inquiries, public records, collections
        3. Reconcile identity across the selected bureaus
        4. Derive metrics and categorize the score
        5. Summarize derogatory marks and per-type stats (fail-soft)
        6. Validate (log warnings, return the view)

    Args:
        raw_report: Raw report payload with a ``providerViews`` list.
        selector: Bureau selector; None or "all" for every bureau.
        score: Optional numeric credit score to categorize.
        as_of: Reference date for account age. Defaults to today.

    Returns:
        CreditReportView for the selection.

    Raises:
        InvalidBureauError: if the selector names no known bureau.
    """
    bureau = parse_bureau(selector)
    as_of = as_of or date.today()

    # 1. Summary (single bureau only)
    summary = select_bureau_summary(raw_report, bureau)

    # 2. Sections
    accounts = [map_account(raw, i) for i, raw in enumerate(flatten_accounts(raw_report, bureau))]
    inquiries = [map_inquiry(raw) for raw in flatten_inquiries(raw_report, bureau)]
    public_records = [map_public_record(raw) for raw in flatten_public_records(raw_report, bureau)]
    collections = [map_collection(raw) for raw in flatten_collections(raw_report, bureau)]

    if not accounts:
        logger.warning(f"No accounts found for bureau selection '{bureau.value}'")

    # 3. Identity
    identity = reconcile_identity(raw_report, bureau)

    # 4. Metrics and score
    metrics = derive_metrics(accounts, summary, as_of=as_of)
    score_category = categorize_score(score) if score is not None else None

    view = CreditReportView(
        bureau=bureau,
        as_of=as_of,
        accounts=accounts,
        inquiries=inquiries,
        public_records=public_records,
        collections=collections,
        identity=identity,
        metrics=metrics,
        score=score,
        score_category=score_category,
    )

    # 5. Optional sections (fail-soft)
    try:
        view.derogatory_marks = calculate_derogatory_marks(
            accounts, public_records, collections, summary
        )
    except Exception as e:
        logger.warning(f"Derogatory marks calculation failed for '{bureau.value}': {e}")

    try:
        view.summary_stats = parse_account_summary(summary)
    except Exception as e:
        logger.warning(f"Account summary parsing failed for '{bureau.value}': {e}")

    # 6. Validate (fail-soft: log warnings, return the view)
    view.warnings = _validate_view(view)
    for w in view.warnings:
        logger.warning(f"Credit report validation [{bureau.value}]: {w}")

    return view
