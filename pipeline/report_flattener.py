"""Report flatteners - collect same-kind items across provider views.

Each flattener narrows the report to the selected bureau, then walks the
remaining provider views in order and concatenates the named
sub-collections of each view. Items are returned raw (un-normalized).

A missing or malformed report never raises; it flattens to [].
Only an unknown bureau selector raises (InvalidBureauError).
"""

import logging
from typing import Any, List, Sequence

from schemas.bureau import BureauSelector
from pipeline.bureau_filter import filter_provider_views
from utils.payload import get_list

logger = logging.getLogger(__name__)

# Sub-collection keys per kind, in per-view concatenation order
ACCOUNT_SECTIONS = ("revolvingAccounts", "installmentAccounts", "mortgageAccounts")
INQUIRY_SECTIONS = ("inquiries",)
# Collections are flattened separately so they are never counted twice
PUBLIC_RECORD_SECTIONS = ("publicRecords", "bankruptcies", "liens", "judgments")
COLLECTION_SECTIONS = ("collections",)


def get_provider_views(raw_report: Any, selector: BureauSelector = None) -> List[Any]:
    """Filtered provider views of a report, or [] when the report has none."""
    if not isinstance(raw_report, dict):
        return []
    views = raw_report.get("providerViews")
    if not isinstance(views, list):
        return []
    return filter_provider_views(views, selector)


def _flatten(raw_report: Any, selector: BureauSelector, sections: Sequence[str]) -> List[Any]:
    items: List[Any] = []
    for view in get_provider_views(raw_report, selector):
        for section in sections:
            items.extend(get_list(view, section))
    return items


def flatten_accounts(raw_report: Any, selector: BureauSelector = None) -> List[Any]:
    """Revolving, then installment, then mortgage accounts, view by view."""
    accounts = _flatten(raw_report, selector, ACCOUNT_SECTIONS)
    logger.debug(f"Flattened {len(accounts)} accounts")
    return accounts


def flatten_inquiries(raw_report: Any, selector: BureauSelector = None) -> List[Any]:
    return _flatten(raw_report, selector, INQUIRY_SECTIONS)


def flatten_public_records(raw_report: Any, selector: BureauSelector = None) -> List[Any]:
    """Public records, bankruptcies, liens and judgments, view by view."""
    return _flatten(raw_report, selector, PUBLIC_RECORD_SECTIONS)


def flatten_collections(raw_report: Any, selector: BureauSelector = None) -> List[Any]:
    return _flatten(raw_report, selector, COLLECTION_SECTIONS)
