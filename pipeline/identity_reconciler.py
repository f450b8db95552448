"""Identity reconciliation across bureau subjects.

Personal data lives at providerViews[].summary.subject. The first selected
view with a subject seeds the result; later views may only fill three
gaps (date of birth, previous addresses, current address). Employment
history and every other field come from the seed view alone, because
each bureau's employment records are reported independently and are not
comparable across bureaus.
"""

import copy
import logging
from typing import Any, Dict, Optional

from schemas.bureau import BureauSelector
from pipeline.report_flattener import get_provider_views
from utils.payload import get_dict

logger = logging.getLogger(__name__)


def _is_present(fields: Dict[str, Any], key: str) -> bool:
    # Presence, not truthiness: a dateOfBirth of 0 (1 Jan 1970) is a real value
    return key in fields and fields[key] is not None


def _merge_gaps(result: Dict[str, Any], subject: Dict[str, Any]) -> None:
    if not _is_present(result, "dateOfBirth") and _is_present(subject, "dateOfBirth"):
        result["dateOfBirth"] = copy.deepcopy(subject["dateOfBirth"])

    previous = subject.get("previousAddresses")
    if not result.get("previousAddresses") and isinstance(previous, list) and previous:
        result["previousAddresses"] = copy.deepcopy(previous)

    if not _is_present(result, "currentAddress") and _is_present(subject, "currentAddress"):
        result["currentAddress"] = copy.deepcopy(subject["currentAddress"])


def reconcile_identity(raw_report: Any, selector: BureauSelector = None) -> Optional[Any]:
    """Merge subject data across the selected provider views.

    Args:
        raw_report: Raw multi-bureau report payload.
        selector: Bureau selector; "all"/None merges every bureau.

    Returns:
        A new dict (deep copy) with the merged subject fields, the report's legacy
        ``personalInfo`` value when no view carries a subject, or None.
    """
    result: Optional[Dict[str, Any]] = None
    sources = 0

    for view in get_provider_views(raw_report, selector):
        subject = get_dict(view, "summary", "subject")
        if subject is None:
            continue
        sources += 1
        if result is None:
            result = copy.deepcopy(subject)
        else:
            _merge_gaps(result, subject)

    if result is not None:
        logger.debug(f"Reconciled identity from {sources} bureau subject(s)")
        return result

    if isinstance(raw_report, dict) and "personalInfo" in raw_report:
        return copy.deepcopy(raw_report["personalInfo"])

    return None
