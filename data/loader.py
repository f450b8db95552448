"""
Report payload loading.
Reads a fetched multi-bureau report from disk; the engine itself never does I/O.
"""

import json
import logging
from typing import Any, Dict, Optional

from config.settings import SAMPLE_REPORT_FILE
from pipeline.report_flattener import ACCOUNT_SECTIONS
from utils.payload import get_list

logger = logging.getLogger(__name__)


def load_report(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a raw report payload from a JSON file.

    Args:
        path: JSON file path. Defaults to the bundled sample report.

    Returns:
        The decoded payload
    """
    report_path = path or SAMPLE_REPORT_FILE
    with open(report_path, "r") as f:
        report = json.load(f)

    views = report.get("providerViews") if isinstance(report, dict) else None
    view_count = len(views) if isinstance(views, list) else 0
    logger.info(f"Loaded report with {view_count} provider views from {report_path}")
    return report


def get_report_summary(report: Dict[str, Any]) -> str:
    """
    Generate a short summary of a raw report payload.

    Returns:
        String with per-bureau section counts
    """
    views = report.get("providerViews") if isinstance(report, dict) else None
    if not isinstance(views, list):
        return "No provider views in report"

    lines = [f"Provider views: {len(views)}"]
    for view in views:
        if not isinstance(view, dict):
            continue
        code = view.get("provider", view.get("providerCode", "?"))
        accounts = sum(len(get_list(view, key)) for key in ACCOUNT_SECTIONS)
        inquiries = len(get_list(view, "inquiries"))
        lines.append(f"  {code}: {accounts} accounts, {inquiries} inquiries")
    return "\n".join(lines)
