"""Main entry point for the Credit Report Reconciliation Engine."""

import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.bureau_loader import get_bureau_config
from config.settings import DEFAULT_BUREAU, LOG_LEVEL, VERBOSE_MODE
from data.loader import get_report_summary, load_report
from pipeline import build_credit_report
from schemas.bureau import Bureau, InvalidBureauError
from schemas.score_category import get_score_category_display_name
from utils.helpers import format_currency, format_percent, mask_identifier, print_header, print_section


# =============================================================================
# DEMOS
# =============================================================================

def demo_bureau_view(report: dict, bureau: str, score: int = None):
    """Print the reconciled view for one bureau selection."""
    view = build_credit_report(report, bureau, score=score)
    metrics = view.metrics

    config = get_bureau_config(view.bureau.value)
    print_header(f"Credit Report - {config.display_name if config else 'All bureaus'}")

    print_section("Metrics")
    print(f"Utilization:        {format_percent(metrics.utilization_rate)}")
    print(f"On-time payments:   {metrics.on_time_percentage}%")
    print(f"Total accounts:     {metrics.total_accounts} ({metrics.open_accounts} open)")
    print(f"Total balance:      {format_currency(metrics.total_balance)}")
    print(f"Total credit limit: {format_currency(metrics.total_credit_limit)}")
    print(f"Available credit:   {format_currency(metrics.available_credit)}")
    print(f"Avg account age:    {metrics.average_account_age} months")
    if view.score_category is not None:
        print(f"Score:              {view.score} ({get_score_category_display_name(view.score_category)})")

    print_section("Accounts")
    for account in view.accounts:
        print(
            f"  {account.name} [{account.account_type.value}] "
            f"{mask_identifier(account.account_number)} - {format_currency(account.balance)}"
        )

    if view.derogatory_marks is not None:
        print_section("Derogatory marks")
        marks = view.derogatory_marks
        print(f"  {marks.total_count} item(s), severity {marks.severity.value}, "
              f"est. impact -{marks.estimated_score_impact} pts")

    if VERBOSE_MODE and isinstance(view.identity, dict):
        print_section("Identity fields")
        print("  " + ", ".join(sorted(view.identity.keys())))


def demo_all_bureaus(report: dict):
    """Print the view for each bureau and for the merged selection."""
    for bureau in Bureau:
        demo_bureau_view(report, bureau.value)
        print()


# =============================================================================
# MAIN
# =============================================================================

def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    path = sys.argv[1] if len(sys.argv) > 1 else None
    bureau = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_BUREAU
    score = int(sys.argv[3]) if len(sys.argv) > 3 else None

    report = load_report(path)
    print(get_report_summary(report))
    print()

    if bureau == "each":
        demo_all_bureaus(report)
    else:
        demo_bureau_view(report, bureau, score=score)


if __name__ == "__main__":
    try:
        main()
    except InvalidBureauError as e:
        print(f"\nError: {e}")
        print(f"Valid bureaus: {', '.join(b.value for b in Bureau)}, each")
        sys.exit(2)
