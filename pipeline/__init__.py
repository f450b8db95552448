"""Pipeline module for multi-bureau credit report reconciliation."""

from .bureau_filter import filter_provider_views
from .report_flattener import (
    flatten_accounts,
    flatten_inquiries,
    flatten_public_records,
    flatten_collections,
)
from .identity_reconciler import reconcile_identity
from .metrics_deriver import derive_metrics
from .score_categorizer import categorize_score
from .account_mapper import map_account
from .credit_report_builder import build_credit_report

__all__ = [
    "filter_provider_views",
    "flatten_accounts",
    "flatten_inquiries",
    "flatten_public_records",
    "flatten_collections",
    "reconcile_identity",
    "derive_metrics",
    "categorize_score",
    "map_account",
    "build_credit_report",
]
