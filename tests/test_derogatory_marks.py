"""Tests for derogatory mark aggregation and account summary parsing."""

from features.credit_metrics import AccountTypeStats
from features.derogatory_features import DerogatorySeverity
from schemas.credit_account import AccountStatus
from schemas.credit_records import CollectionItem, PublicRecord
from pipeline.account_summary_parser import parse_account_summary, parse_type_summary
from pipeline.derogatory_marks import MAX_SCORE_IMPACT, calculate_derogatory_marks

from conftest import make_account, make_history


# =============================================================================
# TEST: derogatory marks
# =============================================================================

class TestDerogatoryMarks:

    def test_clean_file(self):
        marks = calculate_derogatory_marks([make_account("a")])
        assert marks.total_count == 0
        assert marks.estimated_score_impact == 0
        assert marks.severity == DerogatorySeverity.NONE

    def test_counts_negative_accounts_without_summary(self):
        accounts = [
            make_account("a", is_negative=True),
            make_account("b", is_negative=True),
            make_account("c"),
        ]
        marks = calculate_derogatory_marks(accounts)
        assert marks.negative_accounts == 2
        assert marks.total_count == 2
        assert marks.severity == DerogatorySeverity.LOW

    def test_summary_negative_count_is_authoritative(self):
        accounts = [make_account("a", is_negative=True)]
        summary = {"revolvingAccounts": {"totalNegativeAccounts": 0}}
        assert calculate_derogatory_marks(accounts, summary=summary).negative_accounts == 0

    def test_summary_top_level_count_preferred(self):
        summary = {
            "totalNegativeAccounts": 4,
            "revolvingAccounts": {"totalNegativeAccounts": 1},
        }
        assert calculate_derogatory_marks([], summary=summary).negative_accounts == 4

    def test_late_payments_and_charge_offs_feed_impact(self):
        accounts = [
            make_account("a", payment_history=make_history("late", "missed", "current")),
            make_account("b", status=AccountStatus.LATE),
            make_account("c", status=AccountStatus.DELINQUENT),
        ]
        marks = calculate_derogatory_marks(accounts)
        assert marks.late_payments == 3
        assert marks.charge_offs == 1
        assert marks.estimated_score_impact == 3 * 15 + 100
        # Late payments alone never add to the total
        assert marks.total_count == 0

    def test_collections_and_public_records(self):
        marks = calculate_derogatory_marks(
            [make_account("a", payment_history=make_history("late"))],
            public_records=[],
            collections=[CollectionItem(amount=240)],
        )
        assert marks.total_count == 1
        assert marks.estimated_score_impact == 95
        assert marks.severity == DerogatorySeverity.MODERATE

    def test_impact_is_capped(self):
        marks = calculate_derogatory_marks(
            [], public_records=[PublicRecord(), PublicRecord()], collections=[CollectionItem()]
        )
        assert marks.estimated_score_impact == MAX_SCORE_IMPACT
        assert marks.severity == DerogatorySeverity.SEVERE


# =============================================================================
# TEST: account summary
# =============================================================================

class TestAccountSummary:

    def test_sample_summary(self, sample_report):
        summary = sample_report["providerViews"][0]["summary"]
        stats = parse_account_summary(summary)

        assert set(stats) == {"revolving", "mortgage", "installment", "other"}
        revolving = stats["revolving"]
        assert revolving.open == 1
        assert revolving.with_balance == 1
        assert revolving.total_balance == 1200
        assert revolving.credit_limit == 5000
        assert revolving.debt_to_credit == 24
        assert stats["mortgage"] == AccountTypeStats()

    def test_ratio_rounded_half_up(self):
        assert parse_type_summary({"debtToCreditRatio": 23.5}).debt_to_credit == 24

    def test_no_summary(self):
        assert parse_account_summary(None) is None
        assert parse_account_summary([]) is None
