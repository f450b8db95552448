"""Tests for raw account mapping and payment history parsing."""

from datetime import date

import pytest

from schemas.credit_account import AccountStatus, AccountType, PaymentStatus
from pipeline.account_mapper import map_account, normalize_account_status, normalize_account_type
from pipeline.payment_history_parser import (
    classify_payment,
    on_time_percentage_from_entries,
    parse_payment_history,
)

from conftest import make_history


# =============================================================================
# TEST: normalization tables
# =============================================================================

class TestNormalization:

    @pytest.mark.parametrize("raw, expected", [
        ("CreditCard", AccountType.CREDIT_CARD),
        ("credit_card", AccountType.CREDIT_CARD),
        ("Revolving", AccountType.CREDIT_CARD),
        ("Mortgage", AccountType.MORTGAGE),
        ("AUTO_LOAN", AccountType.AUTO_LOAN),
        ("Student Loan", AccountType.STUDENT_LOAN),
        ("Installment", AccountType.PERSONAL_LOAN),
        ({"code": "MORTGAGE"}, AccountType.MORTGAGE),
    ])
    def test_account_types(self, raw, expected):
        assert normalize_account_type(raw) == expected

    def test_unknown_type_is_personal_loan(self):
        assert normalize_account_type("timeshare") == AccountType.PERSONAL_LOAN
        assert normalize_account_type(None) == AccountType.PERSONAL_LOAN

    @pytest.mark.parametrize("raw, expected", [
        ("PAYS_AS_AGREED", AccountStatus.CURRENT),
        ("LATE_30", AccountStatus.LATE),
        ("90 days late", AccountStatus.LATE),
        ("CHARGE_OFF", AccountStatus.DELINQUENT),
        ("Closed", AccountStatus.CLOSED),
        ({"code": "LATE_60"}, AccountStatus.LATE),
    ])
    def test_account_statuses(self, raw, expected):
        assert normalize_account_status(raw) == expected

    def test_unknown_status_is_current(self):
        assert normalize_account_status("weird") == AccountStatus.CURRENT
        assert normalize_account_status(42) == AccountStatus.CURRENT


# =============================================================================
# TEST: map_account
# =============================================================================

class TestMapAccount:

    def test_full_record(self, sample_report):
        raw = sample_report["providerViews"][0]["revolvingAccounts"][0]
        account = map_account(raw)

        assert account.id == "efx-rev-1"
        assert account.name == "FIRST CARD BANK"
        assert account.account_type == AccountType.CREDIT_CARD
        assert account.account_number == "****1234"
        assert account.balance == 1200
        assert account.credit_limit == 5000
        assert account.credit_utilization == pytest.approx(24.0)
        assert account.status == AccountStatus.CURRENT
        assert account.open_date == date(2016, 3, 15)
        assert [r.status for r in account.payment_history] == [
            PaymentStatus.CURRENT, PaymentStatus.CURRENT, PaymentStatus.LATE, PaymentStatus.UNKNOWN,
        ]

    def test_bare_amounts_and_bureau_on_time(self, sample_report):
        raw = sample_report["providerViews"][1]["revolvingAccounts"][0]
        account = map_account(raw)
        assert account.balance == 1180
        assert account.credit_limit == 5000
        assert account.on_time_percentage == 96

    def test_defaults_for_empty_record(self):
        account = map_account({}, index=3)
        assert account.id == "account_3"
        assert account.name == "Unknown Creditor"
        assert account.account_number == "N/A"
        assert account.balance == 0.0
        assert account.credit_limit is None
        assert account.credit_utilization is None
        assert account.open_date is None
        assert account.payment_history == []
        assert account.on_time_percentage is None

    def test_non_dict_record(self):
        assert map_account("garbage", index=1).id == "account_1"

    def test_zero_limit_is_no_limit(self):
        account = map_account({"balance": 100, "creditLimit": 0})
        assert account.credit_limit is None
        assert account.credit_utilization is None

    def test_malformed_balance_falls_through(self):
        account = map_account({"balanceAmount": {"amount": "abc"}, "balance": 75})
        assert account.balance == 75

    def test_numeric_string_amounts(self):
        account = map_account({"balance": "1500", "creditLimit": "3000"})
        assert account.balance == 1500
        assert account.credit_limit == 3000
        assert account.credit_utilization == pytest.approx(50.0)

    def test_account_open_false_is_closed(self):
        account = map_account({"paymentStatus": "PAYS_AS_AGREED", "accountOpen": False})
        assert account.status == AccountStatus.CLOSED

    def test_epoch_open_date(self):
        account = map_account({"dateOpened": 1704067200000})
        assert account.open_date == date(2024, 1, 1)

    def test_minimum_payment_falls_back_to_monthly(self):
        account = map_account({"monthlyPayment": {"amount": 210}})
        assert account.monthly_payment == 210
        assert account.minimum_payment == 210

    def test_negative_flag(self):
        assert map_account({"isNegative": True}).is_negative is True
        assert map_account({"isNegative": "yes"}).is_negative is False

    def test_integer_id_is_stringified(self):
        assert map_account({"id": 123}).id == "123"


# =============================================================================
# TEST: payment history
# =============================================================================

class TestPaymentHistory:

    @pytest.mark.parametrize("month_type, value, expected", [
        ("POSITIVE", "PAYS_AS_AGREED", PaymentStatus.CURRENT),
        ("NEGATIVE", "LATE_30", PaymentStatus.LATE),
        ("NEUTRAL", "LATE_60", PaymentStatus.LATE),
        ("NEGATIVE", "CHARGE_OFF", PaymentStatus.MISSED),
        ("NEGATIVE", "COLLECTION", PaymentStatus.MISSED),
        ("NO_DATA", "NOT_REPORTED", PaymentStatus.UNKNOWN),
        ("POSITIVE", "CLOSED", PaymentStatus.UNKNOWN),
    ])
    def test_classify_payment(self, month_type, value, expected):
        assert classify_payment(month_type, value) == expected

    def test_months_in_calendar_order(self):
        history = [{
            "year": 2023,
            "march": {"monthType": "NEGATIVE", "value": "LATE_30"},
            "january": {"monthType": "POSITIVE", "value": "PAYS_AS_AGREED"},
        }]
        records = parse_payment_history(history)
        assert [(r.year, r.month) for r in records] == [(2023, 1), (2023, 3)]

    def test_malformed_entries_skipped(self):
        history = [
            "not a block",
            {"january": {"monthType": "POSITIVE", "value": "PAYS_AS_AGREED"}},
            {"year": "2022", "february": {"monthType": "POSITIVE"}, "may": "bad",
             "june": {"monthType": "POSITIVE", "value": "PAYS_AS_AGREED"}},
        ]
        records = parse_payment_history(history)
        assert len(records) == 1
        assert records[0].year == 2022
        assert records[0].month == 6

    def test_non_list_history(self):
        assert parse_payment_history(None) == []
        assert parse_payment_history({"year": 2024}) == []

    def test_on_time_percentage_from_entries(self):
        assert on_time_percentage_from_entries(make_history("current", "current", "late", "unknown")) == 67
        assert on_time_percentage_from_entries(make_history("current", "missed")) == 50
        assert on_time_percentage_from_entries(make_history("unknown")) == 0
        assert on_time_percentage_from_entries([]) == 0
