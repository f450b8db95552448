"""Shared fixtures for the credit report pipeline tests."""

from datetime import date

import pytest

from data.loader import load_report
from schemas.credit_account import CanonicalAccount, PaymentRecord, PaymentStatus


def make_view(provider, **sections):
    """Build a raw provider view with the given sub-collections."""
    view = {"provider": provider}
    view.update(sections)
    return view


def make_account(account_id, balance=0.0, credit_limit=None, **kwargs):
    return CanonicalAccount(id=account_id, balance=balance, credit_limit=credit_limit, **kwargs)


def make_history(*statuses, year=2024):
    return [
        PaymentRecord(year=year, month=i + 1, status=PaymentStatus(s))
        for i, s in enumerate(statuses)
    ]


@pytest.fixture
def as_of():
    return date(2026, 1, 1)


@pytest.fixture
def sample_report():
    return load_report()


@pytest.fixture
def three_bureau_views():
    return [
        make_view("EFX", revolvingAccounts=[{"id": "efx-1"}]),
        make_view("TU", revolvingAccounts=[{"id": "tu-1"}]),
        make_view("EXP", revolvingAccounts=[{"id": "exp-1"}]),
        make_view("EFX", revolvingAccounts=[{"id": "efx-2"}]),
    ]
