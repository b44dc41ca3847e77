"""
Shared fixtures for billing tests.
"""

from datetime import UTC, datetime

import pytest

from planshift.billing.money_models import Currency, Money


@pytest.fixture
def now() -> datetime:
    """Fixed calculation instant."""
    return datetime(2026, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def gbp_150() -> Money:
    return Money(amount=150, currency=Currency.GBP)


@pytest.fixture
def gbp_300() -> Money:
    return Money(amount=300, currency=Currency.GBP)


@pytest.fixture
def eur_300() -> Money:
    return Money(amount=300, currency=Currency.EUR)
