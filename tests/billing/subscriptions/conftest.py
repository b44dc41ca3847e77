"""
Pytest fixtures for subscription and proration tests.
"""

from datetime import datetime, timedelta

import pytest

from planshift.billing.money_models import Currency, Money
from planshift.billing.subscriptions.models import Plan, Subscription
from planshift.billing.subscriptions.proration import ProrationCalculator


@pytest.fixture
def chip_lite() -> Plan:
    return Plan.new(Money.new(0, Currency.GBP), timedelta(days=28), name="chip_lite")


@pytest.fixture
def chip_ai() -> Plan:
    return Plan.new(Money.new(150, Currency.GBP), timedelta(days=28), name="chip_ai")


@pytest.fixture
def chip_x() -> Plan:
    return Plan.new(Money.new(300, Currency.GBP), timedelta(days=28), name="chip_x")


@pytest.fixture
def subscription(chip_ai: Plan, now: datetime) -> Subscription:
    """Subscription on chip_ai that started three days before `now`."""
    sub = Subscription.new(chip_ai)
    sub.update_start_date(now - timedelta(days=3))
    return sub


@pytest.fixture
def calculator(now: datetime) -> ProrationCalculator:
    """Calculator whose clock is pinned to `now`."""
    return ProrationCalculator(clock=lambda: now)
