"""Subscription plans, subscriptions and plan change proration."""

from planshift.billing.subscriptions.models import Plan, ProrationResult, Subscription
from planshift.billing.subscriptions.proration import ProrationCalculator, calculate_price_diff

__all__ = [
    "Plan",
    "Subscription",
    "ProrationResult",
    "ProrationCalculator",
    "calculate_price_diff",
]
