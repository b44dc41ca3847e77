"""
Billing module.

Provides:
- Currency and Money value types with currency-checked arithmetic
- Subscription plans and subscriptions
- Mid-cycle plan change proration
"""

from planshift.billing.exceptions import (
    AmountUnderflowError,
    BillingConfigurationError,
    BillingError,
    CurrencyMismatchError,
    InvalidBillingCycleError,
    MoneyError,
    ProrationError,
    SubscriptionError,
)
from planshift.billing.money_models import Currency, Money, MoneyField
from planshift.billing.money_utils import format_money, money_handler
from planshift.billing.subscriptions import (
    Plan,
    ProrationCalculator,
    ProrationResult,
    Subscription,
    calculate_price_diff,
)

__all__ = [
    # Exceptions
    "BillingError",
    "MoneyError",
    "CurrencyMismatchError",
    "AmountUnderflowError",
    "SubscriptionError",
    "InvalidBillingCycleError",
    "ProrationError",
    "BillingConfigurationError",
    # Money
    "Currency",
    "Money",
    "MoneyField",
    "money_handler",
    "format_money",
    # Subscriptions
    "Plan",
    "Subscription",
    "ProrationResult",
    "ProrationCalculator",
    "calculate_price_diff",
]
