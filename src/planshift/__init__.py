"""
planshift: prorated price differences for mid-cycle plan changes.
"""

import planshift.logging  # noqa: F401  configures structlog
from planshift.billing import (
    AmountUnderflowError,
    BillingError,
    Currency,
    CurrencyMismatchError,
    InvalidBillingCycleError,
    Money,
    Plan,
    ProrationCalculator,
    ProrationResult,
    Subscription,
    calculate_price_diff,
)

__version__ = "0.1.0"

__all__ = [
    "AmountUnderflowError",
    "BillingError",
    "Currency",
    "CurrencyMismatchError",
    "InvalidBillingCycleError",
    "Money",
    "Plan",
    "ProrationCalculator",
    "ProrationResult",
    "Subscription",
    "calculate_price_diff",
]
