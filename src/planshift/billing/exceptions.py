"""
Billing system exceptions.

Custom exceptions for money arithmetic and subscription proration.
Every error carries a machine-readable code, context and a recovery hint.
"""

from typing import Any


class BillingError(Exception):
    """
    Base billing system error with enhanced context.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        status_code: HTTP-style status code for this error type
        context: Additional context data about the error
        recovery_hint: Suggested action to resolve the error
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        status_code: int = 400,
        context: dict[str, Any] | None = None,
        recovery_hint: str | None = None,
    ):
        self.message = message
        self.error_code = error_code or "BILLING_ERROR"
        self.status_code = status_code
        self.context = context or {}
        self.recovery_hint = recovery_hint
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for reporting."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
            "context": self.context,
            "recovery_hint": self.recovery_hint,
        }


class MoneyError(BillingError):
    """Money arithmetic errors."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        recovery_hint: str | None = None,
    ):
        super().__init__(
            message, "MONEY_ERROR", status_code=400, context=context, recovery_hint=recovery_hint
        )


class CurrencyMismatchError(MoneyError):
    """Operands of a money operation carry different currencies."""

    def __init__(self, message: str, left_currency: str, right_currency: str) -> None:
        super().__init__(
            message,
            context={"left_currency": left_currency, "right_currency": right_currency},
            recovery_hint="Make sure both plans are priced in the same currency",
        )
        self.error_code = "CURRENCY_MISMATCH"


class AmountUnderflowError(MoneyError):
    """Subtraction would produce a negative amount."""

    def __init__(self, message: str, minuend: int, subtrahend: int, currency: str) -> None:
        super().__init__(
            message,
            context={"minuend": minuend, "subtrahend": subtrahend, "currency": currency},
            recovery_hint="Money amounts are non-negative; subtract a smaller amount",
        )
        self.error_code = "AMOUNT_UNDERFLOW"


class SubscriptionError(BillingError):
    """Subscription-related errors."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        recovery_hint: str | None = None,
    ):
        super().__init__(
            message,
            "SUBSCRIPTION_ERROR",
            status_code=400,
            context=context,
            recovery_hint=recovery_hint,
        )


class InvalidBillingCycleError(SubscriptionError):
    """Billing cycle is not a positive whole number of days."""

    def __init__(self, message: str, billing_cycle: Any = None, plan_id: str | None = None) -> None:
        context: dict[str, Any] = {}
        if billing_cycle is not None:
            context["billing_cycle"] = str(billing_cycle)
        if plan_id:
            context["plan_id"] = plan_id

        super().__init__(
            message,
            context=context,
            recovery_hint="Use a billing cycle of at least one whole day",
        )
        self.error_code = "INVALID_BILLING_CYCLE"


class ProrationError(SubscriptionError):
    """Error while computing a prorated price difference."""

    def __init__(
        self,
        message: str,
        subscription_id: str | None = None,
        next_plan_id: str | None = None,
    ) -> None:
        context = {}
        if subscription_id:
            context["subscription_id"] = subscription_id
        if next_plan_id:
            context["next_plan_id"] = next_plan_id

        super().__init__(
            message,
            context=context,
            recovery_hint="Check the subscription dates and the target plan",
        )
        self.error_code = "PRORATION_ERROR"


class BillingConfigurationError(BillingError):
    """Billing configuration errors."""

    def __init__(
        self, message: str, config_key: str | None = None, recovery_hint: str | None = None
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key

        super().__init__(
            message,
            "BILLING_CONFIG_ERROR",
            status_code=500,
            context=context,
            recovery_hint=recovery_hint or "Check billing configuration settings",
        )
