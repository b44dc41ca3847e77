"""
Plan change proration.

Moving a subscription to a plan that costs the same or more charges the
next plan's price minus the fee already consumed on the current plan:

    fee_per_day = current_price // cycle_days
    amount_due  = next_price - fee_per_day * days_elapsed

Moving to a strictly cheaper plan charges nothing and refunds nothing.
"""

from collections.abc import Callable
from datetime import datetime

import structlog

from planshift.billing.config import ProrationConfig, get_billing_config
from planshift.billing.exceptions import (
    CurrencyMismatchError,
    InvalidBillingCycleError,
    ProrationError,
)
from planshift.billing.money_models import Money
from planshift.billing.subscriptions.models import Plan, ProrationResult, Subscription
from planshift.billing.subscriptions.utils import elapsed_days, ensure_utc, utcnow

logger = structlog.get_logger(__name__)


class ProrationCalculator:
    """Computes the price difference of a mid-cycle plan change."""

    def __init__(
        self,
        config: ProrationConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> ProrationConfig:
        if self._config is not None:
            return self._config
        return get_billing_config().proration

    def preview(
        self, subscription: Subscription, next_plan: Plan, now: datetime | None = None
    ) -> ProrationResult:
        """
        Compute the full proration breakdown without side effects.

        Raises:
            CurrencyMismatchError: current and next plan use different currencies
            InvalidBillingCycleError: current plan cycle is shorter than a day
            AmountUnderflowError: consumed fee exceeds the next plan price
            ProrationError: start date in the future while clamping is disabled
        """
        current_plan = subscription.plan
        currency = current_plan.price.currency
        calculated_at = ensure_utc(now) if now is not None else self._clock()

        try:
            is_downgrade = current_plan.price > next_plan.price
        except CurrencyMismatchError:
            logger.warning(
                "proration.currency_mismatch",
                subscription_id=subscription.subscription_id,
                current_currency=currency.code,
                next_currency=next_plan.price.currency.code,
            )
            raise

        if is_downgrade:
            zero = Money.zero(currency)
            logger.debug(
                "proration.downgrade",
                subscription_id=subscription.subscription_id,
                next_plan_id=next_plan.plan_id,
            )
            return ProrationResult(
                subscription_id=subscription.subscription_id,
                current_plan_id=current_plan.plan_id,
                next_plan_id=next_plan.plan_id,
                is_downgrade=True,
                days_elapsed=0,
                fee_per_day=zero,
                consumed=zero,
                amount_due=zero,
                calculated_at=calculated_at,
            )

        days = elapsed_days(subscription.start_at, calculated_at)
        if days < 0:
            if not self.config.clamp_negative_elapsed_days:
                raise ProrationError(
                    f"Subscription starts {-days} day(s) after the calculation time",
                    subscription_id=subscription.subscription_id,
                    next_plan_id=next_plan.plan_id,
                )
            days = 0

        cycle_days = current_plan.billing_cycle_days
        if cycle_days <= 0:
            raise InvalidBillingCycleError(
                "Cannot prorate a plan whose billing cycle is shorter than a day",
                billing_cycle=current_plan.billing_cycle,
                plan_id=current_plan.plan_id,
            )

        fee_per_day = Money(amount=current_plan.price.amount // cycle_days, currency=currency)
        if self.config.enabled:
            consumed = Money(amount=fee_per_day.amount * days, currency=currency)
        else:
            consumed = Money.zero(currency)

        amount_due = next_plan.price.subtract(consumed)

        logger.debug(
            "proration.calculated",
            subscription_id=subscription.subscription_id,
            current_plan_id=current_plan.plan_id,
            next_plan_id=next_plan.plan_id,
            days_elapsed=days,
            fee_per_day=fee_per_day.amount,
            consumed=consumed.amount,
            amount_due=amount_due.amount,
            currency=amount_due.currency.code,
        )

        return ProrationResult(
            subscription_id=subscription.subscription_id,
            current_plan_id=current_plan.plan_id,
            next_plan_id=next_plan.plan_id,
            is_downgrade=False,
            days_elapsed=days,
            fee_per_day=fee_per_day,
            consumed=consumed,
            amount_due=amount_due,
            calculated_at=calculated_at,
        )

    def calculate_price_diff(
        self, subscription: Subscription, next_plan: Plan, now: datetime | None = None
    ) -> Money:
        """Amount owed for moving the subscription to next_plan."""
        return self.preview(subscription, next_plan, now=now).amount_due


def calculate_price_diff(
    subscription: Subscription, next_plan: Plan, now: datetime | None = None
) -> Money:
    """Price difference using the globally configured calculator."""
    return ProrationCalculator().calculate_price_diff(subscription, next_plan, now=now)


__all__ = ["ProrationCalculator", "calculate_price_diff"]
