"""
Subscription plan and subscription models.

A Plan prices a recurring billing cycle; a Subscription enrolls a customer
on a Plan between start_at and end_at.
"""

from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from planshift.billing.config import get_billing_config
from planshift.billing.exceptions import InvalidBillingCycleError
from planshift.billing.money_models import Money
from planshift.billing.subscriptions.utils import ONE_DAY, ensure_utc, utcnow

logger = structlog.get_logger(__name__)


def _new_id() -> str:
    return str(uuid4())


class Plan(BaseModel):
    """Billing plan: a price charged every billing cycle."""

    model_config = ConfigDict(extra="forbid")

    plan_id: str = Field(default_factory=_new_id, description="Plan identifier")
    name: str | None = Field(None, description="Display name")
    price: Money = Field(description="Price per billing cycle")
    billing_cycle: timedelta = Field(description="Billing cycle length in whole days")
    transition_plan_id: str | None = Field(
        None, description="Plan scheduled to replace this one; equals plan_id when none"
    )

    @field_validator("billing_cycle", mode="before")
    @classmethod
    def coerce_days(cls, v: Any) -> Any:
        """Plain integers are read as days rather than seconds."""
        if isinstance(v, int) and not isinstance(v, bool):
            if v <= 0:
                raise InvalidBillingCycleError(
                    f"Billing cycle must be at least one day, got {v}", billing_cycle=v
                )
            return timedelta(days=v)
        return v

    @field_validator("billing_cycle")
    @classmethod
    def validate_billing_cycle(cls, v: timedelta) -> timedelta:
        if v < ONE_DAY or v % ONE_DAY:
            raise InvalidBillingCycleError(
                f"Billing cycle must be a positive whole number of days, got {v}",
                billing_cycle=v,
            )
        return v

    @model_validator(mode="after")
    def default_transition(self) -> "Plan":
        if self.transition_plan_id is None:
            self.transition_plan_id = self.plan_id
        return self

    @classmethod
    def new(
        cls, price: Money, billing_cycle: timedelta | int, name: str | None = None
    ) -> "Plan":
        return cls(price=price, billing_cycle=billing_cycle, name=name)

    @property
    def billing_cycle_days(self) -> int:
        return self.billing_cycle.days

    @property
    def has_transition(self) -> bool:
        return self.transition_plan_id != self.plan_id

    def set_transition(self, plan_id: str) -> None:
        """Record the plan this one should transition to."""
        if not plan_id:
            raise ValueError("Transition plan id must not be empty")
        self.transition_plan_id = plan_id
        logger.debug("plan.transition_set", plan_id=self.plan_id, transition_plan_id=plan_id)

    def describe(self) -> str:
        return f"{self.plan_id}, {self.price.amount}, {str(self.price.currency)}, {self.transition_plan_id}"


class Subscription(BaseModel):
    """A customer's enrollment on a plan."""

    model_config = ConfigDict(extra="forbid")

    subscription_id: str = Field(default_factory=_new_id, description="Subscription identifier")
    plan: Plan = Field(description="Plan the subscription is billed on")
    start_at: datetime = Field(default_factory=utcnow, description="Start of the current period")
    end_at: datetime | None = Field(None, description="End of the current period")

    @field_validator("plan")
    @classmethod
    def own_plan(cls, v: Plan) -> Plan:
        # Each subscription holds its own copy so later plan mutations don't leak in
        return v.model_copy(deep=True)

    @field_validator("start_at", "end_at")
    @classmethod
    def normalise_timezone(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None

    @model_validator(mode="after")
    def default_end(self) -> "Subscription":
        if self.end_at is None:
            term_days = get_billing_config().proration.subscription_term_days
            term = timedelta(days=term_days) if term_days else self.plan.billing_cycle
            self.end_at = self.start_at + term
        return self

    @classmethod
    def new(cls, plan: Plan) -> "Subscription":
        return cls(plan=plan)

    def update_start_date(self, start_at: datetime) -> None:
        self.start_at = ensure_utc(start_at)
        logger.debug(
            "subscription.start_updated",
            subscription_id=self.subscription_id,
            start_at=self.start_at.isoformat(),
        )

    def update_end_date(self, end_at: datetime) -> None:
        self.end_at = ensure_utc(end_at)
        logger.debug(
            "subscription.end_updated",
            subscription_id=self.subscription_id,
            end_at=self.end_at.isoformat(),
        )


class ProrationResult(BaseModel):
    """Breakdown of a plan change price difference."""

    model_config = ConfigDict(frozen=True)

    subscription_id: str
    current_plan_id: str
    next_plan_id: str
    is_downgrade: bool = Field(description="Current plan costs strictly more than the next")
    days_elapsed: int = Field(ge=0, description="Whole days used of the current cycle")
    fee_per_day: Money = Field(description="Current plan price divided by cycle days, floored")
    consumed: Money = Field(description="Fee already used of the current plan")
    amount_due: Money = Field(description="Amount charged for the plan change")
    calculated_at: datetime


__all__ = ["Plan", "Subscription", "ProrationResult"]
