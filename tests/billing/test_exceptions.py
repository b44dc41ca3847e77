"""Tests for billing exceptions."""

import pytest

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


class TestBillingError:
    """Test base BillingError class."""

    def test_billing_error_basic(self):
        error = BillingError("Test error message")

        assert error.message == "Test error message"
        assert error.error_code == "BILLING_ERROR"
        assert error.status_code == 400
        assert error.context == {}
        assert error.recovery_hint is None
        assert str(error) == "Test error message"

    def test_billing_error_to_dict(self):
        error = BillingError(
            "Boom",
            error_code="CUSTOM",
            status_code=422,
            context={"key": "value"},
            recovery_hint="Try again",
        )

        assert error.to_dict() == {
            "error_code": "CUSTOM",
            "message": "Boom",
            "status_code": 422,
            "context": {"key": "value"},
            "recovery_hint": "Try again",
        }


class TestMoneyErrors:
    """Test money arithmetic errors."""

    def test_currency_mismatch(self):
        error = CurrencyMismatchError("mismatch", left_currency="GBP", right_currency="EUR")

        assert isinstance(error, MoneyError)
        assert isinstance(error, BillingError)
        assert error.error_code == "CURRENCY_MISMATCH"
        assert error.context == {"left_currency": "GBP", "right_currency": "EUR"}
        assert error.recovery_hint

    def test_amount_underflow(self):
        error = AmountUnderflowError("underflow", minuend=1, subtrahend=2, currency="USD")

        assert isinstance(error, MoneyError)
        assert error.error_code == "AMOUNT_UNDERFLOW"
        assert error.context["subtrahend"] == 2


class TestSubscriptionErrors:
    """Test subscription and proration errors."""

    def test_invalid_billing_cycle(self):
        error = InvalidBillingCycleError("bad cycle", billing_cycle=0, plan_id="plan_1")

        assert isinstance(error, SubscriptionError)
        assert error.error_code == "INVALID_BILLING_CYCLE"
        assert error.context == {"billing_cycle": "0", "plan_id": "plan_1"}

    def test_invalid_billing_cycle_without_context(self):
        assert InvalidBillingCycleError("bad cycle").context == {}

    def test_proration_error(self):
        error = ProrationError("future start", subscription_id="sub_1")

        assert isinstance(error, SubscriptionError)
        assert error.error_code == "PRORATION_ERROR"
        assert error.context == {"subscription_id": "sub_1"}

    def test_errors_can_be_caught_as_billing_error(self):
        with pytest.raises(BillingError):
            raise ProrationError("boom")


class TestBillingConfigurationError:
    """Test configuration errors."""

    def test_configuration_error(self):
        error = BillingConfigurationError("bad config", config_key="billing")

        assert error.status_code == 500
        assert error.error_code == "BILLING_CONFIG_ERROR"
        assert error.context == {"config_key": "billing"}
        assert error.recovery_hint == "Check billing configuration settings"
