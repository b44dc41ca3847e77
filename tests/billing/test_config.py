"""Tests for billing configuration."""

import pytest
from pydantic import ValidationError

from planshift.billing.config import (
    BillingConfig,
    CurrencyConfig,
    ProrationConfig,
    get_billing_config,
    set_billing_config,
)
from planshift.billing.exceptions import BillingConfigurationError


class TestBillingConfig:
    """Test BillingConfig model."""

    def test_defaults(self):
        config = BillingConfig()

        assert config.currency == CurrencyConfig(default_currency="GBP", default_locale="en_GB")
        assert config.proration.enabled is True
        assert config.proration.subscription_term_days == 28
        assert config.proration.clamp_negative_elapsed_days is True

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("PLANSHIFT_BILLING__PRORATION_ENABLED", raising=False)

        config = BillingConfig.from_env()

        assert config.proration.enabled is True
        assert config.currency.default_currency == "GBP"

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PLANSHIFT_BILLING__PRORATION_ENABLED", "false")
        monkeypatch.setenv("PLANSHIFT_BILLING__SUBSCRIPTION_TERM_DAYS", "30")
        monkeypatch.setenv("PLANSHIFT_BILLING__DEFAULT_CURRENCY", "eur")

        config = BillingConfig.from_env()

        assert config.proration.enabled is False
        assert config.proration.subscription_term_days == 30
        assert config.currency.default_currency == "EUR"

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("PLANSHIFT_BILLING__SUBSCRIPTION_TERM_DAYS", "0")

        with pytest.raises(BillingConfigurationError) as exc_info:
            BillingConfig.from_env()

        assert exc_info.value.context == {"config_key": "billing"}


class TestGlobalConfig:
    """Test global configuration accessors."""

    def test_set_and_get(self):
        config = BillingConfig(proration=ProrationConfig(enabled=False))

        set_billing_config(config)

        assert get_billing_config() is config

    def test_reset_reloads_from_env(self, monkeypatch):
        monkeypatch.setenv("PLANSHIFT_BILLING__CLAMP_NEGATIVE_ELAPSED_DAYS", "false")
        set_billing_config(None)

        assert get_billing_config().proration.clamp_negative_elapsed_days is False


class TestCurrencyConfig:
    """Test CurrencyConfig validation."""

    def test_currency_code_normalised(self):
        assert CurrencyConfig(default_currency="eur").default_currency == "EUR"

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError):
            CurrencyConfig(default_currency="JPY")

    def test_from_env_unsupported_currency(self, monkeypatch):
        monkeypatch.setenv("PLANSHIFT_BILLING__DEFAULT_CURRENCY", "JPY")

        with pytest.raises(BillingConfigurationError) as exc_info:
            BillingConfig.from_env()

        assert exc_info.value.context == {"config_key": "billing.default_currency"}
        assert "JPY" in exc_info.value.message
