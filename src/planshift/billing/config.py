"""
Billing module configuration
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planshift.billing.exceptions import BillingConfigurationError
from planshift.billing.money_models import Currency


class CurrencyConfig(BaseModel):
    """Currency configuration - Single currency support"""

    model_config = ConfigDict()

    default_currency: str = Field("GBP", description="Default currency code")
    default_locale: str = Field("en_GB", description="Locale used to format money")

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        return Currency.parse(v).value


class ProrationConfig(BaseModel):
    """Plan change proration configuration"""

    model_config = ConfigDict()

    enabled: bool = Field(True, description="Deduct the consumed fee on upgrades")
    subscription_term_days: int | None = Field(
        28, description="Fixed subscription term; None derives it from the plan cycle"
    )
    clamp_negative_elapsed_days: bool = Field(
        True, description="Treat a start date in the future as zero elapsed days"
    )


def _default_currency_config() -> CurrencyConfig:
    """Create default CurrencyConfig instance"""
    return CurrencyConfig(default_currency="GBP", default_locale="en_GB")


def _default_proration_config() -> ProrationConfig:
    """Create default ProrationConfig instance"""
    return ProrationConfig(enabled=True, subscription_term_days=28, clamp_negative_elapsed_days=True)


class BillingConfig(BaseModel):
    """Main billing configuration"""

    model_config = ConfigDict()

    currency: CurrencyConfig = Field(default_factory=_default_currency_config)
    proration: ProrationConfig = Field(default_factory=_default_proration_config)

    @classmethod
    def from_env(cls) -> "BillingConfig":
        """Create configuration from settings"""

        from planshift.settings import Settings

        try:
            billing = Settings().billing  # type: ignore[call-arg]
        except ValueError as exc:
            raise BillingConfigurationError(
                f"Invalid billing settings: {exc}",
                config_key="billing",
            ) from exc

        try:
            currency_config = CurrencyConfig(
                default_currency=billing.default_currency,
                default_locale=billing.default_locale,
            )
        except ValueError as exc:
            raise BillingConfigurationError(
                f"Invalid default currency: {billing.default_currency}",
                config_key="billing.default_currency",
            ) from exc

        proration_config = ProrationConfig(
            enabled=billing.proration_enabled,
            subscription_term_days=billing.subscription_term_days,
            clamp_negative_elapsed_days=billing.clamp_negative_elapsed_days,
        )

        return cls(currency=currency_config, proration=proration_config)


# Global configuration instance
_billing_config: BillingConfig | None = None


def get_billing_config() -> BillingConfig:
    """Get the global billing configuration instance"""
    global _billing_config
    if _billing_config is None:
        _billing_config = BillingConfig.from_env()
    return _billing_config


def set_billing_config(config: BillingConfig | None) -> None:
    """Set the global billing configuration instance; None reloads from env"""
    global _billing_config
    _billing_config = config
