"""Centralized configuration using pydantic-settings.

All configuration is loaded from environment variables and .env files.
For nested settings, use double underscore: PLANSHIFT_BILLING__PRORATION_ENABLED=false
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PLANSHIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = Field("planshift", description="Application name")
    app_version: str = Field("0.1.0", description="Application version")

    # ============================================================
    # Observability
    # ============================================================

    class ObservabilitySettings(BaseModel):
        """Logging configuration."""

        log_level: LogLevel = Field(LogLevel.INFO, description="Minimum log level")
        log_format: str = Field("console", description="Log output format (console/json)")

        @field_validator("log_format")
        @classmethod
        def validate_log_format(cls, v: str) -> str:
            v = v.lower()
            if v not in {"console", "json"}:
                raise ValueError(f"Unsupported log format: {v}")
            return v

    observability: ObservabilitySettings = ObservabilitySettings()  # type: ignore[call-arg]

    # ============================================================
    # Billing Configuration
    # ============================================================

    class BillingSettings(BaseModel):
        """Billing and proration configuration."""

        default_currency: str = Field("GBP", description="Default currency code")
        default_locale: str = Field("en_GB", description="Locale used to format money")

        proration_enabled: bool = Field(True, description="Enable mid-cycle proration")
        subscription_term_days: int | None = Field(
            28,
            description="Fixed subscription term in days; None derives it from the plan cycle",
        )
        clamp_negative_elapsed_days: bool = Field(
            True, description="Treat a start date in the future as zero elapsed days"
        )

        @field_validator("subscription_term_days")
        @classmethod
        def validate_term_days(cls, v: int | None) -> int | None:
            if v is not None and v <= 0:
                raise ValueError("subscription_term_days must be positive")
            return v

    billing: BillingSettings = BillingSettings()  # type: ignore[call-arg]


settings = Settings()  # type: ignore[call-arg]
