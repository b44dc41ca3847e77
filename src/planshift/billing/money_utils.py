"""
Minor-unit conversion and display helpers backed by py-moneyed and Babel.

planshift amounts are integers in a currency's minor unit, while py-moneyed
holds decimal major-unit amounts. Babel's currency data supplies the number
of decimal places between the two and the locale-aware rendering.
"""

from decimal import ROUND_DOWN, Decimal
from typing import Any

from babel import Locale
from babel.core import UnknownLocaleError
from babel.numbers import format_currency, get_currency_precision
from moneyed import Currency, Money, get_currency
from moneyed.classes import CurrencyDoesNotExist

# Used when neither the caller nor the billing config names a usable locale
DEFAULT_LOCALE = "en_GB"


class MoneyHandler:
    """Converts between minor units and py-moneyed amounts and formats them."""

    def __init__(self, locale: str | None = None) -> None:
        self._locale = self.validate_locale(locale) if locale else None

    @property
    def locale(self) -> str:
        """Explicit locale, else the configured billing locale."""
        if self._locale is not None:
            return self._locale
        from planshift.billing.config import get_billing_config

        return self.validate_locale(get_billing_config().currency.default_locale)

    def validate_currency(self, currency_code: str) -> Currency:
        try:
            return get_currency(currency_code.upper())
        except CurrencyDoesNotExist:
            raise ValueError(f"Invalid currency code: {currency_code}")

    def validate_locale(self, locale_code: str) -> str:
        """Return the locale if Babel knows it, otherwise DEFAULT_LOCALE."""
        try:
            Locale.parse(locale_code)
            return locale_code
        except (UnknownLocaleError, ValueError):
            return DEFAULT_LOCALE

    def precision(self, currency_code: str) -> int:
        return get_currency_precision(currency_code.upper())

    def to_moneyed(self, minor_units: int, currency_code: str) -> Money:
        """285 GBP pence -> Money('2.85', 'GBP')."""
        currency = self.validate_currency(currency_code)
        divisor = Decimal(10 ** self.precision(currency.code))
        return Money(amount=Decimal(minor_units) / divisor, currency=currency)

    def to_minor_units(self, money: Money) -> int:
        """Money('2.855', 'GBP') -> 285; fractions of a minor unit are dropped."""
        scaled = money.amount * Decimal(10 ** self.precision(money.currency.code))
        return int(scaled.quantize(Decimal("1"), rounding=ROUND_DOWN))

    def format(self, money: Money, locale: str | None = None, **kwargs: Any) -> str:
        locale = self.validate_locale(locale) if locale else self.locale

        try:
            return format_currency(
                number=money.amount, currency=money.currency.code, locale=locale, **kwargs
            )
        except (TypeError, ValueError):
            # Fallback to simple formatting if locale issues
            return f"{money.currency.code} {money.amount}"

    def serialize(self, money: Money) -> dict[str, Any]:
        return {
            "amount": str(money.amount),
            "currency": money.currency.code,
            "minor_units": self.to_minor_units(money),
        }


# Follows the billing config locale
money_handler = MoneyHandler()


def format_money(money: Money, locale: str | None = None, **kwargs: Any) -> str:
    """Format Money with default handler."""
    return money_handler.format(money, locale, **kwargs)


__all__ = ["MoneyHandler", "money_handler", "format_money", "DEFAULT_LOCALE"]
