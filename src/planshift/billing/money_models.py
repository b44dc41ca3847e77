"""
Currency and Money value types.

Amounts are held as non-negative integers in minor units (pence, cents).
Arithmetic and ordering are only defined between amounts of the same
currency; mixing currencies raises CurrencyMismatchError.
py-moneyed and Babel are used for conversion and locale-aware display.
"""

from enum import Enum
from typing import Any

import moneyed
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import AmountUnderflowError, CurrencyMismatchError
from .money_utils import format_money, money_handler


class Currency(str, Enum):
    """Supported currencies."""

    USD = "USD"
    EUR = "EUR"
    RON = "RON"
    GBP = "GBP"

    def __str__(self) -> str:
        return f"({self.value})"

    @property
    def code(self) -> str:
        return self.value

    def equals(self, other: "Currency") -> bool:
        return self is other

    def to_moneyed(self) -> moneyed.Currency:
        """Return the matching py-moneyed currency."""
        return moneyed.get_currency(self.value)

    @classmethod
    def parse(cls, code: str) -> "Currency":
        """Look up a currency by ISO code, case-insensitively."""
        try:
            return cls(code.strip().upper())
        except ValueError:
            supported = ", ".join(c.value for c in cls)
            raise ValueError(f"Unsupported currency code: {code} (expected one of {supported})")


class Money(BaseModel):
    """Non-negative amount in minor units tied to a currency."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=0, description="Amount in minor units")
    currency: Currency = Field(description="ISO 4217 currency code")

    @classmethod
    def new(cls, amount: int, currency: Currency | str) -> "Money":
        return cls(amount=amount, currency=currency)

    @classmethod
    def zero(cls, currency: Currency | str) -> "Money":
        return cls(amount=0, currency=currency)

    def _require_same_currency(self, other: "Money", operation: str) -> None:
        if not self.currency.equals(other.currency):
            raise CurrencyMismatchError(
                f"Cannot {operation} {other.currency.code} and {self.currency.code} amounts",
                left_currency=self.currency.code,
                right_currency=other.currency.code,
            )

    def equals(self, other: "Money") -> bool:
        self._require_same_currency(other, "compare")
        return self.amount == other.amount

    def greater_than(self, other: "Money") -> bool:
        self._require_same_currency(other, "compare")
        return self.amount > other.amount

    def less_than(self, other: "Money") -> bool:
        self._require_same_currency(other, "compare")
        return self.amount < other.amount

    def subtract(self, other: "Money") -> "Money":
        """
        Subtract another amount of the same currency.

        Raises:
            CurrencyMismatchError: currencies differ
            AmountUnderflowError: other is larger than self
        """
        self._require_same_currency(other, "subtract")
        if other.amount > self.amount:
            raise AmountUnderflowError(
                f"Cannot subtract {other.amount} from {self.amount} {self.currency.code}",
                minuend=self.amount,
                subtrahend=other.amount,
                currency=self.currency.code,
            )
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __sub__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return not self.less_than(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return not self.greater_than(other)

    def __str__(self) -> str:
        return f"{self.amount} {str(self.currency)}"

    def to_moneyed(self) -> moneyed.Money:
        """Convert to a py-moneyed Money in major units."""
        return money_handler.to_moneyed(self.amount, self.currency.code)

    @classmethod
    def from_moneyed(cls, money: moneyed.Money) -> "Money":
        """Create from a py-moneyed Money, truncating below the minor unit."""
        return cls(
            amount=money_handler.to_minor_units(money),
            currency=Currency.parse(money.currency.code),
        )

    def format(self, locale: str | None = None, **kwargs: Any) -> str:
        """Format with locale, defaulting to the billing config locale."""
        return format_money(self.to_moneyed(), locale, **kwargs)


class MoneyField(BaseModel):
    """Pydantic-compatible Money field for serialization."""

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    amount: str = Field(description="Amount in major units as string for precision")
    currency: str = Field(description="ISO 4217 currency code")
    minor_units: int = Field(ge=0, description="Amount in minor units (pence, cents)")

    @classmethod
    def from_money(cls, money: Money) -> "MoneyField":
        """Create MoneyField from Money object."""
        data = money_handler.serialize(money.to_moneyed())
        return cls(**data)

    def to_money(self) -> Money:
        """Convert back to Money object."""
        return Money(amount=self.minor_units, currency=Currency.parse(self.currency))


__all__ = ["Currency", "Money", "MoneyField"]
