"""
Value Objects - Immutable Domain Concepts

Value objects have no identity - two value objects are equal if their values are equal.

Example:
- Money(45.00, "BOB") == Money(45, "BOB") ✓

Why Decimal and not float:
- 0.1 + 0.2 != 0.3 in binary floating point
- Stacking modifiers must never drift by a cent
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from restaurant_orders.domain.errors import CurrencyMismatch

CENT = Decimal("0.01")


class Currency(str, Enum):
    """ISO 4217 currency codes."""
    BOB = "BOB"
    USD = "USD"
    EUR = "EUR"


class Money(BaseModel):
    """
    Money value object with currency.

    Amounts are always held with 2 decimal places.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    currency: Currency = Currency.BOB

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Ensure proper decimal precision for currency."""
        return v.quantize(CENT, rounding=ROUND_HALF_UP)

    @classmethod
    def of(cls, amount: Decimal | int | str, currency: Currency = Currency.BOB) -> Money:
        """Shorthand constructor: Money.of("45.00")."""
        return cls(amount=Decimal(str(amount)), currency=currency)

    @classmethod
    def zero(cls, currency: Currency = Currency.BOB) -> Money:
        return cls(amount=Decimal("0"), currency=currency)

    def __add__(self, other: Money) -> Money:
        """
        Add money (only same currency).

        CRITICAL: Can't add BOB + USD without conversion.
        """
        if self.currency != other.currency:
            raise CurrencyMismatch(self.currency.value, other.currency.value)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: Money) -> Money:
        """Subtract money (only same currency)."""
        if self.currency != other.currency:
            raise CurrencyMismatch(self.currency.value, other.currency.value)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __eq__(self, other: object) -> bool:
        """Value equality."""
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: Money) -> bool:
        """Compare money (same currency only)."""
        if self.currency != other.currency:
            raise CurrencyMismatch(self.currency.value, other.currency.value)
        return self.amount < other.amount

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.value}"

    def __repr__(self) -> str:
        return f"Money({self.amount}, {self.currency.value})"
