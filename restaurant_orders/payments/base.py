"""
Payment strategy contract.

Every payment method answers one question: "can you collect this amount?"
The answer is a SettlementResult. Strategies may also raise SettlementFailed;
the session treats both forms of failure the same way.

Exactly one settle() call is made per order. There is no retry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from restaurant_orders.domain.value_objects import Money


class SettlementResult(BaseModel):
    """Immutable record of one settlement attempt."""

    model_config = ConfigDict(frozen=True)

    success: bool
    amount: Money
    method_name: str
    reference: str | None = None
    failure_reason: str | None = None
    details: dict[str, str] = Field(default_factory=dict)


class PaymentStrategy(ABC):
    """Interchangeable settlement behavior."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable method name shown to the customer."""

    @abstractmethod
    def settle(self, amount: Money) -> SettlementResult:
        """Attempt to collect ``amount`` once."""

    def details(self) -> dict[str, str]:
        """Non-sensitive fields the presenter may show (masked card, account)."""
        return {}

    def _succeeded(self, amount: Money, reference: str | None = None) -> SettlementResult:
        return SettlementResult(
            success=True,
            amount=amount,
            method_name=self.display_name,
            reference=reference,
            details=self.details(),
        )

    def _failed(self, amount: Money, reason: str) -> SettlementResult:
        return SettlementResult(
            success=False,
            amount=amount,
            method_name=self.display_name,
            failure_reason=reason,
            details=self.details(),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.display_name})"
