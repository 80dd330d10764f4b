"""
Concrete payment strategies.

None of these talk to a real gateway; each always settles. Randomness and
time are injected so authorization codes and transfer references are
reproducible in tests.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable

import structlog

from restaurant_orders.domain.enums import PaymentMethod
from restaurant_orders.domain.value_objects import Money
from restaurant_orders.payments.base import PaymentStrategy, SettlementResult
from restaurant_orders.payments.registry import register_payment_strategy

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def mask_card_number(card_number: str) -> str:
    """
    Show only the last 4 digits.

    Example: "1234567890123456" -> "**** **** **** 3456"
    """
    digits = card_number.replace(" ", "").replace("-", "")
    return f"**** **** **** {digits[-4:]}"


@register_payment_strategy(PaymentMethod.CASH)
class CashPayment(PaymentStrategy):
    """Cash at the counter."""

    @property
    def display_name(self) -> str:
        return "Cash"

    def settle(self, amount: Money) -> SettlementResult:
        logger.info("settlement_succeeded", method="cash", amount=str(amount.amount))
        return self._succeeded(amount)


@register_payment_strategy(PaymentMethod.CARD)
class CardPayment(PaymentStrategy):
    """
    Card payment.

    The full card number is kept private; only the masked form is exposed
    or logged.
    """

    def __init__(self, card_number: str, rng: random.Random | None = None):
        self._card_number = card_number
        self._rng = rng or random.Random()

    @property
    def display_name(self) -> str:
        return "Card"

    @property
    def masked_card(self) -> str:
        return mask_card_number(self._card_number)

    def details(self) -> dict[str, str]:
        return {"card": self.masked_card}

    def settle(self, amount: Money) -> SettlementResult:
        authorization_code = str(self._rng.randint(100000, 999999))
        logger.info(
            "settlement_succeeded",
            method="card",
            card=self.masked_card,
            amount=str(amount.amount),
            authorization_code=authorization_code,
        )
        return self._succeeded(amount, reference=authorization_code)


@register_payment_strategy(PaymentMethod.TRANSFER)
class TransferPayment(PaymentStrategy):
    """Bank transfer to the restaurant's account."""

    def __init__(self, account_number: str, clock: Clock | None = None):
        self.account_number = account_number
        self._clock = clock or _utc_now

    @property
    def display_name(self) -> str:
        return "Transfer"

    def details(self) -> dict[str, str]:
        return {"account": self.account_number}

    def settle(self, amount: Money) -> SettlementResult:
        reference = f"TRF-{int(self._clock().timestamp() * 1000)}"
        logger.info(
            "settlement_succeeded",
            method="transfer",
            account=self.account_number,
            amount=str(amount.amount),
            reference=reference,
        )
        return self._succeeded(amount, reference=reference)
