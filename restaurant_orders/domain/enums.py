"""Closed enumerations shared across the domain."""

from enum import Enum


class OrderType(str, Enum):
    """Base orders the kitchen knows how to build."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class ModifierKind(str, Enum):
    """Priced extras that can wrap any order."""

    EXTRA_CHEESE = "extra_cheese"
    EXTRA_PORTION = "extra_portion"
    PREMIUM_DRINK = "premium_drink"


class PaymentMethod(str, Enum):
    """Payment rails supported at the counter."""

    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"


class OrderOutcome(str, Enum):
    """
    Terminal result of one processed order.

    COMPLETED: payment settled, order recorded in the session
    PAYMENT_FAILED: payment did not settle, order discarded
    """

    COMPLETED = "completed"
    PAYMENT_FAILED = "payment_failed"
