"""
Payment strategies using the Strategy pattern.

Usage:
    from restaurant_orders.payments import create_payment_strategy

    strategy = create_payment_strategy("card", card_number="1234567890123456")
    result = strategy.settle(order.price)
"""

from restaurant_orders.payments.base import PaymentStrategy, SettlementResult
from restaurant_orders.payments.registry import (
    create_payment_strategy,
    register_payment_strategy,
    registered_methods,
)
from restaurant_orders.payments.strategies import (
    CardPayment,
    CashPayment,
    TransferPayment,
    mask_card_number,
)

__all__ = [
    "CardPayment",
    "CashPayment",
    "PaymentStrategy",
    "SettlementResult",
    "TransferPayment",
    "create_payment_strategy",
    "mask_card_number",
    "register_payment_strategy",
    "registered_methods",
]
