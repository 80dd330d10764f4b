"""
Domain Layer - Pure Business Logic

This layer contains:
- Enums (order types, modifier kinds, payment methods)
- Value objects (Money)
- The order catalog (factory) and the modifier chain (decorator)
- Domain errors

Key principle: ZERO dependencies on presentation.
The session and the console can change without touching pricing rules.
"""

from restaurant_orders.domain.catalog import catalog_entry, create_order, list_catalog
from restaurant_orders.domain.enums import ModifierKind, OrderType, PaymentMethod
from restaurant_orders.domain.errors import (
    CurrencyMismatch,
    InvalidModifierKind,
    InvalidOrderType,
    RestaurantError,
    SettlementFailed,
    UnknownPaymentMethod,
)
from restaurant_orders.domain.order import Order, apply_modifier
from restaurant_orders.domain.value_objects import Currency, Money

__all__ = [
    "Currency",
    "CurrencyMismatch",
    "InvalidModifierKind",
    "InvalidOrderType",
    "ModifierKind",
    "Money",
    "Order",
    "OrderType",
    "PaymentMethod",
    "RestaurantError",
    "SettlementFailed",
    "UnknownPaymentMethod",
    "apply_modifier",
    "catalog_entry",
    "create_order",
    "list_catalog",
]
