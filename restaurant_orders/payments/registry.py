"""
Registration table from payment method to strategy factory.

New rails are added with @register_payment_strategy("wallet") instead of
growing an if/elif chain.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from restaurant_orders.domain.enums import PaymentMethod
from restaurant_orders.domain.errors import UnknownPaymentMethod
from restaurant_orders.payments.base import PaymentStrategy

StrategyFactory = Callable[..., PaymentStrategy]
F = TypeVar("F", bound=StrategyFactory)

_REGISTRY: dict[str, StrategyFactory] = {}


def _key(method: PaymentMethod | str) -> str:
    if isinstance(method, PaymentMethod):
        return method.value
    return str(method).strip().lower()


def register_payment_strategy(method: PaymentMethod | str) -> Callable[[F], F]:
    """Class decorator registering a strategy under ``method``."""

    def decorator(factory: F) -> F:
        _REGISTRY[_key(method)] = factory
        return factory

    return decorator


def registered_methods() -> list[str]:
    return sorted(_REGISTRY)


def create_payment_strategy(method: PaymentMethod | str, **details: Any) -> PaymentStrategy:
    """
    Build a strategy by method name.

    Example:
        create_payment_strategy("card", card_number="1234567890123456")
    """
    try:
        factory = _REGISTRY[_key(method)]
    except KeyError as exc:
        raise UnknownPaymentMethod(method) from exc
    return factory(**details)
