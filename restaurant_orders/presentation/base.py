"""
Presenter contract.

The session calls these hooks at each phase boundary. The core never depends
on whether or how they render anything; the base class ignores every hook.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from restaurant_orders.domain.enums import OrderOutcome, OrderType
from restaurant_orders.domain.modifiers import Modifier
from restaurant_orders.domain.order import Order
from restaurant_orders.payments.base import PaymentStrategy, SettlementResult

if TYPE_CHECKING:
    from restaurant_orders.session import SessionStatistics


class OrderPresenter:
    """No-op presenter. Subclass and override the hooks you care about."""

    def order_started(self, order_type: OrderType) -> None:
        pass

    def order_created(self, order: Order) -> None:
        pass

    def modifier_applied(self, order: Order, modifier: Modifier) -> None:
        pass

    def order_summarized(self, order: Order) -> None:
        pass

    def order_assembled(self, order: Order, steps: list[str]) -> None:
        pass

    def payment_started(self, order: Order, payment: PaymentStrategy) -> None:
        pass

    def payment_finished(self, order: Order, result: SettlementResult) -> None:
        pass

    def order_finished(self, outcome: OrderOutcome) -> None:
        pass

    def statistics_shown(self, statistics: SessionStatistics) -> None:
        pass


NullPresenter = OrderPresenter
