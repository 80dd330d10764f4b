"""
Order Session - orchestrates factory, modifiers and payment.

Each process_order() call runs three phases, in order, with no loopback:

    COMPOSE  -> catalog builds the base order, modifiers wrap it
                (fixed priority: cheese, portion, drink)
    ASSEMBLE -> the decorated order's kitchen steps, innermost first
    SETTLE   -> one payment attempt with the final price

Outcome:
- COMPLETED: order appended to the session
- PAYMENT_FAILED: order discarded, nothing recorded

The completed-orders list is the only shared mutable state. Appends and
snapshots happen under a single lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict

from restaurant_orders.domain.catalog import create_order, parse_order_type
from restaurant_orders.domain.enums import ModifierKind, OrderOutcome, OrderType
from restaurant_orders.domain.errors import SettlementFailed
from restaurant_orders.domain.order import Order, apply_modifier
from restaurant_orders.domain.value_objects import Money
from restaurant_orders.payments.base import PaymentStrategy, SettlementResult
from restaurant_orders.presentation.base import NullPresenter, OrderPresenter

logger = structlog.get_logger(__name__)

MODIFIER_PRIORITY: tuple[ModifierKind, ...] = (
    ModifierKind.EXTRA_CHEESE,
    ModifierKind.EXTRA_PORTION,
    ModifierKind.PREMIUM_DRINK,
)


@dataclass(frozen=True)
class ProcessResult:
    """What one process_order() call produced."""

    order: Order | None
    outcome: OrderOutcome
    settlement: SettlementResult

    @property
    def completed(self) -> bool:
        return self.outcome is OrderOutcome.COMPLETED


class SessionStatistics(BaseModel):
    """Read-only fold over completed orders."""

    model_config = ConfigDict(frozen=True)

    count: int
    total_revenue: Money
    average_per_order: Decimal


class OrderSession:
    """
    Process-scoped aggregator of settled orders.

    Usage:
        session = OrderSession()
        result = session.process_order(
            OrderType.LUNCH, add_cheese=True, add_drink=True, payment=CashPayment()
        )
        session.statistics().total_revenue  # Money(65.00, BOB)
    """

    def __init__(self, presenter: OrderPresenter | None = None):
        self._presenter = presenter or NullPresenter()
        self._completed: list[Order] = []
        self._lock = threading.Lock()

    @property
    def completed_orders(self) -> tuple[Order, ...]:
        """Snapshot of completed orders in completion order."""
        with self._lock:
            return tuple(self._completed)

    def process_order(
        self,
        order_type: OrderType | str,
        add_cheese: bool = False,
        add_portion: bool = False,
        add_drink: bool = False,
        *,
        payment: PaymentStrategy,
    ) -> ProcessResult:
        """
        Compose, assemble and settle one order.

        Raises:
            InvalidOrderType: before any phase runs; the session is unchanged
        """
        resolved_type = parse_order_type(order_type)
        log = logger.bind(order_type=resolved_type.value, payment_method=payment.display_name)
        self._presenter.order_started(resolved_type)

        # 1. COMPOSE
        order = create_order(resolved_type)
        self._presenter.order_created(order)

        flags = {
            ModifierKind.EXTRA_CHEESE: add_cheese,
            ModifierKind.EXTRA_PORTION: add_portion,
            ModifierKind.PREMIUM_DRINK: add_drink,
        }
        for kind in MODIFIER_PRIORITY:
            if flags[kind]:
                order = apply_modifier(order, kind)
                self._presenter.modifier_applied(order, order.modifiers[-1])

        self._presenter.order_summarized(order)

        # 2. ASSEMBLE
        steps = order.assemble()
        self._presenter.order_assembled(order, steps)

        # 3. SETTLE
        self._presenter.payment_started(order, payment)
        settlement = self._settle(order, payment)
        self._presenter.payment_finished(order, settlement)

        if settlement.success:
            with self._lock:
                self._completed.append(order)
            log.info(
                "order_completed",
                name=order.name,
                price=str(order.price.amount),
                modifiers=[kind.value for kind in order.applied_modifiers],
            )
            self._presenter.order_finished(OrderOutcome.COMPLETED)
            return ProcessResult(order=order, outcome=OrderOutcome.COMPLETED, settlement=settlement)

        log.warning(
            "order_discarded",
            name=order.name,
            price=str(order.price.amount),
            reason=settlement.failure_reason,
        )
        self._presenter.order_finished(OrderOutcome.PAYMENT_FAILED)
        return ProcessResult(order=None, outcome=OrderOutcome.PAYMENT_FAILED, settlement=settlement)

    def _settle(self, order: Order, payment: PaymentStrategy) -> SettlementResult:
        """Single settlement attempt; a raised SettlementFailed becomes a failed result."""
        amount = order.price
        try:
            return payment.settle(amount)
        except SettlementFailed as exc:
            logger.warning(
                "settlement_failed",
                payment_method=payment.display_name,
                amount=str(amount.amount),
                error_code=exc.error_code,
                reason=exc.message,
            )
            return SettlementResult(
                success=False,
                amount=amount,
                method_name=payment.display_name,
                failure_reason=exc.message,
                details=payment.details(),
            )

    def statistics(self) -> SessionStatistics:
        """Count, total and mean over completed orders (mean is 0 when empty)."""
        orders = self.completed_orders
        total = Money.zero()
        for order in orders:
            total = total + order.price
        count = len(orders)
        average = total.amount / count if count else Decimal("0")
        return SessionStatistics(count=count, total_revenue=total, average_per_order=average)

    def show_statistics(self) -> SessionStatistics:
        stats = self.statistics()
        self._presenter.statistics_shown(stats)
        return stats

    def summary(self) -> dict[str, Any]:
        """Plain dict of the statistics, for JSON output."""
        stats = self.statistics()
        return {
            "count": stats.count,
            "total_revenue": str(stats.total_revenue.amount),
            "average_per_order": str(stats.average_per_order),
        }
