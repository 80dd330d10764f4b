"""Rich console narration of an order's journey through the session."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Callable

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from restaurant_orders.config import Settings, get_settings
from restaurant_orders.domain.enums import OrderOutcome, OrderType
from restaurant_orders.domain.modifiers import Modifier
from restaurant_orders.domain.order import Order
from restaurant_orders.domain.value_objects import Money
from restaurant_orders.payments.base import PaymentStrategy, SettlementResult
from restaurant_orders.presentation.base import OrderPresenter

if TYPE_CHECKING:
    from restaurant_orders.session import SessionStatistics


class ConsolePresenter(OrderPresenter):
    """Prints every phase boundary to a rich Console."""

    def __init__(
        self,
        console: Console | None = None,
        settings: Settings | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.console = console or Console()
        self.settings = settings or get_settings()
        self._clock = clock

    def format_amount(self, amount: Money | Decimal) -> str:
        value = amount.amount if isinstance(amount, Money) else amount
        return f"{self.settings.currency_symbol} {value:.2f}"

    def order_started(self, order_type: OrderType) -> None:
        self.console.print(Rule("[bold]PROCESSING NEW ORDER[/bold]"))
        timestamp = self._clock().strftime(self.settings.timestamp_format)
        self.console.print(f"Date: {timestamp}\n")

    def order_created(self, order: Order) -> None:
        self.console.print(f"[green]✓[/green] Order created: {order.name}")

    def modifier_applied(self, order: Order, modifier: Modifier) -> None:
        self.console.print(
            f"[green]✓[/green] Added: {modifier.label} (+{self.format_amount(modifier.price_delta)})"
        )

    def order_summarized(self, order: Order) -> None:
        body = f"{order.description}\nPrice: {self.format_amount(order.price)}"
        self.console.print(Panel(body, title=order.name, subtitle="ORDER SUMMARY"))

    def order_assembled(self, order: Order, steps: list[str]) -> None:
        self.console.print(Rule("PREPARATION"))
        for step in steps:
            self.console.print(f"  - {step}")
        self.console.print("[green]✅ Order fully prepared![/green]\n")

    def payment_started(self, order: Order, payment: PaymentStrategy) -> None:
        self.console.print(Rule("PAYMENT"))
        self.console.print(f"Selected method: {payment.display_name}")
        self.console.print(f"Total amount: {self.format_amount(order.price)}")

    def payment_finished(self, order: Order, result: SettlementResult) -> None:
        for label, value in result.details.items():
            self.console.print(f"  {label.capitalize()}: {value}")
        if result.success:
            self.console.print(f"  [green]✅ {result.method_name} payment approved[/green]")
            if result.reference:
                self.console.print(f"  Reference: {result.reference}")
        else:
            self.console.print(f"  [red]❌ Payment failed: {result.failure_reason}[/red]")

    def order_finished(self, outcome: OrderOutcome) -> None:
        if outcome is OrderOutcome.COMPLETED:
            self.console.print("[bold green]✅ ORDER COMPLETED SUCCESSFULLY![/bold green]")
        else:
            self.console.print("[bold red]❌ Error while processing the payment[/bold red]")
        self.console.print(Rule())

    def statistics_shown(self, statistics: SessionStatistics) -> None:
        table = Table(title="RESTAURANT STATISTICS")
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Orders processed", str(statistics.count))
        table.add_row("Total revenue", self.format_amount(statistics.total_revenue))
        table.add_row("Average per order", self.format_amount(statistics.average_per_order))
        self.console.print(table)
