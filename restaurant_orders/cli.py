"""CLI for the restaurant order system.

Provides commands to browse the menu, place a single order, and run the
factory / decorator / strategy demonstration.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from restaurant_orders.config import get_settings
from restaurant_orders.domain.catalog import list_catalog
from restaurant_orders.domain.enums import OrderType, PaymentMethod
from restaurant_orders.domain.errors import RestaurantError
from restaurant_orders.domain.modifiers import MODIFIER_CATALOG
from restaurant_orders.observability import get_logger, setup_logging
from restaurant_orders.payments import PaymentStrategy, create_payment_strategy
from restaurant_orders.presentation import ConsolePresenter, NullPresenter
from restaurant_orders.session import OrderSession

# Initialize Typer app
app = typer.Typer(
    name="restaurant-orders",
    help="Restaurant order system - factory, decorator and strategy patterns",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

DEMO_CARD_NUMBER = "1234567890123456"
DEMO_ACCOUNT_NUMBER = "1000-2000-3000"


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)


def build_payment(method: str, card_number: str, account: str) -> PaymentStrategy:
    """Map CLI options onto the registered strategy's constructor."""
    details = {
        PaymentMethod.CARD.value: {"card_number": card_number},
        PaymentMethod.TRANSFER.value: {"account_number": account},
    }
    return create_payment_strategy(method, **details.get(method.strip().lower(), {}))


@app.command()
def menu() -> None:
    """List base orders and available extras."""
    presenter = ConsolePresenter(console=console)

    orders = Table(title="Orders")
    orders.add_column("Type", style="cyan")
    orders.add_column("Name")
    orders.add_column("Description")
    orders.add_column("Price", justify="right")
    for entry in list_catalog():
        orders.add_row(
            entry.order_type.value,
            entry.name,
            entry.description,
            presenter.format_amount(entry.base_price),
        )
    console.print(orders)

    extras = Table(title="Extras")
    extras.add_column("Option", style="cyan")
    extras.add_column("Extra")
    extras.add_column("Price", justify="right")
    options = {"extra_cheese": "--cheese", "extra_portion": "--portion", "premium_drink": "--drink"}
    for kind, modifier in MODIFIER_CATALOG.items():
        extras.add_row(options[kind.value], modifier.label, f"+{presenter.format_amount(modifier.price_delta)}")
    console.print(extras)


@app.command()
def order(
    order_type: str = typer.Argument(..., help="Order type: breakfast, lunch or dinner"),
    cheese: bool = typer.Option(False, "--cheese", help="Add extra cheese"),
    portion: bool = typer.Option(False, "--portion", help="Add an extra portion"),
    drink: bool = typer.Option(False, "--drink", help="Add a premium drink"),
    pay: str = typer.Option("cash", "--pay", "-p", help="Payment method: cash, card or transfer"),
    card_number: str = typer.Option(DEMO_CARD_NUMBER, "--card-number", help="Card number for --pay card"),
    account: str = typer.Option(DEMO_ACCOUNT_NUMBER, "--account", help="Account for --pay transfer"),
    as_json: bool = typer.Option(False, "--json", help="Print only the statistics as JSON"),
) -> None:
    """Process a single order and print the session statistics."""
    presenter = NullPresenter() if as_json else ConsolePresenter(console=console)
    session = OrderSession(presenter=presenter)

    try:
        payment = build_payment(pay, card_number, account)
        result = session.process_order(
            order_type,
            add_cheese=cheese,
            add_portion=portion,
            add_drink=drink,
            payment=payment,
        )
    except RestaurantError as e:
        logger.error("order_rejected", error_code=e.error_code, error=e.message)
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(data={"outcome": result.outcome.value, **session.summary()})
    else:
        session.show_statistics()

    if not result.completed:
        raise typer.Exit(1)


@app.command()
def demo(
    order_type: Optional[str] = typer.Option(
        None,
        "--order-type",
        "-t",
        help="Override the demo order type",
    ),
) -> None:
    """Run the demonstration: lunch with extra cheese and a premium drink, paid by card."""
    session = OrderSession(presenter=ConsolePresenter(console=console))

    console.print(Panel("RESTAURANT ORDER SYSTEM\nDesign patterns demonstration", expand=False))
    console.print("📌 ORDER: Lunch with extras")
    console.print("   Factory Method: builds the lunch order")
    console.print("   Decorator: adds Extra Cheese + Premium Drink")
    console.print("   Strategy: pays by Card\n")

    try:
        session.process_order(
            order_type or OrderType.LUNCH,
            add_cheese=True,
            add_portion=False,
            add_drink=True,
            payment=build_payment(PaymentMethod.CARD.value, DEMO_CARD_NUMBER, DEMO_ACCOUNT_NUMBER),
        )
    except RestaurantError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    session.show_statistics()

    summary = Table(title="PATTERNS IMPLEMENTED", show_header=False)
    summary.add_column("Pattern", style="bold")
    summary.add_column("Role")
    summary.add_row("Factory Method", "The catalog builds each order type; callers never name concrete classes")
    summary.add_row("Decorator", "Extras wrap an order at runtime without changing the base order")
    summary.add_row("Strategy", "Payment methods are interchangeable behind one settle() contract")
    console.print(summary)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
