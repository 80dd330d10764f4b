"""Tests for the rich console presenter."""

from restaurant_orders.domain.enums import OrderType
from restaurant_orders.domain.value_objects import Money
from restaurant_orders.presentation import NullPresenter
from restaurant_orders.session import OrderSession


class TestConsolePresenter:
    def test_full_order_narration(self, console_presenter, console_buffer, card):
        _, buffer = console_buffer
        session = OrderSession(presenter=console_presenter)

        session.process_order(OrderType.LUNCH, add_cheese=True, add_drink=True, payment=card)
        session.show_statistics()
        output = buffer.getvalue()

        assert "PROCESSING NEW ORDER" in output
        assert "Date: 15/03/2024 12:30:45" in output
        assert "Order created: Executive Lunch" in output
        assert "Added: Extra Cheese (+Bs. 8.00)" in output
        assert "Added: Premium Drink (+Bs. 12.00)" in output
        assert "Soup, main course, dessert, soft drink + Extra Cheese + Premium Drink" in output
        assert "Heating the soup of the day" in output
        assert "Selected method: Card" in output
        assert "Total amount: Bs. 65.00" in output
        assert "**** **** **** 3456" in output
        assert "1234567890123456" not in output
        assert "ORDER COMPLETED SUCCESSFULLY" in output
        assert "RESTAURANT STATISTICS" in output
        assert "Bs. 65.00" in output

    def test_assembly_printed_innermost_first(self, console_presenter, console_buffer, cash):
        _, buffer = console_buffer
        session = OrderSession(presenter=console_presenter)

        session.process_order(OrderType.BREAKFAST, add_drink=True, payment=cash)
        output = buffer.getvalue()

        assert output.index("Brewing coffee") < output.index("Adding a PREMIUM DRINK")

    def test_failed_payment_narration(self, console_presenter, console_buffer, declining):
        _, buffer = console_buffer
        session = OrderSession(presenter=console_presenter)

        session.process_order(OrderType.DINNER, payment=declining)
        output = buffer.getvalue()

        assert "Payment failed: insufficient funds" in output
        assert "Error while processing the payment" in output

    def test_format_amount(self, console_presenter):
        assert console_presenter.format_amount(Money.of("7.5")) == "Bs. 7.50"


class TestNullPresenter:
    def test_session_runs_silently(self, cash, capsys):
        session = OrderSession(presenter=NullPresenter())

        result = session.process_order(OrderType.LUNCH, payment=cash)

        assert result.completed
        assert "PROCESSING NEW ORDER" not in capsys.readouterr().out
