"""
Pytest configuration and fixtures for restaurant order tests.
"""

import io
import logging
import random
from datetime import datetime, timezone

import pytest
import structlog
from rich.console import Console

from restaurant_orders.config import Settings
from restaurant_orders.domain.value_objects import Money
from restaurant_orders.payments import CardPayment, CashPayment, PaymentStrategy, TransferPayment
from restaurant_orders.payments.base import SettlementResult
from restaurant_orders.presentation import ConsolePresenter, OrderPresenter
from restaurant_orders.session import OrderSession

FIXED_NOW = datetime(2024, 3, 15, 12, 30, 45, tzinfo=timezone.utc)


class DecliningPayment(PaymentStrategy):
    """Strategy that always reports failure through its result."""

    def __init__(self):
        self.attempts = 0

    @property
    def display_name(self) -> str:
        return "Declining"

    def settle(self, amount: Money) -> SettlementResult:
        self.attempts += 1
        return self._failed(amount, reason="insufficient funds")


class RecordingPresenter(OrderPresenter):
    """Presenter that records the hooks the session called, in order."""

    def __init__(self):
        self.calls = []

    def order_started(self, order_type):
        self.calls.append(("order_started", order_type))

    def order_created(self, order):
        self.calls.append(("order_created", order.name))

    def modifier_applied(self, order, modifier):
        self.calls.append(("modifier_applied", modifier.kind))

    def order_summarized(self, order):
        self.calls.append(("order_summarized", order.description))

    def order_assembled(self, order, steps):
        self.calls.append(("order_assembled", tuple(steps)))

    def payment_started(self, order, payment):
        self.calls.append(("payment_started", payment.display_name))

    def payment_finished(self, order, result):
        self.calls.append(("payment_finished", result.success))

    def order_finished(self, outcome):
        self.calls.append(("order_finished", outcome))

    def statistics_shown(self, statistics):
        self.calls.append(("statistics_shown", statistics.count))

    @property
    def hook_names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def session():
    """Fresh session with no presenter."""
    return OrderSession()


@pytest.fixture
def cash():
    return CashPayment()


@pytest.fixture
def card():
    """Card strategy with a seeded random source."""
    return CardPayment("1234567890123456", rng=random.Random(42))


@pytest.fixture
def transfer():
    """Transfer strategy with a frozen clock."""
    return TransferPayment("1000-2000-3000", clock=lambda: FIXED_NOW)


@pytest.fixture
def declining():
    return DecliningPayment()


@pytest.fixture
def recording_presenter():
    return RecordingPresenter()


@pytest.fixture
def test_settings():
    """Create test settings."""
    return Settings(
        app_name="restaurant-orders-test",
        app_env="test",
        log_level="DEBUG",
        currency_symbol="Bs.",
    )


@pytest.fixture
def console_buffer():
    """Rich console writing to an in-memory buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, force_terminal=False, color_system=None)
    return console, buffer


@pytest.fixture
def console_presenter(console_buffer, test_settings):
    console, _ = console_buffer
    return ConsolePresenter(console=console, settings=test_settings, clock=lambda: FIXED_NOW)


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers added by setup_logging() so none outlive a captured stream."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
