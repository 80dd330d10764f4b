"""Tests for the typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from restaurant_orders.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestMenu:
    def test_lists_orders_and_extras(self, runner):
        result = runner.invoke(app, ["menu"])

        assert result.exit_code == 0
        assert "Executive Lunch" in result.output
        assert "Extra Portion" in result.output
        assert "--drink" in result.output


class TestOrderCommand:
    def test_lunch_with_extras_json(self, runner):
        result = runner.invoke(
            app, ["order", "lunch", "--cheese", "--drink", "--pay", "card", "--json"]
        )

        assert result.exit_code == 0
        start = result.stdout.index("{")
        end = result.stdout.rindex("}") + 1
        payload = json.loads(result.stdout[start:end])
        assert payload == {
            "outcome": "completed",
            "count": 1,
            "total_revenue": "65.00",
            "average_per_order": "65.00",
        }

    def test_narrated_order(self, runner):
        result = runner.invoke(app, ["order", "dinner", "--portion", "--pay", "transfer"])

        assert result.exit_code == 0
        assert "Special Dinner" in result.output
        assert "TRF-" in result.output
        assert "Bs. 70.00" in result.output

    def test_invalid_order_type(self, runner):
        result = runner.invoke(app, ["order", "brunch"])

        assert result.exit_code == 1
        assert "Invalid order type" in result.output

    def test_unknown_payment_method(self, runner):
        result = runner.invoke(app, ["order", "lunch", "--pay", "crypto"])

        assert result.exit_code == 1
        assert "Unknown payment method" in result.output


class TestDemo:
    def test_demo_runs(self, runner):
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert "Executive Lunch" in result.output
        assert "**** **** **** 3456" in result.output
        assert "Bs. 65.00" in result.output
        assert "PATTERNS IMPLEMENTED" in result.output
