"""Tests for the order catalog (factory)."""

from decimal import Decimal

import pytest

from restaurant_orders.domain.catalog import (
    ORDER_CATALOG,
    catalog_entry,
    create_order,
    list_catalog,
    parse_order_type,
)
from restaurant_orders.domain.enums import OrderType
from restaurant_orders.domain.errors import InvalidOrderType
from restaurant_orders.domain.value_objects import Money


class TestCreateOrder:
    """Every order type yields exactly its catalog entry."""

    @pytest.mark.parametrize(
        "order_type,name,price,description",
        [
            (OrderType.BREAKFAST, "Full Breakfast", "35.00", "Eggs, toast, orange juice, coffee"),
            (OrderType.LUNCH, "Executive Lunch", "45.00", "Soup, main course, dessert, soft drink"),
            (OrderType.DINNER, "Special Dinner", "55.00", "Starter, gourmet main course, wine, dessert"),
        ],
    )
    def test_catalog_values(self, order_type, name, price, description):
        order = create_order(order_type)

        assert order.order_type == order_type
        assert order.name == name
        assert order.price == Money.of(price)
        assert order.base_price == Money.of(price)
        assert order.description == description
        assert order.modifiers == ()

    def test_each_call_returns_fresh_order(self):
        first = create_order(OrderType.LUNCH)
        second = create_order(OrderType.LUNCH)

        assert first is not second
        assert first == second

    def test_base_order_is_immutable(self):
        order = create_order(OrderType.DINNER)

        with pytest.raises(Exception):
            order.name = "Renamed"

    @pytest.mark.parametrize("tag", ["lunch", "LUNCH", "Lunch", " lunch "])
    def test_accepts_string_tags(self, tag):
        assert create_order(tag).order_type == OrderType.LUNCH


class TestInvalidOrderType:
    """Anything outside the enumeration is rejected."""

    @pytest.mark.parametrize("tag", ["brunch", "", 3, None, "supper"])
    def test_unknown_tag_raises(self, tag):
        with pytest.raises(InvalidOrderType) as exc_info:
            create_order(tag)

        assert exc_info.value.error_code == "invalid_order_type"

    def test_error_payload(self):
        with pytest.raises(InvalidOrderType) as exc_info:
            parse_order_type("brunch")

        payload = exc_info.value.to_dict()
        assert payload["error"]["code"] == "invalid_order_type"
        assert payload["error"]["type"] == "InvalidOrderType"
        assert payload["error"]["order_type"] == "brunch"


class TestCatalogListing:
    def test_list_catalog_in_enum_order(self):
        entries = list_catalog()

        assert [e.order_type for e in entries] == list(OrderType)
        assert len(entries) == len(ORDER_CATALOG)

    def test_catalog_entry_lookup(self):
        entry = catalog_entry("dinner")

        assert entry.name == "Special Dinner"
        assert entry.base_price.amount == Decimal("55.00")
        assert len(entry.preparation_steps) == 4
