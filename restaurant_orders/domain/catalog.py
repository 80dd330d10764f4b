"""
Order Catalog - the factory for base orders.

Each OrderType maps to exactly one fixed entry. create_order() is the ONLY
way to obtain a base Order, so catalog prices cannot drift between callers.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict

from restaurant_orders.domain.enums import OrderType
from restaurant_orders.domain.errors import InvalidOrderType
from restaurant_orders.domain.order import Order
from restaurant_orders.domain.value_objects import Money

logger = structlog.get_logger(__name__)


class CatalogEntry(BaseModel):
    """Fixed (name, price, description) triple for one order type."""

    model_config = ConfigDict(frozen=True)

    order_type: OrderType
    name: str
    base_price: Money
    description: str
    preparation_steps: tuple[str, ...]


ORDER_CATALOG: dict[OrderType, CatalogEntry] = {
    OrderType.BREAKFAST: CatalogEntry(
        order_type=OrderType.BREAKFAST,
        name="Full Breakfast",
        base_price=Money.of("35.00"),
        description="Eggs, toast, orange juice, coffee",
        preparation_steps=(
            "Scrambling eggs",
            "Toasting bread",
            "Squeezing fresh orange juice",
            "Brewing coffee",
        ),
    ),
    OrderType.LUNCH: CatalogEntry(
        order_type=OrderType.LUNCH,
        name="Executive Lunch",
        base_price=Money.of("45.00"),
        description="Soup, main course, dessert, soft drink",
        preparation_steps=(
            "Heating the soup of the day",
            "Cooking the main course (chicken with rice)",
            "Preparing a fresh salad",
            "Serving dessert",
        ),
    ),
    OrderType.DINNER: CatalogEntry(
        order_type=OrderType.DINNER,
        name="Special Dinner",
        base_price=Money.of("55.00"),
        description="Starter, gourmet main course, wine, dessert",
        preparation_steps=(
            "Preparing the starter (caprese salad)",
            "Cooking the gourmet main course (steak with potatoes)",
            "Pouring the house wine",
            "Preparing the special dessert",
        ),
    ),
}


def parse_order_type(order_type: Any) -> OrderType:
    """
    Resolve an OrderType from a member, its value ("lunch") or its name ("LUNCH").

    Raises:
        InvalidOrderType: for anything outside the closed enumeration
    """
    if isinstance(order_type, OrderType):
        return order_type
    if isinstance(order_type, str):
        tag = order_type.strip()
        try:
            return OrderType(tag.lower())
        except ValueError:
            pass
        if tag.upper() in OrderType.__members__:
            return OrderType[tag.upper()]
    raise InvalidOrderType(order_type)


def catalog_entry(order_type: OrderType | str) -> CatalogEntry:
    return ORDER_CATALOG[parse_order_type(order_type)]


def list_catalog() -> list[CatalogEntry]:
    """All catalog entries in enumeration order."""
    return [ORDER_CATALOG[order_type] for order_type in OrderType]


def create_order(order_type: OrderType | str) -> Order:
    """
    Factory method: build a fresh base order.

    No two calls share state; every Order returned is a new value.
    """
    entry = catalog_entry(order_type)
    order = Order(
        order_type=entry.order_type,
        name=entry.name,
        base_price=entry.base_price,
        base_description=entry.description,
        preparation_steps=entry.preparation_steps,
    )
    logger.debug(
        "order_created",
        order_type=entry.order_type.value,
        name=order.name,
        price=str(order.price.amount),
    )
    return order
