"""
Order - the priceable, describable entity.

Design: decoration is a value, not a subclass.

An Order holds its base triple (name, base_price, base_description) plus an
immutable chain of modifiers. Price and description are folds over that chain:

    Order(LUNCH) -> with EXTRA_CHEESE -> with PREMIUM_DRINK
    price       = 45.00 + 8.00 + 12.00
    description = "Soup, ..." + " + Extra Cheese" + " + Premium Drink"

Wrapping returns a new Order; the inner one is never shared or mutated.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ConfigDict

from restaurant_orders.domain.enums import ModifierKind, OrderType
from restaurant_orders.domain.modifiers import Modifier, resolve_modifier
from restaurant_orders.domain.value_objects import Money

logger = structlog.get_logger(__name__)


class Order(BaseModel):
    """
    Order value object.

    Invariants:
    - name never changes through decoration
    - price == base_price + sum(modifier deltas)
    - description == base_description + suffixes in application order
    """

    model_config = ConfigDict(frozen=True)

    order_type: OrderType
    name: str
    base_price: Money
    base_description: str
    preparation_steps: tuple[str, ...] = ()
    modifiers: tuple[Modifier, ...] = ()

    @property
    def price(self) -> Money:
        total = self.base_price
        for modifier in self.modifiers:
            total = total + modifier.price_delta
        return total

    @property
    def description(self) -> str:
        return self.base_description + "".join(m.suffix for m in self.modifiers)

    @property
    def applied_modifiers(self) -> tuple[ModifierKind, ...]:
        """Modifier kinds in the order they were applied (duplicates kept)."""
        return tuple(m.kind for m in self.modifiers)

    def with_modifier(self, kind: ModifierKind | str) -> Order:
        """Wrap this order with one more modifier."""
        modifier = resolve_modifier(kind)
        return self.model_copy(update={"modifiers": self.modifiers + (modifier,)})

    def assemble(self) -> list[str]:
        """
        Kitchen steps for this order, innermost first.

        The base order's preparation always completes before any modifier's
        note, and modifier notes follow application order.
        """
        steps = list(self.preparation_steps)
        steps.extend(m.assembly_note for m in self.modifiers)
        return steps


def apply_modifier(order: Order, kind: ModifierKind | str) -> Order:
    """Decorate ``order`` with ``kind`` and return the wrapping order."""
    wrapped = order.with_modifier(kind)
    logger.debug(
        "modifier_applied",
        order_name=wrapped.name,
        modifier=wrapped.modifiers[-1].kind.value,
        price=str(wrapped.price.amount),
    )
    return wrapped
