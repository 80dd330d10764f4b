"""
Modifiers - priced extras that wrap an order.

A modifier is a pure transform:
- price: wrapped price + price_delta
- description: wrapped description + " + <label>"
- assembly: wrapped assembly first, then assembly_note

Modifiers hold no state of their own. The table below is the only place
their prices live.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from restaurant_orders.domain.enums import ModifierKind
from restaurant_orders.domain.errors import InvalidModifierKind
from restaurant_orders.domain.value_objects import Money


class Modifier(BaseModel):
    """One node of the decoration chain."""

    model_config = ConfigDict(frozen=True)

    kind: ModifierKind
    label: str
    price_delta: Money
    assembly_note: str

    @property
    def suffix(self) -> str:
        return f" + {self.label}"


MODIFIER_CATALOG: dict[ModifierKind, Modifier] = {
    ModifierKind.EXTRA_CHEESE: Modifier(
        kind=ModifierKind.EXTRA_CHEESE,
        label="Extra Cheese",
        price_delta=Money.of("8.00"),
        assembly_note="Adding top quality EXTRA CHEESE",
    ),
    ModifierKind.EXTRA_PORTION: Modifier(
        kind=ModifierKind.EXTRA_PORTION,
        label="Extra Portion",
        price_delta=Money.of("15.00"),
        assembly_note="Adding an EXTRA PORTION (double size)",
    ),
    ModifierKind.PREMIUM_DRINK: Modifier(
        kind=ModifierKind.PREMIUM_DRINK,
        label="Premium Drink",
        price_delta=Money.of("12.00"),
        assembly_note="Adding a PREMIUM DRINK (fresh juice or smoothie)",
    ),
}


def resolve_modifier(kind: ModifierKind | str) -> Modifier:
    """Look up a modifier by enum member or its string value."""
    try:
        return MODIFIER_CATALOG[ModifierKind(kind)]
    except (ValueError, KeyError) as exc:
        raise InvalidModifierKind(kind) from exc
