"""Presentation layer: renders what the session reports, never feeds back into it."""

from restaurant_orders.presentation.base import NullPresenter, OrderPresenter
from restaurant_orders.presentation.console import ConsolePresenter

__all__ = ["ConsolePresenter", "NullPresenter", "OrderPresenter"]
