"""Logging setup shared by the CLI and library callers."""

from restaurant_orders.observability.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
