"""
Structured logging configuration.

Uses structlog so every order event carries key/value fields
(order_type, price, payment_method) instead of free text.
"""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from restaurant_orders.config import Settings, get_settings


def add_app_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add application context to log events.

    Args:
        logger: Logger instance
        method_name: Log method name
        event_dict: Event dictionary

    Returns:
        dict[str, Any]: Enhanced event dictionary
    """
    settings = get_settings()
    event_dict["app_name"] = settings.app_name
    event_dict["app_env"] = settings.app_env
    return event_dict


def scrub_card_numbers(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Keep only the last 4 digits of any card number that reaches a log line."""
    value = event_dict.get("card_number")
    if isinstance(value, str):
        event_dict["card_number"] = f"***{value[-4:]}" if len(value) > 4 else "***REDACTED***"
    return event_dict


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure structured logging.

    Sets up:
    - Structured log fields with ISO timestamps
    - JSON output (production or RESTAURANT_LOG_JSON=true) or console output
    - Card number scrubbing
    """
    settings = settings or get_settings()
    use_json = settings.log_json or settings.is_production

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_app_context,
            scrub_card_numbers,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level_number)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Logs go to stderr so they never interleave with the console narration
    handler = logging.StreamHandler(sys.stderr)
    if use_json:
        handler.setFormatter(jsonlogger.JsonFormatter("%(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "logging_configured",
        log_level=settings.log_level,
        app_env=settings.app_env,
        json=use_json,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        Any: Structured logger
    """
    return structlog.get_logger(name)
