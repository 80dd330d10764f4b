"""
Domain exceptions for the restaurant order system.

Every exception carries:
- A machine-readable error code
- The offending value as metadata (for logs and CLI messages)

Two kinds matter to the session:
- InvalidOrderType is raised to the caller; the session is left untouched.
- SettlementFailed never leaves the session; it becomes a PAYMENT_FAILED outcome.
"""

from typing import Any, Dict


class RestaurantError(Exception):
    """Base exception for all order-system errors."""

    def __init__(self, message: str, error_code: str, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.metadata = kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for structured output."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "type": self.__class__.__name__,
                **self.metadata,
            }
        }


class InvalidOrderType(RestaurantError):
    """The catalog has no base order for this tag."""

    def __init__(self, order_type: Any):
        super().__init__(
            message=f"Invalid order type: {order_type!r}",
            error_code="invalid_order_type",
            order_type=str(order_type),
        )


class InvalidModifierKind(RestaurantError):
    """The modifier table has no entry for this kind."""

    def __init__(self, kind: Any):
        super().__init__(
            message=f"Invalid modifier kind: {kind!r}",
            error_code="invalid_modifier_kind",
            kind=str(kind),
        )


class SettlementFailed(RestaurantError):
    """
    A payment strategy could not collect the amount.

    Strategies may raise this instead of returning a failed result.
    """

    def __init__(self, message: str, method: str, amount: Any = None):
        super().__init__(
            message=message,
            error_code="settlement_failed",
            method=method,
            amount=str(amount) if amount is not None else None,
        )
        self.method = method


class UnknownPaymentMethod(RestaurantError):
    """No payment strategy is registered under this method."""

    def __init__(self, method: Any):
        super().__init__(
            message=f"Unknown payment method: {method!r}",
            error_code="unknown_payment_method",
            method=str(method),
        )


class CurrencyMismatch(RestaurantError):
    """Money arithmetic across two currencies."""

    def __init__(self, left: Any, right: Any):
        super().__init__(
            message=f"Cannot combine {left} with {right} - convert first",
            error_code="currency_mismatch",
            left=str(left),
            right=str(right),
        )
