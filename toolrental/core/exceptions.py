"""
Domain exceptions for the tool rental service.

Every exception is an ``HTTPException`` so routers and the centralized
handlers render them without a translation layer, while services and tests
can still tell the failure kinds apart by type.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class RentalError(HTTPException):
    """Base class for failures raised by the rental core."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Rental operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(status_code=self.status_code, detail=self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class BookingValidationError(RentalError):
    """Raised when a requested interval is structurally invalid."""

    default_message = "Invalid booking dates"


class RentOverlapError(BookingValidationError):
    """Raised when a requested interval collides with a live rent of the same tool."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Tool is not available for the selected dates"


class InvalidRentTransitionError(RentalError):
    """Raised when a rent cannot move from its current status to the requested one."""

    default_message = "Invalid rent status transition"


class RentAuthorizationError(RentalError):
    """Raised when the caller is not allowed to act on a rent."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed to modify this rent"


class ResourceNotFoundError(RentalError):
    """Raised when a rent or tool id cannot be resolved."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class RentConcurrencyError(RentalError):
    """Raised when a rent was modified by another request in the meantime."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Rent was modified by another request, please retry"


class PaymentGatewayError(RentalError):
    """Raised when the payment provider is unreachable or answers unexpectedly."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Payment provider error"


__all__ = [
    "RentalError",
    "BookingValidationError",
    "RentOverlapError",
    "InvalidRentTransitionError",
    "RentAuthorizationError",
    "ResourceNotFoundError",
    "RentConcurrencyError",
    "PaymentGatewayError",
]
