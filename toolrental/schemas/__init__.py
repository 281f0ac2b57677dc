"""Pydantic schemas for the tool rental service."""

from toolrental.schemas.payment import PaymentCaptureResponse, PaymentOrderResponse
from toolrental.schemas.rent import RentCreate, RentReject, RentResponse

__all__ = [
    "RentCreate",
    "RentReject",
    "RentResponse",
    "PaymentOrderResponse",
    "PaymentCaptureResponse",
]
