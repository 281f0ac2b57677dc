"""Pydantic schemas for payment gateway orders and captures."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class PaymentOrderResponse(BaseModel):
    rent_id: Optional[int] = None
    order_id: str
    status: str
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    approval_url: Optional[str] = None


class PaymentCaptureResponse(BaseModel):
    order_id: str
    status: str
    rent_id: Optional[int] = None
    payer_id: Optional[str] = None
    payer_email: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    capture_id: Optional[str] = None


__all__ = ["PaymentOrderResponse", "PaymentCaptureResponse"]
