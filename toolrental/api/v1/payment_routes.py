"""API routes for paying rents through PayPal."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from toolrental.core.security import get_current_user
from toolrental.dependencies import get_db, get_payment_gateway
from toolrental.schemas.payment import PaymentCaptureResponse, PaymentOrderResponse
from toolrental.services.payment_service import DEFAULT_CURRENCY, PaymentService
from toolrental.services.paypal_client import PayPalClient

router = APIRouter(
    prefix="/paypal",
    tags=["payments"],
    dependencies=[Depends(get_current_user)],
)


@router.post("/orders", response_model=PaymentOrderResponse)
def create_order(
    rent_id: int = Query(..., alias="rentId", description="Rent id, 0 for pay-first"),
    amount: Decimal = Query(..., gt=0, description="Payment amount"),
    currency: str = Query(DEFAULT_CURRENCY, min_length=3, max_length=3),
    description: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    gateway: PayPalClient = Depends(get_payment_gateway),
) -> PaymentOrderResponse:
    service = PaymentService(db, gateway)
    return service.create_order(rent_id, amount, currency, description)


@router.post("/orders/{order_id}/capture", response_model=PaymentCaptureResponse)
def capture_order(
    order_id: str,
    rent_id: int = Query(..., alias="rentId", description="Rent correlated with the order"),
    db: Session = Depends(get_db),
    gateway: PayPalClient = Depends(get_payment_gateway),
) -> PaymentCaptureResponse:
    service = PaymentService(db, gateway)
    return service.capture_order(order_id, rent_id)


@router.get("/orders/{order_id}", response_model=PaymentOrderResponse)
def get_order_details(
    order_id: str,
    db: Session = Depends(get_db),
    gateway: PayPalClient = Depends(get_payment_gateway),
) -> PaymentOrderResponse:
    service = PaymentService(db, gateway)
    return service.get_order_details(order_id)


__all__ = ["router"]
