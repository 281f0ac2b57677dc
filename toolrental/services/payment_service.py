"""Business logic for paying rents through the payment gateway."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from toolrental.core.exceptions import InvalidRentTransitionError, ResourceNotFoundError
from toolrental.models.enums import RentStatus
from toolrental.repository import rent_repository
from toolrental.schemas.payment import PaymentCaptureResponse, PaymentOrderResponse
from toolrental.services.payment_capture import PaymentCaptureOrchestrator, is_pay_first
from toolrental.services.paypal_client import PayPalClient

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "EUR"
PAY_FIRST_DESCRIPTION = "Tool rental payment - pay first"


class PaymentService:
    def __init__(self, db: Session, gateway: PayPalClient):
        self.db = db
        self.gateway = gateway

    def create_order(
        self,
        rent_id: Optional[int],
        amount: Decimal,
        currency: str = DEFAULT_CURRENCY,
        description: Optional[str] = None,
    ) -> PaymentOrderResponse:
        logger.info("Creating PayPal order for rent %s, amount: %s %s", rent_id, amount, currency)

        if not is_pay_first(rent_id):
            rent = rent_repository.get_rent(self.db, rent_id)
            if rent is None:
                raise ResourceNotFoundError(f"Rent not found with ID: {rent_id}")
            if rent.status != RentStatus.APPROVED:
                raise InvalidRentTransitionError(
                    "Only approved rentals can be paid. Current status: "
                    f"{RentStatus(rent.status).value}"
                )

        if not description:
            description = (
                PAY_FIRST_DESCRIPTION
                if is_pay_first(rent_id)
                else f"Tool rental payment - Rent #{rent_id}"
            )
        order = self.gateway.create_order(amount, currency, description)
        order.rent_id = rent_id
        return order

    def capture_order(self, order_id: str, rent_id: Optional[int]) -> PaymentCaptureResponse:
        """Capture the order and, when it completed, activate the rent.

        A gateway failure propagates before the rent is looked at, so the rent
        keeps its status and the capture can simply be retried.
        """

        logger.info("Capturing PayPal order %s for rent %s", order_id, rent_id)

        capture = self.gateway.capture_order(order_id)
        capture.rent_id = rent_id

        PaymentCaptureOrchestrator(self.db).on_capture_result(rent_id, capture.status)
        return capture

    def get_order_details(self, order_id: str) -> PaymentOrderResponse:
        return self.gateway.get_order(order_id)


__all__ = ["PaymentService", "DEFAULT_CURRENCY", "PAY_FIRST_DESCRIPTION"]
