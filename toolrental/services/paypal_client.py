"""HTTP client for the PayPal checkout API."""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Optional

import httpx

from toolrental.core.config import settings
from toolrental.core.exceptions import PaymentGatewayError
from toolrental.schemas.payment import PaymentCaptureResponse, PaymentOrderResponse

logger = logging.getLogger(__name__)

INTENT_CAPTURE = "CAPTURE"


class PayPalClient:
    """Small wrapper around the order endpoints of the PayPal REST API.

    Every failure (transport error, non-2xx answer, unexpected payload) is
    raised as ``PaymentGatewayError`` so callers can leave their own state
    untouched and let the capture be retried.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        configured_base = base_url or settings.PAYPAL_BASE_URL
        self._base_url = configured_base.rstrip("/") if configured_base else ""
        self._client_id = client_id if client_id is not None else settings.PAYPAL_CLIENT_ID
        self._client_secret = (
            client_secret if client_secret is not None else settings.PAYPAL_CLIENT_SECRET
        )
        self._timeout = timeout or settings.PAYPAL_TIMEOUT
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        try:
            with self._client() as client:
                response = client.request(method, path, **kwargs)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "PayPal returned HTTP %s while trying to %s: %s",
                exc.response.status_code,
                operation,
                exc.response.text,
            )
            raise PaymentGatewayError(f"Failed to {operation}: PayPal API error") from exc
        except httpx.RequestError as exc:
            logger.error("Could not reach PayPal while trying to %s: %s", operation, exc)
            raise PaymentGatewayError(f"Failed to {operation}: PayPal is unreachable") from exc
        except ValueError as exc:
            logger.error("PayPal sent a non-JSON answer while trying to %s", operation)
            raise PaymentGatewayError(f"Failed to parse PayPal response to {operation}") from exc

        if not isinstance(data, dict):
            raise PaymentGatewayError(f"Failed to parse PayPal response to {operation}")
        return data

    def get_access_token(self) -> str:
        data = self._request(
            "POST",
            "/v1/oauth2/token",
            "authenticate with PayPal",
            data={"grant_type": "client_credentials"},
            auth=(self._client_id, self._client_secret),
            headers={"Accept": "application/json"},
        )
        token = data.get("access_token")
        if not token:
            raise PaymentGatewayError("Failed to parse PayPal access token response")
        return token

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.get_access_token()}"}

    @staticmethod
    def build_order_request(
        amount: Decimal,
        currency: str,
        description: Optional[str],
    ) -> Dict[str, Any]:
        value = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return {
            "intent": INTENT_CAPTURE,
            "purchase_units": [
                {
                    "amount": {"currency_code": currency, "value": format(value, "f")},
                    "description": description,
                }
            ],
            "application_context": {
                "return_url": settings.PAYPAL_RETURN_URL,
                "cancel_url": settings.PAYPAL_CANCEL_URL,
                "brand_name": settings.PAYPAL_BRAND_NAME,
                "user_action": "PAY_NOW",
                "shipping_preference": "NO_SHIPPING",
            },
        }

    def create_order(
        self,
        amount: Decimal,
        currency: str,
        description: Optional[str] = None,
    ) -> PaymentOrderResponse:
        headers = self._auth_headers()
        headers["PayPal-Request-Id"] = str(uuid.uuid4())

        data = self._request(
            "POST",
            "/v2/checkout/orders",
            "create PayPal order",
            json=self.build_order_request(amount, currency, description),
            headers=headers,
        )

        try:
            order_id = data["id"]
            order_status = data["status"]
        except KeyError as exc:
            raise PaymentGatewayError("Failed to parse PayPal create order response") from exc

        approval_url = next(
            (
                link.get("href")
                for link in data.get("links") or []
                if isinstance(link, dict) and link.get("rel") == "approve"
            ),
            None,
        )

        logger.info("PayPal order created. Order ID: %s, Status: %s", order_id, order_status)
        return PaymentOrderResponse(
            order_id=order_id,
            status=order_status,
            amount=amount,
            currency=currency,
            description=description,
            approval_url=approval_url,
        )

    def capture_order(self, order_id: str) -> PaymentCaptureResponse:
        data = self._request(
            "POST",
            f"/v2/checkout/orders/{order_id}/capture",
            "capture PayPal order",
            json={},
            headers=self._auth_headers(),
        )

        if "status" not in data:
            raise PaymentGatewayError("Failed to parse PayPal capture response")

        capture = PaymentCaptureResponse(order_id=order_id, status=data["status"])

        payer = data.get("payer") or {}
        capture.payer_id = payer.get("payer_id")
        capture.payer_email = payer.get("email_address")

        purchase_units = data.get("purchase_units") or []
        payments = (purchase_units[0].get("payments") or {}) if purchase_units else {}
        captures = payments.get("captures") or []
        if captures:
            first = captures[0]
            try:
                capture.capture_id = first["id"]
                capture.amount = Decimal(first["amount"]["value"])
                capture.currency = first["amount"]["currency_code"]
            except (KeyError, TypeError, InvalidOperation) as exc:
                raise PaymentGatewayError("Failed to parse PayPal capture response") from exc

        logger.info("PayPal order %s captured with status %s", order_id, capture.status)
        return capture

    def get_order(self, order_id: str) -> PaymentOrderResponse:
        data = self._request(
            "GET",
            f"/v2/checkout/orders/{order_id}",
            "get PayPal order details",
            headers=self._auth_headers(),
        )

        try:
            order = PaymentOrderResponse(order_id=data["id"], status=data["status"])
        except KeyError as exc:
            raise PaymentGatewayError("Failed to parse PayPal order details response") from exc

        purchase_units = data.get("purchase_units") or []
        amount = purchase_units[0].get("amount") if purchase_units else None
        if amount:
            try:
                order.amount = Decimal(amount["value"])
                order.currency = amount["currency_code"]
            except (KeyError, TypeError, InvalidOperation) as exc:
                raise PaymentGatewayError(
                    "Failed to parse PayPal order details response"
                ) from exc

        return order


__all__ = ["PayPalClient", "INTENT_CAPTURE"]
