"""PaymentService: order creation rules and capture reconciliation."""

from datetime import datetime
from decimal import Decimal

import pytest

from toolrental.core.exceptions import (
    InvalidRentTransitionError,
    PaymentGatewayError,
    ResourceNotFoundError,
)
from toolrental.models import Rent, RentStatus
from toolrental.services.payment_service import PAY_FIRST_DESCRIPTION, PaymentService

START = datetime(2030, 6, 1, 9)
END = datetime(2030, 6, 4, 9)


@pytest.fixture
def service(db_session, gateway):
    return PaymentService(db_session, gateway)


def test_create_order_for_approved_rent(service, gateway, make_tool, make_rent):
    rent = make_rent(make_tool().id, START, END, status=RentStatus.APPROVED)

    order = service.create_order(rent.id, Decimal("37.50"))

    assert order.rent_id == rent.id
    assert order.order_id == "ORDER-1"
    assert gateway.created == [
        (Decimal("37.50"), "EUR", f"Tool rental payment - Rent #{rent.id}")
    ]


def test_create_order_requires_approved_rent(service, gateway, make_tool, make_rent):
    rent = make_rent(make_tool().id, START, END, status=RentStatus.PENDING)

    with pytest.raises(InvalidRentTransitionError) as exc_info:
        service.create_order(rent.id, Decimal("10"))

    assert exc_info.value.detail == (
        "Only approved rentals can be paid. Current status: PENDING"
    )
    assert gateway.created == []


def test_create_order_for_unknown_rent(service):
    with pytest.raises(ResourceNotFoundError):
        service.create_order(77, Decimal("10"))


def test_pay_first_order_skips_rent_lookup(service, gateway):
    order = service.create_order(0, Decimal("10"), "USD", "Deposit")

    assert order.rent_id == 0
    assert gateway.created == [(Decimal("10"), "USD", "Deposit")]


def test_completed_capture_activates_rent(service, db_session, make_tool, make_rent):
    rent = make_rent(make_tool().id, START, END, status=RentStatus.APPROVED)

    capture = service.capture_order("ORDER-1", rent.id)

    assert capture.status == "COMPLETED"
    assert capture.rent_id == rent.id
    assert db_session.get(Rent, rent.id).status == RentStatus.ACTIVE


def test_incomplete_capture_keeps_rent_status(service, gateway, db_session, make_tool, make_rent):
    rent = make_rent(make_tool().id, START, END, status=RentStatus.APPROVED)
    gateway.capture_status = "PENDING"

    service.capture_order("ORDER-1", rent.id)

    assert db_session.get(Rent, rent.id).status == RentStatus.APPROVED


def test_gateway_failure_leaves_rent_untouched(service, gateway, db_session, make_tool, make_rent):
    rent = make_rent(make_tool().id, START, END, status=RentStatus.APPROVED)
    gateway.fail_with = PaymentGatewayError("Failed to capture PayPal order: PayPal API error")

    with pytest.raises(PaymentGatewayError):
        service.capture_order("ORDER-1", rent.id)

    assert db_session.get(Rent, rent.id).status == RentStatus.APPROVED


def test_capture_for_missing_rent_is_not_an_error(service):
    capture = service.capture_order("ORDER-1", 4242)

    assert capture.status == "COMPLETED"


@pytest.mark.parametrize("rent_id", [None, 0])
def test_pay_first_order_gets_its_own_description(service, gateway, rent_id):
    service.create_order(rent_id, Decimal("15"))

    assert gateway.created == [(Decimal("15"), "EUR", PAY_FIRST_DESCRIPTION)]
