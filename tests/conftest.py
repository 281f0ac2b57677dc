import os
from datetime import datetime
from decimal import Decimal

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ALGORITHM", "HS256")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from toolrental.core.config import settings
from toolrental.core.database import Base, SessionLocal, engine
from toolrental.dependencies import get_db, get_payment_gateway
from toolrental.main import app
from toolrental.models import Rent, RentStatus, Tool
from toolrental.schemas.payment import PaymentCaptureResponse, PaymentOrderResponse

OWNER_ID = 10
RENTER_ID = 20
OTHER_RENTER_ID = 30
ADMIN_ID = 1


@pytest.fixture
def db_session():
    """Fresh schema per test on the in-memory SQLite engine."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_tool(db_session):
    def _make_tool(owner_id=OWNER_ID, name="Drill"):
        tool = Tool(
            name=name,
            type="power",
            daily_price=Decimal("12.50"),
            deposit_amount=Decimal("50.00"),
            owner_id=owner_id,
        )
        db_session.add(tool)
        db_session.commit()
        db_session.refresh(tool)
        return tool

    return _make_tool


@pytest.fixture
def make_rent(db_session):
    def _make_rent(tool_id, start, end, status=RentStatus.PENDING, user_id=RENTER_ID):
        rent = Rent(
            tool_id=tool_id,
            user_id=user_id,
            start_date=start,
            end_date=end,
            status=status,
        )
        db_session.add(rent)
        db_session.commit()
        db_session.refresh(rent)
        return rent

    return _make_rent


class FakeGateway:
    """Stands in for PayPalClient; records calls and answers with canned data."""

    def __init__(self):
        self.capture_status = "COMPLETED"
        self.fail_with = None
        self.created = []
        self.captured = []

    def create_order(self, amount, currency, description=None):
        if self.fail_with is not None:
            raise self.fail_with
        self.created.append((amount, currency, description))
        return PaymentOrderResponse(
            order_id="ORDER-1",
            status="CREATED",
            amount=amount,
            currency=currency,
            description=description,
            approval_url="https://paypal.test/approve/ORDER-1",
        )

    def capture_order(self, order_id):
        if self.fail_with is not None:
            raise self.fail_with
        self.captured.append(order_id)
        return PaymentCaptureResponse(
            order_id=order_id,
            status=self.capture_status,
            amount=Decimal("25.00"),
            currency="EUR",
            capture_id="CAPTURE-1",
        )

    def get_order(self, order_id):
        return PaymentOrderResponse(order_id=order_id, status="APPROVED")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(db_session, gateway):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def auth_headers(user_id, roles=None):
    claims = {"sub": str(user_id)}
    if roles:
        claims["roles"] = list(roles)
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return {"Authorization": f"Bearer {token}"}


def at(year, month, day, hour=9):
    return datetime(year, month, day, hour, 0)
