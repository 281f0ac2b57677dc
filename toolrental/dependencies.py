"""Shared dependencies for the tool rental service."""

from typing import Generator

from toolrental.core.database import SessionLocal
from toolrental.services.paypal_client import PayPalClient


def get_db() -> Generator:
    """Provide a transactional scope around a series of operations."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_payment_gateway() -> PayPalClient:
    """Provide the payment gateway client configured from settings."""

    return PayPalClient()
