"""Structural validation of requested booking intervals."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from toolrental.core.exceptions import BookingValidationError


def to_utc_naive(value: datetime) -> datetime:
    """Normalize a timestamp to naive UTC, the form rents are stored in.

    Naive inputs are taken to already be in UTC.
    """

    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def validate_booking_dates(
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    *,
    now: Optional[datetime] = None,
) -> None:
    """Reject missing, past or inverted intervals.

    Checks run in a fixed order so the first failing rule decides the message.
    Equal start and end dates are rejected as well.
    """

    if start_date is None or end_date is None:
        raise BookingValidationError("Start date and end date are required")

    start = to_utc_naive(start_date)
    end = to_utc_naive(end_date)
    current = to_utc_naive(now) if now is not None else utcnow()

    if start < current:
        raise BookingValidationError("Start date cannot be in the past")

    if end <= start:
        raise BookingValidationError("End date must be after start date")


__all__ = ["validate_booking_dates", "to_utc_naive", "utcnow"]
