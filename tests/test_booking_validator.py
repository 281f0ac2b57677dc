"""
Interval validation for new bookings: required dates, no past starts and a
strictly positive duration.
"""

from datetime import datetime, timedelta, timezone

import pytest

from toolrental.core.exceptions import BookingValidationError
from toolrental.services.booking_validator import to_utc_naive, validate_booking_dates

NOW = datetime(2025, 3, 1, 12, 0)


@pytest.mark.parametrize(
    "start, end",
    [
        (None, NOW + timedelta(days=1)),
        (NOW + timedelta(days=1), None),
        (None, None),
    ],
)
def test_missing_dates_are_rejected(start, end):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking_dates(start, end, now=NOW)
    assert exc_info.value.detail == "Start date and end date are required"


def test_start_in_the_past_is_rejected():
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking_dates(NOW - timedelta(minutes=1), NOW + timedelta(days=1), now=NOW)
    assert exc_info.value.detail == "Start date cannot be in the past"


def test_end_before_start_is_rejected():
    start = NOW + timedelta(days=2)
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking_dates(start, start - timedelta(hours=1), now=NOW)
    assert exc_info.value.detail == "End date must be after start date"


def test_equal_start_and_end_is_rejected():
    start = NOW + timedelta(days=2)
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking_dates(start, start, now=NOW)
    assert exc_info.value.detail == "End date must be after start date"


def test_start_exactly_now_is_accepted():
    validate_booking_dates(NOW, NOW + timedelta(hours=1), now=NOW)


def test_past_check_runs_before_ordering_check():
    """A past and inverted interval reports the past start first."""
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking_dates(NOW - timedelta(days=1), NOW - timedelta(days=2), now=NOW)
    assert exc_info.value.detail == "Start date cannot be in the past"


def test_aware_datetimes_are_compared_in_utc():
    lisbon_summer = timezone(timedelta(hours=1))
    start = datetime(2025, 3, 1, 12, 30, tzinfo=lisbon_summer)  # 11:30 UTC
    with pytest.raises(BookingValidationError):
        validate_booking_dates(start, start + timedelta(hours=2), now=NOW)

    assert to_utc_naive(start) == datetime(2025, 3, 1, 11, 30)


def test_validation_error_is_a_client_error():
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking_dates(None, None, now=NOW)
    assert exc_info.value.status_code == 400
