"""Status transition guards of the rent lifecycle."""

from datetime import datetime

import pytest

from toolrental.core.exceptions import InvalidRentTransitionError
from toolrental.models import Rent, RentStatus
from toolrental.services.rental_state_machine import (
    TRANSITIONS,
    RentalStateMachine,
    can_transition,
    rejection_message,
)


def _rent(status):
    return Rent(
        id=1,
        tool_id=1,
        user_id=2,
        start_date=datetime(2030, 1, 1),
        end_date=datetime(2030, 1, 2),
        status=status,
    )


def test_every_status_declares_its_transitions():
    assert set(TRANSITIONS) == set(RentStatus)


@pytest.mark.parametrize(
    "status",
    [RentStatus.REJECTED, RentStatus.CANCELED, RentStatus.FINISHED],
)
def test_terminal_statuses_have_no_exits(status):
    assert TRANSITIONS[status] == frozenset()
    assert status.is_terminal
    assert not status.is_live


def test_approve_moves_pending_to_approved():
    rent = RentalStateMachine.approve(_rent(RentStatus.PENDING))
    assert rent.status == RentStatus.APPROVED


@pytest.mark.parametrize("status", [s for s in RentStatus if s != RentStatus.PENDING])
def test_approve_requires_pending(status):
    with pytest.raises(InvalidRentTransitionError) as exc_info:
        RentalStateMachine.approve(_rent(status))
    assert exc_info.value.detail == "Only pending rents can be approved"


def test_second_approval_fails():
    rent = RentalStateMachine.approve(_rent(RentStatus.PENDING))
    with pytest.raises(InvalidRentTransitionError, match="Only pending rents can be approved"):
        RentalStateMachine.approve(rent)


def test_reject_stores_prefixed_reason():
    rent = RentalStateMachine.reject(_rent(RentStatus.PENDING), "tool under repair")
    assert rent.status == RentStatus.REJECTED
    assert rent.message == "Rejeitado: tool under repair"


def test_second_rejection_fails():
    rent = RentalStateMachine.reject(_rent(RentStatus.PENDING), "busy")
    with pytest.raises(InvalidRentTransitionError) as exc_info:
        RentalStateMachine.reject(rent, "busy")
    assert exc_info.value.detail == "Only pending rents can be rejected"


def test_rejection_without_reason():
    assert rejection_message(None) == "Rejeitado"
    assert rejection_message("   ") == "Rejeitado"


@pytest.mark.parametrize(
    "status",
    [RentStatus.PENDING, RentStatus.APPROVED, RentStatus.ACTIVE],
)
def test_live_rents_can_be_canceled(status):
    rent = RentalStateMachine.cancel(_rent(status))
    assert rent.status == RentStatus.CANCELED


@pytest.mark.parametrize(
    "status",
    [RentStatus.REJECTED, RentStatus.CANCELED, RentStatus.FINISHED],
)
def test_terminal_rents_cannot_be_canceled(status):
    with pytest.raises(InvalidRentTransitionError) as exc_info:
        RentalStateMachine.cancel(_rent(status))
    assert exc_info.value.detail == f"Rent is already {status.value} and cannot be canceled"


@pytest.mark.parametrize("status", list(RentStatus))
def test_activate_always_ends_active(status):
    rent = RentalStateMachine.activate(_rent(status))
    assert rent.status == RentStatus.ACTIVE


def test_finish_only_from_active():
    rent = RentalStateMachine.finish(_rent(RentStatus.ACTIVE))
    assert rent.status == RentStatus.FINISHED

    with pytest.raises(InvalidRentTransitionError):
        RentalStateMachine.finish(_rent(RentStatus.APPROVED))


def test_can_transition_table():
    assert can_transition(RentStatus.PENDING, RentStatus.APPROVED)
    assert can_transition(RentStatus.APPROVED, RentStatus.ACTIVE)
    assert not can_transition(RentStatus.APPROVED, RentStatus.REJECTED)
    assert not can_transition(RentStatus.CANCELED, RentStatus.ACTIVE)
