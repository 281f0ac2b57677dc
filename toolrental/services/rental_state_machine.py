"""Legal status transitions of a rent.

The transition table covers every ``RentStatus``; adding a status without
declaring its outgoing transitions fails at import time rather than letting
the new status fall through the guards below.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Optional

from toolrental.core.exceptions import InvalidRentTransitionError
from toolrental.models.enums import RentStatus
from toolrental.models.rent import Rent

logger = logging.getLogger(__name__)

REJECTION_PREFIX = "Rejeitado: "

TRANSITIONS: Dict[RentStatus, FrozenSet[RentStatus]] = {
    RentStatus.PENDING: frozenset(
        {RentStatus.APPROVED, RentStatus.REJECTED, RentStatus.ACTIVE, RentStatus.CANCELED}
    ),
    RentStatus.APPROVED: frozenset({RentStatus.ACTIVE, RentStatus.CANCELED}),
    RentStatus.ACTIVE: frozenset({RentStatus.ACTIVE, RentStatus.CANCELED, RentStatus.FINISHED}),
    RentStatus.REJECTED: frozenset(),
    RentStatus.CANCELED: frozenset(),
    RentStatus.FINISHED: frozenset(),
}

_undeclared = set(RentStatus) - set(TRANSITIONS)
if _undeclared:
    raise RuntimeError(
        "Rent statuses without declared transitions: "
        + ", ".join(sorted(status.value for status in _undeclared))
    )


def can_transition(current: RentStatus, target: RentStatus) -> bool:
    return target in TRANSITIONS[current]


def rejection_message(reason: Optional[str]) -> str:
    reason = (reason or "").strip()
    if not reason:
        return REJECTION_PREFIX.rstrip(": ")
    return f"{REJECTION_PREFIX}{reason}"


class RentalStateMachine:
    """Applies status transitions to a loaded rent.

    Authorization is not checked here; callers resolve ownership first and only
    then ask the state machine to move the rent.
    """

    @staticmethod
    def approve(rent: Rent) -> Rent:
        if rent.status != RentStatus.PENDING:
            raise InvalidRentTransitionError("Only pending rents can be approved")
        rent.status = RentStatus.APPROVED
        return rent

    @staticmethod
    def reject(rent: Rent, reason: Optional[str] = None) -> Rent:
        if rent.status != RentStatus.PENDING:
            raise InvalidRentTransitionError("Only pending rents can be rejected")
        rent.status = RentStatus.REJECTED
        rent.message = rejection_message(reason)
        return rent

    @staticmethod
    def cancel(rent: Rent) -> Rent:
        if not can_transition(rent.status, RentStatus.CANCELED):
            raise InvalidRentTransitionError(
                f"Rent is already {RentStatus(rent.status).value} and cannot be canceled"
            )
        rent.status = RentStatus.CANCELED
        return rent

    @staticmethod
    def activate(rent: Rent) -> Rent:
        """Mark a rent as paid, from any status.

        Whether a canceled or rejected rent may be revived is decided by the
        caller, which checks the slot is still free first.
        """

        previous = rent.status
        if not can_transition(previous, RentStatus.ACTIVE):
            logger.warning(
                "Payment captured for rent %s in status %s; forcing ACTIVE",
                rent.id,
                RentStatus(previous).value,
            )
        rent.status = RentStatus.ACTIVE
        return rent

    @staticmethod
    def finish(rent: Rent) -> Rent:
        if not can_transition(rent.status, RentStatus.FINISHED):
            raise InvalidRentTransitionError("Only active rents can be finished")
        rent.status = RentStatus.FINISHED
        return rent


__all__ = [
    "RentalStateMachine",
    "TRANSITIONS",
    "REJECTION_PREFIX",
    "can_transition",
    "rejection_message",
]
