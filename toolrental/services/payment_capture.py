"""Reconciles payment capture results with the rent lifecycle."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from toolrental.core.exceptions import RentConcurrencyError
from toolrental.models.enums import RentStatus
from toolrental.models.rent import Rent
from toolrental.repository import rent_repository, tool_repository
from toolrental.services.overlap_detector import OverlapDetector
from toolrental.services.rental_state_machine import RentalStateMachine

logger = logging.getLogger(__name__)

CAPTURE_COMPLETED = "COMPLETED"


def is_pay_first(rent_id: Optional[int]) -> bool:
    """Rent ids of ``None`` or ``<= 0`` mean the rent does not exist yet."""

    return rent_id is None or rent_id <= 0


class PaymentCaptureOrchestrator:
    """Moves a rent to ACTIVE once the payment provider confirms the capture.

    A capture that arrives after the rent was canceled or rejected reactivates
    it only while its dates are still free. If the slot has been booked again
    in the meantime, the rebooking wins and the rent keeps its terminal status.
    """

    def __init__(self, db: Session):
        self.db = db

    def on_capture_result(
        self,
        rent_id: Optional[int],
        capture_status: Optional[str],
    ) -> Optional[Rent]:
        if is_pay_first(rent_id):
            logger.info(
                "Skipping rent status update - rent id is %s (pay-first flow)", rent_id
            )
            return None

        if (capture_status or "").upper() != CAPTURE_COMPLETED:
            logger.info(
                "Capture for rent %s finished with status %s; rent left untouched",
                rent_id,
                capture_status,
            )
            return None

        rent = rent_repository.get_rent(self.db, rent_id, for_update=True)
        if rent is None:
            logger.warning("Payment captured for unknown rent %s; nothing to update", rent_id)
            return None

        if RentStatus(rent.status).is_terminal and self._slot_was_rebooked(rent):
            self.db.rollback()
            return None

        RentalStateMachine.activate(rent)
        try:
            rent = rent_repository.save_rent(self.db, rent)
        except StaleDataError as exc:
            self.db.rollback()
            raise RentConcurrencyError() from exc

        logger.info("Rent %s status updated to ACTIVE after payment", rent_id)
        return rent

    def _slot_was_rebooked(self, rent: Rent) -> bool:
        # Lock the tool like create_rent does so no booking slips in meanwhile.
        tool_repository.get_tool(self.db, rent.tool_id, for_update=True)
        conflicts = OverlapDetector(self.db).find_conflicts(
            rent.tool_id,
            rent.start_date,
            rent.end_date,
            exclude_rent_id=rent.id,
        )
        if not conflicts:
            return False
        logger.warning(
            "Payment captured for %s rent %s but its dates now belong to rents %s; "
            "rent left %s",
            RentStatus(rent.status).value,
            rent.id,
            [other.id for other in conflicts],
            RentStatus(rent.status).value,
        )
        return True


__all__ = ["PaymentCaptureOrchestrator", "CAPTURE_COMPLETED", "is_pay_first"]
