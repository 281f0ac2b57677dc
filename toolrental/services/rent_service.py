import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from toolrental.core.exceptions import (
    RentConcurrencyError,
    RentOverlapError,
    ResourceNotFoundError,
)
from toolrental.models.enums import RentStatus
from toolrental.models.rent import Rent
from toolrental.models.tool import Tool
from toolrental.repository import rent_repository, tool_repository
from toolrental.schemas.rent import RentCreate
from toolrental.services.approval_authority import ensure_owner, ensure_renter
from toolrental.services.booking_validator import (
    to_utc_naive,
    utcnow,
    validate_booking_dates,
)
from toolrental.services.overlap_detector import OverlapDetector
from toolrental.services.rental_state_machine import RentalStateMachine

logger = logging.getLogger(__name__)


class RentService:

    def __init__(self, db: Session, *, clock: Optional[Callable[[], datetime]] = None):
        self.db = db
        self._clock = clock or utcnow

    def list_rents(
        self,
        *,
        status_filter: Optional[RentStatus] = None,
        tool_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> List[Rent]:

        return rent_repository.list_rents(
            self.db,
            status_filter=status_filter,
            tool_id=tool_id,
            user_id=user_id,
        )

    def get_rent(self, rent_id: int, *, for_update: bool = False) -> Rent:

        rent = rent_repository.get_rent(self.db, rent_id, for_update=for_update)
        if rent is None:
            raise ResourceNotFoundError("Rent not found")
        return rent

    def _get_tool(self, tool_id: int, *, for_update: bool = False) -> Tool:

        tool = tool_repository.get_tool(self.db, tool_id, for_update=for_update)
        if tool is None:
            raise ResourceNotFoundError("Tool not found")
        return tool

    def find_by_interval(self, start_from: datetime, start_to: datetime) -> List[Rent]:
        """Rents whose start date lies in ``[start_from, start_to]``. Reporting only."""

        return rent_repository.list_rents_starting_between(
            self.db,
            to_utc_naive(start_from),
            to_utc_naive(start_to),
        )

    def create_rent(self, payload: RentCreate, *, renter_id: int) -> Rent:
        """Book a tool for the renter as a new PENDING rent.

        The tool row stays locked from the overlap read until the insert is
        committed, so two overlapping requests for the same tool cannot both pass.
        """

        validate_booking_dates(payload.start_date, payload.end_date, now=self._clock())
        start_date = to_utc_naive(payload.start_date)
        end_date = to_utc_naive(payload.end_date)

        try:
            tool = self._get_tool(payload.tool_id, for_update=True)

            conflicts = OverlapDetector(self.db).find_conflicts(tool.id, start_date, end_date)
            if conflicts:
                logger.warning(
                    "Rejected booking of tool %s for %s - %s: overlaps rents %s",
                    tool.id,
                    start_date,
                    end_date,
                    [existing.id for existing in conflicts],
                )
                raise RentOverlapError("Tool is not available for the selected dates")

            rent = Rent(
                tool_id=tool.id,
                user_id=renter_id,
                start_date=start_date,
                end_date=end_date,
                status=RentStatus.PENDING,
            )
            rent = rent_repository.create_rent(self.db, rent)
        except Exception:
            self.db.rollback()
            raise

        logger.info("Rent %s created for tool %s by user %s", rent.id, rent.tool_id, renter_id)
        return rent

    def approve_rent(self, rent_id: int, caller_id: int) -> Rent:

        rent = self.get_rent(rent_id, for_update=True)
        tool = self._get_tool(rent.tool_id)
        ensure_owner(tool, caller_id, "approve")

        RentalStateMachine.approve(rent)
        rent = self._save_transition(rent)
        logger.info("Rent %s approved by owner %s", rent_id, caller_id)
        return rent

    def reject_rent(self, rent_id: int, caller_id: int, reason: Optional[str] = None) -> Rent:

        rent = self.get_rent(rent_id, for_update=True)
        tool = self._get_tool(rent.tool_id)
        ensure_owner(tool, caller_id, "reject")

        RentalStateMachine.reject(rent, reason)
        rent = self._save_transition(rent)
        logger.info("Rent %s rejected by owner %s", rent_id, caller_id)
        return rent

    def cancel_rent(self, rent_id: int, caller_id: int) -> Rent:

        rent = self.get_rent(rent_id, for_update=True)
        ensure_renter(rent, caller_id, "cancel")

        RentalStateMachine.cancel(rent)
        rent = self._save_transition(rent)
        logger.info("Rent %s canceled by renter %s", rent_id, caller_id)
        return rent

    def delete_rent(self, rent_id: int, admin_id: Optional[int] = None) -> None:
        """Administrative removal of a rent record. Routes only allow administrators."""

        rent = self.get_rent(rent_id)
        rent_repository.delete_rent(self.db, rent)
        logger.info("Rent %s deleted by administrator %s", rent_id, admin_id)

    def _save_transition(self, rent: Rent) -> Rent:
        rent_id = rent.id
        try:
            return rent_repository.save_rent(self.db, rent)
        except StaleDataError as exc:
            self.db.rollback()
            logger.warning("Concurrent modification detected on rent %s", rent_id)
            raise RentConcurrencyError() from exc


__all__ = ["RentService"]
