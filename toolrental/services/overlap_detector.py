"""Detection of scheduling conflicts between rents of the same tool."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from toolrental.models.rent import Rent
from toolrental.repository import rent_repository
from toolrental.services.booking_validator import to_utc_naive


def intervals_overlap(
    first_start: datetime,
    first_end: datetime,
    second_start: datetime,
    second_end: datetime,
) -> bool:
    """Return whether two half-open intervals ``[start, end)`` intersect.

    Back-to-back intervals (one ends exactly when the other starts) do not.
    """

    return first_start < second_end and first_end > second_start


class OverlapDetector:
    """Checks a candidate interval against the live rents of a tool."""

    def __init__(self, db: Session):
        self.db = db

    def find_conflicts(
        self,
        tool_id: int,
        start_date: datetime,
        end_date: datetime,
        *,
        exclude_rent_id: Optional[int] = None,
    ) -> List[Rent]:
        candidate_start = to_utc_naive(start_date)
        candidate_end = to_utc_naive(end_date)

        conflicts = []
        for existing in rent_repository.find_live_by_tool(self.db, tool_id):
            if exclude_rent_id is not None and existing.id == exclude_rent_id:
                continue
            if intervals_overlap(
                existing.start_date,
                existing.end_date,
                candidate_start,
                candidate_end,
            ):
                conflicts.append(existing)
        return conflicts

    def has_overlap(
        self,
        tool_id: int,
        start_date: datetime,
        end_date: datetime,
        exclude_rent_id: Optional[int] = None,
    ) -> bool:
        return bool(
            self.find_conflicts(
                tool_id,
                start_date,
                end_date,
                exclude_rent_id=exclude_rent_id,
            )
        )


__all__ = ["OverlapDetector", "intervals_overlap"]
