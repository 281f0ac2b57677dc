from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from toolrental.models.enums import LIVE_RENT_STATUSES, RentStatus
from toolrental.models.rent import Rent


def list_rents(
    db: Session,
    *,
    status_filter: Optional[RentStatus] = None,
    tool_id: Optional[int] = None,
    user_id: Optional[int] = None,
) -> list[Rent]:
    query = db.query(Rent)

    if status_filter is not None:
        query = query.filter(Rent.status == status_filter)
    if tool_id is not None:
        query = query.filter(Rent.tool_id == tool_id)
    if user_id is not None:
        query = query.filter(Rent.user_id == user_id)

    return query.order_by(Rent.start_date, Rent.id).all()


def get_rent(db: Session, rent_id: int, *, for_update: bool = False) -> Optional[Rent]:
    query = db.query(Rent).filter(Rent.id == rent_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def list_rents_by_tool_and_status(
    db: Session,
    tool_id: int,
    statuses: Iterable[RentStatus],
) -> list[Rent]:
    return (
        db.query(Rent)
        .filter(Rent.tool_id == tool_id)
        .filter(Rent.status.in_(list(statuses)))
        .order_by(Rent.start_date)
        .all()
    )


def find_live_by_tool(db: Session, tool_id: int) -> list[Rent]:
    return list_rents_by_tool_and_status(db, tool_id, LIVE_RENT_STATUSES)


def list_rents_starting_between(
    db: Session,
    start_from: datetime,
    start_to: datetime,
) -> list[Rent]:
    return (
        db.query(Rent)
        .filter(Rent.start_date >= start_from)
        .filter(Rent.start_date <= start_to)
        .order_by(Rent.start_date)
        .all()
    )


def create_rent(db: Session, rent: Rent) -> Rent:
    db.add(rent)
    db.commit()
    db.refresh(rent)
    return rent


def save_rent(db: Session, rent: Rent) -> Rent:
    db.flush()
    db.commit()
    db.refresh(rent)
    return rent


def delete_rent(db: Session, rent: Rent) -> None:
    db.delete(rent)
    db.commit()


__all__ = [
    "list_rents",
    "get_rent",
    "list_rents_by_tool_and_status",
    "find_live_by_tool",
    "list_rents_starting_between",
    "create_rent",
    "save_rent",
    "delete_rent",
]
