"""API routes for managing rents."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from toolrental.core.security import get_current_user, get_current_user_id, require_admin
from toolrental.dependencies import get_db
from toolrental.models.enums import RentStatus
from toolrental.schemas.rent import RentCreate, RentReject, RentResponse
from toolrental.services.rent_service import RentService

router = APIRouter(
    prefix="/rents",
    tags=["rents"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=List[RentResponse])
def list_rents(
    *,
    db: Session = Depends(get_db),
    status: Optional[RentStatus] = Query(None, description="Filter rents by status"),
    tool_id: Optional[int] = Query(None, description="Filter rents by tool id"),
    user_id: Optional[int] = Query(None, description="Filter rents by renter id"),
) -> List[RentResponse]:
    """Retrieve all rents optionally filtered by status, tool or renter."""

    service = RentService(db)
    return service.list_rents(status_filter=status, tool_id=tool_id, user_id=user_id)


@router.get("/interval", response_model=List[RentResponse])
def find_rents_by_interval(
    *,
    db: Session = Depends(get_db),
    start_from: datetime = Query(..., alias="from", description="Earliest start date"),
    start_to: datetime = Query(..., alias="to", description="Latest start date"),
) -> List[RentResponse]:
    """Retrieve rents whose start date falls within the given interval."""

    service = RentService(db)
    return service.find_by_interval(start_from, start_to)


@router.get("/{rent_id}", response_model=RentResponse)
def get_rent(rent_id: int, db: Session = Depends(get_db)) -> RentResponse:
    """Retrieve a rent by its identifier."""

    service = RentService(db)
    return service.get_rent(rent_id)


@router.post("/", response_model=RentResponse, status_code=status.HTTP_201_CREATED)
def create_rent(
    payload: RentCreate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_current_user_id),
) -> RentResponse:
    """Request a new rent for the authenticated renter."""

    service = RentService(db)
    return service.create_rent(payload, renter_id=caller_id)


@router.patch("/{rent_id}/approve", response_model=RentResponse)
def approve_rent(
    rent_id: int,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_current_user_id),
) -> RentResponse:
    """Approve a pending rent. Only the tool owner may do this."""

    service = RentService(db)
    return service.approve_rent(rent_id, caller_id)


@router.patch("/{rent_id}/reject", response_model=RentResponse)
def reject_rent(
    rent_id: int,
    payload: Optional[RentReject] = None,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_current_user_id),
) -> RentResponse:
    """Reject a pending rent with an optional reason."""

    service = RentService(db)
    reason = payload.reason if payload is not None else None
    return service.reject_rent(rent_id, caller_id, reason)


@router.patch("/{rent_id}/cancel", response_model=RentResponse)
def cancel_rent(
    rent_id: int,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_current_user_id),
) -> RentResponse:
    """Cancel a rent that has not reached a terminal status. Only the renter may do this."""

    service = RentService(db)
    return service.cancel_rent(rent_id, caller_id)


@router.delete("/{rent_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rent(
    rent_id: int,
    db: Session = Depends(get_db),
    admin_id: int = Depends(require_admin),
) -> None:
    """Delete a rent. Restricted to administrators."""

    service = RentService(db)
    service.delete_rent(rent_id, admin_id)
