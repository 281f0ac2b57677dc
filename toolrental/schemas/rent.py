"""Pydantic schemas for rent resources."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from toolrental.models.enums import RentStatus


class RentCreate(BaseModel):
    """Schema used when a renter requests a new rent.

    Dates are optional here so the booking validator can report missing values
    with its own message instead of a generic schema error.
    """

    tool_id: int = Field(..., gt=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class RentReject(BaseModel):
    """Schema carrying the owner's reason when rejecting a rent."""

    reason: Optional[str] = Field(None, max_length=500)


class RentResponse(BaseModel):
    """Rent data returned to API clients."""

    id: int
    tool_id: int
    user_id: int
    status: RentStatus
    start_date: datetime
    end_date: datetime
    message: Optional[str] = None

    class Config:
        from_attributes = True


__all__ = ["RentCreate", "RentReject", "RentResponse"]
