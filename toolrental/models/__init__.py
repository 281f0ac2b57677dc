"""SQLAlchemy models for the tool rental service."""
from toolrental.models.enums import (
    LIVE_RENT_STATUSES,
    TERMINAL_RENT_STATUSES,
    RentStatus,
    ToolStatus,
)
from toolrental.models.rent import Rent
from toolrental.models.tool import Tool

__all__ = [
    "Rent",
    "Tool",
    "RentStatus",
    "ToolStatus",
    "LIVE_RENT_STATUSES",
    "TERMINAL_RENT_STATUSES",
]
