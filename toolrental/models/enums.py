"""Closed status enumerations shared by the ORM models and the services."""

import enum


class RentStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"
    FINISHED = "FINISHED"

    @property
    def is_live(self) -> bool:
        return self in LIVE_RENT_STATUSES

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_RENT_STATUSES


# Live rents count toward the per-tool scheduling invariant; terminal ones never block.
LIVE_RENT_STATUSES = frozenset({RentStatus.PENDING, RentStatus.APPROVED, RentStatus.ACTIVE})
TERMINAL_RENT_STATUSES = frozenset(
    {RentStatus.REJECTED, RentStatus.CANCELED, RentStatus.FINISHED}
)


class ToolStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    RENTED = "RENTED"
    MAINTENANCE = "MAINTENANCE"
    INACTIVE = "INACTIVE"


__all__ = [
    "RentStatus",
    "ToolStatus",
    "LIVE_RENT_STATUSES",
    "TERMINAL_RENT_STATUSES",
]
