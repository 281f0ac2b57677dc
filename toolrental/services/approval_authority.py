"""Ownership checks for owner-only and renter-only rent operations."""

from __future__ import annotations

from toolrental.core.exceptions import RentAuthorizationError
from toolrental.models.rent import Rent
from toolrental.models.tool import Tool


def is_owner(tool: Tool, caller_id: int) -> bool:
    # Strict equality; no role grants ownership.
    return tool.owner_id is not None and tool.owner_id == caller_id


def ensure_owner(tool: Tool, caller_id: int, action: str) -> None:
    if not is_owner(tool, caller_id):
        raise RentAuthorizationError(f"Only the tool owner can {action} this rent")


def is_renter(rent: Rent, caller_id: int) -> bool:
    return rent.user_id is not None and rent.user_id == caller_id


def ensure_renter(rent: Rent, caller_id: int, action: str) -> None:
    if not is_renter(rent, caller_id):
        raise RentAuthorizationError(f"Only the renter can {action} this rent")


__all__ = ["is_owner", "ensure_owner", "is_renter", "ensure_renter"]
