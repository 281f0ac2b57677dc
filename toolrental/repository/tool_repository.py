"""Helpers to look up tools from the rental core."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from toolrental.models.tool import Tool


def get_tool(db: Session, tool_id: int, *, for_update: bool = False) -> Optional[Tool]:
    """Fetch a tool by id, optionally locking its row until the transaction ends.

    Locking the tool row is what serializes concurrent bookings of the same tool.
    """

    query = db.query(Tool).filter(Tool.id == tool_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


__all__ = ["get_tool"]
